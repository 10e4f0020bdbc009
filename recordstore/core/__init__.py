"""Core storage engine components."""
from .store import RecordStore
from .datafile import DataFile
from .index import Index

__all__ = ['RecordStore', 'DataFile', 'Index']
