"""recordstore - Minimal single-table record store with a persisted hash index."""
__version__ = '1.0.0'

from .core.store import RecordStore
from .core.codec import (
    Codec, ScalarCodec, BoolCodec, StringCodec, BytesCodec, CompositeCodec,
    INT8, UINT8, INT16, UINT16, INT32, UINT32, INT64, UINT64,
    FLOAT32, FLOAT64, BOOL, STRING, BYTES,
)
from .core.errors import (
    RecordStoreError, CodecError, CorruptDataError, RecordNotFoundError,
    StorageIOError, StoreClosedError,
)

__all__ = [
    'RecordStore',
    'Codec', 'ScalarCodec', 'BoolCodec', 'StringCodec', 'BytesCodec', 'CompositeCodec',
    'INT8', 'UINT8', 'INT16', 'UINT16', 'INT32', 'UINT32', 'INT64', 'UINT64',
    'FLOAT32', 'FLOAT64', 'BOOL', 'STRING', 'BYTES',
    'RecordStoreError', 'CodecError', 'CorruptDataError', 'RecordNotFoundError',
    'StorageIOError', 'StoreClosedError',
]
