"""Exception hierarchy for the record store."""


class RecordStoreError(Exception):
    """Base exception for all record store errors."""
    pass


class CodecError(RecordStoreError, ValueError):
    """Raised when a value cannot be represented by a codec."""
    pass


class CorruptDataError(RecordStoreError):
    """Raised when stored bytes end early or do not decode."""
    pass


class RecordNotFoundError(RecordStoreError, KeyError):
    """Raised when a key is not present in the index."""
    pass


class StorageIOError(RecordStoreError, OSError):
    """Raised when the data file cannot be opened or read."""
    pass


class StoreClosedError(RecordStoreError):
    """Raised when an operation is attempted on a closed store."""
    pass
