"""Main RecordStore implementation."""
import logging
from typing import Any, List

from .codec import Codec
from .datafile import DataFile
from .errors import CodecError, CorruptDataError, RecordNotFoundError, StoreClosedError
from .index import Index

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Single-table record store.

    Records are appended to a data file and located through an in-memory
    hash index that is loaded on construction and saved on close(). Use the
    store as a context manager so the index is saved on every controlled
    shutdown path.

    Space from deleted records is never reclaimed. Single process,
    single thread only.
    """

    def __init__(self, data_path: str, index_path: str, key_codec: Codec, value_codec: Codec):
        self.data_path = str(data_path)
        self.index_path = str(index_path)
        self.key_codec = key_codec
        self.value_codec = value_codec

        self.data_file = DataFile(self.data_path, key_codec, value_codec)
        self.index = Index(self.index_path, key_codec)
        self.closed = False

        self.load_index()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def __contains__(self, key: Any) -> bool:
        self._check_open()
        try:
            key = self._canonical_key(key)
        except CodecError:
            return False
        return key in self.index

    def __len__(self) -> int:
        self._check_open()
        return len(self.index)

    def _check_open(self):
        if self.closed:
            raise StoreClosedError(f"Store for {self.data_path} is closed")

    def _canonical_key(self, key: Any) -> Any:
        """Key as it reads back from disk, e.g. narrowed to float32."""
        return self.key_codec.decode_bytes(self.key_codec.encode(key))

    def load_index(self):
        """Populate the in-memory index from the index file."""
        self.index.load()

    def save_index(self) -> bool:
        """Rewrite the index file from the in-memory index."""
        return self.index.save()

    def flush(self) -> bool:
        """Persist the index without closing the store."""
        self._check_open()
        return self.save_index()

    def keys(self) -> List[Any]:
        """Snapshot of live keys, in no particular order."""
        self._check_open()
        return list(self.index)

    def insert(self, key: Any, value: Any) -> bool:
        """
        Insert a new record.

        Returns False if the key already exists or the data file cannot be
        written. Raises CodecError if the key or value cannot be encoded.
        """
        self._check_open()
        key = self._canonical_key(key)

        if key in self.index:
            logger.warning(f"Record with key {key!r} already exists")
            return False

        try:
            offset = self.data_file.append(key, value)
        except OSError as e:
            logger.error(f"Unable to write data file {self.data_path}: {e}")
            return False

        # Index only after the record is on disk
        self.index.put(key, offset)
        return True

    def retrieve(self, key: Any) -> Any:
        """
        Read the value stored for key.

        Raises:
            RecordNotFoundError: key is not in the index
            StorageIOError: data file cannot be opened
            CorruptDataError: record is truncated or holds a different key
        """
        self._check_open()
        key = self._canonical_key(key)

        offset = self.index.get(key)
        if offset is None:
            raise RecordNotFoundError(f"Record with key {key!r} not found")

        stored_key, value = self.data_file.read(offset)
        if self.key_codec.encode(stored_key) != self.key_codec.encode(key):
            raise CorruptDataError(
                f"Record at offset {offset} holds key {stored_key!r}, expected {key!r}"
            )
        return value

    def delete(self, key: Any) -> bool:
        """Remove key from the index. The data file is left untouched."""
        self._check_open()
        key = self._canonical_key(key)

        if not self.index.delete(key):
            logger.info(f"No record found with key {key!r}")
            return False
        return True

    def close(self):
        """Save the index and close the store."""
        if self.closed:
            return  # Already closed

        self.closed = True
        if not self.save_index():
            logger.error(f"Index for {self.data_path} was not saved; recent changes are lost")
