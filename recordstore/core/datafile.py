"""Append-only data file of encoded records."""
import logging
import os
from typing import Any, Tuple

from .codec import Codec
from .errors import StorageIOError
from ..utils.config import Config

logger = logging.getLogger(__name__)


class DataFile:
    """
    Append-only data file holding encode(key) + encode(value) records.

    The file is opened and closed inside each call; no handle is kept
    between operations.
    """

    def __init__(self, path: str, key_codec: Codec, value_codec: Codec, sync: bool = None):
        self.path = path
        self.key_codec = key_codec
        self.value_codec = value_codec
        self.sync = Config.SYNC_WRITES if sync is None else sync

    def append(self, key: Any, value: Any) -> int:
        """
        Append a record to the data file.
        Returns the offset the record starts at.

        Raises CodecError before touching the file if either side cannot be
        encoded, and OSError if the file cannot be opened or written.
        """
        data = self.key_codec.encode(key) + self.value_codec.encode(value)

        with open(self.path, 'ab') as f:
            f.seek(0, os.SEEK_END)
            offset = f.tell()
            f.write(data)
            if self.sync:
                f.flush()
                os.fsync(f.fileno())

        logger.debug(f"Appended record at offset {offset} ({len(data)} bytes) to {self.path}")
        return offset

    def read(self, offset: int) -> Tuple[Any, Any]:
        """Read the (key, value) record starting at offset."""
        try:
            f = open(self.path, 'rb')
        except OSError as e:
            raise StorageIOError(f"Unable to open data file {self.path}: {e}") from e

        with f:
            f.seek(offset)
            key = self.key_codec.decode(f)
            value = self.value_codec.decode(f)
        return key, value
