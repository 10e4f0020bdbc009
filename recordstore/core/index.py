"""In-memory hash index mapping keys to data file offsets."""
import logging
from typing import Any, Dict, Iterator, Optional

from .codec import Codec, UINT64

logger = logging.getLogger(__name__)


class Index:
    """
    In-memory hash index mapping keys to data file offsets.

    Persisted as a flat sequence of encode(key) + encode(offset) pairs with
    no header, count or checksum. The file is rewritten wholesale on save.
    """

    def __init__(self, path: str, key_codec: Codec, offset_codec: Codec = UINT64):
        self.path = path
        self.key_codec = key_codec
        self.offset_codec = offset_codec
        self.index: Dict[Any, int] = {}

    def put(self, key: Any, offset: int):
        """Add key to index."""
        self.index[key] = offset

    def get(self, key: Any) -> Optional[int]:
        """Get offset for key."""
        return self.index.get(key)

    def delete(self, key: Any) -> bool:
        """Remove key from index. Returns False if it was not present."""
        return self.index.pop(key, None) is not None

    def __contains__(self, key: Any) -> bool:
        return key in self.index

    def __len__(self) -> int:
        return len(self.index)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.index)

    def load(self):
        """
        Load index from disk.

        A missing file leaves the index empty. Any other failure to open the
        file is logged and also leaves it empty. A truncated entry raises
        CorruptDataError.
        """
        try:
            f = open(self.path, 'rb')
        except FileNotFoundError:
            logger.info(f"No index file found at {self.path}, starting fresh")
            return
        except OSError as e:
            logger.error(f"Unable to open index file {self.path}: {e}; starting with empty index")
            return

        entries = {}
        with f:
            while f.peek(1):
                key = self.key_codec.decode(f)
                offset = self.offset_codec.decode(f)
                entries[key] = offset

        self.index = entries
        logger.info(f"Loaded {len(entries)} index entries from {self.path}")

    def save(self) -> bool:
        """Persist index to disk. Returns False if the file could not be written."""
        data = b''.join(
            self.key_codec.encode(key) + self.offset_codec.encode(offset)
            for key, offset in self.index.items()
        )
        try:
            with open(self.path, 'wb') as f:
                f.write(data)
        except OSError as e:
            logger.error(f"Unable to save index file {self.path}: {e}")
            return False

        logger.debug(f"Saved {len(self.index)} index entries to {self.path}")
        return True
