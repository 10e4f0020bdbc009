"""Binary codecs for record keys and values.

Every codec turns a value into bytes and reads it back from a binary stream,
consuming exactly the bytes its encoding produced. This lets records be read
sequentially without any length metadata in the index.

Layouts:
    scalar:    raw fixed-width struct pattern, platform byte order
    string:    [byte_count(8)][bytes]
    composite: concatenation of field encodings in declared order
"""
import io
import os
import struct
from typing import Any, BinaryIO, Callable, Sequence, Tuple

from .errors import CodecError, CorruptDataError
from ..utils.config import Config


def _remaining(stream: BinaryIO) -> int:
    """Bytes left between the current position and the end of stream."""
    pos = stream.tell()
    end = stream.seek(0, os.SEEK_END)
    stream.seek(pos)
    return end - pos


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly size bytes or raise CorruptDataError."""
    available = _remaining(stream)
    if size > available:
        raise CorruptDataError(
            f"Unexpected end of data: wanted {size} bytes, {available} available"
        )
    data = stream.read(size)
    if len(data) != size:
        raise CorruptDataError(
            f"Unexpected end of data: wanted {size} bytes, got {len(data)}"
        )
    return data


class Codec:
    """Encode/decode pair defining a type's binary representation."""

    def encode(self, value: Any) -> bytes:
        raise NotImplementedError

    def decode(self, stream: BinaryIO) -> Any:
        raise NotImplementedError

    def decode_bytes(self, data: bytes) -> Any:
        """Decode a value from an in-memory buffer."""
        return self.decode(io.BytesIO(data))


class ScalarCodec(Codec):
    """Fixed-size scalar stored as its raw struct pattern."""

    def __init__(self, fmt: str, byte_order: str = None):
        self.format = fmt
        self._struct = struct.Struct((byte_order or Config.BYTE_ORDER) + fmt)

    @property
    def size(self) -> int:
        return self._struct.size

    def encode(self, value: Any) -> bytes:
        try:
            return self._struct.pack(value)
        except struct.error as e:
            raise CodecError(f"Cannot encode {value!r} as '{self.format}': {e}") from e

    def decode(self, stream: BinaryIO) -> Any:
        return self._struct.unpack(read_exact(stream, self._struct.size))[0]

    def __repr__(self):
        return f"ScalarCodec({self.format!r})"


class BoolCodec(ScalarCodec):
    """Single-byte boolean; only real bool values are accepted."""

    def __init__(self, byte_order: str = None):
        super().__init__('?', byte_order)

    def encode(self, value: bool) -> bytes:
        if not isinstance(value, bool):
            raise CodecError(f"Expected bool, got {type(value).__name__}")
        return super().encode(value)


INT8 = ScalarCodec('b')
UINT8 = ScalarCodec('B')
INT16 = ScalarCodec('h')
UINT16 = ScalarCodec('H')
INT32 = ScalarCodec('i')
UINT32 = ScalarCodec('I')
INT64 = ScalarCodec('q')
UINT64 = ScalarCodec('Q')
FLOAT32 = ScalarCodec('f')
FLOAT64 = ScalarCodec('d')
BOOL = BoolCodec()

# Length prefix for variable-length sequences (a size_t byte count).
LENGTH_PREFIX = UINT64


class BytesCodec(Codec):
    """Raw bytes with a length prefix."""

    def encode(self, value: bytes) -> bytes:
        if not isinstance(value, (bytes, bytearray)):
            raise CodecError(f"Expected bytes, got {type(value).__name__}")
        return LENGTH_PREFIX.encode(len(value)) + bytes(value)

    def decode(self, stream: BinaryIO) -> bytes:
        size = LENGTH_PREFIX.decode(stream)
        return read_exact(stream, size)


class StringCodec(Codec):
    """Text stored as a length-prefixed byte string."""

    def __init__(self, encoding: str = None):
        self.encoding = encoding or Config.STRING_ENCODING
        self._bytes = BytesCodec()

    def encode(self, value: str) -> bytes:
        if not isinstance(value, str):
            raise CodecError(f"Expected str, got {type(value).__name__}")
        try:
            data = value.encode(self.encoding)
        except UnicodeEncodeError as e:
            raise CodecError(f"Cannot encode string as {self.encoding}: {e}") from e
        return self._bytes.encode(data)

    def decode(self, stream: BinaryIO) -> str:
        data = self._bytes.decode(stream)
        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise CorruptDataError(f"Invalid {self.encoding} string data: {e}") from e


BYTES = BytesCodec()
STRING = StringCodec()


class CompositeCodec(Codec):
    """
    Structured value encoded field by field in a fixed order.

    Args:
        factory: Callable building the value from keyword arguments,
            usually a dataclass or namedtuple type
        fields: Ordered (attribute_name, codec) pairs
    """

    def __init__(self, factory: Callable[..., Any], fields: Sequence[Tuple[str, Codec]]):
        if not fields:
            raise ValueError("CompositeCodec requires at least one field")
        self.factory = factory
        self.fields = list(fields)

    def encode(self, value: Any) -> bytes:
        parts = []
        for name, codec in self.fields:
            try:
                field_value = getattr(value, name)
            except AttributeError as e:
                raise CodecError(f"{type(value).__name__} has no field '{name}'") from e
            parts.append(codec.encode(field_value))
        return b''.join(parts)

    def decode(self, stream: BinaryIO) -> Any:
        values = {name: codec.decode(stream) for name, codec in self.fields}
        return self.factory(**values)
