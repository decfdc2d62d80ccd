"""Tagged binary encoding used by the PulseAudio native protocol."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Mapping
from enum import IntEnum

__all__ = ["Tag", "ProtocolError", "PacketWriter", "PacketReader", "MAX_STRING_LENGTH"]

MAX_STRING_LENGTH = 1024

_U8 = struct.Struct(">B")
_U32 = struct.Struct(">I")
_U64 = struct.Struct(">Q")
_I64 = struct.Struct(">q")


class Tag(IntEnum):
    """Type tags that precede values in a packet."""

    INVALID = 0
    STRING = ord("t")
    STRING_NULL = ord("N")
    UINT32 = ord("L")
    UINT8 = ord("B")
    UINT64 = ord("R")
    INT64 = ord("r")
    SAMPLE_SPEC = ord("a")
    ARBITRARY = ord("x")
    TRUE = ord("1")
    FALSE = ord("0")
    TIME = ord("T")
    USEC = ord("U")
    CHANNEL_MAP = ord("m")
    CVOLUME = ord("v")
    PROPLIST = ord("P")
    VOLUME = ord("V")
    FORMAT_INFO = ord("f")

    def __str__(self) -> str:
        return self.name


class ProtocolError(Exception):
    """Raised when packet data does not follow the protocol."""


def _mismatch(got: Tag, expected: str) -> ProtocolError:
    return ProtocolError(f"Protocol error: got type {got.name} but expected {expected}")


class PacketWriter:
    """Builds the payload of a packet."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def _pack(self, fmt: struct.Struct, value: int) -> None:
        try:
            self._buf += fmt.pack(value)
        except struct.error as exc:
            raise ValueError(f"value {value!r} out of range: {exc}") from exc

    def put_tag(self, tag) -> None:
        self._buf.append(Tag(tag))

    def put_u8(self, value: int) -> None:
        self._pack(_U8, value)

    def put_u32(self, value: int) -> None:
        self._pack(_U32, value)

    def put_tagged_u32(self, value: int) -> None:
        self.put_tag(Tag.UINT32)
        self.put_u32(value)

    def put_string(self, value: str) -> None:
        data = value.encode("utf-8")
        if b"\0" in data:
            raise ValueError("strings may not contain NUL characters")
        self.put_tag(Tag.STRING)
        self._buf += data
        self._buf.append(0)

    def put_null_string(self) -> None:
        self.put_tag(Tag.STRING_NULL)

    def put_arbitrary(self, data: bytes) -> None:
        self.put_tag(Tag.ARBITRARY)
        self.put_u32(len(data))
        self._buf += data

    def put_bool(self, value: bool) -> None:
        self.put_tag(Tag.TRUE if value else Tag.FALSE)

    def put_proplist(self, props: Mapping[str, str]) -> None:
        """Write a property list; entries with empty values are left out."""
        self.put_tag(Tag.PROPLIST)
        for key, value in props.items():
            if not value:
                continue
            data = value.encode("utf-8") + b"\0"
            self.put_string(key)
            self.put_tagged_u32(len(data))
            self.put_arbitrary(data)
        self.put_null_string()

    def put_cvolume(self, volumes: Iterable[int]) -> None:
        volumes = list(volumes)
        if len(volumes) > 0xFF:
            raise ValueError(f"too many channels: {len(volumes)}")
        self.put_tag(Tag.CVOLUME)
        self.put_u8(len(volumes))
        for volume in volumes:
            self.put_u32(volume)

    def getvalue(self) -> bytes:
        return bytes(self._buf)


class PacketReader:
    """Reads values from the payload of a packet."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def read_bytes(self, count: int) -> bytes:
        if count < 0:
            raise ValueError("count must not be negative")
        end = self._pos + count
        if end > len(self._data):
            raise ProtocolError(
                f"unexpected end of data: wanted {count} bytes, {self.remaining()} left"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def read_byte(self) -> int:
        return self.read_bytes(1)[0]

    def read_u32(self) -> int:
        return _U32.unpack(self.read_bytes(4))[0]

    def read_u64(self) -> int:
        return _U64.unpack(self.read_bytes(8))[0]

    def read_i64(self) -> int:
        return _I64.unpack(self.read_bytes(8))[0]

    def read_tag(self) -> Tag:
        value = self.read_byte()
        try:
            return Tag(value)
        except ValueError:
            raise ProtocolError(f"Protocol error: unknown type UnknownValue({value})") from None

    def expect_tag(self, tag) -> None:
        expected = Tag(tag)
        got = self.read_tag()
        if got != expected:
            raise _mismatch(got, expected.name)

    def _read_cbytes(self) -> bytes:
        limit = self._pos + MAX_STRING_LENGTH
        end = self._data.find(b"\0", self._pos, limit)
        if end == -1:
            if len(self._data) >= limit:
                raise ProtocolError(f"String is too long (max {MAX_STRING_LENGTH} bytes)")
            raise ProtocolError("unexpected end of data: unterminated string")
        raw = self._data[self._pos:end]
        self._pos = end + 1
        return raw

    def read_cstring(self) -> str:
        """Read a NUL-terminated string without a leading tag."""
        return self._read_cbytes().decode("utf-8", errors="replace")

    def read_string(self) -> str:
        """Read a tagged string; a null string reads as empty."""
        tag = self.read_tag()
        if tag == Tag.STRING_NULL:
            return ""
        if tag != Tag.STRING:
            raise _mismatch(tag, Tag.STRING.name)
        return self.read_cstring()

    def read_tagged_u32(self) -> int:
        self.expect_tag(Tag.UINT32)
        return self.read_u32()

    def read_tagged_u8(self) -> int:
        self.expect_tag(Tag.UINT8)
        return self.read_byte()

    def read_tagged_i64(self) -> int:
        self.expect_tag(Tag.INT64)
        return self.read_i64()

    def read_usec(self) -> int:
        self.expect_tag(Tag.USEC)
        return self.read_u64()

    def read_volume(self) -> int:
        self.expect_tag(Tag.VOLUME)
        return self.read_u32()

    def read_bool(self) -> bool:
        tag = self.read_tag()
        if tag == Tag.TRUE:
            return True
        if tag == Tag.FALSE:
            return False
        raise _mismatch(tag, "boolean true or false")

    def read_proplist(self) -> dict[str, str]:
        self.expect_tag(Tag.PROPLIST)
        props: dict[str, str] = {}
        while True:
            tag = self.read_tag()
            if tag == Tag.STRING_NULL:
                return props
            if tag != Tag.STRING:
                raise _mismatch(tag, Tag.STRING.name)
            key = self.read_cstring()
            declared = self.read_tagged_u32()
            self.expect_tag(Tag.ARBITRARY)
            arbitrary = self.read_u32()
            raw = self._read_cbytes()
            if len(raw) != declared - 1 or len(raw) != arbitrary - 1:
                raise ProtocolError(
                    "Protocol error: Proplist value length mismatch "
                    f"(len {declared}, arb len {arbitrary}, value len {len(raw)})"
                )
            props[key] = raw.decode("utf-8", errors="replace")