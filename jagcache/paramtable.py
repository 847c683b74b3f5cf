"""Big-endian byte reading and parameter tables attached to cache configs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


class DecodeError(ValueError):
    """Raised when cache data does not follow the expected format."""


class ReadError(DecodeError):
    """Raised when a read runs past the end of the data."""


class ByteReader:
    """Sequential big-endian reader over an immutable byte buffer."""

    def __init__(self, data):
        self._data = bytes(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data)

    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._data) - self._pos

    def has_remaining(self) -> bool:
        return self._pos < len(self._data)

    def seek(self, position: int) -> None:
        """Move to an absolute position from the start."""
        if not 0 <= position <= len(self._data):
            raise ReadError(f"cannot seek to {position} in {len(self._data)} bytes")
        self._pos = position

    def seek_end(self, offset: int) -> None:
        """Move to a position relative to the end (offset is usually negative)."""
        self.seek(len(self._data) + offset)

    def read_bytes(self, count: int) -> bytes:
        if count < 0:
            raise ValueError(f"cannot read a negative number of bytes: {count}")
        if count > self.remaining():
            raise ReadError(f"needed {count} bytes but only {self.remaining()} remain")
        chunk = self._data[self._pos:self._pos + count]
        self._pos += count
        return chunk

    def u8(self) -> int:
        return self.read_bytes(1)[0]

    def i8(self) -> int:
        return int.from_bytes(self.read_bytes(1), "big", signed=True)

    def u16(self) -> int:
        return int.from_bytes(self.read_bytes(2), "big")

    def u32(self) -> int:
        return int.from_bytes(self.read_bytes(4), "big")

    def i32(self) -> int:
        return int.from_bytes(self.read_bytes(4), "big", signed=True)

    def uint(self, size: int) -> int:
        """Read an unsigned integer of ``size`` bytes."""
        return int.from_bytes(self.read_bytes(size), "big")

    def rgb(self) -> tuple[int, int, int]:
        red, green, blue = self.read_bytes(3)
        return red, green, blue

    def string(self) -> str:
        """Read a zero-terminated string."""
        end = self._data.find(b"\x00", self._pos)
        if end < 0:
            raise ReadError("string is not terminated")
        raw = self._data[self._pos:end]
        self._pos = end + 1
        return raw.decode("cp1252", errors="replace")

    def bitflags(self) -> tuple[bool, ...]:
        """Read one byte as eight flags, least significant bit first."""
        value = self.u8()
        return tuple(bool(value >> bit & 1) for bit in range(8))

    def unsigned_smart(self) -> int:
        """Read a value stored in one byte if below 128, otherwise in two."""
        if not self.has_remaining():
            raise ReadError("needed 1 byte but none remain")
        if self._data[self._pos] < 0x80:
            return self.u8()
        return self.u16() - 0x8000


Param = Union[int, str]


@dataclass
class ParamTable:
    """Mapping of parameter keys to integer or string values."""

    params: dict[int, Param] = field(default_factory=dict)

    @classmethod
    def deserialize(cls, reader: ByteReader) -> "ParamTable":
        count = reader.u8()
        params: dict[int, Param] = {}
        for _ in range(count):
            kind = reader.u8()
            key = reader.uint(3)
            if kind == 0:
                params[key] = reader.i32()
            elif kind == 1:
                params[key] = reader.string()
            else:
                raise DecodeError(f"cannot decode unknown param type {kind}")
        return cls(params)

    def get(self, key: int) -> Param | None:
        return self.params.get(key)

    def __getitem__(self, key: int) -> Param:
        try:
            return self.params[key]
        except KeyError:
            raise KeyError("key not in table") from None