"""Game world coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Coordinate:
    """A position given by plane and x, y tile coordinates."""

    plane: int
    x: int
    y: int

    @classmethod
    def from_packed(cls, value: int) -> "Coordinate":
        """Unpack a coordinate stored as plane << 28 | x << 14 | y."""
        if not 0 <= value < 1 << 32:
            raise ValueError("invalid coordinate")
        plane = value >> 28
        x = (value >> 14) & 0x3FFF
        y = value & 0x3FFF
        if plane > 3 or x > 6400 or y > 12800:
            raise ValueError("invalid coordinate")
        return cls(plane, x, y)