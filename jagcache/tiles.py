"""Ground tiles of a map square."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from jagcache.paramtable import ByteReader, DecodeError, ReadError

PLANES = 4
SIDE = 64
TILE_COUNT = PLANES * SIDE * SIDE

_HEADER_936 = b"jagx\x01"

TileArray = list[list[list["Tile"]]]


@dataclass(frozen=True)
class Tile:
    """Properties of one tile; indexed as ``tiles[plane][x][y]``."""

    shape: Optional[int] = None
    overlay_id: Optional[int] = None
    settings: Optional[int] = None
    underlay_id: Optional[int] = None
    height: Optional[int] = None


def _reshape(tiles: list[Tile]) -> TileArray:
    if len(tiles) != TILE_COUNT:
        raise DecodeError(f"expected {TILE_COUNT} tiles, got {len(tiles)}")
    plane_size = SIDE * SIDE
    return [
        [tiles[p * plane_size + x * SIDE:p * plane_size + (x + 1) * SIDE] for x in range(SIDE)]
        for p in range(PLANES)
    ]


def dump_tiles(data: bytes) -> TileArray:
    """Decode the flag-based tile format, with or without the ``jagx`` header."""
    data = bytes(data)
    is_936 = data[:5] == _HEADER_936
    reader = ByteReader(data)
    if is_936:
        reader.read_bytes(len(_HEADER_936))

    tiles = []
    for _ in range(TILE_COUNT):
        has_overlay, has_settings, has_underlay, has_height, *_ = reader.bitflags()
        shape = overlay_id = settings = underlay_id = height = None
        if has_overlay:
            shape = reader.u8()
            overlay_id = reader.unsigned_smart()
        if has_settings:
            settings = reader.u8()
        if has_underlay:
            underlay_id = reader.unsigned_smart()
        if has_height:
            height = reader.u16() if is_936 else reader.u8()
        tiles.append(Tile(shape, overlay_id, settings, underlay_id, height))
    return _reshape(tiles)


def try_dump(data: bytes, use_post_oct_2022: bool) -> list[Tile]:
    """Decode the opcode-based tile format into a flat list of tiles.

    Raises ReadError if the data runs out and DecodeError if bytes are left over.
    """
    reader = ByteReader(data)
    read_wide = reader.u16 if use_post_oct_2022 else reader.u8

    tiles = []
    for _ in range(TILE_COUNT):
        shape = overlay_id = settings = underlay_id = height = None
        while True:
            opcode = read_wide()
            if opcode == 0:
                break
            if opcode == 1:
                height = reader.u8()
                break
            if opcode <= 49:
                shape = opcode - 2
                overlay_id = read_wide()
            elif opcode <= 81:
                settings = opcode - 49
            else:
                underlay_id = opcode - 81
        tiles.append(Tile(shape, overlay_id, settings, underlay_id, height))

    if reader.has_remaining():
        raise DecodeError(f"tile data not exhausted: {reader.remaining()} bytes left")
    return tiles


def dump_tiles_osrs(data: bytes) -> TileArray:
    """Decode opcode-based tiles, trying the newer wide format first."""
    try:
        tiles = try_dump(data, True)
    except DecodeError:
        tiles = try_dump(data, False)
    return _reshape(tiles)


def dump_tiles_legacy(data: bytes) -> TileArray:
    """Decode opcode-based tiles in the narrow format."""
    return _reshape(try_dump(data, False))


__all__ = ["Tile", "TileArray", "dump_tiles", "try_dump", "dump_tiles_osrs", "dump_tiles_legacy", "ReadError"]