"""World map zones, pastes and images."""

from __future__ import annotations

import enum
import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from jagcache.coordinate import Coordinate
from jagcache.paramtable import ByteReader, DecodeError


class WorldMapType(enum.IntEnum):
    """Archives in the world map index."""

    ZONES = 0
    PASTES = 1
    SMALL = 2
    UNKNOWN_3 = 3
    BIG = 4


@dataclass(frozen=True)
class Bound:
    """A rectangular area of the game map."""

    west: int
    south: int
    east: int
    north: int

    @classmethod
    def deserialize(cls, reader: ByteReader) -> "Bound":
        west = reader.u16()
        south = reader.u16()
        east = reader.u16()
        north = reader.u16()
        return cls(west, south, east, north)

    def to_dict(self) -> dict:
        return {"west": self.west, "south": self.south, "east": self.east, "north": self.north}


@dataclass(frozen=True)
class BoundDef:
    """Maps a source area on a plane to a destination area."""

    plane: int
    src: Bound
    dst: Bound

    @classmethod
    def deserialize(cls, reader: ByteReader) -> "BoundDef":
        plane = reader.u8()
        src = Bound.deserialize(reader)
        dst = Bound.deserialize(reader)
        return cls(plane, src, dst)

    def to_dict(self) -> dict:
        return {"plane": self.plane, "src": self.src.to_dict(), "dst": self.dst.to_dict()}


@dataclass
class MapZone:
    """General properties of a map zone."""

    id: int
    internal_name: str
    name: str
    center: Coordinate
    unknown_1: int
    show: bool
    default_zoom: int
    unknown_2: int
    bounds: list[BoundDef] = field(default_factory=list)

    @classmethod
    def deserialize(cls, id: int, data: bytes) -> "MapZone":
        reader = ByteReader(data)
        internal_name = reader.string()
        name = reader.string()
        packed = reader.u32()
        try:
            center = Coordinate.from_packed(packed)
        except ValueError as error:
            raise DecodeError(f"map zone {id} has an invalid center {packed:#x}") from error
        unknown_1 = reader.u32()
        raw_show = reader.u8()
        if raw_show not in (0, 1):
            raise DecodeError(f"Cannot convert value {raw_show} for 'show' to boolean")
        default_zoom = reader.u8()
        unknown_2 = reader.u8()
        count = reader.u8()
        bounds = [BoundDef.deserialize(reader) for _ in range(count)]
        return cls(
            id=id,
            internal_name=internal_name,
            name=name,
            center=center,
            unknown_1=unknown_1,
            show=bool(raw_show),
            default_zoom=default_zoom,
            unknown_2=unknown_2,
            bounds=bounds,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "internal_name": self.internal_name,
            "name": self.name,
            "center": {"plane": self.center.plane, "x": self.center.x, "y": self.center.y},
            "unknown_1": self.unknown_1,
            "show": self.show,
            "default_zoom": self.default_zoom,
            "unknown_2": self.unknown_2,
            "bounds": [bound.to_dict() for bound in self.bounds],
        }


@dataclass(frozen=True)
class Chunk:
    """A chunk position within a map square."""

    x: int
    y: int

    @classmethod
    def deserialize(cls, reader: ByteReader) -> "Chunk":
        x = reader.u8()
        y = reader.u8()
        return cls(x, y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Paste:
    """Copies a square or chunk of the map to a place on the world map."""

    src_plane: int
    n_planes: int
    src_i: int
    src_j: int
    dst_plane: int
    dst_i: int
    dst_j: int
    src_chunk: Optional[Chunk] = None
    dst_chunk: Optional[Chunk] = None

    @classmethod
    def deserialize_square(cls, reader: ByteReader) -> "Paste":
        src_plane = reader.u8()
        n_planes = reader.u8()
        src_i = reader.u16()
        src_j = reader.u16()
        dst_plane = reader.u8()
        dst_i = reader.u16()
        dst_j = reader.u16()
        return cls(src_plane, n_planes, src_i, src_j, dst_plane, dst_i, dst_j)

    @classmethod
    def deserialize_chunk(cls, reader: ByteReader) -> "Paste":
        src_plane = reader.u8()
        n_planes = reader.u8()
        src_i = reader.u16()
        src_j = reader.u16()
        src_chunk = Chunk.deserialize(reader)
        dst_plane = reader.u8()
        dst_i = reader.u16()
        dst_j = reader.u16()
        dst_chunk = Chunk.deserialize(reader)
        return cls(src_plane, n_planes, src_i, src_j, dst_plane, dst_i, dst_j, src_chunk, dst_chunk)

    def to_dict(self) -> dict:
        return {
            "src_plane": self.src_plane,
            "n_planes": self.n_planes,
            "src_i": self.src_i,
            "src_j": self.src_j,
            "src_chunk": self.src_chunk.to_dict() if self.src_chunk else None,
            "dst_plane": self.dst_plane,
            "dst_i": self.dst_i,
            "dst_j": self.dst_j,
            "dst_chunk": self.dst_chunk.to_dict() if self.dst_chunk else None,
        }


@dataclass
class MapPastes:
    """How a world map is assembled from pieces of the actual map."""

    id: int
    dim_i: int
    dim_j: int
    pastes: list[Paste] = field(default_factory=list)

    @classmethod
    def deserialize(cls, id: int, data: bytes) -> "MapPastes":
        reader = ByteReader(data)
        square_count = reader.u16()
        pastes = [Paste.deserialize_square(reader) for _ in range(square_count)]
        chunk_count = reader.u16()
        pastes.extend(Paste.deserialize_chunk(reader) for _ in range(chunk_count))
        dim_i = reader.u8()
        dim_j = reader.u8()
        return cls(id, dim_i, dim_j, pastes)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "dim_i": self.dim_i,
            "dim_j": self.dim_j,
            "pastes": [paste.to_dict() for paste in self.pastes],
        }


FileSource = Union[Mapping[int, bytes], Iterable[tuple[int, bytes]]]


def _values(items):
    return items.values() if isinstance(items, Mapping) else items


def _pairs(files: FileSource):
    return files.items() if isinstance(files, Mapping) else files


def export_zones(zones, output) -> Path:
    """Write the zones, sorted by id, to ``map_zones.json`` in ``output``."""
    folder = Path(output)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / "map_zones.json"
    records = [zone.to_dict() for zone in sorted(_values(zones), key=lambda z: z.id)]
    path.write_text(json.dumps(records, indent=2), encoding="utf-8")
    return path


def export_pastes(pastes, output) -> Path:
    """Write the pastes, keyed by id in ascending order, to ``map_pastes.json``."""
    folder = Path(output)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / "map_pastes.json"
    if isinstance(pastes, Mapping):
        entries = sorted(pastes.items())
    else:
        entries = sorted((p.id, p) for p in pastes)
    records = {str(key): value.to_dict() for key, value in entries}
    path.write_text(json.dumps(records, indent=2), encoding="utf-8")
    return path


def dump_small(files: FileSource, output) -> Path:
    """Write each small world map image as ``world_map_small/<id>.png``."""
    folder = Path(output) / "world_map_small"
    folder.mkdir(parents=True, exist_ok=True)
    for file_id, data in _pairs(files):
        (folder / f"{file_id}.png").write_bytes(bytes(data))
    return folder


def dump_big(files: FileSource, output) -> Path:
    """Write each length-prefixed big world map image as ``world_map_big/<id>.png``."""
    folder = Path(output) / "world_map_big"
    folder.mkdir(parents=True, exist_ok=True)
    for file_id, data in _pairs(files):
        reader = ByteReader(data)
        size = reader.u32()
        image = reader.read_bytes(size)
        (folder / f"{file_id}.png").write_bytes(image)
    return folder