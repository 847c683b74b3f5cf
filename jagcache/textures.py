"""Texture configurations."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from pathlib import Path

from jagcache.paramtable import ByteReader


@dataclass
class TextureConfig:
    """The few texture properties that are decoded."""

    id: int
    field1777: int
    field1778: bool

    @classmethod
    def deserialize(cls, id: int, data: bytes) -> "TextureConfig":
        reader = ByteReader(data)
        field1777 = reader.u16()
        field1778 = reader.i8() != 0
        reader.u8()  # count of entries that follow; the rest is not decoded
        return cls(id, field1777, field1778)

    def to_dict(self) -> dict:
        return asdict(self)

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def export(textures, output) -> Path:
    """Write the textures, sorted by id, to ``textures.json`` in ``output``."""
    items = textures.values() if isinstance(textures, Mapping) else textures
    folder = Path(output)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / "textures.json"
    records = [t.to_dict() for t in sorted(items, key=lambda t: t.id)]
    path.write_text(json.dumps(records, indent=2), encoding="utf-8")
    return path