"""Underlay configurations: ground colours blended between tiles."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jagcache.paramtable import ByteReader, DecodeError


@dataclass
class Underlay:
    """The general ground colour of a tile type."""

    id: int
    colour: Optional[tuple[int, int, int]] = None
    op_2: Optional[int] = None
    op_3: Optional[int] = None
    op_4: Optional[bool] = None
    op_5: Optional[bool] = None

    @classmethod
    def deserialize(cls, id: int, data: bytes) -> "Underlay":
        reader = ByteReader(data)
        underlay = cls(id)
        while True:
            opcode = reader.u8()
            if opcode == 0:
                if reader.has_remaining():
                    raise DecodeError(f"underlay {id} has {reader.remaining()} trailing bytes")
                return underlay
            if opcode == 1:
                underlay.colour = reader.rgb()
            elif opcode == 2:
                underlay.op_2 = reader.u16()
            elif opcode == 3:
                underlay.op_3 = reader.u16()
            elif opcode == 4:
                underlay.op_4 = True
            elif opcode == 5:
                underlay.op_5 = True
            else:
                raise DecodeError(f"Underlay cannot deserialize opcode {opcode} in id {id}")

    def to_dict(self) -> dict:
        out: dict = {"id": self.id}
        if self.colour is not None:
            out["colour"] = list(self.colour)
        for name in ("op_2", "op_3", "op_4", "op_5"):
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        return out


def export(underlays, output) -> Path:
    """Write the underlays, sorted by id, to ``underlays.json`` in ``output``."""
    items = underlays.values() if isinstance(underlays, Mapping) else underlays
    folder = Path(output)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / "underlays.json"
    records = [u.to_dict() for u in sorted(items, key=lambda u: u.id)]
    path.write_text(json.dumps(records, indent=2), encoding="utf-8")
    return path