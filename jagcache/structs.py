"""Struct configurations: bags of parameters."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jagcache.paramtable import ByteReader, DecodeError, ParamTable


@dataclass
class Struct:
    """A struct config with its id and optional parameter table."""

    id: int
    params: Optional[ParamTable] = None

    @classmethod
    def deserialize(cls, id: int, data: bytes) -> "Struct":
        reader = ByteReader(data)
        struct = cls(id)
        while True:
            opcode = reader.u8()
            if opcode == 0:
                return struct
            if opcode == 249:
                struct.params = ParamTable.deserialize(reader)
            else:
                raise DecodeError(f"Struct cannot deserialize opcode {opcode} in id {id}")

    def to_dict(self) -> dict:
        out: dict = {"id": self.id}
        if self.params is not None:
            out["params"] = dict(sorted(self.params.params.items()))
        return out

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def export(structs, output) -> Path:
    """Write the structs, sorted by id, to ``structs.json`` in ``output``."""
    items: Iterable[Struct] = structs.values() if isinstance(structs, Mapping) else structs
    folder = Path(output)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / "structs.json"
    records = [s.to_dict() for s in sorted(items, key=lambda s: s.id)]
    path.write_text(json.dumps(records, indent=2), encoding="utf-8")
    return path