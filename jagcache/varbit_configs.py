"""Varbit configurations: bit ranges of player variables."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from pathlib import Path

from jagcache.paramtable import ByteReader, DecodeError


@dataclass
class VarbitConfig:
    """Varbit ``id`` is bits ``least_significant_bit..=most_significant_bit`` of varp ``index``."""

    id: int
    unknown_1: int
    index: int
    least_significant_bit: int
    most_significant_bit: int

    @classmethod
    def deserialize(cls, id: int, data: bytes) -> "VarbitConfig":
        reader = ByteReader(data)
        first = None
        bits = None
        while True:
            opcode = reader.u8()
            if opcode == 0:
                if reader.has_remaining():
                    raise DecodeError(f"varbit {id} has {reader.remaining()} trailing bytes")
                break
            if opcode == 1:
                first = (reader.u8(), reader.u16())
            elif opcode == 2:
                bits = (reader.u8(), reader.u8())
            else:
                raise DecodeError(f"unknown varbit_config opcode {opcode}")
        if first is None:
            raise DecodeError("opcode 1 was not read")
        if bits is None:
            raise DecodeError("opcode 2 was not read")
        return cls(id, first[0], first[1], bits[0], bits[1])

    def to_dict(self) -> dict:
        return asdict(self)

    def __repr__(self) -> str:
        return f"VarbitConfig({json.dumps(self.to_dict())})"


def export(configs, output) -> Path:
    """Write the configs, sorted by id, to ``varbit_configs.json`` in ``output``."""
    items = configs.values() if isinstance(configs, Mapping) else configs
    folder = Path(output)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / "varbit_configs.json"
    records = [c.to_dict() for c in sorted(items, key=lambda c: c.id)]
    path.write_text(json.dumps(records, indent=2), encoding="utf-8")
    return path