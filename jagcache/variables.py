"""Player variables: varps and the varbits packed into them."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass
from typing import ClassVar, Optional

_NONE = 0xFFFF


@functools.total_ordering
@dataclass(frozen=True)
class _Variable:
    val: Optional[int]

    type: ClassVar[str] = ""

    @classmethod
    def from_raw(cls, value: int):
        """Build from a stored id where 0xFFFF means no variable."""
        return cls(None if value == _NONE else value)

    def _key(self):
        return (self.val is not None, self.val or 0)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() < other._key()


@dataclass(frozen=True, eq=False)
class Varbit(_Variable):
    """A bit range of a varp; ``val`` is None when absent."""

    type: ClassVar[str] = "varbit"

    @classmethod
    def from_raw(cls, value: int) -> "Varbit":
        return super().from_raw(value)

    def __eq__(self, other):
        return type(other) is Varbit and self.val == other.val

    def __hash__(self):
        return hash((Varbit, self.val))


@dataclass(frozen=True, eq=False)
class Varp(_Variable):
    """A player variable; ``val`` is None when absent."""

    type: ClassVar[str] = "varp"

    @classmethod
    def from_raw(cls, value: int) -> "Varp":
        return super().from_raw(value)

    def __eq__(self, other):
        return type(other) is Varp and self.val == other.val

    def __hash__(self):
        return hash((Varp, self.val))


class VariableKind(enum.Enum):
    VARBIT = "varbit"
    VARP = "varp"


_KIND_ORDER = {VariableKind.VARBIT: 0, VariableKind.VARP: 1}


@functools.total_ordering
@dataclass(frozen=True)
class VarpOrVarbit:
    """Exactly one of a varp or a varbit."""

    kind: VariableKind
    id: int

    @classmethod
    def from_pair(cls, varp: Varp, varbit: Varbit) -> "VarpOrVarbit":
        """Pick whichever of the two is present; exactly one must be."""
        if varp.val is not None and varbit.val is None:
            return cls(VariableKind.VARP, varp.val)
        if varp.val is None and varbit.val is not None:
            return cls(VariableKind.VARBIT, varbit.val)
        raise ValueError(f"Invalid variable pattern {(varp.val, varbit.val)!r}.")

    def __lt__(self, other):
        if not isinstance(other, VarpOrVarbit):
            return NotImplemented
        return (_KIND_ORDER[self.kind], self.id) < (_KIND_ORDER[other.kind], other.id)