"""Pixel coverage of wall-like location lines."""

from __future__ import annotations

from typing import Callable, Iterator

YSpan = Callable[[int, int], tuple[int, int]]


def _spans(s: int) -> tuple[int, int]:
    return s // 4, s * 3 // 4


def _wall(x_part: str, y_part: str) -> Callable[[int], tuple[tuple[int, int], YSpan]]:
    def build(s: int):
        quarter, three = _spans(s)
        parts = {"full": (0, s), "low": (0, quarter), "high": (three, s)}
        y_span = parts[y_part]
        return parts[x_part], lambda x, _s: y_span
    return build


def _corner(s: int, rotation: int):
    quarter, three = _spans(s)
    spans = {
        0: lambda x, _s: (0, s if x < quarter else quarter),
        1: lambda x, _s: (0, quarter if x < three else s),
        2: lambda x, _s: (three if x < three else 0, s),
        3: lambda x, _s: (0 if x < quarter else three, s),
    }
    return (0, s), spans[rotation]


def _diagonal(s: int, rising: bool):
    eighth = s // 8
    if rising:
        return (0, s), lambda x, _s: (max(0, x - eighth), min(x + eighth, s))
    return (0, s), lambda x, _s: (max(0, s - x - eighth), min(s - x + eighth, s))


_SHAPES = {
    (0, 0): _wall("low", "full"),
    (0, 1): _wall("full", "low"),
    (0, 2): _wall("high", "full"),
    (0, 3): _wall("full", "high"),
    (2, 0): lambda s: _corner(s, 0),
    (2, 1): lambda s: _corner(s, 1),
    (2, 2): lambda s: _corner(s, 2),
    (2, 3): lambda s: _corner(s, 3),
    (9, 0): lambda s: _diagonal(s, False),
    (9, 2): lambda s: _diagonal(s, False),
    (9, 1): lambda s: _diagonal(s, True),
    (9, 3): lambda s: _diagonal(s, True),
}


def _cover(x_span: tuple[int, int], y_span: YSpan, size: int) -> Iterator[tuple[int, int]]:
    for x in range(*x_span):
        y_lo, y_hi = y_span(x, size)
        for y in range(y_lo, y_hi):
            yield x, y


def draw(ty: int, rotation: int, size: int) -> Iterator[tuple[int, int]]:
    """Yield the (x, y) pixels of a line of location type ``ty`` with ``rotation``."""
    if size <= 0 or size & (size - 1):
        raise ValueError(f"{size} is an invalid size Only 2^n values are allowed.")
    try:
        build = _SHAPES[(ty, rotation)]
    except KeyError:
        raise ValueError(f"no line shape for type {ty} with rotation {rotation}") from None
    x_span, y_span = build(size)
    return _cover(x_span, y_span, size)