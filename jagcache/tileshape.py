"""Pixel coverage of overlay and underlay tile shapes."""

from __future__ import annotations

from typing import Callable, Iterator, Optional

Span = Callable[[int], tuple[int, int]]
YSpan = Callable[[int, int], tuple[int, int]]


def _full(s: int) -> tuple[int, int]:
    return 0, s


def _left(s: int) -> tuple[int, int]:
    return 0, s // 2


def _right(s: int) -> tuple[int, int]:
    return s // 2, s


def _table(entries) -> dict:
    table = {}
    for shapes, xspan, yspan in entries:
        for shape in shapes:
            table[shape] = (xspan, yspan)
    return table


_OVERLAY = _table([
    ((0,), _full, lambda x, s: (0, s)),
    ((4, 39, 41), _full, lambda x, s: (x, s)),
    ((5, 36, 42), _full, lambda x, s: (0, s - x)),
    ((6, 37, 43), _full, lambda x, s: (0, x)),
    ((7, 38, 40), _full, lambda x, s: (s - x, s)),
    ((8,), _left, lambda x, s: (0, s - 2 * x)),
    ((9,), _full, lambda x, s: (0, x // 2)),
    ((10,), _right, lambda x, s: (s - 2 * (x - s // 2), s)),
    ((11,), _full, lambda x, s: ((x + s) // 2, s)),
    ((12,), _right, lambda x, s: (0, 2 * x - s)),
    ((13,), _full, lambda x, s: (s - 1 - x // 2, s)),
    ((14,), _left, lambda x, s: (2 * x, s)),
    ((15,), _full, lambda x, s: (0, (s - x) // 2)),
    ((16,), _full, lambda x, s: (max(0, s - 2 * x), s)),
    ((17,), _full, lambda x, s: (x // 2, s)),
    ((18,), _full, lambda x, s: (0, min(2 * (s - x), s))),
    ((19,), _full, lambda x, s: (0, (x + s) // 2)),
    ((20,), _full, lambda x, s: (max(0, 2 * x - s), s)),
    ((21,), _full, lambda x, s: (0, s - 1 - x // 2)),
    ((22,), _full, lambda x, s: (0, min(2 * x, s))),
    ((23,), _full, lambda x, s: ((s - x) // 2, s)),
    ((24,), _left, lambda x, s: (0, s)),
    ((25,), _full, lambda x, s: (0, s // 2)),
    ((26,), _right, lambda x, s: (0, s)),
    ((27,), _full, lambda x, s: (s // 2, s)),
    ((28,), _left, lambda x, s: (s // 2 + x, s)),
    ((29,), _left, lambda x, s: (0, s // 2 - x)),
    ((30,), _right, lambda x, s: (0, x - s // 2)),
    ((31,), _right, lambda x, s: (s + s // 2 - x, s)),
    ((32, 45), _full, lambda x, s: (0, min(s // 2 + x, s))),
    ((33, 46), _full, lambda x, s: (max(0, s // 2 - x), s)),
    ((34, 47), _full, lambda x, s: (max(0, x - s // 2), s)),
    ((35, 44), _full, lambda x, s: (0, min(s + s // 2 - x, s))),
])

_UNDERLAY = _table([
    ((None,), _full, lambda x, s: (0, s)),
    ((4, 39, 41), _full, lambda x, s: (0, x)),
    ((5, 36, 42), _full, lambda x, s: (s - x, s)),
    ((6, 37, 43), _full, lambda x, s: (x, s)),
    ((7, 38, 40), _full, lambda x, s: (0, s - x)),
    ((8,), _full, lambda x, s: (max(0, s - 2 * x), s)),
    ((9,), _full, lambda x, s: (x // 2, s)),
    ((10,), _full, lambda x, s: (0, min(2 * (s - x), s))),
    ((11,), _full, lambda x, s: (0, (x + s) // 2)),
    ((12,), _full, lambda x, s: (max(0, 2 * x - s), s)),
    ((13,), _full, lambda x, s: (0, s - 1 - x // 2)),
    ((14,), _full, lambda x, s: (0, min(2 * x, s))),
    ((15,), _full, lambda x, s: ((s - x) // 2, s)),
    ((16,), _left, lambda x, s: (0, s - 2 * x)),
    ((17,), _full, lambda x, s: (0, x // 2)),
    ((18,), _right, lambda x, s: (s - 2 * (x - s // 2), s)),
    ((19,), _full, lambda x, s: ((x + s) // 2, s)),
    ((20,), _right, lambda x, s: (0, 2 * x - s)),
    ((21,), _full, lambda x, s: (s - 1 - x // 2, s)),
    ((22,), _left, lambda x, s: (2 * x, s)),
    ((23,), _full, lambda x, s: (0, (s - x) // 2)),
    ((24,), _right, lambda x, s: (0, s)),
    ((25,), _full, lambda x, s: (s // 2, s)),
    ((26,), _left, lambda x, s: (0, s)),
    ((27,), _full, lambda x, s: (0, s // 2)),
    ((28,), _full, lambda x, s: (0, min(s // 2 + x, s))),
    ((29,), _full, lambda x, s: (max(0, s // 2 - x), s)),
    ((30,), _full, lambda x, s: (max(0, x - s // 2), s)),
    ((31,), _full, lambda x, s: (0, min(s + s // 2 - x, s))),
    ((32, 45), _left, lambda x, s: (s // 2 + x, s)),
    ((33, 46), _left, lambda x, s: (0, s // 2 - x)),
    ((34, 47), _right, lambda x, s: (0, x - s // 2)),
    ((35, 44), _right, lambda x, s: (s + s // 2 - x, s)),
])


def _check_size(size: int) -> None:
    if size <= 0 or size & (size - 1):
        raise ValueError(f"{size} is an invalid size, only 2^n values are allowed.")


def _cover(xspan: Span, yspan: YSpan, size: int) -> Iterator[tuple[int, int]]:
    x_lo, x_hi = xspan(size)
    for x in range(x_lo, x_hi):
        y_lo, y_hi = yspan(x, size)
        for y in range(y_lo, y_hi):
            yield x, y


def _draw(table: dict, shape, size: int) -> Iterator[tuple[int, int]]:
    _check_size(size)
    try:
        xspan, yspan = table[shape]
    except KeyError:
        raise ValueError(f"unknown tile shape {shape}") from None
    return _cover(xspan, yspan, size)


def draw_overlay(shape: int, size: int) -> Iterator[tuple[int, int]]:
    """Yield the (x, y) pixels an overlay of ``shape`` covers in a tile of ``size``."""
    return _draw(_OVERLAY, shape, size)


def draw_underlay(shape: Optional[int], size: int) -> Iterator[tuple[int, int]]:
    """Yield the (x, y) pixels left to the underlay; ``None`` covers the whole tile."""
    if shape == 0:
        # A full overlay leaves nothing for the underlay.
        _check_size(size)
        return iter(())
    return _draw(_UNDERLAY, shape, size)