"""Builds lower zoom levels of map tiles from the level above."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable

from PIL import Image

from jagcache.scale import resize_half

_TILE_NAME = re.compile(r"(?P<p>\d+)_(?P<i>\d+)_(?P<j>\d+)\.png")

_QUADRANTS = ((0, 0), (0, 1), (1, 0), (1, 1))


def to_coordinates(text) -> tuple[int, int, int]:
    """Parse ``<plane>_<i>_<j>.png`` into ``(plane, i, j)``."""
    name = os.fspath(text)
    match = _TILE_NAME.search(name)
    if match is None:
        raise ValueError(f"not a tile file name: {name!r}")
    return int(match["p"]), int(match["i"]), int(match["j"])


def _level_folder(folder, name: str, mapid: int, zoom: int) -> Path:
    return Path(folder) / name / str(mapid) / str(zoom)


def _source_tiles(folder, name, mapid, target_zoom, target_plane, target_i, target_j):
    """Yield ``((di, dj), image)`` for each existing tile one zoom level up."""
    source = _level_folder(folder, name, mapid, target_zoom + 1)
    for di, dj in _QUADRANTS:
        i = (target_i << 1) + di
        j = (target_j << 1) + dj
        try:
            with Image.open(source / f"{target_plane}_{i}_{j}.png") as opened:
                image = opened.convert("RGBA")
        except FileNotFoundError:
            continue
        yield (di, dj), image


def make_tile(folder, name, mapid, target_zoom, target_plane, target_i, target_j, backfill) -> Image.Image:
    """Combine up to four tiles of the next zoom level into one 256x256 tile."""
    base = Image.new("RGBA", (512, 512), tuple(backfill))
    for (di, dj), image in _source_tiles(
        folder, name, mapid, target_zoom, target_plane, target_i, target_j
    ):
        x, y = 256 * di, 256 * (1 - dj)
        image = image.crop((0, 0, min(image.width, 512 - x), min(image.height, 512 - y)))
        base.alpha_composite(image, dest=(x, y))
    return resize_half(base)


def _future_tiles(output, name: str, mapid: int, zoom: int) -> set[tuple[int, int, int]]:
    folder = _level_folder(output, name, mapid, zoom)
    coordinates = set()
    for entry in folder.iterdir():
        plane, i, j = to_coordinates(entry.name)
        coordinates.add((plane, i >> 1, j >> 1))
    return coordinates


def render_zoom_levels(output, name, mapid, zoom_range: Iterable[int], backfill) -> list[Path]:
    """Create every zoom level in ``zoom_range``, highest first, from the level above it."""
    written = []
    for zoom in sorted(zoom_range, reverse=True):
        folder = _level_folder(output, name, mapid, zoom)
        folder.mkdir(parents=True, exist_ok=True)
        for plane, i, j in sorted(_future_tiles(output, name, mapid, zoom + 1)):
            image = make_tile(output, name, mapid, zoom, plane, i, j, backfill)
            path = folder / f"{plane}_{i}_{j}.png"
            image.save(path)
            written.append(path)
    return written