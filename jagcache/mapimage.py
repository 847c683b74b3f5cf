"""Compositing rendered map planes and cutting them into zoom-level tiles."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image

from jagcache.scale import resize_half, resize_quarter


@dataclass(frozen=True)
class RenderConfig:
    """Settings of the map renderer."""

    map_id: int
    scale: int
    tile_size: int
    initial_zoom: int
    interp: int
    dim: int

    @classmethod
    def fast(cls) -> "RenderConfig":
        return cls(map_id=-1, scale=4, tile_size=16, initial_zoom=3, interp=5, dim=1024)

    @classmethod
    def detailed(cls) -> "RenderConfig":
        return cls(map_id=-1, scale=4, tile_size=16, initial_zoom=4, interp=5, dim=1024)


CONFIG = RenderConfig.detailed()


def _darken(image: Image.Image) -> Image.Image:
    red, green, blue, alpha = image.split()
    halved = [band.point(lambda value: value // 2) for band in (red, green, blue)]
    return Image.merge("RGBA", (*halved, alpha))


def composite_plane(imgs: Sequence[Image.Image], plane: int) -> Image.Image:
    """Show ``plane`` over the planes below it; lower planes are drawn at half brightness.

    Each pixel comes from the highest plane up to ``plane`` where it is not fully
    transparent, or from plane 0 when none is.
    """
    if not 0 <= plane < len(imgs):
        raise ValueError(f"plane {plane} out of range for {len(imgs)} images")
    layers = [image if image.mode == "RGBA" else image.convert("RGBA") for image in imgs[:plane + 1]]
    size = layers[0].size
    if any(layer.size != size for layer in layers):
        raise ValueError("all planes must have the same size")

    result = layers[0].copy() if plane == 0 else _darken(layers[0])
    for p in range(1, plane + 1):
        layer = layers[p] if p == plane else _darken(layers[p])
        mask = layers[p].getchannel("A").point(lambda value: 255 if value else 0)
        result.paste(layer, (0, 0), mask)
    return result


def _has_content(image: Image.Image) -> bool:
    return image.getchannel("A").getbbox() is not None


def _save(image: Image.Image, path: Path, written: list[Path]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path)
    written.append(path)


def save_smallest(output, name, i, j, imgs, config: Optional[RenderConfig] = None) -> list[Path]:
    """Cut the four plane images of map square ``(i, j)`` into tiles of zoom levels 4, 3 and 2.

    Tiles that are fully transparent are not written. Returns the written paths.
    """
    config = config or CONFIG
    dim = config.dim
    if dim % 4:
        raise ValueError(f"image dimension {dim} is not divisible by 4")
    if len(imgs) != 4:
        raise ValueError(f"expected 4 plane images, got {len(imgs)}")
    for image in imgs:
        if image.size != (dim, dim):
            raise ValueError(f"expected {dim}x{dim} images, got {image.width}x{image.height}")

    root = Path(output) / name / str(config.map_id)
    written: list[Path] = []
    for plane in range(4):
        base = composite_plane(imgs, plane)

        if config.initial_zoom >= 4:
            side = dim // 4
            for x, y in product(range(4), range(4)):
                left, top = side * x, dim - side * (y + 1)
                sub_image = base.crop((left, top, left + side, top + side))
                if _has_content(sub_image):
                    target = root / "4" / f"{plane}_{i * 4 + x}_{j * 4 + y}.png"
                    _save(sub_image, target, written)

        if config.initial_zoom >= 3:
            side = dim // 2
            for x, y in product(range(2), range(2)):
                left, top = side * x, dim - side * (y + 1)
                sub_image = base.crop((left, top, left + side, top + side))
                if _has_content(sub_image):
                    target = root / "3" / f"{plane}_{i * 2 + x}_{j * 2 + y}.png"
                    _save(resize_half(sub_image), target, written)

        if config.initial_zoom >= 2:
            resized = resize_quarter(base)
            if _has_content(resized):
                _save(resized, root / "2" / f"{plane}_{i}_{j}.png", written)
    return written