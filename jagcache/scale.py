"""Box-filter downscaling of map tiles to 256x256."""

from __future__ import annotations

from itertools import chain

from PIL import Image

OUTPUT_SIDE = 256


def _as_rgba(image: Image.Image) -> Image.Image:
    return image if image.mode == "RGBA" else image.convert("RGBA")


def _downscale(image: Image.Image, factor: int) -> Image.Image:
    """Average ``factor`` x ``factor`` blocks, rounding each channel down."""
    image = _as_rgba(image)
    expected = OUTPUT_SIDE * factor
    if image.size != (expected, expected):
        raise ValueError(
            f"expected a {expected}x{expected} image, got {image.width}x{image.height}"
        )
    data = image.tobytes()
    stride = expected * 4
    divisor = factor * factor
    step = 4 * factor
    out = bytearray()
    for row in range(OUTPUT_SIDE):
        start = row * factor * stride
        rows = [data[start + k * stride:start + (k + 1) * stride] for k in range(factor)]
        column = [sum(values) for values in zip(*rows)]
        channels = []
        for channel in range(4):
            parts = [column[channel + 4 * k::step] for k in range(factor)]
            channels.append([sum(values) // divisor for values in zip(*parts)])
        out.extend(chain.from_iterable(zip(*channels)))
    return Image.frombytes("RGBA", (OUTPUT_SIDE, OUTPUT_SIDE), bytes(out))


def resize_half(image: Image.Image) -> Image.Image:
    """Shrink a 512x512 image to 256x256 by averaging 2x2 blocks."""
    return _downscale(image, 2)


def resize_quarter(image: Image.Image) -> Image.Image:
    """Shrink a 1024x1024 image to 256x256 by averaging 4x4 blocks."""
    return _downscale(image, 4)