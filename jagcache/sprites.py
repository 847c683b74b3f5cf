"""Sprites: paletted and true-colour images stored in the cache."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from itertools import islice, repeat
from pathlib import Path

from PIL import Image

from jagcache.paramtable import ByteReader, DecodeError

Sprite = Image.Image

MAPSCENE_SPRITE_ID = 317
"""The legacy sprite whose frames form all the mapscenes."""

_TRANSPARENT = (255, 0, 255, 0)


def _paletted_image(
    size: tuple[int, int],
    indices: Iterable[int],
    alphas: Iterable[int],
    palette: list[tuple[int, int, int]],
) -> Sprite:
    """Build an RGBA image where index 0 is transparent and others refer to ``palette``."""
    width, height = size
    count = width * height
    if count == 0:
        return Image.new("RGBA", size)
    buffer = bytearray(count * 4)
    for position, (index, alpha) in enumerate(islice(zip(indices, alphas), count)):
        if index == 0:
            rgba = _TRANSPARENT
        else:
            try:
                red, green, blue = palette[index - 1]
            except IndexError:
                raise DecodeError(
                    f"palette index {index} out of range for {len(palette)} colours"
                ) from None
            rgba = (red, green, blue, alpha)
        buffer[position * 4:position * 4 + 4] = bytes(rgba)
    return Image.frombytes("RGBA", size, bytes(buffer))


def _transpose(image: Sprite) -> Sprite:
    return image.transpose(Image.Transpose.TRANSPOSE)


@dataclass
class IndexEntry:
    """Header shared by the frames of a legacy sprite sheet."""

    max_width: int
    max_height: int
    colour_count: int
    palette: list[tuple[int, int, int]] = field(default_factory=list)

    @classmethod
    def deserialize(cls, reader: ByteReader) -> "IndexEntry":
        max_width = reader.u16()
        max_height = reader.u16()
        raw_count = reader.u8()
        if raw_count == 0:
            raise DecodeError("sprite index entry has a colour count of zero")
        colour_count = raw_count - 1
        palette = [reader.rgb() for _ in range(colour_count)]
        return cls(max_width, max_height, colour_count, palette)


@dataclass(frozen=True)
class Entry:
    """Placement and size of one frame of a legacy sprite sheet."""

    offset_x: int
    offset_y: int
    width: int
    height: int
    transposed: int

    @classmethod
    def deserialize(cls, reader: ByteReader) -> "Entry":
        offset_x = reader.u8()
        offset_y = reader.u8()
        width = reader.u16()
        height = reader.u16()
        transposed = reader.u8()
        return cls(offset_x, offset_y, width, height, transposed)


def make_image(index_entry: IndexEntry, entry: Entry, data: bytes) -> Sprite:
    """Build a legacy frame from its palette indices."""
    image = _paletted_image(
        (entry.width, entry.height), bytes(data), repeat(255), index_entry.palette
    )
    if entry.transposed == 1:
        image = _transpose(image)
    return image


def _deserialize_paletted(reader: ByteReader, count: int) -> dict[int, Sprite]:
    reader.seek_end(-7 - count * 8)
    reader.u16()  # largest width
    reader.u16()  # largest height
    palette_count = reader.u8()
    for _ in range(2 * count):  # minimum x and y offsets
        reader.u16()
    widths = [reader.u16() for _ in range(count)]
    heights = [reader.u16() for _ in range(count)]

    reader.seek_end(-7 - count * 8 - palette_count * 3)
    palette = [reader.rgb() for _ in range(palette_count)]

    reader.seek(0)
    frames: dict[int, Sprite] = {}
    for index, (width, height) in enumerate(zip(widths, heights)):
        pixel_count = width * height
        transposed, alpha, *_ = reader.bitflags()
        if pixel_count == 0:
            continue
        base = reader.read_bytes(pixel_count)
        mask = reader.read_bytes(pixel_count) if alpha else repeat(255)
        size = (height, width) if transposed else (width, height)
        image = _paletted_image(size, base, mask, palette)
        if transposed:
            image = _transpose(image)
        frames[index] = image
    return frames


def _deserialize_true_colour(reader: ByteReader) -> dict[int, Sprite]:
    reader.seek(0)
    kind = reader.u8()
    if kind != 0:
        raise DecodeError(f"Unknown image type {kind}.")
    alpha, *_ = reader.bitflags()
    width = reader.u16()
    height = reader.u16()
    pixel_count = width * height
    base = [reader.rgb() for _ in range(pixel_count)]
    mask = reader.read_bytes(pixel_count) if alpha else bytes([255]) * pixel_count

    if pixel_count == 0:
        return {0: Image.new("RGBA", (width, height))}
    buffer = bytearray()
    for (red, green, blue), value in zip(base, mask):
        buffer += bytes((red, green, blue, value))
    return {0: Image.frombytes("RGBA", (width, height), bytes(buffer))}


def deserialize(data: bytes) -> dict[int, Sprite]:
    """Decode a sprite file into its frames, keyed by frame number in ascending order."""
    reader = ByteReader(data)
    reader.seek_end(-2)
    trailer = reader.u16()
    sprite_format = trailer >> 15
    count = trailer & 0x7FFF
    if sprite_format == 0:
        frames = _deserialize_paletted(reader, count)
    else:
        frames = _deserialize_true_colour(reader)
    return dict(sorted(frames.items()))


def _check_scale(scale: int) -> None:
    if scale <= 0:
        raise ValueError(f"scale must be a positive integer, got {scale}")


def _resize(image: Sprite, scale: int) -> Sprite:
    return image.resize(
        (image.width * scale, image.height * scale), Image.Resampling.NEAREST
    )


def scale_frames(
    archive_id: int, frames: Mapping[int, Sprite], scale: int
) -> dict[tuple[int, int], Sprite]:
    """Scale every frame by ``scale`` and key it by ``(archive_id, frame)``."""
    _check_scale(scale)
    return {
        (archive_id, frame): _resize(image, scale)
        for frame, image in sorted(frames.items())
    }


def save_frames(archive_id: int, frames: Mapping[int, Sprite], folder) -> list[Path]:
    """Save each frame as ``<archive_id>-<frame>.png`` in ``folder``."""
    target = Path(folder)
    target.mkdir(parents=True, exist_ok=True)
    paths = []
    for frame, image in sorted(frames.items()):
        path = target / f"{archive_id}-{frame}.png"
        image.save(path)
        paths.append(path)
    return paths


def legacy_mapscenes(
    index_data: bytes, mapscene_data: bytes, scale: int
) -> dict[tuple[int, int], Sprite]:
    """Decode a legacy mapscene sheet into scaled frames keyed by ``(317, frame)``."""
    _check_scale(scale)
    data = ByteReader(mapscene_data)
    offset = data.u16()
    index_bytes = bytes(index_data)
    if offset > len(index_bytes):
        raise DecodeError(f"index offset {offset} is past the end of {len(index_bytes)} bytes")
    entries = ByteReader(index_bytes[offset:])
    index_entry = IndexEntry.deserialize(entries)

    out: dict[tuple[int, int], Sprite] = {}
    frame = 0
    while data.has_remaining():
        entry = Entry.deserialize(entries)
        pixels = data.read_bytes(entry.width * entry.height)
        image = make_image(index_entry, entry, pixels)
        out[(MAPSCENE_SPRITE_ID, frame)] = _resize(image, scale)
        frame += 1
    return out