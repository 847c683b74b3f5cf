# jagcache

Decoders for the binary config and sprite files found in a game client
cache, and the image helpers that turn rendered map squares into tiles
for a zoomable map. It needs Pillow.

## Install

    pip install jagcache

To run the tests:

    pip install "jagcache[test]"
    pytest

## Modules

- `jagcache.paramtable`: `ByteReader` is a big-endian reader over `bytes`.
  It has `u8`, `i8`, `u16`, `u32`, `i32`, `uint(size)`, `rgb`, zero-terminated
  `string`, `bitflags` (eight flags, least significant bit first),
  `unsigned_smart`, `read_bytes`, `seek` and `seek_end`. `ParamTable` is the
  key to integer-or-string table that many configs carry. It supports `get`
  and `[]`. `DecodeError` marks malformed data, and its subclass `ReadError`
  marks a read past the end.
- `jagcache.coordinate`: `Coordinate(plane, x, y)`. `Coordinate.from_packed`
  unpacks `plane << 28 | x << 14 | y` and raises `ValueError` when the plane
  is above 3, x is above 6400 or y is above 12800.
- `jagcache.variables`: `Varp` and `Varbit`. Their `from_raw` method maps
  0xFFFF to `None`. `VarpOrVarbit.from_pair` picks whichever of the two is
  present and raises `ValueError` unless exactly one is.
- `jagcache.tiles`: `Tile`, plus the decoders of a map square's 4×64×64 tile
  grid, indexed as `tiles[plane][x][y]`:
  - `dump_tiles` reads the flag-based format, with or without the `jagx\x01`
    header.
  - `dump_tiles_osrs` reads the opcode-based format. It tries the wide
    variant first and falls back to the narrow one.
  - `dump_tiles_legacy` reads the narrow variant only.
  - `try_dump` returns the flat list of tiles.
- `jagcache.structs`, `jagcache.underlays`, `jagcache.varbit_configs`,
  `jagcache.textures`: `Struct`, `Underlay`, `VarbitConfig` and
  `TextureConfig`. Each has `deserialize(id, data)` and `to_dict()`. Each
  module has an `export(items, output)` function that writes the items,
  sorted by id, as indented JSON (`structs.json`, `underlays.json`,
  `varbit_configs.json`, `textures.json`) and returns the path.
- `jagcache.worldmaps`:
  - `WorldMapType` names the archives of the world map index.
  - `MapZone` has `Bound`s and `BoundDef`s.
  - `MapPastes` is made of `Paste`s, with `Chunk`s for chunk pastes.
  - `export_zones` writes `map_zones.json`.
  - `export_pastes` writes `map_pastes.json`.
  - `dump_small` writes raw image files to `world_map_small/<id>.png`.
  - `dump_big` writes length-prefixed image files to `world_map_big/<id>.png`.
- `jagcache.sprites`:
  - `deserialize(data)` decodes a sprite file, paletted or true colour, into
    a dict of frame number to Pillow RGBA image. Palette index 0 is
    transparent.
  - `scale_frames` enlarges frames by a whole factor (nearest neighbour) and
    keys them by `(archive_id, frame)`.
  - `save_frames` writes `<archive_id>-<frame>.png` files.
  - For the older sheet format there are `IndexEntry`, `Entry` and
    `make_image`. `legacy_mapscenes` returns that sheet's frames keyed by
    `(317, frame)`.
- `jagcache.tileshape`: `draw_overlay(shape, size)` and
  `draw_underlay(shape, size)` yield the `(x, y)` pixels a tile shape covers
  in a square of side `size`, which must be a power of two. For each shape
  the overlay and underlay pixels are complementary. `draw_underlay(None, size)`
  covers the whole square.
- `jagcache.lineshape`: `draw(ty, rotation, size)` yields the pixels of wall
  lines for location types 0, 2 and 9.
- `jagcache.scale`: `resize_half` shrinks a 512×512 image to 256×256 and
  `resize_quarter` shrinks a 1024×1024 image to 256×256. Both average blocks
  and round each channel down.
- `jagcache.mapimage`:
  - `RenderConfig` has `fast()` and `detailed()`. `CONFIG` is the detailed
    one.
  - `composite_plane` lays a plane over the planes beneath it, drawing the
    lower planes at half brightness.
  - `save_smallest(output, name, i, j, imgs)` cuts the four plane images of
    a map square into tiles of zoom levels 4, 3 and 2. It writes them under
    `<output>/<name>/<map_id>/<zoom>/<plane>_<x>_<y>.png`, skips fully
    transparent tiles and returns the written paths.
- `jagcache.zoom`:
  - `to_coordinates` parses `<plane>_<i>_<j>.png` names.
  - `make_tile` joins up to four tiles of the next zoom level into one.
  - `render_zoom_levels(output, name, mapid, zoom_range, backfill)` builds
    each level in the range, highest first, from the level above it.

## Example

    from jagcache.varbit_configs import VarbitConfig

    config = VarbitConfig.deserialize(7, bytes([1, 0, 0, 12, 2, 3, 5, 0]))
    print(config.to_dict())
    # {'id': 7, 'unknown_1': 0, 'index': 12,
    #  'least_significant_bit': 3, 'most_significant_bit': 5}

    from jagcache.sprites import deserialize

    with open("sprite.dat", "rb") as fh:
        frames = deserialize(fh.read())
    for frame, image in frames.items():
        image.save(f"sprite-{frame}.png")

Malformed input raises `jagcache.paramtable.DecodeError`. When the data runs
out it raises `ReadError`, which is a subclass of `DecodeError`.

## What it does not do

- It does not open a cache. There is no reading of indices, archives or
  compressed containers. You pass in the raw bytes of each file yourself.
- It has no command-line tool.
- It does not draw a map square from its tiles and locations. It gives the
  tile and line shapes, and the compositing, cutting and zooming of plane
  images once they are drawn.