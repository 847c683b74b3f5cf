import pytest
from PIL import Image

from jagcache.zoom import make_tile, render_zoom_levels, to_coordinates

RED = (255, 0, 0, 255)
BACKFILL = (0, 0, 0, 0)


def _write_tile(root, name, mapid, zoom, plane, i, j, colour):
    folder = root / name / str(mapid) / str(zoom)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / f"{plane}_{i}_{j}.png"
    Image.new("RGBA", (256, 256), colour).save(path)
    return path


def test_to_coordinates_parses_name():
    assert to_coordinates("0_12_34.png") == (0, 12, 34)


def test_to_coordinates_searches_within_text():
    assert to_coordinates("dir/3_5_7.png") == (3, 5, 7)


@pytest.mark.parametrize("text", ["readme.txt", "0_1.png", "a_b_c.png"])
def test_to_coordinates_rejects_other_names(text):
    with pytest.raises(ValueError):
        to_coordinates(text)


def test_make_tile_without_sources_is_backfill(tmp_path):
    tile = make_tile(tmp_path, "maps", -1, 2, 0, 2, 3, (1, 2, 3, 4))
    assert tile.size == (256, 256)
    assert set(tile.getdata()) == {(1, 2, 3, 4)}


def test_make_tile_places_lower_left_quadrant(tmp_path):
    _write_tile(tmp_path, "maps", -1, 3, 0, 4, 6, RED)
    tile = make_tile(tmp_path, "maps", -1, 2, 0, 2, 3, BACKFILL)
    assert tile.getpixel((0, 200)) == RED
    assert tile.getpixel((127, 128)) == RED
    assert tile.getpixel((0, 0)) == BACKFILL
    assert tile.getpixel((200, 200)) == BACKFILL


def test_make_tile_places_upper_right_quadrant(tmp_path):
    _write_tile(tmp_path, "maps", -1, 3, 1, 5, 7, RED)
    tile = make_tile(tmp_path, "maps", -1, 2, 1, 2, 3, BACKFILL)
    assert tile.getpixel((200, 10)) == RED
    assert tile.getpixel((10, 10)) == BACKFILL
    assert tile.getpixel((200, 200)) == BACKFILL


def test_render_zoom_levels_builds_each_level(tmp_path):
    _write_tile(tmp_path, "maps", -1, 3, 0, 4, 6, RED)
    written = render_zoom_levels(tmp_path, "maps", -1, range(1, 3), BACKFILL)
    level2 = tmp_path / "maps" / "-1" / "2" / "0_2_3.png"
    level1 = tmp_path / "maps" / "-1" / "1" / "0_1_1.png"
    assert written == [level2, level1]
    with Image.open(level2) as image:
        assert image.convert("RGBA").getpixel((0, 255)) == RED
    with Image.open(level1) as image:
        rgba = image.convert("RGBA")
        assert rgba.getpixel((0, 255)) == RED
        assert rgba.getpixel((255, 0)) == BACKFILL


def test_render_zoom_levels_merges_neighbours(tmp_path):
    _write_tile(tmp_path, "maps", 0, 3, 0, 4, 6, RED)
    _write_tile(tmp_path, "maps", 0, 3, 0, 5, 7, RED)
    written = render_zoom_levels(tmp_path, "maps", 0, range(2, 3), BACKFILL)
    assert [path.name for path in written] == ["0_2_3.png"]


def test_render_zoom_levels_needs_source_level(tmp_path):
    with pytest.raises(FileNotFoundError):
        render_zoom_levels(tmp_path, "maps", -1, range(2, 3), BACKFILL)


def test_render_zoom_levels_rejects_stray_files(tmp_path):
    folder = tmp_path / "maps" / "-1" / "3"
    folder.mkdir(parents=True)
    (folder / "notes.txt").write_text("x")
    with pytest.raises(ValueError):
        render_zoom_levels(tmp_path, "maps", -1, range(2, 3), BACKFILL)