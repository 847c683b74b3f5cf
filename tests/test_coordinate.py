import pytest

from jagcache.coordinate import Coordinate


def _pack(plane, x, y):
    return (plane << 28) | (x << 14) | y


@pytest.mark.parametrize(
    "plane,x,y",
    [(0, 0, 0), (1, 3200, 3200), (3, 6400, 12800), (2, 17, 4000)],
)
def test_round_trip(plane, x, y):
    assert Coordinate.from_packed(_pack(plane, x, y)) == Coordinate(plane, x, y)


@pytest.mark.parametrize(
    "plane,x,y",
    [(4, 0, 0), (0, 6401, 0), (0, 0, 12801), (15, 10, 10)],
)
def test_invalid(plane, x, y):
    with pytest.raises(ValueError):
        Coordinate.from_packed(_pack(plane, x, y))


def test_out_of_u32_range():
    with pytest.raises(ValueError):
        Coordinate.from_packed(-1)
    with pytest.raises(ValueError):
        Coordinate.from_packed(1 << 32)


def test_ordering_follows_plane_then_x_then_y():
    coords = [Coordinate(1, 0, 0), Coordinate(0, 2, 1), Coordinate(0, 2, 0)]
    assert sorted(coords) == [Coordinate(0, 2, 0), Coordinate(0, 2, 1), Coordinate(1, 0, 0)]