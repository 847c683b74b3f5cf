import pytest
from PIL import Image

from jagcache.scale import resize_half, resize_quarter


def test_half_uniform_colour_is_kept():
    image = Image.new("RGBA", (512, 512), (10, 20, 30, 40))
    result = resize_half(image)
    assert result.size == (256, 256)
    assert set(result.getdata()) == {(10, 20, 30, 40)}


def test_quarter_uniform_colour_is_kept():
    image = Image.new("RGBA", (1024, 1024), (200, 100, 50, 255))
    result = resize_quarter(image)
    assert result.size == (256, 256)
    assert set(result.getdata()) == {(200, 100, 50, 255)}


def test_half_rounds_down():
    image = Image.new("RGBA", (512, 512), (0, 0, 0, 0))
    image.putpixel((0, 0), (255, 255, 255, 255))
    image.putpixel((1, 0), (255, 255, 255, 255))
    result = resize_half(image)
    assert result.getpixel((0, 0)) == (127, 127, 127, 127)


def test_half_block_lands_at_half_position():
    image = Image.new("RGBA", (512, 512), (0, 0, 0, 0))
    image.paste((255, 0, 0, 255), (10, 20, 12, 22))
    result = resize_half(image)
    assert result.getpixel((5, 10)) == (255, 0, 0, 255)
    assert result.getpixel((5, 11)) == (0, 0, 0, 0)
    assert result.getpixel((6, 10)) == (0, 0, 0, 0)


def test_quarter_block_lands_at_quarter_position():
    image = Image.new("RGBA", (1024, 1024), (0, 0, 0, 0))
    image.paste((0, 255, 0, 255), (40, 80, 44, 84))
    result = resize_quarter(image)
    assert result.getpixel((10, 20)) == (0, 255, 0, 255)
    assert result.getpixel((11, 20)) == (0, 0, 0, 0)


def test_converts_other_modes():
    image = Image.new("RGB", (512, 512), (9, 8, 7))
    assert resize_half(image).getpixel((100, 100)) == (9, 8, 7, 255)


@pytest.mark.parametrize("size", [(256, 256), (512, 256), (1024, 1024)])
def test_half_rejects_wrong_size(size):
    with pytest.raises(ValueError):
        resize_half(Image.new("RGBA", size))


@pytest.mark.parametrize("size", [(512, 512), (1024, 512)])
def test_quarter_rejects_wrong_size(size):
    with pytest.raises(ValueError):
        resize_quarter(Image.new("RGBA", size))