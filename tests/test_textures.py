import json

import pytest

from jagcache.paramtable import ReadError
from jagcache.textures import TextureConfig, export


def test_deserialize():
    texture = TextureConfig.deserialize(3, bytes([1, 2, 0xFF, 5]))
    assert texture == TextureConfig(3, 258, True)


def test_zero_flag_is_false():
    assert TextureConfig.deserialize(3, bytes([0, 9, 0, 0])).field1778 is False


def test_remaining_data_ignored():
    texture = TextureConfig.deserialize(1, bytes([0, 9, 1, 2, 10, 11, 12]))
    assert texture.to_dict() == {"id": 1, "field1777": 9, "field1778": True}


def test_truncated():
    with pytest.raises(ReadError):
        TextureConfig.deserialize(1, bytes([0, 9, 1]))


def test_str_is_json():
    texture = TextureConfig.deserialize(4, bytes([0, 9, 1, 0]))
    assert json.loads(str(texture)) == texture.to_dict()


def test_export(tmp_path):
    textures = {5: TextureConfig(5, 1, False), 2: TextureConfig(2, 9, True)}
    path = export(textures, tmp_path / "t")
    data = json.loads(path.read_text())
    assert path.name == "textures.json"
    assert data == [textures[2].to_dict(), textures[5].to_dict()]