import json

import pytest

from jagcache.paramtable import DecodeError, ReadError
from jagcache.varbit_configs import VarbitConfig, export

DATA = bytes([1, 3, 1, 2, 2, 4, 9, 0])


def test_deserialize():
    config = VarbitConfig.deserialize(11, DATA)
    assert config == VarbitConfig(11, 3, 258, 4, 9)


def test_to_dict():
    assert VarbitConfig.deserialize(11, DATA).to_dict() == {
        "id": 11,
        "unknown_1": 3,
        "index": 258,
        "least_significant_bit": 4,
        "most_significant_bit": 9,
    }


def test_repr_holds_json():
    text = repr(VarbitConfig.deserialize(11, DATA))
    assert text.startswith("VarbitConfig(")
    assert json.loads(text[len("VarbitConfig("):-1])["index"] == 258


def test_missing_opcode_2():
    with pytest.raises(DecodeError, match="opcode 2"):
        VarbitConfig.deserialize(1, bytes([1, 3, 1, 2, 0]))


def test_missing_opcode_1():
    with pytest.raises(DecodeError, match="opcode 1"):
        VarbitConfig.deserialize(1, bytes([2, 4, 9, 0]))


def test_unknown_opcode():
    with pytest.raises(DecodeError):
        VarbitConfig.deserialize(1, bytes([7, 0]))


def test_truncated():
    with pytest.raises(ReadError):
        VarbitConfig.deserialize(1, bytes([1, 3]))


def test_export(tmp_path):
    configs = {2: VarbitConfig.deserialize(2, DATA), 1: VarbitConfig.deserialize(1, DATA)}
    path = export(configs, tmp_path)
    assert path.name == "varbit_configs.json"
    assert [c["id"] for c in json.loads(path.read_text())] == [1, 2]