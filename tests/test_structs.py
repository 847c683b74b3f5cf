import json

import pytest

from jagcache.paramtable import DecodeError, ReadError
from jagcache.structs import Struct, export

PARAMS = bytes([249, 2, 0, 0, 0, 5, 0, 0, 0, 42, 1, 0, 0, 6]) + b"hello\x00" + bytes([0])


def test_deserialize_params():
    struct = Struct.deserialize(7, PARAMS)
    assert struct.id == 7
    assert struct.params.get(5) == 42
    assert struct.params[6] == "hello"


def test_to_dict_and_str():
    struct = Struct.deserialize(7, PARAMS)
    assert struct.to_dict() == {"id": 7, "params": {5: 42, 6: "hello"}}
    assert json.loads(str(struct)) == {"id": 7, "params": {"5": 42, "6": "hello"}}


def test_empty_struct_skips_params():
    struct = Struct.deserialize(3, b"\x00")
    assert struct.params is None
    assert struct.to_dict() == {"id": 3}


def test_unknown_opcode():
    with pytest.raises(DecodeError):
        Struct.deserialize(1, bytes([12, 0]))


def test_missing_terminator():
    with pytest.raises(ReadError):
        Struct.deserialize(1, b"")


def test_export_sorted(tmp_path):
    structs = {9: Struct.deserialize(9, b"\x00"), 2: Struct.deserialize(2, PARAMS)}
    path = export(structs, tmp_path / "out")
    assert path.name == "structs.json"
    data = json.loads(path.read_text())
    assert [s["id"] for s in data] == [2, 9]
    assert data[0]["params"]["5"] == 42