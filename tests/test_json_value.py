"""
tests/test_json_value.py
────────────────────────
JSON value tree: construction, subscript views, typed accessors,
serialization and fingerprints.
"""
import numpy as np
import orjson
import pytest

from json_coder import JSON, Kind


# ----------------------------------------------------------------------
def test_kinds():
    assert JSON().kind is Kind.NULL
    assert JSON(True).kind is Kind.BOOL
    assert JSON(3).kind is Kind.NUMBER
    assert JSON(2.5).kind is Kind.NUMBER
    assert JSON("x").kind is Kind.STRING
    assert JSON([1, "a"]).kind is Kind.ARRAY
    assert JSON({"a": 1}).kind is Kind.OBJECT


def test_rejects_non_json_values():
    with pytest.raises(TypeError):
        JSON({1: "a"})
    with pytest.raises(TypeError):
        JSON({"s": {1, 2}})


def test_numpy_inputs_are_normalized():
    j = JSON({"i": np.int64(4), "f": np.float32(0.5), "b": np.bool_(True), "a": np.arange(3)})
    assert j.object == {"i": 4, "f": 0.5, "b": True, "a": [0, 1, 2]}
    assert type(j["i"].object) is int
    assert j["b"].bool is True


def test_tuple_becomes_array():
    assert JSON((1, 2)).array_object == [1, 2]


# ----------------------------------------------------------------------
def test_missing_key_and_index_read_as_null():
    j = JSON({"a": [1, 2]})
    assert j["nope"].is_null
    assert j["a"][5].is_null
    assert j["a"]["x"].is_null
    assert JSON(7)["k"].is_null


def test_subscript_views_share_the_tree():
    j = JSON({"outer": {"inner": 1}})
    j["outer"]["inner"] = 2
    assert j.object == {"outer": {"inner": 2}}


def test_set_index_replaces_element():
    j = JSON([1, 2, 3])
    j[1] = "two"
    assert j.object == [1, "two", 3]
    with pytest.raises(IndexError):
        j[3] = 0


def test_set_on_wrong_kind_raises():
    with pytest.raises(TypeError):
        JSON([1])["k"] = 1
    with pytest.raises(TypeError):
        JSON({})[0] = 1


def test_set_accepts_json_values():
    j = JSON({})
    j["child"] = JSON({"x": 1})
    assert j["child"]["x"].int == 1


# ----------------------------------------------------------------------
def test_typed_accessors_return_none_on_mismatch():
    j = JSON({"s": "x", "i": 3, "f": 1.5, "b": False, "n": None})
    assert j["s"].string == "x" and j["s"].int is None
    assert j["i"].int == 3 and j["i"].float == 3.0 and j["i"].string is None
    assert j["f"].float == 1.5 and j["f"].int is None
    assert j["b"].bool is False and j["b"].int is None
    assert j["n"].bool is None and j["n"].array is None and j["n"].dictionary is None


def test_bool_is_not_a_number():
    assert JSON(True).int is None
    assert JSON(True).float is None
    assert JSON(1).bool is None


def test_container_accessors():
    j = JSON({"arr": [1, "a"], "obj": {"k": 1}})
    assert [e.object for e in j["arr"].array] == [1, "a"]
    assert j["obj"].dictionary == {"k": JSON(1)}
    assert j["arr"].array_object == [1, "a"]
    assert j["obj"].dictionary_object == {"k": 1}
    assert j.count == 2
    assert "arr" in j and "zzz" not in j


# ----------------------------------------------------------------------
def test_parse_allows_fragments():
    assert JSON.parse(b"42").int == 42
    assert JSON.parse('"hi"').string == "hi"
    assert JSON.parse(b"[1,2]").array_object == [1, 2]
    assert JSON.parse(b"null").is_null


def test_parse_errors_propagate():
    with pytest.raises(orjson.JSONDecodeError):
        JSON.parse(b"{not json")


def test_raw_data_roundtrip():
    j = JSON({"b": [1, 2.5, None, True], "a": "x"})
    assert JSON.parse(j.raw_data()) == j
    assert j.raw_data(sort_keys=True) == b'{"a":"x","b":[1,2.5,null,true]}'
    assert j.raw_string(indent=True).startswith("{\n  ")


def test_equality_keeps_bool_and_number_apart():
    assert JSON(1) != JSON(True)
    assert JSON([0]) != JSON([False])
    assert JSON(1) == JSON(1.0)
    assert JSON({"a": [1]}) == JSON({"a": [1]})


def test_fingerprint_ignores_key_order():
    a = JSON({"x": 1, "y": [1, 2]})
    b = JSON({"y": [1, 2], "x": 1})
    assert a.fingerprint() == b.fingerprint()
    assert len(a.fingerprint()) == 32
    assert a.fingerprint() != JSON({"x": 2, "y": [1, 2]}).fingerprint()
