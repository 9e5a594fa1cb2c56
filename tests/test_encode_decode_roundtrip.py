"""
Encoder ↔ Decoder end-to-end round-trip.

• value → encode() → JSON / bytes / file
• JSON → from_json() → value'
• value' must equal original
"""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Dict, List

from hypothesis import given, strategies as st

from json_coder import (
    JSONCodable,
    MissingKey,
    decode_bool,
    decode_decodable,
    decode_dict,
    decode_int,
    decode_list,
    decode_string,
)


@dataclass
class Wheel(JSONCodable):
    tire: str
    size: int

    @classmethod
    def from_json(cls, json):
        return cls(decode_string(json, "tire"), decode_int(json, "size"))


@dataclass
class Meta(JSONCodable):
    vin: str
    recalled: bool

    @classmethod
    def from_json(cls, json):
        return cls(decode_string(json, "vin"), decode_bool(json, "recalled"))


@dataclass
class Car(JSONCodable):
    wheels: List[Wheel]
    doors: int
    weight: float
    meta: Meta
    owners: Dict[str, Meta]

    @classmethod
    def from_json(cls, json):
        weight = json["weight"].float
        if weight is None:
            raise MissingKey("weight")
        return cls(
            wheels=decode_list(json, "wheels", Wheel),
            doors=decode_int(json, "doors"),
            weight=weight,
            meta=decode_decodable(json, "meta", Meta),
            owners=decode_dict(json, "owners", Meta),
        )


def _sample():
    return Car(
        wheels=[Wheel("summer", 18)] * 4,
        doors=4,
        weight=1250.5,
        meta=Meta("XYZ123", False),
        owners={"first": Meta("XYZ123", True)},
    )


# ── hypothesis strategies ─────────────────────────────
_text = st.text(alphabet=st.characters(blacklist_categories=("Cs",)))
_ints = st.integers(min_value=-(2**53), max_value=2**53)
_floats = st.floats(allow_nan=False, allow_infinity=False)
_wheels = st.builds(Wheel, _text, _ints)
_metas = st.builds(Meta, _text, st.booleans())
_cars = st.builds(
    Car,
    st.lists(_wheels, max_size=5),
    _ints,
    _floats,
    _metas,
    st.dictionaries(_text, _metas, max_size=5),
)


def test_roundtrip_json():
    original = _sample()
    restored = Car.from_json(copy.deepcopy(original).to_json())
    assert restored == original


def test_roundtrip_file(tmp_path):
    original = _sample()
    original.encode_as_file(tmp_path / "car.json")
    assert Car.from_file(tmp_path / "car.json") == original


@given(_cars)
def test_roundtrip_bytes(car):
    assert Car.from_bytes(car.encode_to_bytes()) == car
