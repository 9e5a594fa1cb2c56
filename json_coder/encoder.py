"""Encoder protocol, per-shape setters and the default field-driven encoder.

A type becomes encodable by subclassing :class:`JSONEncodable`.  Dataclasses
get :meth:`JSONEncodable.encode` for free: every public field is converted
according to the class's field plan (see :mod:`json_coder.shapes`).  Any other
type overrides ``encode`` and writes its keys with the ``encode_*`` setters.

Encoding is all-or-nothing: the first field that cannot be converted raises
and the caller's JSON object is left untouched.
"""
from __future__ import annotations

import dataclasses
import logging
import math
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Tuple, Union

import numpy as np

from .depth import nesting
from .errors import EncodingDepthExceeded, FailedToCreateFile, UnencodableType
from .json_value import JSON
from .shapes import DYNAMIC, Shape, ShapeSpec, field_plan
from .url import URL

# ── logger (무소음 기본) ───────────────────────────────
LOGGER = logging.getLogger("json_coder.encoder")
LOGGER.addHandler(logging.NullHandler())

_BOOL = ShapeSpec(Shape.BOOL)
_INT = ShapeSpec(Shape.INT)
_DOUBLE = ShapeSpec(Shape.DOUBLE)
_STRING = ShapeSpec(Shape.STRING)
_NESTED = ShapeSpec(Shape.NESTED)
_STRING_LIST = ShapeSpec(Shape.LIST, _STRING)
_NESTED_LIST = ShapeSpec(Shape.LIST, _NESTED)
_NESTED_MAP = ShapeSpec(Shape.MAP, _NESTED)

# orjson 이 쓸 수 있는 정수 범위 (int64 ~ uint64)
_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 64 - 1


class JSONEncodable:
    """Capability: write ``self`` into a (mutable) JSON object."""

    def encode(self, json: JSON) -> None:
        scratch: dict = {}
        if dataclasses.is_dataclass(self):
            for fp in field_plan(type(self)):
                scratch[fp.name] = _convert(getattr(self, fp.name), fp.spec)
        else:
            for name, value in _public_attributes(self):
                scratch[name] = _convert(value, DYNAMIC)
        # 모든 필드 변환이 끝난 뒤에만 반영
        for key, value in scratch.items():
            json[key] = value

    def to_json(self) -> JSON:
        json = JSON({})
        self.encode(json)
        return json

    def encode_to_bytes(self) -> bytes:
        return self.to_json().raw_data()

    def encode_as_file(self, path: Union[str, Path]) -> None:
        data = self.encode_to_bytes()
        target = Path(path).expanduser()
        try:
            target.write_bytes(data)
        except OSError as e:
            raise FailedToCreateFile(str(target)) from e
        LOGGER.debug("encode_as_file: %d bytes → %s", len(data), target)


def derive_encoder(cls):
    """Class decorator: build the field plan now so bad annotations fail at import."""
    field_plan(cls)
    return cls


def _public_attributes(obj: Any) -> Iterator[Tuple[str, Any]]:
    """Public instance attributes of a non-dataclass object: slots, then ``__dict__``."""
    names = []
    for klass in reversed(type(obj).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        names.extend([slots] if isinstance(slots, str) else slots)
    names.extend(getattr(obj, "__dict__", {}))

    seen = set()
    for name in names:
        if name in seen or name in ("__dict__", "__weakref__"):
            continue
        seen.add(name)
        if name.startswith("_"):
            LOGGER.debug("encode %s: skip private attribute %s", type(obj).__qualname__, name)
            continue
        if hasattr(obj, name):   # 미할당 slot 은 건너뜀
            yield name, getattr(obj, name)


# ---------------------------------------------------------------------------
# Shape dispatch
# ---------------------------------------------------------------------------

def _shape_of(value: Any) -> Optional[Shape]:
    # 우선순위 고정: bool → int → float → str → nested → list → map
    if isinstance(value, (bool, np.bool_)):
        return Shape.BOOL
    if isinstance(value, (int, np.integer)):
        return Shape.INT
    if isinstance(value, (float, np.floating)):
        return Shape.DOUBLE
    if isinstance(value, str):
        return Shape.STRING
    if isinstance(value, JSONEncodable):
        return Shape.NESTED
    if isinstance(value, (list, tuple, np.ndarray)):
        return Shape.LIST
    if isinstance(value, Mapping):
        return Shape.MAP
    return None


def _convert(value: Any, spec: ShapeSpec) -> Any:
    """Convert *value* to a raw JSON tree according to *spec*."""
    if value is None and spec.optional:
        return None
    shape, element = spec.shape, spec.element
    if shape is Shape.DYNAMIC:
        shape, element = _shape_of(value), DYNAMIC
        if shape is None:
            raise UnencodableType(type(value))
    else:
        actual = _shape_of(value)
        # int 은 double 필드에 허용 (bool 은 제외)
        if actual is not shape and not (shape is Shape.DOUBLE and actual is Shape.INT):
            raise UnencodableType(type(value))

    if shape is Shape.BOOL:
        return bool(value)
    if shape is Shape.INT:
        out = int(value)
        if not _INT_MIN <= out <= _INT_MAX:
            raise UnencodableType(type(value))
        return out
    if shape is Shape.DOUBLE:
        try:
            out = float(value)
        except OverflowError as e:
            raise UnencodableType(type(value)) from e
        # NaN / ±inf 는 JSON 숫자가 아님
        if not math.isfinite(out):
            raise UnencodableType(type(value))
        return out
    if shape is Shape.STRING:
        return value

    with nesting(EncodingDepthExceeded):
        if shape is Shape.NESTED:
            sub = JSON({})
            value.encode(sub)
            return sub.object
        if shape is Shape.LIST:
            return [_convert(v, element) for v in value]
        out = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise UnencodableType(type(k))
            out[k] = _convert(v, element)
        return out


# ---------------------------------------------------------------------------
# Setters: each replaces the value at *key*
# ---------------------------------------------------------------------------

def encode_null(json: JSON, key: str) -> None:
    json[key] = None


def encode_json(json: JSON, key: str, value: JSON) -> None:
    json[key] = value


def encode_bool(json: JSON, key: str, value: bool) -> None:
    json[key] = _convert(value, _BOOL)


def encode_int(json: JSON, key: str, value: int) -> None:
    json[key] = _convert(value, _INT)


def encode_float(json: JSON, key: str, value: float) -> None:
    json[key] = _convert(value, _DOUBLE)


def encode_string(json: JSON, key: str, value: str) -> None:
    json[key] = _convert(value, _STRING)


def encode_url(json: JSON, key: str, url: Union[URL, str]) -> None:
    json[key] = url.absolute_string if isinstance(url, URL) else _convert(url, _STRING)


def encode_string_list(json: JSON, key: str, values: Iterable[str]) -> None:
    if isinstance(values, (str, bytes)):
        raise UnencodableType(type(values))
    json[key] = _convert(list(values), _STRING_LIST)


def encode_encodable(json: JSON, key: str, value: JSONEncodable) -> None:
    json[key] = _convert(value, _NESTED)


def encode_encodable_list(json: JSON, key: str, values: Iterable[JSONEncodable]) -> None:
    json[key] = _convert(list(values), _NESTED_LIST)


def encode_encodable_dict(json: JSON, key: str, values: Mapping) -> None:
    json[key] = _convert(values, _NESTED_MAP)


def encode_value(json: JSON, key: str, value: Any) -> None:
    """Dispatch *value* by its runtime shape, as the default encoder does."""
    json[key] = _convert(value, DYNAMIC)
