"""Dynamic JSON value tree.

``JSON`` wraps a raw Python tree (``None`` / ``bool`` / ``int`` / ``float`` /
``str`` / ``list`` / ``dict``) and exposes subscript access plus typed
accessors.  Accessors never raise: a kind mismatch (or a missing key) gives
``None``, and subscript reads on a missing key or index give a null ``JSON``.

Subscript reads return *views*: ``json["a"]["b"] = 1`` mutates the tree
held by ``json``.
"""
from __future__ import annotations

import enum
from typing import Any, Dict, List, Mapping, Optional, Union

import numpy as np
import xxhash

from . import json_util


class Kind(enum.Enum):
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def _normalize(value: Any) -> Any:
    """Convert *value* into a raw JSON tree, rejecting non-JSON types."""
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, JSON):
        return value._object
    # numpy 스칼라는 float/int 서브클래스일 수 있으므로 먼저 처리
    if isinstance(value, np.generic):
        return _normalize(value.item())
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, np.ndarray):
        return _normalize(value.tolist())
    if isinstance(value, Mapping):
        out: Dict[str, Any] = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError(f"JSON object keys must be str, not {type(k).__name__}")
            out[k] = _normalize(v)
        return out
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    raise TypeError(f"{type(value).__name__} is not a JSON value")


def _kind_of(raw: Any) -> Kind:
    if raw is None:
        return Kind.NULL
    if isinstance(raw, bool):
        return Kind.BOOL
    if isinstance(raw, (int, float)):
        return Kind.NUMBER
    if isinstance(raw, str):
        return Kind.STRING
    if isinstance(raw, list):
        return Kind.ARRAY
    return Kind.OBJECT


def _equal(a: Any, b: Any) -> bool:
    # True == 1 in Python; JSON keeps bool and number apart
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, dict):
        return (
            isinstance(b, dict)
            and a.keys() == b.keys()
            and all(_equal(a[k], b[k]) for k in a)
        )
    if isinstance(a, list):
        return (
            isinstance(b, list)
            and len(a) == len(b)
            and all(_equal(x, y) for x, y in zip(a, b))
        )
    return a == b


class JSON:
    __slots__ = ("_object",)

    def __init__(self, value: Any = None):
        self._object = _normalize(value)

    @classmethod
    def _wrap(cls, raw: Any) -> "JSON":
        node = cls.__new__(cls)
        node._object = raw
        return node

    @classmethod
    def parse(cls, data: Union[bytes, bytearray, memoryview, str]) -> "JSON":
        """Parse raw JSON text; bare scalars and arrays are accepted."""
        return cls._wrap(json_util.loads(data))

    # ── raw / kind ──────────────────────────────────────
    @property
    def object(self) -> Any:
        return self._object

    @property
    def kind(self) -> Kind:
        return _kind_of(self._object)

    @property
    def is_null(self) -> bool:
        return self._object is None

    @property
    def count(self) -> int:
        if isinstance(self._object, (list, dict)):
            return len(self._object)
        return 0

    # ── subscript ───────────────────────────────────────
    def __getitem__(self, key: Union[str, int]) -> "JSON":
        raw = self._object
        if isinstance(key, str):
            return self._wrap(raw.get(key) if isinstance(raw, dict) else None)
        if isinstance(key, int) and not isinstance(key, bool):
            if isinstance(raw, list) and 0 <= key < len(raw):
                return self._wrap(raw[key])
            return self._wrap(None)
        raise TypeError(f"JSON subscript must be str or int, not {type(key).__name__}")

    def __setitem__(self, key: Union[str, int], value: Any) -> None:
        raw = self._object
        if isinstance(key, str):
            if not isinstance(raw, dict):
                raise TypeError(f"cannot set key {key!r} on a JSON {self.kind.value}")
            raw[key] = _normalize(value)
            return
        if isinstance(key, int) and not isinstance(key, bool):
            if not isinstance(raw, list):
                raise TypeError(f"cannot set index {key} on a JSON {self.kind.value}")
            if not 0 <= key < len(raw):
                raise IndexError(f"JSON array index {key} out of range")
            raw[key] = _normalize(value)
            return
        raise TypeError(f"JSON subscript must be str or int, not {type(key).__name__}")

    def __contains__(self, key: object) -> bool:
        return isinstance(self._object, dict) and key in self._object

    # ── typed accessors (None on mismatch) ──────────────
    @property
    def string(self) -> Optional[str]:
        return self._object if isinstance(self._object, str) else None

    @property
    def int(self) -> Optional[int]:
        raw = self._object
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        return None

    @property
    def float(self) -> Optional[float]:
        raw = self._object
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return float(raw)
        return None

    @property
    def bool(self) -> Optional[bool]:
        return self._object if isinstance(self._object, bool) else None

    @property
    def array(self) -> Optional[List["JSON"]]:
        if isinstance(self._object, list):
            return [self._wrap(v) for v in self._object]
        return None

    @property
    def dictionary(self) -> Optional[Dict[str, "JSON"]]:
        if isinstance(self._object, dict):
            return {k: self._wrap(v) for k, v in self._object.items()}
        return None

    @property
    def array_object(self) -> Optional[List[Any]]:
        return self._object if isinstance(self._object, list) else None

    @property
    def dictionary_object(self) -> Optional[Dict[str, Any]]:
        return self._object if isinstance(self._object, dict) else None

    # ── serialization ───────────────────────────────────
    def raw_data(self, *, indent: Optional[bool] = None, sort_keys: Optional[bool] = None) -> bytes:
        return json_util.dumps(self._object, indent=indent, sort_keys=sort_keys)

    def raw_string(self, **kw) -> str:
        return self.raw_data(**kw).decode("utf-8")

    def fingerprint(self) -> str:
        """xxh3-128 of the canonical (sorted, compact) form; key order free."""
        return xxhash.xxh3_128_hexdigest(
            json_util.dumps(self._object, indent=False, sort_keys=True)
        )

    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JSON):
            return NotImplemented
        return _equal(self._object, other._object)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"JSON({self._object!r})"
