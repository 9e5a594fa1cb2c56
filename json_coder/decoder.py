"""Decoder protocol and typed field accessors.

Every ``decode_*`` function reads one key of an object-valued :class:`JSON`
and either returns a fully valid value or raises the first error it meets.
Absence and a wrong kind are reported the same way, as ``MissingKey(key)``;
only :func:`decode_json` never fails (a missing key reads as null).
"""
from __future__ import annotations

import abc
import logging
import re
import typing
from pathlib import Path
from typing import Any, Dict, List, Type, TypeVar, Union

from .depth import nesting
from .errors import (
    BadDictionary,
    DecodingDepthExceeded,
    FileNotFound,
    InvalidURL,
    MissingKey,
    UnexpectedArrayElement,
)
from .json_value import JSON
from .url import URL

# ── logger (무소음 기본) ───────────────────────────────
LOGGER = logging.getLogger("json_coder.decoder")
LOGGER.addHandler(logging.NullHandler())

T = TypeVar("T", bound="JSONDecodable")


class JSONDecodable(abc.ABC):
    """Capability: construct an instance from a JSON value, or raise."""

    @classmethod
    @abc.abstractmethod
    def from_json(cls: Type[T], json: JSON) -> T:
        raise NotImplementedError

    @classmethod
    def from_bytes(cls: Type[T], data: Union[bytes, bytearray, str]) -> T:
        return cls.from_json(JSON.parse(data))

    @classmethod
    def from_file(cls: Type[T], path: Union[str, Path]) -> T:
        target = Path(path).expanduser()
        try:
            data = target.read_bytes()
        except OSError as e:
            raise FileNotFound(str(target)) from e
        LOGGER.debug("from_file: %d bytes ← %s", len(data), target)
        return cls.from_bytes(data)


def _decode_nested(cls: Type[T], node: JSON) -> T:
    with nesting(DecodingDepthExceeded):
        return cls.from_json(node)


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def decode_json(json: JSON, key: str) -> JSON:
    return json[key]


def decode_string(json: JSON, key: str) -> str:
    value = json[key].string
    if value is None:
        raise MissingKey(key)
    return value


def decode_int(json: JSON, key: str) -> int:
    value = json[key].int
    if value is None:
        raise MissingKey(key)
    return value


def decode_bool(json: JSON, key: str) -> bool:
    value = json[key].bool
    if value is None:
        raise MissingKey(key)
    return value


def decode_url(json: JSON, key: str) -> URL:
    text = json[key].string
    if text is None:
        raise MissingKey(key)
    url = URL.parse(text)
    if url is None:
        raise InvalidURL(text)
    return url


def decode_regex(json: JSON, key: str) -> re.Pattern[str]:
    pattern = json[key].string
    if pattern is None:
        raise MissingKey(key)
    return re.compile(pattern)  # re.error 는 그대로 전파


def decode_decodable(json: JSON, key: str, cls: Type[T]) -> T:
    return _decode_nested(cls, json[key])


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def decode_list(json: JSON, key: str, cls: Type[T]) -> List[T]:
    items = json[key].array
    if items is None:
        raise MissingKey(key)
    out: List[Any] = [None] * len(items)
    for i, element in enumerate(items):
        out[i] = _decode_nested(cls, element)
    return out


def decode_string_list(json: JSON, key: str) -> List[str]:
    raw = json[key].array_object
    if raw is None or not all(isinstance(v, str) for v in raw):
        raise MissingKey(key)
    return list(raw)


def decode_regex_list(json: JSON, key: str) -> List[re.Pattern[str]]:
    items = json[key].array
    if items is None:
        raise MissingKey(key)
    out: List[Any] = [None] * len(items)
    for i, element in enumerate(items):
        pattern = element.string
        if pattern is None:
            raise UnexpectedArrayElement(element)
        out[i] = re.compile(pattern)
    return out


def decode_string_dict(json: JSON, key: str) -> Dict[str, str]:
    raw = json[key].dictionary_object
    if raw is None:
        raise MissingKey(key)
    if not all(isinstance(v, str) for v in raw.values()):
        raise BadDictionary(key)
    return dict(raw)


def decode_dict(json: JSON, key: str, cls: Type[T]) -> Dict[str, T]:
    items = json[key].dictionary
    if items is None:
        raise MissingKey(key)
    return {k: _decode_nested(cls, v) for k, v in items.items()}


# ---------------------------------------------------------------------------
# Type-directed dispatch
# ---------------------------------------------------------------------------

def _is_decodable(tp: Any) -> bool:
    return typing.get_origin(tp) is None and isinstance(tp, type) and issubclass(tp, JSONDecodable)


def decode(json: JSON, key: str, as_type: Any) -> Any:
    """Decode *key* into *as_type* by picking the matching ``decode_*``.

    Supported: ``JSON``, ``str``, ``int``, ``bool``, ``URL``, ``re.Pattern``,
    ``JSONDecodable`` subclasses, ``list[...]`` of str / Pattern / decodable
    and ``dict[str, ...]`` of str / decodable.
    """
    origin = typing.get_origin(as_type)
    args = typing.get_args(as_type)

    if origin is None:
        if as_type is JSON:
            return decode_json(json, key)
        if as_type is str:
            return decode_string(json, key)
        if as_type is bool:
            return decode_bool(json, key)
        if as_type is int:
            return decode_int(json, key)
        if as_type is URL:
            return decode_url(json, key)
        if as_type is re.Pattern:
            return decode_regex(json, key)
        if _is_decodable(as_type):
            return decode_decodable(json, key, as_type)
    elif origin is list and len(args) == 1:
        (element,) = args
        if element is str:
            return decode_string_list(json, key)
        if element is re.Pattern or typing.get_origin(element) is re.Pattern:
            return decode_regex_list(json, key)
        if _is_decodable(element):
            return decode_list(json, key, element)
    elif origin is dict and len(args) == 2 and args[0] is str:
        if args[1] is str:
            return decode_string_dict(json, key)
        if _is_decodable(args[1]):
            return decode_dict(json, key, args[1])
    elif origin is re.Pattern:
        return decode_regex(json, key)

    raise TypeError(f"cannot decode into {as_type!r}")
