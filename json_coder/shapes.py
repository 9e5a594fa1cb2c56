"""Closed set of encodable shapes and per-class field plans.

A field plan is derived once per dataclass from its type annotations.  Each
field is resolved to one :class:`Shape` in a fixed priority order (bool, int,
float, str, nested encodable, list, mapping); annotations that resolve to no
shape raise :class:`UnencodableType` while the plan is built.  ``Any``,
``object`` and non-optional unions resolve to ``DYNAMIC`` and are matched
against the value's runtime type at encode time.
"""
from __future__ import annotations

import collections.abc
import dataclasses
import enum
import functools
import logging
import types
import typing
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np

from .errors import UnencodableType

# ── logger (무소음 기본) ───────────────────────────────
LOGGER = logging.getLogger("json_coder.shapes")
LOGGER.addHandler(logging.NullHandler())

_UNION_TYPES = tuple(t for t in (Union, getattr(types, "UnionType", None)) if t is not None)
_SEQ_ORIGINS = (list, collections.abc.Sequence, collections.abc.MutableSequence)
_MAP_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)


class Shape(enum.Enum):
    BOOL = "bool"
    INT = "int"
    DOUBLE = "double"
    STRING = "string"
    NESTED = "nested"
    LIST = "list"
    MAP = "map"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class ShapeSpec:
    shape: Shape
    element: Optional["ShapeSpec"] = None   # LIST / MAP 원소
    optional: bool = False                  # None → null 허용


@dataclass(frozen=True)
class FieldPlan:
    name: str
    spec: ShapeSpec


DYNAMIC = ShapeSpec(Shape.DYNAMIC)


def resolve(tp: Any) -> ShapeSpec:
    """Map a type annotation to its :class:`ShapeSpec`."""
    from .encoder import JSONEncodable

    if tp is Any or tp is object:
        return DYNAMIC
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)

    if origin in _UNION_TYPES:
        rest = [a for a in args if a is not type(None)]
        optional = len(rest) < len(args)
        if len(rest) == 1:
            return replace(resolve(rest[0]), optional=optional)
        return ShapeSpec(Shape.DYNAMIC, optional=optional)

    if origin is None and isinstance(tp, type):
        if tp is bool or issubclass(tp, np.bool_):
            return ShapeSpec(Shape.BOOL)
        if tp is int or issubclass(tp, np.integer):
            return ShapeSpec(Shape.INT)
        if issubclass(tp, (float, np.floating)):
            return ShapeSpec(Shape.DOUBLE)
        if issubclass(tp, str):
            return ShapeSpec(Shape.STRING)
        if issubclass(tp, JSONEncodable):
            return ShapeSpec(Shape.NESTED)
        if tp is list:
            return ShapeSpec(Shape.LIST, DYNAMIC)
        if tp is dict:
            return ShapeSpec(Shape.MAP, DYNAMIC)

    if origin in _SEQ_ORIGINS:
        return ShapeSpec(Shape.LIST, resolve(args[0]) if args else DYNAMIC)
    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return ShapeSpec(Shape.LIST, resolve(args[0]))
    if origin in _MAP_ORIGINS:
        if args and args[0] is not str:
            raise UnencodableType(tp)
        return ShapeSpec(Shape.MAP, resolve(args[1]) if args else DYNAMIC)

    raise UnencodableType(tp)


def _scope_namespace(cls: type) -> Dict[str, Any]:
    """Encodable classes defined in the same scope as *cls*, itself included.

    Lets string annotations of function-local models name their siblings.
    """
    from .encoder import JSONEncodable

    scope = cls.__qualname__.rpartition(".")[0]
    ns: Dict[str, Any] = {}
    stack = list(JSONEncodable.__subclasses__())
    while stack:
        sub = stack.pop()
        stack.extend(sub.__subclasses__())
        if sub.__module__ == cls.__module__ and sub.__qualname__.rpartition(".")[0] == scope:
            ns[sub.__name__] = sub
    ns[cls.__name__] = cls
    return ns


def _type_hints(cls: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(cls, localns=_scope_namespace(cls))
    except NameError as e:
        raise UnencodableType(getattr(e, "name", None) or str(e)) from e


@functools.lru_cache(maxsize=None)
def field_plan(cls: type) -> Tuple[FieldPlan, ...]:
    """Build (and cache) the ordered field plan of a dataclass."""
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls.__qualname__} is not a dataclass")
    hints = _type_hints(cls)
    plan = []
    for f in dataclasses.fields(cls):
        if f.name.startswith("_"):
            LOGGER.debug("field plan %s: skip private field %s", cls.__qualname__, f.name)
            continue
        plan.append(FieldPlan(f.name, resolve(hints.get(f.name, Any))))
    LOGGER.debug("field plan %s: %s", cls.__qualname__, [p.name for p in plan])
    return tuple(plan)
