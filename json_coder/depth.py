"""Nesting-depth guard for recursive encode/decode."""
from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Callable, Iterator

from .config import CODER_CONFIG

_DEPTH: ContextVar[int] = ContextVar("json_coder_depth", default=0)


def current_depth() -> int:
    return _DEPTH.get()


@contextmanager
def nesting(error_factory: Callable[[int], Exception]) -> Iterator[int]:
    """Enter one nesting level; raise ``error_factory(limit)`` past the limit."""
    limit = CODER_CONFIG["max_depth"]
    depth = _DEPTH.get() + 1
    if depth > limit:
        raise error_factory(limit)
    token = _DEPTH.set(depth)
    try:
        yield depth
    finally:
        _DEPTH.reset(token)
