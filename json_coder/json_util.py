from __future__ import annotations

from typing import Any, Optional

import orjson

from .config import CODER_CONFIG

_BASE_OPTS = orjson.OPT_SERIALIZE_NUMPY


def dumps(o: Any, *, indent: Optional[bool] = None, sort_keys: Optional[bool] = None) -> bytes:
    indent = CODER_CONFIG["indent"] if indent is None else indent
    sort_keys = CODER_CONFIG["sort_keys"] if sort_keys is None else sort_keys
    opts = _BASE_OPTS
    if indent:
        opts |= orjson.OPT_INDENT_2
    if sort_keys:
        opts |= orjson.OPT_SORT_KEYS
    return orjson.dumps(o, option=opts)


def loads(data: bytes | bytearray | memoryview | str) -> Any:
    # orjson 은 최상위 fragment(스칼라·배열)도 그대로 허용
    return orjson.loads(data)
