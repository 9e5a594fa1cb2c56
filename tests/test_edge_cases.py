"""
tests/test_edge_cases.py
────────────────────────
1) 빈 컨테이너
2) 깊이 10 중첩 객체
3) 기본 깊이 한도 초과 → EncodingDepthExceeded
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pytest

from json_coder import JSON, EncodingDepthExceeded, JSONEncodable, MissingKey, decode_string_list
from json_coder.config import CODER_CONFIG


@dataclass
class Box(JSONEncodable):
    items: List[int] = field(default_factory=list)
    labels: Dict[str, str] = field(default_factory=dict)
    inner: Optional[Box] = None


# ----------------------------- Helper ---------------------------------
def _nest(depth: int) -> Box:
    box = Box()
    for _ in range(depth):
        box = Box(inner=box)
    return box


# ----------------------------------------------------------------------
def test_empty_containers():
    assert Box().to_json().object == {"items": [], "labels": {}, "inner": None}


def test_empty_array_decodes_to_empty_list():
    assert decode_string_list(JSON({"k": []}), "k") == []


def test_deeply_nested_objects():
    j = _nest(10).to_json()
    for _ in range(10):
        j = j["inner"]
    assert j.object == {"items": [], "labels": {}, "inner": None}


def test_default_depth_limit():
    limit = CODER_CONFIG["max_depth"]
    _nest(limit).to_json()
    with pytest.raises(EncodingDepthExceeded):
        _nest(limit + 1).to_json()


def test_null_root_reads():
    with pytest.raises(MissingKey):
        decode_string_list(JSON(), "k")
