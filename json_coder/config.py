"""json-coder 기본 설정 (환경변수로 덮어쓰기 가능)"""
from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

_TRUTHY = {"1", "true", "yes", "on"}

DEFAULTS: Dict[str, Any] = {
    "max_depth": 256,     # 중첩 encode/decode 허용 깊이
    "indent": False,      # raw_data() → OPT_INDENT_2
    "sort_keys": False,   # raw_data() → OPT_SORT_KEYS
}

ENV_KEYS = {
    "max_depth": "JSON_CODER_MAX_DEPTH",
    "indent": "JSON_CODER_INDENT",
    "sort_keys": "JSON_CODER_SORT_KEYS",
}


def load_config(env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Return the defaults with any ``JSON_CODER_*`` overrides applied."""
    env = os.environ if env is None else env
    cfg = dict(DEFAULTS)
    raw = env.get(ENV_KEYS["max_depth"], "").strip()
    if raw:
        depth = int(raw)
        if depth <= 0:
            raise ValueError(f"{ENV_KEYS['max_depth']} must be positive, got {raw!r}")
        cfg["max_depth"] = depth
    for name in ("indent", "sort_keys"):
        raw = env.get(ENV_KEYS[name], "").strip().lower()
        if raw:
            cfg[name] = raw in _TRUTHY
    return cfg


CODER_CONFIG: Dict[str, Any] = load_config()
