"""Conversion of decoded YAML values into JSON-compatible structures."""

from __future__ import annotations

import math
from typing import Any


def _key_to_string(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None:
        return "<nil>"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, float):
        if math.isnan(key):
            return "NaN"
        if math.isinf(key):
            return "+Inf" if key > 0 else "-Inf"
        if key.is_integer() and abs(key) < 1e21:
            return str(int(key))
        return repr(key)
    return str(key)


def convert_to_json_compatible(v: Any) -> Any:
    """Recursively convert mappings to string-keyed dicts, walking lists too.

    Non-string keys are turned into their plain textual form, so ``1`` and
    ``2.0`` become ``"1"`` and ``"2"``. Other values are returned unchanged.
    """
    if isinstance(v, dict):
        return {_key_to_string(k): convert_to_json_compatible(value) for k, value in v.items()}
    if isinstance(v, list):
        return [convert_to_json_compatible(item) for item in v]
    return v


def convert_map_to_json_compatible(m: dict[str, Any]) -> dict[str, Any]:
    """Convert every value of a string-keyed mapping."""
    return {k: convert_to_json_compatible(v) for k, v in m.items()}