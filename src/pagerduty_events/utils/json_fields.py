"""
Module: json_fields.py
Description: Field extraction helpers for decoded JSON responses.

Both helpers return None instead of raising when a field is missing
or has the wrong shape.
"""

import json
from typing import Any, Optional


def to_json_text(value: Any) -> str:
    """Serialize a decoded JSON value in compact form."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return to_json_text(value)


def get_property_value(node: Any, key: str) -> Optional[str]:
    """
    Read a field of a JSON object as text.

    Args:
        node: Decoded JSON value
        key: Field name

    Returns:
        Strings verbatim, any other JSON value in its JSON spelling,
        or None if ``node`` is not an object or lacks the field
    """
    if isinstance(node, dict) and key in node:
        return _as_text(node[key])
    return None


def get_array_value(node: Any, key: str) -> Optional[str]:
    """Read an array field of a JSON object as compact JSON text."""
    if isinstance(node, dict) and isinstance(node.get(key), list):
        return to_json_text(node[key])
    return None
