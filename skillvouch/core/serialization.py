"""
JSON helpers for array-valued text columns.

Skill lists, quiz questions and quiz answers are stored as JSON text. Rows
written by older clients can hold empty or malformed values, so reads must
never raise: a bad value degrades to the caller's default and is logged.
"""

from __future__ import annotations

import json
from typing import Any

from skillvouch.core.logging_config import get_logger

logger = get_logger(__name__)


def safe_parse_json(value: Any, default: Any = None) -> Any:
    """Parse a JSON text column, returning ``default`` for missing or invalid values.

    Values the driver already decoded (lists, dicts) are returned unchanged.
    """
    if value is None or value == "":
        return default
    if not isinstance(value, (str, bytes, bytearray)):
        return value
    try:
        return json.loads(value)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"JSON parsing error: {e}. Value: {value!r}")
        return default


def safe_dump_json(value: Any, default: str = "[]") -> str:
    """Serialize ``value`` to JSON text, returning ``default`` when it cannot be encoded."""
    try:
        return json.dumps(value)
    except (TypeError, ValueError) as e:
        logger.error(f"JSON stringify error: {e}. Value: {value!r}")
        return default


def parse_json_list(value: Any) -> list:
    """Parse a column that must hold a JSON array; anything else becomes ``[]``."""
    parsed = safe_parse_json(value, [])
    if not isinstance(parsed, list):
        logger.error(f"Expected a JSON array, got {type(parsed).__name__}. Value: {value!r}")
        return []
    return parsed
