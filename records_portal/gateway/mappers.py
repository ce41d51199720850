"""
Coercion helpers for backend rows.

Rows come from MySQL via a JSON API: ids are integers, missing columns are
null and list-valued columns are sometimes JSON encoded strings. The record
schemas use these helpers in their ``from_row`` constructors.
"""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def as_text(value: Any, default: str = "") -> str:
    """Stringify a column, treating null and empty values as ``default``."""
    if value is None or value == "":
        return default
    return str(value)


def as_int(value: Any, default: int) -> int:
    """Convert a numeric column, falling back to ``default`` when falsy."""
    if not value:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def as_choice(value: Any, choices: list[str], default: str) -> str:
    """Return ``value`` when it is one of ``choices``, else ``default``."""
    return value if value in choices else default


def json_list(value: Any) -> list:
    """
    Decode a list column.

    Accepts a list, or a string holding a JSON array. Anything else
    (including undecodable strings) gives an empty list.
    """
    if isinstance(value, list):
        return value
    if isinstance(value, str) and value:
        try:
            decoded = json.loads(value)
        except ValueError:
            logger.warning("Ignoring malformed list column: %.40s", value)
            return []
        return decoded if isinstance(decoded, list) else []
    return []


def first_present(row: dict[str, Any], *keys: str) -> Any:
    """Return the first truthy value among ``keys`` (snake and camel case)."""
    for key in keys:
        if row.get(key):
            return row[key]
    return None
