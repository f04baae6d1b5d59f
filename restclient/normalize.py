"""Reduce a response body to a single JSON object."""

import json
from typing import Any

from restclient.errors import ParseError, TypeMismatch

_JSON_TYPE_NAMES = {
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    type(None): "null",
    list: "array",
}


def _json_type(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def normalize_body(text: str) -> dict[str, Any]:
    """
    Parse a response body and normalize it to a dict.

    - empty or whitespace-only -> {}
    - object -> returned unchanged
    - array -> {} when empty, else its LAST element (must be an object).
      Earlier elements are dropped; some upstream APIs answer with a list
      whose final entry is the current record, and callers rely on that.
    - any other JSON value -> TypeMismatch
    - invalid JSON -> ParseError
    """
    if not text or not text.strip():
        return {}
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Response body is not valid JSON: {e}") from e

    if isinstance(parsed, list):
        if not parsed:
            return {}
        parsed = parsed[-1]
    if not isinstance(parsed, dict):
        raise TypeMismatch(_json_type(parsed))
    return parsed
