"""Tolerant parsing of JSON embedded in free-form LLM replies.

Models often wrap the requested JSON in prose or code fences. The payload is
taken from the first opening bracket to the last closing one; anything that
still fails to decode or validate yields the caller's default.
"""

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _extract_between(text: str, opening: str, closing: str) -> str:
    start = text.find(opening)
    end = text.rfind(closing)
    if start >= 0 and end > start:
        return text[start : end + 1]
    return text


def extract_json_object(text: str) -> str:
    """Return the substring from the first `{` to the last `}` (or `text` unchanged)."""
    return _extract_between(text, '{', '}')


def extract_json_array(text: str) -> str:
    """Return the substring from the first `[` to the last `]` (or `text` unchanged)."""
    return _extract_between(text, '[', ']')


def parse_llm_json(text: str, target: Any, default: T, *, array: bool = False) -> T:
    """Decode JSON from an LLM reply into `target`, falling back to `default`.

    Args:
        text: Raw model output
        target: Type to validate into (pydantic model, `list[str]`, `dict[str, str]`, ...)
        default: Value returned when the reply cannot be parsed
        array: Extract a JSON array instead of an object

    Returns:
        The validated value, or `default`
    """
    payload = extract_json_array(text) if array else extract_json_object(text)
    try:
        return TypeAdapter(target).validate_json(payload)
    except (ValidationError, ValueError) as e:
        logger.warning('Failed to parse LLM response: %s. Raw response: %s', e, text)
        return default
