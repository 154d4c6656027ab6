"""
Structured-answer extraction from free model text.

Models wrap JSON in prose or code fences; the extractor takes the widest
`[...]` or `{...}` span and parses it.
"""

from __future__ import annotations

import json
import logging
import re
from enum import Enum
from typing import Any

from skill_recommender.results import ErrorKind, Result

logger = logging.getLogger(__name__)


class AnswerShape(str, Enum):
    """Expected top-level JSON type of a model answer."""

    ARRAY = "array"
    OBJECT = "object"


_SPANS = {
    AnswerShape.ARRAY: (re.compile(r"\[[\s\S]*\]"), list),
    AnswerShape.OBJECT: (re.compile(r"\{[\s\S]*\}"), dict),
}


def extract_structured(text: str, shape: AnswerShape) -> Result[Any]:
    """
    Extract a JSON array or object embedded in text.

    Args:
        text: Raw model output.
        shape: Expected top-level type.

    Returns:
        Result holding the parsed value, or a MALFORMED_ANSWER failure when
        no span is found, it does not parse, or it has the wrong type.

    Examples:
        >>> extract_structured('Sure! [{"title": "x"}]', AnswerShape.ARRAY).unwrap()
        [{'title': 'x'}]
        >>> extract_structured("no json here", AnswerShape.OBJECT).is_ok
        False
    """
    pattern, expected_type = _SPANS[shape]

    match = pattern.search(text or "")
    if match is None:
        return Result.fail(ErrorKind.MALFORMED_ANSWER, f"no JSON {shape.value} found")

    try:
        value = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.debug(f"Failed to parse JSON {shape.value}: {e}")
        return Result.fail(ErrorKind.MALFORMED_ANSWER, f"invalid JSON {shape.value}: {e}")

    if not isinstance(value, expected_type):
        return Result.fail(ErrorKind.MALFORMED_ANSWER, f"expected JSON {shape.value}")

    return Result.ok(value)
