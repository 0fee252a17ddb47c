"""Extract translated text from the response shapes used by common backends.

Each shape matcher takes the decoded JSON value and returns the translated
string, or ``None`` when the shape does not apply.  Matchers are tried in
order and the first hit wins::

    {"translatedText": "..."}                                  LibreTranslate
    {"data": {"translations": [{"translatedText": "..."}]}}    Google v2 style
    {"data": {"translations": [{"translation": "..."}]}}
    "..."                                                      bare JSON string
    {"result": "..."}

A body that is not JSON, or JSON that matches none of the shapes, is
returned verbatim.
"""

from __future__ import annotations

import json
from typing import Any, Callable

ShapeMatcher = Callable[[Any], "str | None"]


def match_translated_text(value: Any) -> str | None:
    if isinstance(value, dict):
        text = value.get("translatedText")
        if isinstance(text, str):
            return text
    return None


def match_data_translations(value: Any) -> str | None:
    if not isinstance(value, dict):
        return None
    data = value.get("data")
    if not isinstance(data, dict):
        return None
    translations = data.get("translations")
    if not isinstance(translations, list) or not translations:
        return None

    first = translations[0]
    if not isinstance(first, dict):
        return None
    for key in ("translatedText", "translation"):
        text = first.get(key)
        if isinstance(text, str):
            return text
    return None


def match_plain_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def match_result(value: Any) -> str | None:
    if isinstance(value, dict):
        text = value.get("result")
        if isinstance(text, str):
            return text
    return None


SHAPE_MATCHERS: tuple[tuple[str, ShapeMatcher], ...] = (
    ("translatedText", match_translated_text),
    ("data.translations", match_data_translations),
    ("string", match_plain_string),
    ("result", match_result),
)


def interpret_response(body: str) -> tuple[str, str]:
    """Pick the translated text out of a successful response body.

    Args:
        body: Raw response body, already decoded to text.

    Returns:
        ``(text, shape)`` where ``shape`` names the matcher that fired, or
        ``"raw"`` when the body was passed through untouched.
    """
    try:
        value = json.loads(body)
    except (ValueError, RecursionError):
        return body, "raw"

    for shape, matcher in SHAPE_MATCHERS:
        text = matcher(value)
        if text is not None:
            return text, shape

    return body, "raw"


def extract_translation(body: str) -> str:
    """Return only the text part of :func:`interpret_response`."""
    text, _ = interpret_response(body)
    return text
