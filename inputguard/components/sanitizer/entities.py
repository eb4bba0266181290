"""
HTML entity encoding.

Both encoders run as a single regex pass with a lookup table, so an entity
produced for one character is never scanned again and re-encoded.
"""

from __future__ import annotations

import re

MAX_OUTPUT_LENGTH = 500

HTML_ENTITIES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
}

_HTML_SPECIAL_RE = re.compile(r"[&<>\"']")

# An ampersand that does not already start one of our own entities
_TEXT_SPECIAL_RE = re.compile(r"&(?!amp;|lt;|gt;|quot;|#x27;)|[\"']")

# Trailing "&", "&am", "&#x2" left behind by a length cut
_PARTIAL_ENTITY_RE = re.compile(r"&[#\w]*$")


def _replace(match: re.Match[str]) -> str:
    return HTML_ENTITIES[match.group()]


def encode_entities(text: str, *, max_length: int = MAX_OUTPUT_LENGTH) -> str:
    """
    Encode ``& < > " '`` as HTML entities for safe display.

    The result is trimmed and limited to ``max_length`` characters.
    Every ampersand is encoded, including ones that look like entities.
    """
    if not text:
        return ""
    return _HTML_SPECIAL_RE.sub(_replace, text).strip()[:max_length]


def encode_text_entities(text: str) -> str:
    """
    Encode ``&``, ``"`` and ``'`` in text that has no angle brackets left.

    Ampersands that already begin ``&amp;``, ``&lt;``, ``&gt;``, ``&quot;``
    or ``&#x27;`` are kept, so encoded text maps to itself.
    """
    if not text:
        return ""
    return _TEXT_SPECIAL_RE.sub(_replace, text)


def truncate_encoded(text: str, max_length: int = MAX_OUTPUT_LENGTH) -> str:
    """
    Cut encoded text to ``max_length`` without splitting an entity.

    Length is counted in code points, not UTF-16 code units. An emoji
    outside the Basic Multilingual Plane counts as one character.
    """
    if len(text) <= max_length:
        return text
    cut = _PARTIAL_ENTITY_RE.sub("", text[:max_length])
    return cut.rstrip()
