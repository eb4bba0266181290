"""
Sanitizer component - Free-text sanitization for storage and display.

Pipeline (fixed order):
1. Trim
2. Delete angle brackets (tag text survives as plain text)
3. Strip dangerous URI schemes
4. Strip inline event handlers
5. Encode &, " and '
6. Trim and cap length

Invariants:
- Output has no < or >, no dangerous scheme, no handler token
- Output length never exceeds max_length
- sanitize(sanitize(s)) == sanitize(s)
- Never raises for string input; work is bounded by the pass cap
"""

from __future__ import annotations

import logging
import re
import sys

from .entities import encode_entities, encode_text_entities, truncate_encoded
from .fixed_point import PassBudget
from .handlers import (
    defang_handlers,
    has_event_handler,
    strip_event_handlers,
    strip_event_names,
)
from .models import (
    DEFAULT_CONFIG,
    EncodeInput,
    EncodeOutput,
    SanitizeInput,
    SanitizeOutput,
    SanitizerConfig,
)
from .ports import SanitizerRulesPort
from .protocols import defang_protocols, has_dangerous_protocol, strip_protocols

logger = logging.getLogger(__name__)

_ANGLE_BRACKETS_RE = re.compile(r"[<>]")


def _build_config(rules: SanitizerRulesPort | None) -> SanitizerConfig:
    """Build sanitizer config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return SanitizerConfig(
        max_length=rules.get_max_length(),
        max_iterations=rules.get_max_iterations(),
    )


# --- Pure Functions ---


def strip_active_content(text: str, *, max_iterations: int) -> str:
    """
    Strip schemes and event handlers until neither stage finds anything.

    Handler removal can bring a scheme back together ("data onclick= :"),
    so the two stages repeat as a pair. Every regex pass of every round
    draws from one budget of ``max_iterations`` passes.
    """
    budget = PassBudget(max_iterations)
    while True:
        stripped = strip_event_handlers(
            strip_protocols(text, budget=budget),
            budget=budget,
        )
        if stripped == text:
            return text
        text = stripped
        if budget.exhausted:
            break

    if has_dangerous_protocol(text) or has_event_handler(text):
        logger.warning(
            "Active content did not settle after %d passes, defanging", budget.used
        )
        return strip_event_names(defang_handlers(defang_protocols(text)))
    return text


def _cap_length(text: str, max_length: int) -> str:
    """
    Cut ``text`` to ``max_length`` characters.

    Length is counted in code points (Python ``str`` characters), not
    UTF-16 code units, so an astral character such as an emoji counts once.
    """
    if len(text) <= max_length:
        return text
    # A cut can turn "onclicked" into a bare "onclick"
    return strip_event_names(truncate_encoded(text, max_length)).rstrip()


def sanitize(text: str, *, config: SanitizerConfig | None = None) -> str:
    """
    Sanitize untrusted free text.

    Args:
        text: Raw user input.
        config: Limits (defaults to 500 characters, 100 passes).

    Returns:
        Sanitized text, empty for empty input.
    """
    if not text:
        return ""
    cfg = config or DEFAULT_CONFIG

    cleaned = _ANGLE_BRACKETS_RE.sub("", text.strip())
    cleaned = strip_active_content(cleaned, max_iterations=cfg.max_iterations)
    cleaned = encode_text_entities(cleaned)

    return _cap_length(cleaned.strip(), cfg.max_length)


# --- Component Entry Points ---


def run_sanitize(
    inp: SanitizeInput,
    *,
    rules: SanitizerRulesPort | None = None,
) -> SanitizeOutput:
    """
    Sanitize free text.

    Args:
        inp: Input containing the raw text.
        rules: Optional rules port for limits.

    Returns:
        SanitizeOutput with the sanitized text.
    """
    config = _build_config(rules)
    text = sanitize(inp.text, config=config)

    return SanitizeOutput(
        text=text,
        changed=text != (inp.text or "").strip(),
    )


def run_encode(
    inp: EncodeInput,
    *,
    rules: SanitizerRulesPort | None = None,
) -> EncodeOutput:
    """
    Encode HTML-significant characters for display.

    Args:
        inp: Input containing the text to encode.
        rules: Optional rules port for the length cap.

    Returns:
        EncodeOutput with the encoded text.
    """
    config = _build_config(rules)
    full = encode_entities(inp.text, max_length=sys.maxsize)

    return EncodeOutput(
        text=full[: config.max_length],
        truncated=len(full) > config.max_length,
    )


def run(
    inp: SanitizeInput | EncodeInput,
    *,
    rules: SanitizerRulesPort | None = None,
) -> SanitizeOutput | EncodeOutput:
    """
    Main entry point for the sanitizer component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SanitizeInput):
        return run_sanitize(inp, rules=rules)
    elif isinstance(inp, EncodeInput):
        return run_encode(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
