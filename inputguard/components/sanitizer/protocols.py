"""
Dangerous URI scheme stripping.

Each scheme is driven to its own fixed point before the next one runs.
Removing one scheme can assemble another out of the leftovers
("javadata:script:" becomes "javascript:"), so whole sweeps repeat until a
sweep changes nothing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .fixed_point import MAX_ITERATIONS, PassBudget, replace_until_stable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemeRule:
    """A URI scheme and the pattern that removes it."""

    name: str
    pattern: re.Pattern[str]


def _scheme(name: str, trailing: str = "") -> SchemeRule:
    return SchemeRule(
        name=name,
        pattern=re.compile(rf"{name}\s*:\s*{trailing}", re.IGNORECASE),
    )


# file: also takes the path slashes with it, file:///etc/passwd -> etc/passwd
PROTOCOL_RULES: tuple[SchemeRule, ...] = (
    _scheme("javascript"),
    _scheme("data"),
    _scheme("vbscript"),
    _scheme("file", trailing="/*"),
    _scheme("about"),
)

DANGEROUS_SCHEMES: tuple[str, ...] = tuple(rule.name for rule in PROTOCOL_RULES)


def defang_protocols(text: str) -> str:
    """Remove every colon. No scheme pattern can match afterwards."""
    return text.replace(":", "")


def has_dangerous_protocol(text: str) -> bool:
    """Check whether any scheme pattern still matches ``text``."""
    return any(rule.pattern.search(text) for rule in PROTOCOL_RULES)


def strip_protocols(
    text: str,
    *,
    max_iterations: int = MAX_ITERATIONS,
    budget: PassBudget | None = None,
) -> str:
    """
    Remove ``javascript:``, ``data:``, ``vbscript:``, ``file:`` and ``about:``.

    Matching is case-insensitive and allows whitespace around the colon.
    Every pass of every sweep draws from one budget. If a scheme is still
    present when the budget runs out, the remaining colons are removed
    instead.

    Args:
        text: Text to clean.
        max_iterations: Total pass cap when no budget is given.
        budget: Pass budget shared with the caller.

    Returns:
        Text with no dangerous scheme left.
    """
    if not text:
        return ""
    if budget is None:
        budget = PassBudget(max_iterations)

    while True:
        swept = text
        for rule in PROTOCOL_RULES:
            result = replace_until_stable(rule.pattern, swept, budget=budget)
            if not result.converged:
                logger.warning(
                    "Scheme %r still present after %d of %d passes, defanging",
                    rule.name,
                    budget.used,
                    budget.limit,
                )
                return defang_protocols(result.text)
            swept = result.text
        if swept == text:
            return text
        text = swept
