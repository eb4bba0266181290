"""
Bounded replace-until-stable loop shared by the strippers.

A pass deletes every non-overlapping match of a pattern. Passes repeat
until one of them deletes nothing or the pass budget is spent. One budget
is shared by every loop of a sanitize call, so however the loops nest,
adversarial input costs at most ``max_iterations`` scans of the text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

MAX_ITERATIONS = 100


class PassBudget:
    """Number of regex passes left for one sanitize call."""

    def __init__(self, limit: int = MAX_ITERATIONS) -> None:
        self.limit = limit
        self.used = 0

    @property
    def exhausted(self) -> bool:
        return self.used >= self.limit

    def spend(self) -> bool:
        """Take one pass. False when none are left."""
        if self.exhausted:
            return False
        self.used += 1
        return True


@dataclass(frozen=True)
class FixedPointResult:
    """Outcome of a bounded replace-until-stable run."""

    text: str
    passes: int
    converged: bool  # False when the budget ran out with matches left


def replace_until_stable(
    pattern: re.Pattern[str],
    text: str,
    max_iterations: int = MAX_ITERATIONS,
    *,
    budget: PassBudget | None = None,
) -> FixedPointResult:
    """
    Delete matches of ``pattern`` from ``text`` until nothing matches.

    Patterns must never match the empty string, so a pass that replaces
    nothing is the same as a pass that changes nothing.

    Args:
        pattern: Compiled pattern whose matches are removed.
        text: Text to clean.
        max_iterations: Maximum number of passes when no budget is given.
        budget: Shared pass budget; takes precedence over max_iterations.

    Returns:
        FixedPointResult with the cleaned text and pass count.
    """
    if budget is None:
        budget = PassBudget(max_iterations)

    passes = 0
    while budget.spend():
        text, count = pattern.subn("", text)
        passes += 1
        if count == 0:
            return FixedPointResult(text=text, passes=passes, converged=True)

    return FixedPointResult(
        text=text,
        passes=passes,
        converged=pattern.search(text) is None,
    )
