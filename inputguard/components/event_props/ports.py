"""
Event property filter port definitions.
"""

from __future__ import annotations

from typing import Protocol


class EventPropsRulesPort(Protocol):
    """Port for accessing property filter rules."""

    def get_strip_pii(self) -> bool:
        """Whether PII-named keys are dropped."""
        ...

    def get_drop_email_values(self) -> bool:
        """Whether email-looking values are dropped."""
        ...

    def get_pii_key_fragments(self) -> tuple[str, ...]:
        """Key fragments treated as PII."""
        ...
