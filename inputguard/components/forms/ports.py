"""
Forms component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from inputguard.components.email.ports import EmailRulesPort


class FormRulesPort(EmailRulesPort, Protocol):
    """Port for form field limits. Email limits come from the same rules."""

    def get_name_min_length(self) -> int:
        """Minimum display name length after trimming."""
        ...

    def get_name_max_length(self) -> int:
        """Maximum display name length after trimming."""
        ...
