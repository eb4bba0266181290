"""
Email component ports.

Protocol interfaces for email validation configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class EmailRulesPort(Protocol):
    """
    Email rules provider interface.

    Provides configuration from the rules file.
    """

    def get_max_length(self) -> int:
        """Maximum accepted address length."""
        ...

    def get_disposable_domains(self) -> frozenset[str]:
        """Set of known disposable email domains."""
        ...

    def get_typo_corrections(self) -> Mapping[str, str]:
        """Mistyped domain to intended domain."""
        ...
