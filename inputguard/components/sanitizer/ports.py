"""
Sanitizer component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class SanitizerRulesPort(Protocol):
    """Port for accessing sanitizer limits."""

    def get_max_length(self) -> int:
        """Get maximum output length in characters."""
        ...

    def get_max_iterations(self) -> int:
        """Get the pass cap for the fixed-point strippers."""
        ...
