"""
Sanitizer component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from .entities import MAX_OUTPUT_LENGTH
from .fixed_point import MAX_ITERATIONS

# --- Configuration ---


@dataclass(frozen=True)
class SanitizerConfig:
    """Sanitizer limits from rules."""

    max_length: int = MAX_OUTPUT_LENGTH
    max_iterations: int = MAX_ITERATIONS


DEFAULT_CONFIG = SanitizerConfig()


# --- Input Models ---


@dataclass(frozen=True)
class SanitizeInput:
    """Input for sanitizing untrusted free text."""

    text: str


@dataclass(frozen=True)
class EncodeInput:
    """Input for encoding HTML-significant characters."""

    text: str


# --- Output Models ---


@dataclass(frozen=True)
class SanitizeOutput:
    """Output from sanitizing."""

    text: str
    changed: bool = False  # True if anything besides outer whitespace was altered


@dataclass(frozen=True)
class EncodeOutput:
    """Output from entity encoding."""

    text: str
    truncated: bool = False
