"""
Email component models.

Data models for email address validation, normalization and typo hints.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# --- Constants ---

EMAIL_MAX_LENGTH = 254

# Local part: alphanumeric runs joined by single . _ + or -.
# Domain: alphanumeric labels joined by single . or -, then a 2+ letter TLD.
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9]+(?:[._+-][a-zA-Z0-9]+)*"
    r"@"
    r"[a-zA-Z0-9]+(?:[.-][a-zA-Z0-9]+)*\.[a-zA-Z]{2,}"
)

DISPOSABLE_EMAIL_DOMAINS: frozenset[str] = frozenset(
    {
        "tempmail.com",
        "guerrillamail.com",
        "mailinator.com",
        "10minutemail.com",
        "throwaway.email",
        "temp-mail.org",
        "fakeinbox.com",
        "yopmail.com",
    }
)

EMAIL_TYPO_CORRECTIONS: Mapping[str, str] = MappingProxyType(
    {
        "gmial.com": "gmail.com",
        "gmai.com": "gmail.com",
        "gnail.com": "gmail.com",
        "yahooo.com": "yahoo.com",
        "yaho.com": "yahoo.com",
        "hotmial.com": "hotmail.com",
        "outlok.com": "outlook.com",
        "outloook.com": "outlook.com",
    }
)


# --- Configuration ---


@dataclass(frozen=True)
class EmailConfig:
    """Email validation configuration."""

    max_length: int = EMAIL_MAX_LENGTH
    disposable_domains: frozenset[str] = DISPOSABLE_EMAIL_DOMAINS
    typo_corrections: Mapping[str, str] = field(default_factory=lambda: EMAIL_TYPO_CORRECTIONS)


DEFAULT_CONFIG = EmailConfig()


# --- Input Models ---


@dataclass(frozen=True)
class ValidateEmailInput:
    """Input for email validation."""

    email: str


@dataclass(frozen=True)
class NormalizeEmailInput:
    """Input for email normalization."""

    email: str


@dataclass(frozen=True)
class SuggestCorrectionInput:
    """Input for a typo-corrected address suggestion."""

    email: str


# --- Output Models ---


@dataclass(frozen=True)
class EmailValidationResult:
    """Outcome of validating one address. error is None when valid."""

    is_valid: bool
    error: str | None = None
    code: str | None = None  # e.g. "INVALID_FORMAT"


@dataclass(frozen=True)
class NormalizeEmailOutput:
    """Output from normalization."""

    normalized_email: str | None  # Lowercase, trimmed; None when invalid
    validation: EmailValidationResult


@dataclass(frozen=True)
class SuggestCorrectionOutput:
    """Output from typo suggestion."""

    suggestion: str | None = None
