"""
Forms component models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from inputguard.components.email.models import DEFAULT_CONFIG as DEFAULT_EMAIL_CONFIG
from inputguard.components.email.models import EmailConfig

# --- Configuration ---


@dataclass(frozen=True)
class FormConfig:
    """Field limits for form validation."""

    name_min_length: int = 2
    name_max_length: int = 100
    email: EmailConfig = DEFAULT_EMAIL_CONFIG


DEFAULT_CONFIG = FormConfig()


# --- Input Models ---


@dataclass(frozen=True)
class ValidateFormInput:
    """Loosely typed form submission, keyed by field name."""

    fields: Mapping[str, Any]


# --- Output Models ---


@dataclass(frozen=True)
class FormValidationResult:
    """Pass/fail for a whole form with one message per failing field."""

    is_valid: bool
    errors: dict[str, str] = field(default_factory=dict)
