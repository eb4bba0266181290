"""
Email component - Address validation, normalization and typo hints.
"""

from .component import (
    MSG_DISPOSABLE,
    MSG_INVALID,
    MSG_REQUIRED,
    MSG_TOO_LONG,
    extract_domain,
    is_disposable_domain,
    normalize_email,
    run,
    run_normalize,
    run_suggest,
    run_validate,
    suggest_email_correction,
    validate_email,
)
from .models import (
    DEFAULT_CONFIG,
    DISPOSABLE_EMAIL_DOMAINS,
    EMAIL_MAX_LENGTH,
    EMAIL_PATTERN,
    EMAIL_TYPO_CORRECTIONS,
    EmailConfig,
    EmailValidationResult,
    NormalizeEmailInput,
    NormalizeEmailOutput,
    SuggestCorrectionInput,
    SuggestCorrectionOutput,
    ValidateEmailInput,
)
from .ports import EmailRulesPort

__all__ = [
    # Component
    "run",
    "run_validate",
    "run_normalize",
    "run_suggest",
    # Pure functions
    "validate_email",
    "normalize_email",
    "suggest_email_correction",
    "extract_domain",
    "is_disposable_domain",
    # Constants
    "DISPOSABLE_EMAIL_DOMAINS",
    "EMAIL_MAX_LENGTH",
    "EMAIL_PATTERN",
    "EMAIL_TYPO_CORRECTIONS",
    "MSG_DISPOSABLE",
    "MSG_INVALID",
    "MSG_REQUIRED",
    "MSG_TOO_LONG",
    # Models
    "DEFAULT_CONFIG",
    "EmailConfig",
    "EmailValidationResult",
    "ValidateEmailInput",
    "NormalizeEmailInput",
    "NormalizeEmailOutput",
    "SuggestCorrectionInput",
    "SuggestCorrectionOutput",
    # Ports
    "EmailRulesPort",
]
