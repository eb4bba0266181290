"""
Email component - Address validation for capture forms.

Syntax, length and disposable-domain checks only. Deliverability is never
checked.

Key behaviors:
- Rules are checked in order, first failure wins:
  required -> format -> length -> disposable domain
- Normalization (trim + lowercase) only for valid addresses
- Typo hints for commonly mistyped provider domains, local part untouched
"""

from __future__ import annotations

from .models import (
    DEFAULT_CONFIG,
    EMAIL_PATTERN,
    EmailConfig,
    EmailValidationResult,
    NormalizeEmailInput,
    NormalizeEmailOutput,
    SuggestCorrectionInput,
    SuggestCorrectionOutput,
    ValidateEmailInput,
)
from .ports import EmailRulesPort

MSG_REQUIRED = "Email address is required"
MSG_INVALID = "Please enter a valid email address"
MSG_TOO_LONG = "Email address is too long"
MSG_DISPOSABLE = "Please use a permanent email address"


def _build_config(rules: EmailRulesPort | None) -> EmailConfig:
    """Build email config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return EmailConfig(
        max_length=rules.get_max_length(),
        disposable_domains=rules.get_disposable_domains(),
        typo_corrections=rules.get_typo_corrections(),
    )


def _invalid(code: str, message: str) -> EmailValidationResult:
    return EmailValidationResult(is_valid=False, error=message, code=code)


# --- Pure Functions ---


def extract_domain(email: str) -> str | None:
    """
    Return the lowercased part after the last ``@``.

    Returns None when there is no ``@`` or nothing follows it.
    """
    if not email:
        return None
    _, at, domain = email.strip().rpartition("@")
    if not at or not domain:
        return None
    return domain.lower()


def is_disposable_domain(domain: str, config: EmailConfig | None = None) -> bool:
    """Check a domain against the disposable blocklist, case-insensitively."""
    cfg = config or DEFAULT_CONFIG
    return domain.strip().lower() in cfg.disposable_domains


def validate_email(email: str, *, config: EmailConfig | None = None) -> EmailValidationResult:
    """
    Validate an email address.

    Args:
        email: Raw address from a form field.
        config: Limits and domain tables (optional).

    Returns:
        EmailValidationResult, with error set when invalid.
    """
    cfg = config or DEFAULT_CONFIG

    if not email or not email.strip():
        return _invalid("EMPTY_EMAIL", MSG_REQUIRED)

    trimmed = email.strip()

    if not EMAIL_PATTERN.fullmatch(trimmed):
        return _invalid("INVALID_FORMAT", MSG_INVALID)

    if len(trimmed) > cfg.max_length:
        return _invalid("EMAIL_TOO_LONG", MSG_TOO_LONG)

    domain = extract_domain(trimmed)
    if domain is None:
        return _invalid("INVALID_FORMAT", MSG_INVALID)

    if domain in cfg.disposable_domains:
        return _invalid("DISPOSABLE_EMAIL", MSG_DISPOSABLE)

    return EmailValidationResult(is_valid=True)


def normalize_email(email: str, *, config: EmailConfig | None = None) -> str | None:
    """Trim and lowercase a valid address. Invalid addresses give None."""
    if not validate_email(email, config=config).is_valid:
        return None
    return email.strip().lower()


def suggest_email_correction(email: str, *, config: EmailConfig | None = None) -> str | None:
    """
    Suggest a fix for a commonly mistyped provider domain.

    The local part is kept exactly as typed, including ``+tags``.

    Args:
        email: Address as typed.
        config: Typo table (optional).

    Returns:
        ``local@corrected-domain``, or None when there is nothing to suggest.
    """
    if not email:
        return None
    cfg = config or DEFAULT_CONFIG

    parts = email.split("@")
    if len(parts) < 2 or not parts[1]:
        return None

    local_part = parts[0]
    if not local_part:
        return None

    suggestion = cfg.typo_corrections.get(parts[1].lower())
    if suggestion is None:
        return None

    return f"{local_part}@{suggestion}"


# --- Component Entry Points ---


def run_validate(
    inp: ValidateEmailInput,
    *,
    rules: EmailRulesPort | None = None,
) -> EmailValidationResult:
    """Validate an address."""
    return validate_email(inp.email, config=_build_config(rules))


def run_normalize(
    inp: NormalizeEmailInput,
    *,
    rules: EmailRulesPort | None = None,
) -> NormalizeEmailOutput:
    """Validate and normalize an address."""
    config = _build_config(rules)
    validation = validate_email(inp.email, config=config)

    return NormalizeEmailOutput(
        normalized_email=inp.email.strip().lower() if validation.is_valid else None,
        validation=validation,
    )


def run_suggest(
    inp: SuggestCorrectionInput,
    *,
    rules: EmailRulesPort | None = None,
) -> SuggestCorrectionOutput:
    """Suggest a typo correction."""
    config = _build_config(rules)
    return SuggestCorrectionOutput(suggestion=suggest_email_correction(inp.email, config=config))


def run(
    inp: ValidateEmailInput | NormalizeEmailInput | SuggestCorrectionInput,
    *,
    rules: EmailRulesPort | None = None,
) -> EmailValidationResult | NormalizeEmailOutput | SuggestCorrectionOutput:
    """
    Main component entry point.

    Args:
        inp: Input command
        rules: Rules port (Optional)

    Returns:
        Operation result
    """
    if isinstance(inp, ValidateEmailInput):
        return run_validate(inp, rules=rules)
    elif isinstance(inp, NormalizeEmailInput):
        return run_normalize(inp, rules=rules)
    elif isinstance(inp, SuggestCorrectionInput):
        return run_suggest(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
