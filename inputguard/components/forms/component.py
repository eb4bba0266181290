"""
Forms component - Multi-field validation for capture and feedback forms.

Input arrives as a loosely typed mapping, so every field gets a runtime
type check before its value rules run. Type mismatches are reported as
ordinary field errors.

Key behaviors:
- Sparse: only fields present in the mapping are checked
- Fields are independent; each failing field adds one message
- Within a field, the first failing rule wins
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from inputguard.components.email import EmailConfig, validate_email

from .models import DEFAULT_CONFIG, FormConfig, FormValidationResult, ValidateFormInput
from .ports import FormRulesPort

MSG_NOT_A_MAPPING = "Form data must be a mapping"
MSG_EMAIL_TYPE = "Email must be a string"
MSG_NAME_TYPE = "Name must be a string"
MSG_TERMS_TYPE = "Accept terms must be a boolean"
MSG_TERMS_REQUIRED = "You must accept the terms and conditions"


def _build_config(rules: FormRulesPort | None) -> FormConfig:
    """Build form config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return FormConfig(
        name_min_length=rules.get_name_min_length(),
        name_max_length=rules.get_name_max_length(),
        email=EmailConfig(
            max_length=rules.get_max_length(),
            disposable_domains=rules.get_disposable_domains(),
            typo_corrections=rules.get_typo_corrections(),
        ),
    )


# --- Field Validators ---


def check_email_field(value: Any, config: FormConfig) -> str | None:
    """Return the error for an email field, or None."""
    if not isinstance(value, str):
        return MSG_EMAIL_TYPE
    result = validate_email(value, config=config.email)
    if not result.is_valid:
        return result.error or "Invalid email"
    return None


def check_name_field(value: Any, config: FormConfig) -> str | None:
    """Return the error for a display name field, or None."""
    if not isinstance(value, str):
        return MSG_NAME_TYPE
    length = len(value.strip())
    if length < config.name_min_length:
        return f"Name must be at least {config.name_min_length} characters"
    if length > config.name_max_length:
        return "Name is too long"
    return None


def check_terms_field(value: Any, config: FormConfig) -> str | None:
    """Return the error for a terms-consent field, or None."""
    if not value:
        return MSG_TERMS_REQUIRED
    if not isinstance(value, bool):
        return MSG_TERMS_TYPE
    return None


FieldCheck = Callable[[Any, FormConfig], str | None]

# Output key -> accepted input keys and the check for them
FIELD_CHECKS: dict[str, tuple[tuple[str, ...], FieldCheck]] = {
    "email": (("email",), check_email_field),
    "name": (("name",), check_name_field),
    "acceptTerms": (("acceptTerms", "accept_terms"), check_terms_field),
}


# --- Pure Functions ---


def validate_form(
    fields: Mapping[str, Any],
    *,
    config: FormConfig | None = None,
) -> FormValidationResult:
    """
    Validate the recognised fields of a form submission.

    Args:
        fields: Field name to raw value. Unknown keys are ignored.
        config: Field limits (optional).

    Returns:
        FormValidationResult; is_valid is True iff errors is empty.
    """
    if not isinstance(fields, Mapping):
        return FormValidationResult(is_valid=False, errors={"form": MSG_NOT_A_MAPPING})

    cfg = config or DEFAULT_CONFIG
    errors: dict[str, str] = {}

    for error_key, (input_keys, check) in FIELD_CHECKS.items():
        for key in input_keys:
            if key not in fields:
                continue
            error = check(fields[key], cfg)
            if error:
                errors[error_key] = error
            break

    return FormValidationResult(is_valid=len(errors) == 0, errors=errors)


# --- Component Entry Points ---


def run_validate(
    inp: ValidateFormInput,
    *,
    rules: FormRulesPort | None = None,
) -> FormValidationResult:
    """Validate a form submission."""
    return validate_form(inp.fields, config=_build_config(rules))


def run(
    inp: ValidateFormInput,
    *,
    rules: FormRulesPort | None = None,
) -> FormValidationResult:
    """
    Main entry point for the forms component.
    """
    if isinstance(inp, ValidateFormInput):
        return run_validate(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
