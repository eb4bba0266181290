"""
Forms component - Multi-field form validation.
"""

from .component import (
    FIELD_CHECKS,
    MSG_EMAIL_TYPE,
    MSG_NAME_TYPE,
    MSG_NOT_A_MAPPING,
    MSG_TERMS_REQUIRED,
    MSG_TERMS_TYPE,
    check_email_field,
    check_name_field,
    check_terms_field,
    run,
    run_validate,
    validate_form,
)
from .models import (
    DEFAULT_CONFIG,
    FormConfig,
    FormValidationResult,
    ValidateFormInput,
)
from .ports import FormRulesPort

__all__ = [
    # Entry points
    "run",
    "run_validate",
    # Pure functions
    "validate_form",
    "check_email_field",
    "check_name_field",
    "check_terms_field",
    # Constants
    "FIELD_CHECKS",
    "MSG_EMAIL_TYPE",
    "MSG_NAME_TYPE",
    "MSG_NOT_A_MAPPING",
    "MSG_TERMS_REQUIRED",
    "MSG_TERMS_TYPE",
    # Models
    "DEFAULT_CONFIG",
    "FormConfig",
    "FormValidationResult",
    "ValidateFormInput",
    # Ports
    "FormRulesPort",
]
