"""
Event properties component - PII and key-safety filter for analytics events.
"""

from .component import (
    contains_email,
    filter_event_properties,
    is_pii_key,
    is_safe_property_key,
    normalize_key,
    run,
    run_filter,
)
from .models import (
    DEFAULT_CONFIG,
    PII_KEY_FRAGMENTS,
    PII_KEY_SEGMENTS,
    UNSAFE_PROPERTY_KEYS,
    EventPropsConfig,
    FilterPropertiesInput,
    FilterPropertiesOutput,
)
from .ports import EventPropsRulesPort

__all__ = [
    # Entry points
    "run",
    "run_filter",
    # Pure functions
    "filter_event_properties",
    "is_safe_property_key",
    "is_pii_key",
    "normalize_key",
    "contains_email",
    # Constants
    "PII_KEY_FRAGMENTS",
    "PII_KEY_SEGMENTS",
    "UNSAFE_PROPERTY_KEYS",
    # Models
    "DEFAULT_CONFIG",
    "EventPropsConfig",
    "FilterPropertiesInput",
    "FilterPropertiesOutput",
    # Ports
    "EventPropsRulesPort",
]
