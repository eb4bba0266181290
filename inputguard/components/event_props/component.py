"""
Event property filter - Key-safety and PII check for analytics properties.

Analytics wrappers run event properties through this before handing them
to a third-party script.

Key behaviors:
- Prototype-reaching keys (__proto__, constructor, prototype) are dropped
- PII-named keys are dropped (userEmail, api_key, ip_address, ...)
- Values that contain an email address are dropped
- None values are dropped
- Keys are logged when dropped; values never are
"""

from __future__ import annotations

import logging
import re
from typing import Any

from .models import (
    DEFAULT_CONFIG,
    PII_KEY_SEGMENTS,
    UNSAFE_PROPERTY_KEYS,
    EventPropsConfig,
    FilterPropertiesInput,
    FilterPropertiesOutput,
)
from .ports import EventPropsRulesPort

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")

# Needs a dot-separated TLD, so "2.0@stable" and "user@123" do not count
_EMAIL_VALUE_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}")


def _build_config(rules: EventPropsRulesPort | None) -> EventPropsConfig:
    """Build filter config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return EventPropsConfig(
        strip_pii=rules.get_strip_pii(),
        drop_email_values=rules.get_drop_email_values(),
        pii_key_fragments=rules.get_pii_key_fragments(),
    )


# --- Pure Functions ---


def is_safe_property_key(key: str) -> bool:
    """Check that a key cannot reach an object prototype."""
    return key not in UNSAFE_PROPERTY_KEYS


def normalize_key(key: str) -> str:
    """Convert camelCase, kebab-case and SHOUTING keys to snake_case."""
    snake = _CAMEL_BOUNDARY_RE.sub("_", key).lower()
    return _NON_ALNUM_RE.sub("_", snake).strip("_")


def is_pii_key(key: str, config: EventPropsConfig | None = None) -> bool:
    """Check whether a property key names personal data."""
    cfg = config or DEFAULT_CONFIG
    normalized = normalize_key(key)
    if any(fragment in normalized for fragment in cfg.pii_key_fragments):
        return True
    return any(segment in PII_KEY_SEGMENTS for segment in normalized.split("_"))


def contains_email(value: Any) -> bool:
    """Check whether a string value holds an email address."""
    return isinstance(value, str) and _EMAIL_VALUE_RE.search(value) is not None


def filter_event_properties(
    properties: dict[str, Any] | None,
    *,
    config: EventPropsConfig | None = None,
    event_name: str | None = None,
) -> FilterPropertiesOutput:
    """
    Drop properties that are unsafe or personal.

    Args:
        properties: Event properties as passed by the caller.
        config: Filter switches (optional).
        event_name: Event the properties belong to, used in log lines.

    Returns:
        FilterPropertiesOutput with the forwardable properties.
    """
    if not properties:
        return FilterPropertiesOutput()
    cfg = config or DEFAULT_CONFIG
    event = event_name or "-"

    kept: dict[str, Any] = {}
    blocked: list[str] = []

    for key, value in properties.items():
        if not isinstance(key, str) or not is_safe_property_key(key):
            logger.warning("Blocked potentially unsafe property key on event %s: %r", event, key)
            blocked.append(str(key))
            continue
        if value is None:
            continue
        if cfg.strip_pii and is_pii_key(key, cfg):
            logger.debug("Dropped PII property key on event %s: %s", event, key)
            blocked.append(key)
            continue
        if cfg.drop_email_values and contains_email(value):
            logger.debug("Dropped property with email-like value on event %s: %s", event, key)
            blocked.append(key)
            continue
        kept[key] = value

    return FilterPropertiesOutput(properties=kept, blocked_keys=blocked)


# --- Component Entry Points ---


def run_filter(
    inp: FilterPropertiesInput,
    *,
    rules: EventPropsRulesPort | None = None,
) -> FilterPropertiesOutput:
    """Filter the properties of one analytics event."""
    return filter_event_properties(
        inp.properties,
        config=_build_config(rules),
        event_name=inp.event_name,
    )


def run(
    inp: FilterPropertiesInput,
    *,
    rules: EventPropsRulesPort | None = None,
) -> FilterPropertiesOutput:
    """
    Main entry point for the event property filter.
    """
    if isinstance(inp, FilterPropertiesInput):
        return run_filter(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
