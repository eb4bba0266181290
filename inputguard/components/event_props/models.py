"""
Event property filter models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Keys that can reach an object prototype when used for dynamic assignment
UNSAFE_PROPERTY_KEYS: frozenset[str] = frozenset({"__proto__", "constructor", "prototype"})

# Matched anywhere in the snake_case form of a key
PII_KEY_FRAGMENTS: tuple[str, ...] = (
    "email",
    "e_mail",
    "password",
    "passwd",
    "token",
    "authorization",
    "api_key",
    "apikey",
    "secret",
    "credit_card",
    "card_number",
    "social_security",
    "phone",
    "address",
    "full_name",
    "first_name",
    "last_name",
)

# Matched only as a whole "_"-separated segment ("ip" but not "description")
PII_KEY_SEGMENTS: frozenset[str] = frozenset(
    {"auth", "cvv", "ip", "mail", "pass", "pwd", "ssn"}
)


# --- Configuration ---


@dataclass(frozen=True)
class EventPropsConfig:
    """Property filter configuration."""

    strip_pii: bool = True
    drop_email_values: bool = True
    pii_key_fragments: tuple[str, ...] = PII_KEY_FRAGMENTS


DEFAULT_CONFIG = EventPropsConfig()


# --- Input Models ---


@dataclass(frozen=True)
class FilterPropertiesInput:
    """Input for filtering analytics event properties."""

    properties: dict[str, Any]
    event_name: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class FilterPropertiesOutput:
    """Properties safe to forward, plus the keys that were dropped."""

    properties: dict[str, Any] = field(default_factory=dict)
    blocked_keys: list[str] = field(default_factory=list)
