import re
import time

import pytest

from inputguard.components.email import normalize_email, suggest_email_correction, validate_email
from inputguard.components.event_props import filter_event_properties
from inputguard.components.forms import validate_form
from inputguard.components.sanitizer import (
    EVENT_NAMES,
    SanitizerConfig,
    encode_entities,
    has_event_handler,
    sanitize,
)

DANGEROUS_SCHEME_RE = re.compile(r"(javascript|data|vbscript|about)\s*:", re.IGNORECASE)

ADVERSARIAL = [
    "<script>alert('xss')</script>",
    "<img src=x onerror=alert(1)>",
    "<a href=\"javascript:alert(1)\">x</a>",
    "jajajavascript:vascript:vascript:alert(1)",
    "javadata:script:alert(1)",
    "data onclick= :x",
    "DaTa : text/html,boom",
    "ononononclick=alert(1)",
    "onmouseover =alert(1) onfocus= x",
    "vbvbscript:script:msgbox(1)",
    "about:blank & file:///etc/passwd",
    "&amp;&lt;&gt; \"'",
    "x" * 492 + " onclickable",
    "y" * 496 + "&&&&&",
    "ja" * 30 + "javascript:" + "vascript:" * 30 + "alert(1)",
    "on" * 40 + "click=alert(1)",
]


@pytest.fixture
def small_cap() -> SanitizerConfig:
    return SanitizerConfig(max_iterations=2)


# --- R1: Idempotence ---
@pytest.mark.parametrize("raw", ADVERSARIAL)
def test_R1_sanitize_idempotent(raw):
    """R1: Sanitizing sanitized text changes nothing."""
    once = sanitize(raw)
    assert sanitize(once) == once


# --- R2: No dangerous token survives ---
@pytest.mark.parametrize("raw", ADVERSARIAL)
def test_R2_no_dangerous_tokens(raw):
    """R2: No bracket, scheme or handler token in the output."""
    result = sanitize(raw)
    assert "<" not in result and ">" not in result
    assert not DANGEROUS_SCHEME_RE.search(result)
    assert not has_event_handler(result)


@pytest.mark.parametrize("raw", ADVERSARIAL)
def test_R2_no_dangerous_tokens_when_cap_runs_out(raw, small_cap):
    """R2: Exhausting the pass cap still leaves nothing dangerous."""
    result = sanitize(raw, config=small_cap)
    assert not DANGEROUS_SCHEME_RE.search(result)
    assert not has_event_handler(result)


def test_R2_every_catalog_event_removed():
    """R2: Each catalog event, bare or as an attribute, is removed."""
    for name in EVENT_NAMES:
        assert f"on{name}" not in sanitize(f"x on{name} y").lower()
        assert sanitize(f"on{name}=go()") == "go()"


# --- R3: Bounded output ---
@pytest.mark.parametrize("raw", ADVERSARIAL + ["a" * 10_000, "&" * 600, "'" * 600])
def test_R3_bounded_length(raw):
    """R3: Output never exceeds 500 characters."""
    assert len(sanitize(raw)) <= 500
    assert len(encode_entities(raw)) <= 500


# --- R4: Termination under adversarial load ---
def _pad(unit: str, size: int = 200_000) -> str:
    return " ".join([unit] * (size // (len(unit) + 1)))


def _cross_scheme_nest(levels: int) -> str:
    raw = "javascript:"
    for level in range(levels):
        raw = "abo" + raw + "ut:" if level % 2 == 0 else "java" + raw + "script:"
    return raw + "alert(1)"


def _cross_stage_nest(levels: int) -> str:
    raw = "onx="
    for level in range(levels):
        raw = "data " + raw + " :" if level % 2 == 0 else "on" + raw + "x="
    return raw + "alert(1)"


def test_R4_adversarial_input_terminates_quickly():
    """R4: Deep nesting is handled within the pass cap."""
    raw = "ja" * 200 + "javascript:" + "vascript:" * 200 + "alert(1)"
    started = time.monotonic()
    result = sanitize(raw)
    assert time.monotonic() - started < 5
    assert not DANGEROUS_SCHEME_RE.search(result)


@pytest.mark.parametrize("levels", [60, 200])
def test_R4_cross_scheme_nesting_terminates_quickly(levels):
    """R4: Alternating about/javascript nesting shares one pass budget."""
    raw = _pad(_cross_scheme_nest(levels))
    assert len(raw) > 190_000
    started = time.monotonic()
    result = sanitize(raw)
    assert time.monotonic() - started < 5
    assert not DANGEROUS_SCHEME_RE.search(result)
    assert not has_event_handler(result)


@pytest.mark.parametrize("levels", [40, 120])
def test_R4_cross_stage_nesting_terminates_quickly(levels):
    """R4: Nesting that alternates schemes and handlers shares one pass budget."""
    raw = _pad(_cross_stage_nest(levels))
    assert len(raw) > 190_000
    started = time.monotonic()
    result = sanitize(raw)
    assert time.monotonic() - started < 5
    assert not DANGEROUS_SCHEME_RE.search(result)
    assert not has_event_handler(result)


# --- R5: Email round-trip ---
@pytest.mark.parametrize(
    "email",
    ["User@Example.com", "  a.b@c.io ", "bad", "", "x@tempmail.com", "a..b@c.com"],
)
def test_R5_normalize_matches_validate(email):
    """R5: Normalized iff valid; normalized form is trimmed lowercase."""
    if validate_email(email).is_valid:
        assert normalize_email(email) == email.strip().lower()
    else:
        assert normalize_email(email) is None


def test_R5_typo_suggestion_keeps_local_part():
    assert suggest_email_correction("test.user+tag@gmial.com") == "test.user+tag@gmail.com"


# --- R6: Form aggregation ---
def test_R6_form_errors_are_independent():
    """R6: Each invalid field contributes exactly one error."""
    result = validate_form({"email": "bad", "name": "J", "acceptTerms": False})
    assert result.is_valid is False
    assert sorted(result.errors) == ["acceptTerms", "email", "name"]


# --- R7: Event properties ---
def test_R7_no_pii_or_unsafe_key_forwarded():
    """R7: Forwarded properties carry no PII key, email value or unsafe key."""
    props = {
        "__proto__": {},
        "constructor": "x",
        "userEmail": "a@b.co",
        "ip_address": "10.0.0.1",
        "comment": "reach me at a@b.co",
        "button_location": "footer",
    }
    result = filter_event_properties(props)
    assert result.properties == {"button_location": "footer"}
    assert len(result.blocked_keys) == 5
