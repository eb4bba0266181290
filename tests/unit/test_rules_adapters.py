"""
Rules adapter tests.

Rules loaded from YAML should reach each component through its adapter.
"""

from __future__ import annotations

from inputguard.components.email import (
    DISPOSABLE_EMAIL_DOMAINS,
    MSG_DISPOSABLE,
    SuggestCorrectionInput,
    ValidateEmailInput,
)
from inputguard.components.email import run_suggest as run_email_suggest
from inputguard.components.email import run_validate as run_email_validate
from inputguard.components.event_props import PII_KEY_FRAGMENTS, FilterPropertiesInput
from inputguard.components.event_props import run_filter
from inputguard.components.forms import ValidateFormInput
from inputguard.components.forms import run_validate as run_form_validate
from inputguard.components.sanitizer import SanitizeInput, run_sanitize
from inputguard.rules.adapters import (
    EmailRulesAdapter,
    EventPropsRulesAdapter,
    FormRulesAdapter,
    SanitizerRulesAdapter,
)
from inputguard.rules.loader import load_rules
from inputguard.rules.models import Rules

CUSTOM_RULES = """
sanitizer:
  max_length: 10
email:
  extra_disposable_domains: [" Burner.Test "]
  extra_typo_corrections:
    Exmaple.com: example.com
forms:
  name:
    min_length: 3
event_props:
  extra_pii_fragments: [member_id]
"""


class TestSanitizerRulesAdapter:
    def test_defaults(self, rules: Rules) -> None:
        adapter = SanitizerRulesAdapter(rules)
        assert adapter.get_max_length() == 500
        assert adapter.get_max_iterations() == 100

    def test_limit_reaches_component(self, write_rules) -> None:
        adapter = SanitizerRulesAdapter(load_rules(write_rules(CUSTOM_RULES)))
        result = run_sanitize(SanitizeInput(text="a" * 50), rules=adapter)
        assert result.text == "a" * 10


class TestEmailRulesAdapter:
    def test_defaults(self, rules: Rules) -> None:
        adapter = EmailRulesAdapter(rules)
        assert adapter.get_max_length() == 254
        assert adapter.get_disposable_domains() == DISPOSABLE_EMAIL_DOMAINS
        assert adapter.get_typo_corrections()["gmial.com"] == "gmail.com"

    def test_extra_domains_extend_builtins(self, write_rules) -> None:
        adapter = EmailRulesAdapter(load_rules(write_rules(CUSTOM_RULES)))
        domains = adapter.get_disposable_domains()
        assert "burner.test" in domains
        assert DISPOSABLE_EMAIL_DOMAINS <= domains

        result = run_email_validate(ValidateEmailInput(email="a@burner.test"), rules=adapter)
        assert result.error == MSG_DISPOSABLE

    def test_extra_typos(self, write_rules) -> None:
        adapter = EmailRulesAdapter(load_rules(write_rules(CUSTOM_RULES)))
        result = run_email_suggest(SuggestCorrectionInput(email="me@exmaple.com"), rules=adapter)
        assert result.suggestion == "me@example.com"
        assert adapter.get_typo_corrections()["gmai.com"] == "gmail.com"


class TestFormRulesAdapter:
    def test_defaults(self, rules: Rules) -> None:
        adapter = FormRulesAdapter(rules)
        assert adapter.get_name_min_length() == 2
        assert adapter.get_name_max_length() == 100
        assert adapter.get_max_length() == 254

    def test_limits_reach_component(self, write_rules) -> None:
        adapter = FormRulesAdapter(load_rules(write_rules(CUSTOM_RULES)))
        fields = {"name": "Al", "email": "a@burner.test"}
        result = run_form_validate(ValidateFormInput(fields=fields), rules=adapter)

        assert result.errors == {
            "name": "Name must be at least 3 characters",
            "email": MSG_DISPOSABLE,
        }


class TestEventPropsRulesAdapter:
    def test_defaults(self, rules: Rules) -> None:
        adapter = EventPropsRulesAdapter(rules)
        assert adapter.get_strip_pii() is True
        assert adapter.get_drop_email_values() is True
        assert adapter.get_pii_key_fragments() == PII_KEY_FRAGMENTS

    def test_extra_fragments(self, write_rules) -> None:
        adapter = EventPropsRulesAdapter(load_rules(write_rules(CUSTOM_RULES)))
        inp = FilterPropertiesInput(properties={"memberId": "m-1", "plan": "pro"})
        result = run_filter(inp, rules=adapter)

        assert result.properties == {"plan": "pro"}
        assert result.blocked_keys == ["memberId"]
