"""
Adapters mapping the rules file onto each component's RulesPort.
"""

from __future__ import annotations

from collections.abc import Mapping

from inputguard.components.event_props.models import PII_KEY_FRAGMENTS
from inputguard.rules.models import Rules


class SanitizerRulesAdapter:
    """Adapter to map generic Rules to Sanitizer component RulesPort."""

    def __init__(self, rules: Rules):
        self._rules = rules.sanitizer

    def get_max_length(self) -> int:
        return self._rules.max_length

    def get_max_iterations(self) -> int:
        return self._rules.max_iterations


class EmailRulesAdapter:
    """Adapter to map generic Rules to Email component RulesPort."""

    def __init__(self, rules: Rules):
        self._rules = rules.email

    def get_max_length(self) -> int:
        return self._rules.max_length

    def get_disposable_domains(self) -> frozenset[str]:
        return self._rules.disposable_domains

    def get_typo_corrections(self) -> Mapping[str, str]:
        return self._rules.typo_corrections


class FormRulesAdapter(EmailRulesAdapter):
    """Adapter to map generic Rules to Forms component RulesPort."""

    def __init__(self, rules: Rules):
        super().__init__(rules)
        self._name = rules.forms.name

    def get_name_min_length(self) -> int:
        return self._name.min_length

    def get_name_max_length(self) -> int:
        return self._name.max_length


class EventPropsRulesAdapter:
    """Adapter to map generic Rules to Event Properties component RulesPort."""

    def __init__(self, rules: Rules):
        self._rules = rules.event_props

    def get_strip_pii(self) -> bool:
        return self._rules.strip_pii

    def get_drop_email_values(self) -> bool:
        return self._rules.drop_email_values

    def get_pii_key_fragments(self) -> tuple[str, ...]:
        extra = tuple(
            f.strip().lower() for f in self._rules.extra_pii_fragments if f.strip()
        )
        return PII_KEY_FRAGMENTS + extra
