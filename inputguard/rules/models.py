from pydantic import BaseModel, ConfigDict, Field

from inputguard.components.email.models import (
    DISPOSABLE_EMAIL_DOMAINS,
    EMAIL_MAX_LENGTH,
    EMAIL_TYPO_CORRECTIONS,
)


class SanitizerRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_length: int = Field(default=500, ge=1)
    max_iterations: int = Field(default=100, ge=1)


class EmailRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_length: int = Field(default=EMAIL_MAX_LENGTH, ge=3)
    # Added to the built-in blocklist, never replacing it
    extra_disposable_domains: list[str] = Field(default_factory=list)
    extra_typo_corrections: dict[str, str] = Field(default_factory=dict)

    @property
    def disposable_domains(self) -> frozenset[str]:
        extra = {d.strip().lower() for d in self.extra_disposable_domains if d.strip()}
        return DISPOSABLE_EMAIL_DOMAINS | extra

    @property
    def typo_corrections(self) -> dict[str, str]:
        merged = dict(EMAIL_TYPO_CORRECTIONS)
        merged.update({k.lower(): v.lower() for k, v in self.extra_typo_corrections.items()})
        return merged


class NameRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    min_length: int = Field(default=2, ge=0)
    max_length: int = Field(default=100, ge=1)


class FormsRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: NameRules = Field(default_factory=NameRules)


class EventPropsRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    strip_pii: bool = True
    drop_email_values: bool = True
    extra_pii_fragments: list[str] = Field(default_factory=list)


class Rules(BaseModel):
    """Top-level rules file schema. Every section has built-in defaults."""

    model_config = ConfigDict(extra="forbid")

    rules_version: str = "1"
    sanitizer: SanitizerRules = Field(default_factory=SanitizerRules)
    email: EmailRules = Field(default_factory=EmailRules)
    forms: FormsRules = Field(default_factory=FormsRules)
    event_props: EventPropsRules = Field(default_factory=EventPropsRules)
