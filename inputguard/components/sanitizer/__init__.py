"""
Sanitizer component - Untrusted free text to display-safe text.
"""

from .component import (
    run,
    run_encode,
    run_sanitize,
    sanitize,
    strip_active_content,
)
from .entities import (
    HTML_ENTITIES,
    MAX_OUTPUT_LENGTH,
    encode_entities,
    encode_text_entities,
    truncate_encoded,
)
from .fixed_point import MAX_ITERATIONS, FixedPointResult, PassBudget, replace_until_stable
from .handlers import (
    EVENT_NAMES,
    has_event_handler,
    strip_event_handlers,
    strip_event_names,
    strip_handler_attributes,
)
from .models import (
    DEFAULT_CONFIG,
    EncodeInput,
    EncodeOutput,
    SanitizeInput,
    SanitizeOutput,
    SanitizerConfig,
)
from .ports import SanitizerRulesPort
from .protocols import (
    DANGEROUS_SCHEMES,
    PROTOCOL_RULES,
    has_dangerous_protocol,
    strip_protocols,
)

__all__ = [
    # Entry points
    "run",
    "run_encode",
    "run_sanitize",
    # Pure functions
    "sanitize",
    "strip_active_content",
    "encode_entities",
    "encode_text_entities",
    "truncate_encoded",
    "replace_until_stable",
    "strip_protocols",
    "has_dangerous_protocol",
    "strip_event_handlers",
    "strip_handler_attributes",
    "strip_event_names",
    "has_event_handler",
    # Constants
    "DANGEROUS_SCHEMES",
    "EVENT_NAMES",
    "HTML_ENTITIES",
    "MAX_ITERATIONS",
    "MAX_OUTPUT_LENGTH",
    "PROTOCOL_RULES",
    # Models
    "DEFAULT_CONFIG",
    "FixedPointResult",
    "PassBudget",
    "SanitizerConfig",
    "SanitizeInput",
    "SanitizeOutput",
    "EncodeInput",
    "EncodeOutput",
    # Ports
    "SanitizerRulesPort",
]
