"""
ServiceNow Glide Script to Wolken JS Converter

Rewrites ServiceNow client scripts (gs.* system calls, g_form.* form calls,
current/workflow record access) into Wolken JS event handler functions that
operate on the Angular context object `ele`.

- GlideToWolkenConverter: applies the rule catalog and shapes the output
- build_form_rules: g_form rule group for a selected form type

The conversion is a best-effort textual rewrite. Calls without a specific
rule are commented out rather than dropped, so they can be finished by hand.
"""

from .converter import (
    GlideToWolkenConverter,
    convert_glide_to_wolken,
    strip_function_wrapper,
    resolve_function_name,
)
from .rules import (
    SYSTEM_API_RULES,
    ALERT_RULES,
    RECORD_RULES,
    FALLBACK_RULES,
    CLEANUP_RULES,
    build_form_rules,
)
from .samples import get_sample_glide_script
from .types import (
    FormType,
    EventType,
    RewriteRule,
    RuleGroup,
    ConversionDetails,
    DEFAULT_FUNCTION_NAME,
    EVENT_FUNCTION_NAMES,
)

__all__ = [
    "GlideToWolkenConverter",
    "convert_glide_to_wolken",
    "strip_function_wrapper",
    "resolve_function_name",
    "SYSTEM_API_RULES",
    "ALERT_RULES",
    "RECORD_RULES",
    "FALLBACK_RULES",
    "CLEANUP_RULES",
    "build_form_rules",
    "get_sample_glide_script",
    "FormType",
    "EventType",
    "RewriteRule",
    "RuleGroup",
    "ConversionDetails",
    "DEFAULT_FUNCTION_NAME",
    "EVENT_FUNCTION_NAMES",
]

__version__ = "1.0.0"
