"""
Main Glide Script to Wolken JS Converter.

Rewrites ServiceNow client script text into a Wolken JS event handler by
ordered regular-expression substitution. Nothing is parsed: the input is
treated as plain text and each rule group rewrites the whole accumulated
string before the next group runs.
"""
import logging
import re
from typing import List

from .rules import (
    CLEANUP_RULES,
    FALLBACK_RULES,
    build_form_rules,
    fixed_rule_groups,
)
from .types import (
    DEFAULT_FUNCTION_NAME,
    EVENT_FUNCTION_NAMES,
    FUNCTION_PARAMETERS,
    ConversionDetails,
    EventType,
    EventTypeLike,
    FormType,
    FormTypeLike,
)

logger = logging.getLogger(__name__)

INDENT_UNIT = "    "

# Function wrapper of the incoming script, e.g. "function onChange(control, ...) {"
_FUNCTION_HEADER = re.compile(r"^function\s+[A-Za-z0-9_]+\s*\([^)]*\)\s*\{?", re.MULTILINE)
_LEADING_BRACE = re.compile(r"^\s*\{?\s*")
_TRAILING_BRACE = re.compile(r"\s*\}\s*\Z")


def strip_function_wrapper(source: str) -> str:
    """
    Unwrap a function declaration into its bare statements.

    Removes line-leading function headers, then one leading "{" and one
    trailing "}". Input that is not wrapped passes through unchanged, and a
    header of any other shape is simply left alone.
    """
    text = _FUNCTION_HEADER.sub("", source)
    text = _LEADING_BRACE.sub("", text, count=1)
    text = _TRAILING_BRACE.sub("", text, count=1)
    return text


def find_unconverted_calls(text: str) -> List[str]:
    """
    List the gs/g_form calls the fallback group is about to comment out.

    Returns call names such as "g_form.flash", g_form first, each namespace
    in order of appearance.
    """
    calls = []
    for rewrite in FALLBACK_RULES:
        for match in rewrite.pattern.finditer(text):
            calls.append(match.group(0)[:-1])
    return calls


def indent_lines(text: str, unit: str = INDENT_UNIT) -> str:
    """Prefix every line with one indentation unit."""
    return "\n".join(unit + line for line in text.split("\n"))


def resolve_function_name(event_type: EventTypeLike) -> str:
    """
    Map an event type to the generated function name.

    Unknown event types fall back to the default handler name instead of
    failing.
    """
    try:
        event = EventType(event_type)
    except ValueError:
        return DEFAULT_FUNCTION_NAME
    return EVENT_FUNCTION_NAMES.get(event, DEFAULT_FUNCTION_NAME)


def wrap_in_function(body: str, function_name: str) -> str:
    """Wrap an already indented body in a Wolken handler declaration."""
    params = ", ".join(FUNCTION_PARAMETERS)
    return f"function {function_name}({params}) {{\n{body}\n}}"


def _value_of(item) -> str:
    return item.value if isinstance(item, (FormType, EventType)) else str(item)


class GlideToWolkenConverter:
    """
    Converts ServiceNow Glide Script to a Wolken JS event handler.

    Processing order:
    1. Strip an optional function wrapper from the input
    2. Apply the gs, alert and record rule groups
    3. Apply the g_form rule group built for the selected form type
    4. Comment out leftover gs/g_form calls
    5. Drop trailing semicolons
    6. Reindent and wrap in a function named after the event type

    The converter holds no per-call state, so one instance can serve
    concurrent requests.

    Example:
        converter = GlideToWolkenConverter()
        js = converter.convert('g_form.getValue("priority")', "requestForm", "onLoad")
    """

    def __init__(self, indent_unit: str = INDENT_UNIT):
        self.indent_unit = indent_unit

    def convert(
        self,
        source: str,
        form_type: FormTypeLike = FormType.REQUEST_FORM,
        event_type: EventTypeLike = EventType.ON_CHANGE
    ) -> str:
        """
        Convert Glide Script to Wolken JS.

        Args:
            source: Glide Script text; blank input is not rejected here
            form_type: Form the generated field accessors address
            event_type: Event kind selecting the function name

        Returns:
            Wolken JS function declaration
        """
        return self.convert_with_details(source, form_type, event_type)["output"]

    def convert_with_details(
        self,
        source: str,
        form_type: FormTypeLike = FormType.REQUEST_FORM,
        event_type: EventTypeLike = EventType.ON_CHANGE
    ) -> ConversionDetails:
        """
        Convert Glide Script and report what was left for manual conversion.

        Returns:
            ConversionDetails with the output and the commented-out calls
        """
        js = strip_function_wrapper(source)

        for group in fixed_rule_groups():
            js = group.apply(js)
        js = build_form_rules(form_type).apply(js)

        unconverted = find_unconverted_calls(js)
        js = FALLBACK_RULES.apply(js)
        js = CLEANUP_RULES.apply(js)

        function_name = resolve_function_name(event_type)
        output = wrap_in_function(indent_lines(js, self.indent_unit), function_name)

        logger.debug(
            f"Converted Glide Script to {function_name} for {_value_of(form_type)} "
            f"({len(unconverted)} unconverted calls)"
        )

        return {
            "output": output,
            "functionName": function_name,
            "formType": _value_of(form_type),
            "eventType": _value_of(event_type),
            "unconvertedCalls": unconverted,
        }


_default_converter = GlideToWolkenConverter()


def convert_glide_to_wolken(
    source: str,
    form_type: FormTypeLike = FormType.REQUEST_FORM,
    event_type: EventTypeLike = EventType.ON_CHANGE
) -> str:
    """Convert Glide Script with the default four-space indentation."""
    return _default_converter.convert(source, form_type, event_type)
