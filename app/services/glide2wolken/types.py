"""
Type definitions for the Glide Script to Wolken JS converter
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple, TypedDict, Union


class FormType(str, Enum):
    """Target Wolken form object addressed by generated field accessors"""
    REQUEST_FORM = "requestForm"        # Request Creation
    MODIFIED_FIELDS = "modifiedFields"  # Request Summary
    MAIN_FORM_GROUP = "mainFormGroup"   # Task Summary

    @property
    def label(self) -> str:
        return FORM_TYPE_LABELS[self]


class EventType(str, Enum):
    """Event the generated Wolken function handles"""
    ON_CHANGE = "onChange"
    ON_LOAD = "onLoad"
    ON_SUBMIT = "onSubmit"
    ON_BLUR = "onBlur"
    ON_FOCUS = "onFocus"
    ON_CLICK = "onClick"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return EVENT_TYPE_LABELS[self]


FORM_TYPE_LABELS: Dict[FormType, str] = {
    FormType.REQUEST_FORM: "Request Creation",
    FormType.MODIFIED_FIELDS: "Request Summary",
    FormType.MAIN_FORM_GROUP: "Task Summary",
}

EVENT_TYPE_LABELS: Dict[EventType, str] = {
    EventType.ON_CHANGE: "onChange",
    EventType.ON_LOAD: "onLoad",
    EventType.ON_SUBMIT: "onSubmit",
    EventType.ON_BLUR: "onBlur",
    EventType.ON_FOCUS: "onFocus",
    EventType.ON_CLICK: "onClick",
    EventType.CUSTOM: "Custom Event",
}

DEFAULT_FUNCTION_NAME = "invokeDependentAPiCalls"

# onChange and custom share the default handler name
EVENT_FUNCTION_NAMES: Dict[EventType, str] = {
    EventType.ON_CHANGE: DEFAULT_FUNCTION_NAME,
    EventType.ON_LOAD: "onLoadEventCall",
    EventType.ON_SUBMIT: "onSubmitEventCall",
    EventType.ON_BLUR: "onBlurEventCall",
    EventType.ON_FOCUS: "onFocusEventCall",
    EventType.ON_CLICK: "onClickEventCall",
    EventType.CUSTOM: DEFAULT_FUNCTION_NAME,
}

# Parameters of every generated function: context object, triggering field, all fields
FUNCTION_PARAMETERS: Tuple[str, ...] = ("ele", "fieldObj", "allFields")


@dataclass(frozen=True)
class RewriteRule:
    """
    A single pattern/template rewrite.

    Attributes:
        pattern: Compiled regular expression matched against the source text
        replacement: Template using \\1-style group references
    """
    pattern: "re.Pattern[str]"
    replacement: str

    def apply(self, text: str) -> str:
        """Replace every match in text."""
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True)
class RuleGroup:
    """Named, ordered sequence of rewrite rules applied as a unit."""
    name: str
    rules: Tuple[RewriteRule, ...]

    def apply(self, text: str) -> str:
        for rewrite in self.rules:
            text = rewrite.apply(text)
        return text

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)


FormTypeLike = Union[FormType, str]
EventTypeLike = Union[EventType, str]


class ConversionDetails(TypedDict):
    """
    Result of a detailed conversion.

    Attributes:
        output: The generated Wolken JS function
        functionName: Name of the generated function
        formType: Form context identifier used for field accessors
        eventType: Event kind as supplied by the caller
        unconvertedCalls: gs/g_form calls commented out for manual follow-up
    """
    output: str
    functionName: str
    formType: str
    eventType: str
    unconvertedCalls: List[str]
