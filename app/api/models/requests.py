"""Request and response models for API endpoints"""
from pydantic import BaseModel
from typing import Optional, List

from app.services.glide2wolken.types import FormType


class ConvertRequest(BaseModel):
    """Request to convert a Glide Script"""
    script: str
    formType: Optional[FormType] = None    # Falls back to DEFAULT_FORM_TYPE
    eventType: Optional[str] = None        # Unknown values get the default function name


class ConvertResponse(BaseModel):
    """Converted Wolken JS and conversion metadata"""
    success: bool
    message: str
    output: str
    functionName: str
    formType: str
    eventType: str
    unconvertedCalls: List[str] = []


class SelectOption(BaseModel):
    """A value/label pair for a selector"""
    value: str
    label: str


class OptionsResponse(BaseModel):
    """Available form and event types"""
    formTypes: List[SelectOption]
    eventTypes: List[SelectOption]
    defaultFormType: str
    defaultEventType: str


class SampleResponse(BaseModel):
    """Sample Glide Script"""
    script: str
