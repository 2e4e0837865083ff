"""API models package"""
from app.api.models.requests import (
    ConvertRequest,
    ConvertResponse,
    SelectOption,
    OptionsResponse,
    SampleResponse
)

__all__ = [
    "ConvertRequest",
    "ConvertResponse",
    "SelectOption",
    "OptionsResponse",
    "SampleResponse"
]
