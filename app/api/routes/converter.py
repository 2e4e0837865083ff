"""Glide Script to Wolken JS conversion routes"""
from fastapi import APIRouter, HTTPException
import logging

from app.config import settings
from app.api.models.requests import (
    ConvertRequest,
    ConvertResponse,
    OptionsResponse,
    SampleResponse,
    SelectOption
)
from app.services.glide2wolken import (
    GlideToWolkenConverter,
    FormType,
    EventType,
    get_sample_glide_script
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Global converter instance for reuse
_converter = GlideToWolkenConverter(indent_unit=settings.INDENT_UNIT)

EMPTY_SCRIPT_MESSAGE = "Please enter ServiceNow Glide Script to convert"
SUCCESS_MESSAGE = "ServiceNow Glide Script converted to Wolken JS successfully!"


@router.post("/convert", response_model=ConvertResponse)
async def convert_script(request: ConvertRequest) -> ConvertResponse:
    """
    Convert ServiceNow Glide Script to a Wolken JS event handler.

    **Example:**
    ```
    POST /api/converter/convert
    {
      "script": "g_form.setValue(\\"priority\\", \\"high\\");",
      "formType": "requestForm",
      "eventType": "onChange"
    }
    ```
    """
    script = request.script.strip()
    if not script:
        raise HTTPException(status_code=400, detail=EMPTY_SCRIPT_MESSAGE)

    form_type = request.formType or settings.DEFAULT_FORM_TYPE
    event_type = request.eventType or settings.DEFAULT_EVENT_TYPE

    try:
        result = _converter.convert_with_details(script, form_type, event_type)
    except Exception as e:
        logger.error(f"Error converting Glide Script: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error during conversion: {e}")

    if result["unconvertedCalls"]:
        logger.info(
            f"Converted to {result['functionName']} with calls left for manual "
            f"conversion: {', '.join(result['unconvertedCalls'])}"
        )

    return ConvertResponse(
        success=True,
        message=SUCCESS_MESSAGE,
        output=result["output"],
        functionName=result["functionName"],
        formType=result["formType"],
        eventType=result["eventType"],
        unconvertedCalls=result["unconvertedCalls"]
    )


@router.get("/options", response_model=OptionsResponse)
async def list_options() -> OptionsResponse:
    """Form types and event types accepted by /convert"""
    return OptionsResponse(
        formTypes=[SelectOption(value=f.value, label=f.label) for f in FormType],
        eventTypes=[SelectOption(value=e.value, label=e.label) for e in EventType],
        defaultFormType=settings.DEFAULT_FORM_TYPE.value,
        defaultEventType=settings.DEFAULT_EVENT_TYPE
    )


@router.get("/sample", response_model=SampleResponse)
async def sample_script() -> SampleResponse:
    """Sample onChange client script to try the converter with"""
    return SampleResponse(script=get_sample_glide_script())
