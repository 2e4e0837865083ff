"""Health check endpoint for load balancers"""
from fastapi import APIRouter
from app.config import settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "UP", "service": settings.SERVICE_NAME}


@router.get("/info")
async def info():
    """Service info endpoint"""
    from app import __version__
    return {
        "service": settings.SERVICE_NAME,
        "version": __version__,
        "description": "ServiceNow Glide Script to Wolken JS converter",
        "defaults": {
            "formType": settings.DEFAULT_FORM_TYPE.value,
            "eventType": settings.DEFAULT_EVENT_TYPE
        }
    }
