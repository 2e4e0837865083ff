"""Services package"""
from app.services.glide2wolken import GlideToWolkenConverter, convert_glide_to_wolken

__all__ = [
    "GlideToWolkenConverter",
    "convert_glide_to_wolken"
]
