"""Glide Script to Wolken JS converter service"""

__version__ = "1.0.0"
