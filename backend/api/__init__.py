"""
PV Market API package.

Provides the FastAPI application for the pole marketplace backend.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
