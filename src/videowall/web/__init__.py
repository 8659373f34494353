"""FastAPI REST API for video wall sizing.

This module provides a REST API for calculating the closest lower and upper
wall configurations and for listing the cabinet catalog.

Usage:
    uvicorn videowall.web:app --reload
"""

from videowall.web.app import app, create_app

__all__ = ["app", "create_app"]
