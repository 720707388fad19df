"""
API Interface - FastAPI gateway exposing /chat and /gemini.
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
