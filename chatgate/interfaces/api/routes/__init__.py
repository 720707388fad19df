"""
API Routes.
"""

from . import chat, health

__all__ = ["health", "chat"]
