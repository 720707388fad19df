"""
Interfaces - User-facing applications.

- api: FastAPI gateway
- cli: Typer commands and the interactive test console
"""

__all__ = ["api", "cli"]
