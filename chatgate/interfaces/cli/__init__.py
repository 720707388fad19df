"""
CLI Interface - Command-line tools for ChatGate.

Provides commands for:
- Running the gateway server
- The interactive test console
- One-shot questions
"""

from .client import GatewayClient, Provider
from .console import ChatConsole
from .main import app, main

__all__ = ["app", "main", "GatewayClient", "Provider", "ChatConsole"]
