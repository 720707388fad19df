"""
ChatGate - Minimal HTTP gateway relaying questions to OpenAI and Google Gemini.

Example:
    >>> from chatgate.adapters import OpenAIClient
    >>> from chatgate.domains.chat import ChatGateway
    >>> outcome = await ChatGateway(OpenAIClient(api_key="sk-...")).handle("Hello")
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
