"""
Exceptions raised by the chat admin SDK itself.

Transport and server failures are not wrapped: they reach the caller
exactly as the admin core's HTTP client raised them.
"""

from typing import Any, Dict, Optional


class ChatAdminError(Exception):
    """Base exception for errors raised locally by the SDK."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(ChatAdminError, ValueError):
    """Raised when an argument fails local validation before any request is made."""

    def __init__(self, message: str, argument: Optional[str] = None, value: Any = None):
        details: Dict[str, Any] = {}
        if argument:
            details["argument"] = argument
            details["value"] = value
        super().__init__(message, details)
        self.argument = argument
        self.value = value
