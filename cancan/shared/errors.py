"""
Shared error handling for the CanCan authorization engine.
"""

from typing import Dict, Any, Optional


class CanCanError(Exception):
    """Base exception for the authorization engine."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidConditionError(CanCanError, TypeError):
    """Raised when an ability is declared with an unsupported condition."""

    def __init__(self, condition: Any):
        type_name = type(condition).__name__
        super().__init__(
            "INVALID_CONDITION",
            f"Expected condition to be object or function, got {type_name}",
            {"type": type_name}
        )


class AuthorizationError(CanCanError):
    """Authorization-related errors."""

    def __init__(self, message: str = "Authorization error", details: Optional[Dict[str, Any]] = None):
        super().__init__("AUTHORIZATION_ERROR", message, details)
