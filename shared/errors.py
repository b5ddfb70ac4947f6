"""
Shared error handling for the Actions Gateway.

Every failure that reaches the HTTP boundary is rendered as an envelope of
the form ``{"error": <category>, "details": <message>, ...context}``.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


FAILED_TO_PROCESS = "Failed to process request"


class ErrorKind(str, Enum):
    """Classification attached to tool failures."""

    VALIDATION = "validation"
    UPSTREAM = "upstream"


class GatewayException(Exception):
    """Base exception for the Actions Gateway."""

    status_code = 500

    def __init__(
        self,
        error: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.error = error
        self.message = message
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> Dict[str, Any]:
        """Convert to an error envelope."""
        payload: Dict[str, Any] = {"error": self.error, "details": self.message}
        payload.update(self.details)
        return payload


class AuthenticationError(GatewayException):
    """Shared-secret authentication errors."""

    status_code = 401

    def __init__(self, received: Optional[str], expected: str):
        super().__init__("Unauthorized", "Invalid or missing API key")
        self.received = received
        self.expected = expected

    def to_response(self) -> Dict[str, Any]:
        # The expected key is echoed back; callers rely on this shape.
        return {"error": self.error, "received": self.received, "expected": self.expected}


class ValidationError(GatewayException):
    """Missing or malformed tool parameters."""

    status_code = 400
    kind = ErrorKind.VALIDATION

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("Invalid request", message, details)


class ExternalServiceError(GatewayException):
    """Upstream API failures."""

    status_code = 500
    kind = ErrorKind.UPSTREAM

    def __init__(self, service: str, message: str = "External service error", details: Optional[Dict[str, Any]] = None):
        self.service = service
        super().__init__(FAILED_TO_PROCESS, message, details)


class ToolNotFoundError(GatewayException):
    """Raised when the requested tool is not registered."""

    status_code = 400

    def __init__(self, tool: Optional[str], available_tools: List[str]):
        self.tool = tool
        self.available_tools = list(available_tools)
        super().__init__("Tool not found", f"Unknown tool: {tool}")

    def to_response(self) -> Dict[str, Any]:
        return {"error": self.error, "availableTools": self.available_tools}


class ToolExecutionError(GatewayException):
    """A tool handler failed; carries the classified status code."""

    def __init__(self, tool: str, message: str, kind: ErrorKind):
        self.tool = tool
        self.kind = kind
        status_code = 400 if kind is ErrorKind.VALIDATION else 500
        super().__init__(FAILED_TO_PROCESS, message, status_code=status_code)
