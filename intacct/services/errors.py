"""
Intacct client error handling

Specific error types with readable messages and debugging context.
Business errors reported by the gateway are not raised; they are returned
inside operation results as IntacctServiceError descriptors.
"""
from typing import Optional, Dict, Any, List
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for client handling."""
    # Caller errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_CONFIG = "INVALID_CONFIG"

    # Gateway errors
    TRANSPORT_FAILED = "TRANSPORT_FAILED"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"


class IntacctError(Exception):
    """Base exception with structured error info."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        detail: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.detail = detail
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "error": self.code.value,
            "message": self.message
        }
        if self.detail:
            result["detail"] = self.detail
        if self.context:
            result["context"] = self.context
        return result


class InvalidArgumentError(IntacctError, ValueError):
    """A required argument was missing or unusable."""

    def __init__(self, argument: str, detail: str = "Value is required"):
        super().__init__(
            code=ErrorCode.INVALID_ARGUMENT,
            message=f"Invalid argument '{argument}'",
            detail=detail,
            context={"argument": argument}
        )


class ConfigError(IntacctError):
    """Error in configuration."""

    def __init__(self, field: str, detail: str):
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=f"Invalid configuration for '{field}'",
            detail=detail,
            context={"field": field}
        )


class TransportError(IntacctError):
    """The gateway could not be reached or answered with an HTTP error."""

    def __init__(self, endpoint: str, detail: str, status_code: Optional[int] = None):
        context: Dict[str, Any] = {"endpoint": endpoint}
        if status_code is not None:
            context["status_code"] = status_code
        super().__init__(
            code=ErrorCode.TRANSPORT_FAILED,
            message=f"Intacct gateway request to {endpoint} failed",
            detail=detail,
            context=context
        )


class MalformedResponseError(IntacctError):
    """The gateway answered with XML the client cannot interpret."""

    def __init__(self, detail: str, element: Optional[str] = None):
        super().__init__(
            code=ErrorCode.MALFORMED_RESPONSE,
            message="Intacct response could not be parsed",
            detail=detail,
            context={"element": element} if element else None
        )


class AuthenticationError(IntacctError):
    """Intacct refused the supplied credentials."""

    def __init__(self, errors: List[Any]):
        self.errors = list(errors)
        first = self.errors[0] if self.errors else None
        super().__init__(
            code=ErrorCode.AUTHENTICATION_FAILED,
            message="Intacct rejected the session request",
            detail=getattr(first, "description", None),
            context={"error_numbers": [getattr(e, "error_no", None) for e in self.errors]}
        )
