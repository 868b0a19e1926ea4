"""
Exception classes for the shoppe data-access layer.

Every failure of a remote call surfaces as a ``NetworkFailure`` subclass.
Clients translate transport, status and decoding problems into these once;
the repository and its consumers receive them unchanged.
"""

from typing import Any, Dict, Optional

# Messages for status codes without a dedicated exception class
STATUS_MESSAGES: Dict[int, str] = {
    401: "Authentication failed",
    403: "Access denied",
    404: "Resource not found",
    429: "Too many requests. Please try again later.",
}


class NetworkFailure(Exception):
    """
    Base exception for every failed remote call.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code if a response was received
        details: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class TransportFailure(NetworkFailure):
    """Raised when no response was received (DNS, connect, TLS, timeout)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(
            f"Unable to reach {url}: {reason}",
            details={"url": url, "reason": reason},
        )


class ServerError(NetworkFailure):
    """Raised when the server answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        if message is None:
            if status_code in STATUS_MESSAGES:
                message = STATUS_MESSAGES[status_code]
            elif 500 <= status_code < 600:
                message = "Server error. Please try again later."
            else:
                message = f"Network error occurred: HTTP {status_code}"
        super().__init__(message, status_code=status_code, details=details)


class NotFoundError(ServerError):
    """Raised when the requested resource does not exist."""

    def __init__(self, resource: str, identifier: Any) -> None:
        super().__init__(
            404,
            f"{resource} not found: {identifier}",
            details={"resource": resource, "identifier": str(identifier)},
        )
        self.resource = resource
        self.identifier = identifier


class ValidationError(ServerError):
    """Raised when the server rejects a create or update payload."""

    def __init__(self, status_code: int, errors: Any = None) -> None:
        message = "Request rejected by server"
        if isinstance(errors, dict):
            parts = []
            for field, problems in errors.items():
                if isinstance(problems, list):
                    problems = ", ".join(str(problem) for problem in problems)
                parts.append(f"{field} {problems}")
            message += ": " + "; ".join(parts)
        elif errors:
            message += f": {errors}"
        super().__init__(status_code, message, details={"errors": errors})
        self.errors = errors


class DecodeFailure(NetworkFailure):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, expected: str, reason: str) -> None:
        super().__init__(
            f"Could not decode {expected}: {reason}",
            details={"expected": expected, "reason": reason},
        )
