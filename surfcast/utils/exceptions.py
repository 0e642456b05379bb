"""Custom exception hierarchy for the surfcast project."""

from typing import Any


class SurfcastError(Exception):
    """Base exception for all surfcast errors.

    Attributes:
        message: Human-readable error message.
        context: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Format error message with context."""
        if not self.context:
            return self.message

        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} | Context: {context_str}"


class ConfigValidationError(SurfcastError):
    """Raised when client configuration cannot be loaded or validated.

    Example context:
        - path: Config file being read
        - section: Config section that was expected
        - error: Underlying validation error message
    """


class InternalError(SurfcastError):
    """Common category for failures talking to an upstream forecast API.

    Subclasses set ``kind`` so callers can branch on the failure category
    without matching on message text.

    Attributes:
        kind: Failure category discriminant.
        status: HTTP status code, if the remote service answered.
        body: Decoded response body, if the remote service answered.
        cause: The originating exception.
    """

    kind: str = "internal"

    def __init__(
        self,
        message: str,
        status: int | None = None,
        body: Any = None,
        cause: BaseException | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.status = status
        self.body = body
        self.cause = cause
        super().__init__(message, context=context)
