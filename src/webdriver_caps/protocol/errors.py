"""WebDriver error types and error codes."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """
    Error codes surfaced by capability processing.

    Values are the wire names used in the ``error`` field of a
    WebDriver error response.
    """

    INVALID_ARGUMENT = "invalid argument"
    INVALID_TYPE = "invalid type"
    SESSION_NOT_CREATED = "session not created"

    @property
    def http_status(self) -> int:
        """HTTP status the protocol layer should answer with."""
        return HTTP_STATUS[self]

    @classmethod
    def from_string(cls, value: str) -> "ErrorCode":
        """Parse an error code from its wire name."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown error code: {value}")


HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_ARGUMENT: 400,
    ErrorCode.INVALID_TYPE: 400,
    ErrorCode.SESSION_NOT_CREATED: 500,
}


@dataclass
class WebDriverError(Exception):
    """
    Capability processing error.

    Raised by every validation and negotiation step. The protocol layer
    is responsible for turning it into an error response.
    """

    code: ErrorCode
    message: str
    data: dict[str, Any] | None = None

    def __post_init__(self):
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a WebDriver error response body."""
        error: dict[str, Any] = {
            "error": self.code.value,
            "message": self.message,
            "stacktrace": "",
        }
        if self.data is not None:
            error["data"] = self.data
        return error

    @classmethod
    def from_dict(cls, error: dict[str, Any]) -> "WebDriverError":
        """Create from a WebDriver error response body."""
        return cls(
            code=ErrorCode.from_string(error.get("error", "invalid argument")),
            message=error.get("message", "Unknown error"),
            data=error.get("data"),
        )

    @classmethod
    def invalid_argument(cls, message: str) -> "WebDriverError":
        """Create an invalid argument error."""
        return cls(code=ErrorCode.INVALID_ARGUMENT, message=message)

    @classmethod
    def invalid_type(cls, message: str) -> "WebDriverError":
        """Create an invalid type error."""
        return cls(code=ErrorCode.INVALID_TYPE, message=message)

    @classmethod
    def unrecognized_capability(cls, name: str) -> "UnrecognizedCapabilityError":
        """Create an error for a capability name nobody knows how to validate."""
        return UnrecognizedCapabilityError(
            code=ErrorCode.INVALID_ARGUMENT,
            message=f"Unrecognized capability: {name}",
            data={"capability": name},
        )

    @classmethod
    def merge_conflict(cls, name: str) -> "WebDriverError":
        """Create an error for a key present in both merge operands."""
        return cls(
            code=ErrorCode.INVALID_ARGUMENT,
            message=f"Unable to merge capability {name}",
            data={"capability": name},
        )

    @classmethod
    def no_matching_capabilities(cls) -> "WebDriverError":
        """Create an error for a request where no candidate matched."""
        return cls(
            code=ErrorCode.SESSION_NOT_CREATED,
            message="No matching capabilities",
        )

    def __str__(self) -> str:
        base = f"WebDriverError({self.code.value}): {self.message}"
        if self.data:
            base += f" {self.data}"
        return base

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code}, "
            f"message={self.message!r}, data={self.data})"
        )


@dataclass(repr=False)
class UnrecognizedCapabilityError(WebDriverError):
    """A capability name is neither built in nor a registered extension."""

    @property
    def capability(self) -> str:
        """The offending capability name."""
        return (self.data or {}).get("capability", "")
