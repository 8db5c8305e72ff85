"""Error signal definitions for metadata operations.

Every client operation reports its outcome as an ErrorSignal: a numeric
code and a human-readable reason, with code 0 meaning success. Operations
that also produce a value return a Result pairing the value with its
signal. Codes below 100 are client-side codes; codes of 100 and above
are HTTP status codes returned by the service.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")

# Client-side error codes
OK_CODE = 0
PROFILES_DIRECTORY_CODE = 12
HTTP_GET_ERROR_CODE = 14
HTTP_POST_ERROR_CODE = 15
HTTP_POSTFILE_ERROR_CODE = 16
HTTP_PUT_ERROR_CODE = 17
PROFILE_PARSE_ERROR_CODE = 18
HTTP_DELETE_ERROR_CODE = 19


class ErrorKind(str, Enum):
    """Broad classification of an error signal."""

    OK = "ok"
    TRANSPORT = "transport"
    PROFILE_PARSE = "profile_parse"
    PROFILES_DIRECTORY = "profiles_directory"


@dataclass(frozen=True)
class ErrorSignal:
    """Outcome of a metadata operation.

    Attributes:
        code: 0 on success, an HTTP status or a client-side error code otherwise.
        reason: Human-readable description of the outcome.
    """

    code: int
    reason: str

    @property
    def ok(self) -> bool:
        """True if the signal reports success."""
        return self.code == OK_CODE

    @property
    def kind(self) -> ErrorKind:
        """Classify the signal."""
        if self.code == OK_CODE:
            return ErrorKind.OK
        if self.code == PROFILE_PARSE_ERROR_CODE:
            return ErrorKind.PROFILE_PARSE
        if self.code == PROFILES_DIRECTORY_CODE:
            return ErrorKind.PROFILES_DIRECTORY
        return ErrorKind.TRANSPORT

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {"code": self.code, "reason": self.reason, "kind": self.kind.value}


OK = ErrorSignal(OK_CODE, "Success")
PROFILE_PARSE_ERROR = ErrorSignal(
    PROFILE_PARSE_ERROR_CODE, "Error while parsing device profile"
)
PROFILES_DIRECTORY_ERROR = ErrorSignal(
    PROFILES_DIRECTORY_CODE, "Problem scanning profiles directory"
)


@dataclass
class Result(Generic[T]):
    """A value produced by an operation together with its error signal.

    The value may be None even when the signal is OK (for lookups where
    the service reports the entity as absent), and may be present when
    the signal is an error (for creates, which always hand back the
    locally built object).
    """

    value: T | None = None
    error: ErrorSignal = field(default=OK)

    @property
    def ok(self) -> bool:
        """True if the operation succeeded."""
        return self.error.ok


def http_status_error(status: int, phrase: str, message: str = "") -> ErrorSignal:
    """Create a transport error for a non-2xx HTTP response.

    Args:
        status: HTTP status code.
        phrase: HTTP reason phrase.
        message: Optional message from the response body.

    Returns:
        ErrorSignal carrying the HTTP status as its code.
    """
    reason = f"HTTP {status} {phrase}".rstrip()
    if message:
        reason = f"{reason}: {message}"
    return ErrorSignal(status, reason)


def transport_error(code: int, message: str) -> ErrorSignal:
    """Create a transport error for a request that produced no response."""
    return ErrorSignal(code, message)


__all__ = [
    "ErrorKind",
    "ErrorSignal",
    "HTTP_DELETE_ERROR_CODE",
    "HTTP_GET_ERROR_CODE",
    "HTTP_POSTFILE_ERROR_CODE",
    "HTTP_POST_ERROR_CODE",
    "HTTP_PUT_ERROR_CODE",
    "OK",
    "OK_CODE",
    "PROFILES_DIRECTORY_CODE",
    "PROFILES_DIRECTORY_ERROR",
    "PROFILE_PARSE_ERROR",
    "PROFILE_PARSE_ERROR_CODE",
    "Result",
    "http_status_error",
    "transport_error",
]
