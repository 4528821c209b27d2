from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class WhoIsError(Exception):
    code = "whois_error"


class EmptyInputError(WhoIsError):
    """Raised when the name contains no tokens; no remote call is made."""

    code = "empty_input"

    def __init__(self, message: str = "empty string") -> None:
        super().__init__(message)


class RemoteTransportFailure(WhoIsError):
    code = "remote_transport_failure"

    def __str__(self) -> str:
        return f"remote transport failure: {self.args[0] if self.args else ''}"


class MalformedRemoteResponse(WhoIsError):
    code = "malformed_remote_response"

    def __str__(self) -> str:
        return f"malformed remote response: {self.args[0] if self.args else ''}"


@dataclass
class Result(Generic[T]):
    """Value-or-error returned by the remote client and the transcoder."""

    success: bool
    value: T | None = None
    error: WhoIsError | None = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: WhoIsError) -> "Result[T]":
        return cls(success=False, error=error)

    def unwrap(self) -> T:
        if not self.success:
            raise self.error  # type: ignore[misc]
        return self.value  # type: ignore[return-value]


__all__ = [
    "WhoIsError",
    "EmptyInputError",
    "RemoteTransportFailure",
    "MalformedRemoteResponse",
    "Result",
]
