"""
Structured outcome of a single HTTP request.

``Ok`` carries the decoded JSON payload, ``Err`` carries one of three failure
kinds. ``str()`` of any failure gives the plain error message returned by
``http_request``.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar, Union

from core.exceptions import RequestFailedException


T = TypeVar("T")

FailureKind = Literal["transport", "status", "shape"]

SHAPE_MISMATCH_MESSAGE = "Failed to parse response to the expected type"


@dataclass(frozen=True)
class TransportFailure:
    """Network, URL or JSON decoding fault, reported by its own message."""
    message: str

    kind: FailureKind = field(default="transport", init=False)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class StatusFailure:
    """Response arrived with a status outside 200-299."""
    status_code: int
    status_text: str

    kind: FailureKind = field(default="status", init=False)

    def __str__(self) -> str:
        return (
            f"Failed to fetch with status {self.status_code} "
            f"and message {self.status_text}"
        )


@dataclass(frozen=True)
class ShapeMismatch:
    """Body decoded, but to null or a bare primitive."""
    kind: FailureKind = field(default="shape", init=False)

    def __str__(self) -> str:
        return SHAPE_MISMATCH_MESSAGE


Failure = Union[TransportFailure, StatusFailure, ShapeMismatch]


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    failure: Failure

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind

    @property
    def message(self) -> str:
        return str(self.failure)


HttpResult = Union[Ok[Any], Err]


def render(result: HttpResult) -> Any:
    """Collapse a result into the decoded value or its error string."""
    if isinstance(result, Ok):
        return result.value
    return result.message


def unwrap(result: HttpResult) -> Any:
    """
    Return the decoded value, or raise for service code that wants an exception.

    Raises:
        RequestFailedException: If the result is an ``Err``
    """
    if isinstance(result, Ok):
        return result.value
    raise RequestFailedException(result.failure)
