"""
ConversionResult: explicit success/failure values for every codec call

Codecs never raise on bad user input. They return either Success(value) or
Failure(kind, message), and the caller decides how to display or escalate.

INVARIANTS:
1. Success and Failure are immutable (frozen dataclasses)
2. Failure.message is always human-readable and non-empty
3. unwrap() is the only place a Failure turns into an exception
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Kind of a conversion failure."""

    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_WORD = "INVALID_WORD"
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_NUMBER = "INVALID_NUMBER"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConversionError(ValueError):
    """
    Raised by Failure.unwrap() for callers that prefer exception flow.

    Attributes:
        kind: ErrorKind of the failure that was unwrapped
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


# =============================================================================
# RESULT TYPES
# =============================================================================


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful conversion carrying the converted value."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))


@dataclass(frozen=True)
class Failure:
    """Failed conversion: what went wrong and the message to show the user."""

    kind: ErrorKind
    message: str

    def __post_init__(self):
        if not self.message:
            raise ValueError("Failure message must not be empty")

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise ConversionError(self.kind, self.message)

    def map(self, fn: Callable) -> "Failure":
        return self


ConversionResult = Union[Success[T], Failure]


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def success(value: T) -> Success[T]:
    return Success(value)


def failure(kind: ErrorKind, message: str) -> Failure:
    return Failure(kind, message)
