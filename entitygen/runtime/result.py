"""Outcome type stored in fallible fields of generated entities."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, TypeAlias, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class FetchError(IntEnum):
    """Uniform error kind reported by the fetch layer."""

    NOT_FETCHED = 0  # Placeholder until the first update()
    NOT_READY = 1  # The data handle behind an API view is unavailable
    UNKNOWN_CODE = 2  # Raw integer does not name a declared enum value
    UNDEFINED = 3
    NOT_IMPLEMENTED = 4
    INVALID_PARAMETER = 5
    INVALID_ID = 6
    NOT_CONNECTED = 7
    OUT_OF_RANGE = 8  # Raw integer does not fit the converted type


class FetchFailed(RuntimeError):
    """Raised when a value that must not fail could not be fetched."""

    def __init__(self, error: FetchError) -> None:
        super().__init__(f"fetch failed: {error.name}")
        self.error = error


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successfully fetched value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def and_then(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """A failed fetch, carrying the provider's error kind."""

    error: FetchError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[Any], Any]) -> "Err":
        return self

    def and_then(self, fn: Callable[[Any], Any]) -> "Err":
        return self

    def unwrap(self) -> Any:
        raise FetchFailed(self.error)

    def unwrap_or(self, default: U) -> U:
        return default


Result: TypeAlias = Ok[T] | Err
