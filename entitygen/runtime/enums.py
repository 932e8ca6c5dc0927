"""Checked conversion of raw provider codes into enums."""

from __future__ import annotations

from enum import IntEnum
from typing import Self

from .result import Err, FetchError, Ok, Result


class DecodeError(ValueError):
    """Raised when a raw code does not match any declared enum value."""


class RawEnum(IntEnum):
    """Base class for enums that travel as raw integers.

    Every member's value is the exact code used by the provider, so the
    conversion is a lookup instead of a cast:

    Example:
        class HostbannerMode(RawEnum):
            NO_ADJUST = 0
            IGNORE_ASPECT = 1
            KEEP_ASPECT = 2
    """

    @classmethod
    def from_raw(cls, raw: int) -> Self:
        """Return the member whose code equals ``raw``."""
        member = cls._value2member_map_.get(raw)
        if member is None:
            raise DecodeError(f"{raw} is not a valid {cls.__name__} code")
        return member  # type: ignore[return-value]

    @classmethod
    def decode(cls, raw: int) -> Result[Self]:
        """Like from_raw, but report unknown codes as a fetch error."""
        try:
            return Ok(cls.from_raw(raw))
        except DecodeError:
            return Err(FetchError.UNKNOWN_CODE)

    def to_raw(self) -> int:
        return int(self.value)
