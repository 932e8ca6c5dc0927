"""Conversions from raw provider integers to richer Python values."""

from datetime import UTC, datetime, timedelta

from .result import Err, FetchError, Ok, Result


def as_duration(seconds: int) -> Result[timedelta]:
    """Raw integer seconds to a duration, OUT_OF_RANGE if it does not fit."""
    try:
        return Ok(timedelta(seconds=seconds))
    except (OverflowError, ValueError):
        return Err(FetchError.OUT_OF_RANGE)


def as_timestamp(seconds: int) -> Result[datetime]:
    """Raw integer seconds since the epoch to an aware UTC datetime.

    Sentinels such as 2**64 - 1 lie outside what the platform can represent
    and are reported as OUT_OF_RANGE.
    """
    try:
        return Ok(datetime.fromtimestamp(seconds, tz=UTC))
    except (OverflowError, OSError, ValueError):
        return Err(FetchError.OUT_OF_RANGE)


def as_bool(raw: int) -> bool:
    return raw != 0
