"""Small helpers shared across the package."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import TypeVar

T = TypeVar("T")

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def from_unix_timestamp(value: str | int) -> datetime:
    """Parse a base-10 count of seconds since the epoch into an aware UTC datetime."""
    text = str(value)
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid unix timestamp: {value!r}")
    seconds = int(text)
    if not _INT64_MIN <= seconds <= _INT64_MAX:
        raise ValueError(f"unix timestamp out of range: {value!r}")
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"unix timestamp out of range: {value!r}") from exc


def get_item_or_none(items: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    """Return the first item matching ``predicate``, or None."""
    return next((item for item in items if predicate(item)), None)


def filter_items(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return every item matching ``predicate``, in order."""
    return [item for item in items if predicate(item)]