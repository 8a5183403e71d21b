"""Deadline date parsing and urgency classification."""

import math
from datetime import date, datetime, timezone

from ..models.legal_enums import UrgencyLevel

SECONDS_PER_DAY = 24 * 60 * 60

# Inclusive upper bounds of the urgency bands, in days.
URGENT_WITHIN_DAYS = 7
IMPORTANT_WITHIN_DAYS = 30


def parse_deadline(value: str) -> datetime:
    """
    Parse an ISO 8601 date or datetime into an aware UTC datetime.

    A bare date means midnight UTC, a naive datetime is taken as UTC, and a
    trailing ``Z`` is accepted.

    Raises:
        ValueError: If the value is not a parseable date
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        if "T" not in text and " " not in text:
            parsed_date = date.fromisoformat(text)
            return datetime(parsed_date.year, parsed_date.month, parsed_date.day, tzinfo=timezone.utc)
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"Invalid date: {value!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def days_until(deadline: datetime, now: datetime) -> int:
    """Whole days from ``now`` to ``deadline``, rounded up (negative when past)."""
    seconds = (deadline - now).total_seconds()
    return math.ceil(seconds / SECONDS_PER_DAY)


def classify_urgency(days: int) -> UrgencyLevel:
    """Map a day count onto an urgency band. Boundary values fall in the more urgent band."""
    if days <= URGENT_WITHIN_DAYS:
        return UrgencyLevel.URGENT
    if days <= IMPORTANT_WITHIN_DAYS:
        return UrgencyLevel.IMPORTANT
    return UrgencyLevel.SCHEDULED
