"""Injectable time sources for handlers.

Handlers never call ``datetime.now()`` directly; they go through a
:class:`Clock` and an :class:`IdGenerator` held by the operation context, so
tests can pin the current time and the generated ids.
"""

from datetime import datetime, timezone
from typing import Optional


class Clock:
    """Wall-clock time source (always timezone-aware UTC)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """Clock frozen at a given instant. Naive instants are treated as UTC."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


class IdGenerator:
    """
    Generates ``<prefix>_<epoch milliseconds>`` identifiers.

    Ids are derived from the clock and are not stored anywhere. Two calls in
    the same millisecond would collide, so the generator bumps the value past
    the last one it issued.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or Clock()
        self._last_millis = 0

    def new_id(self, prefix: str) -> str:
        millis = int(self.clock.now().timestamp() * 1000)
        if millis <= self._last_millis:
            millis = self._last_millis + 1
        self._last_millis = millis
        return f"{prefix}_{millis}"


class CounterIdGenerator(IdGenerator):
    """Deterministic ids (``<prefix>_1``, ``<prefix>_2``, ...) for tests."""

    def __init__(self, start: int = 1):
        super().__init__(clock=None)
        self._next = start

    def new_id(self, prefix: str) -> str:
        value = self._next
        self._next += 1
        return f"{prefix}_{value}"


def isoformat_millis(instant: datetime) -> str:
    """Render an instant as ISO 8601 with millisecond precision and a ``Z`` suffix."""
    utc = instant.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
