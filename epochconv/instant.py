"""Exact point-in-time value measured from the Unix epoch.

Instants are kept as integer seconds plus a nanosecond remainder so that
nanosecond inputs survive without float rounding. All calendar views are
UTC.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

NANOS_PER_SECOND = 1_000_000_000

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True)
class Instant:
    seconds: int
    nanos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanos < NANOS_PER_SECOND:
            raise ValueError(f"nanos must be in [0, {NANOS_PER_SECOND}), got {self.nanos}")

    @classmethod
    def from_count(cls, count: int, nanos_per_unit: int) -> Instant:
        """Build an instant from ``count`` units of ``nanos_per_unit`` nanoseconds each."""
        seconds, nanos = divmod(count * nanos_per_unit, NANOS_PER_SECOND)
        return cls(seconds, nanos)

    @property
    def epoch_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    def to_datetime(self) -> datetime:
        """UTC datetime truncated to whole seconds.

        Raises:
            OverflowError: If the instant falls outside years 1-9999.
        """
        return EPOCH + timedelta(seconds=self.seconds)

    def __str__(self) -> str:
        return f"{self.seconds}s+{self.nanos}ns"


__all__ = ["EPOCH", "Instant", "NANOS_PER_SECOND"]
