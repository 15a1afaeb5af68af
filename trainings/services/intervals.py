"""Half-open time-of-day intervals used for venue conflict detection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from trainings.domain.errors import InvalidInterval


@dataclass(frozen=True)
class TimeInterval:
    """A ``[start, end)`` range of local times on a single date.

    Sessions never cross midnight, so ``start`` must be strictly before
    ``end``; zero-length intervals are rejected as well.
    """

    start: time
    end: time

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise InvalidInterval(self.start, self.end)

    def overlaps(self, other: TimeInterval) -> bool:
        """Return True if the two intervals share any instant.

        Exact boundary touches (one ends when the other starts) do not overlap.
        """
        return self.start < other.end and other.start < self.end

    @property
    def duration(self) -> timedelta:
        anchor = date.min
        return datetime.combine(anchor, self.end) - datetime.combine(anchor, self.start)
