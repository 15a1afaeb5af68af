"""Rolling booking window: no past dates, nothing beyond the horizon."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from trainings.config import Settings, get_settings
from trainings.domain.errors import BeyondHorizon, PastDate
from trainings.domain.models import CallerRole


@dataclass(frozen=True)
class BookingWindowPolicy:
    """Accepts dates from ``today`` up to and including ``today + horizon``."""

    horizon: timedelta
    role: CallerRole = CallerRole.COACH

    def bounds(self, today: date | None = None) -> tuple[date, date]:
        min_date = today or date.today()
        return min_date, min_date + self.horizon

    def validate(self, day: date, today: date | None = None) -> None:
        """Raise ``PastDate`` or ``BeyondHorizon`` if *day* is not bookable."""
        min_date, max_date = self.bounds(today)
        if day < min_date:
            raise PastDate(day, min_date)
        if day > max_date:
            raise BeyondHorizon(day, max_date)


def policy_for(role: CallerRole, settings: Settings) -> BookingWindowPolicy:
    """Build the window policy for a caller role from configuration."""
    if role == CallerRole.ADMIN:
        days = settings.ADMIN_HORIZON_DAYS
    else:
        days = settings.COACH_HORIZON_DAYS
    return BookingWindowPolicy(horizon=timedelta(days=days), role=role)


def policies_from_settings(settings: Settings) -> dict[CallerRole, BookingWindowPolicy]:
    return {role: policy_for(role, settings) for role in CallerRole}


def default_policies() -> dict[CallerRole, BookingWindowPolicy]:
    """Policies built from the process-wide settings."""
    return policies_from_settings(get_settings())
