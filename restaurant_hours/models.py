"""Data models for restaurants and their weekly schedules."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time
from types import MappingProxyType

from restaurant_hours.date_utils import weekday_abbr

# Every parsed clock time is pinned to this date so open/close/query values
# compare as datetimes. Closes that roll past midnight land on the next day.
ANCHOR_DATE = date(2000, 1, 1)

# A clock time pinned to ANCHOR_DATE (or the day after, for rolled-over closes)
TimeOfDay = datetime


def anchor(clock: time | datetime) -> TimeOfDay:
    """Pin a clock time to ANCHOR_DATE, dropping any date it carried."""
    if isinstance(clock, datetime):
        clock = clock.time()
    return datetime.combine(ANCHOR_DATE, clock.replace(tzinfo=None))


@dataclass(frozen=True)
class RawRestaurant:
    """A restaurant record exactly as it appears in the data source."""

    name: str
    times: tuple[str, ...]


@dataclass(frozen=True)
class DaySchedule:
    """
    Opening window for a single weekday.

    Note: close is strictly after open. Overnight hours such as
    "10 pm - 2 am" carry a close on the day after the open.
    """

    open: TimeOfDay
    close: TimeOfDay

    def __post_init__(self):
        if self.close <= self.open:
            raise ValueError(
                f"Close {self.close:%H:%M} must be after open {self.open:%H:%M}"
            )

    @property
    def overnight(self) -> bool:
        """True when the window runs past midnight into the next day."""
        return self.close.date() > self.open.date()

    def contains(self, instant: TimeOfDay) -> bool:
        """Strictly-exclusive check: the open and close instants are closed."""
        return self.open < instant < self.close


# Weekday abbreviation -> DaySchedule. Absent days are closed.
Schedule = Mapping[str, DaySchedule]


@dataclass(frozen=True)
class Restaurant:
    """A restaurant with its parsed weekly schedule."""

    name: str
    schedule: Schedule = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mapping so the schedule can't drift after load
        object.__setattr__(self, "schedule", MappingProxyType(dict(self.schedule)))


@dataclass(frozen=True)
class Query:
    """One user lookup: a calendar date and a clock time."""

    date: date
    time: TimeOfDay

    @property
    def weekday(self) -> str:
        return weekday_abbr(self.date)
