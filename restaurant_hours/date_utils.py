"""Shared date and weekday utilities used across the project."""

from datetime import date, datetime

# Standard day-of-week names in order (Monday = 0, Sunday = 6)
DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Mapping from day abbreviation to weekday number (0-6)
DAY_TO_WEEKDAY = {name: i for i, name in enumerate(DAY_NAMES)}

# Free-text day fragments are matched on their first three letters
# ("Tues" -> "Tue", "Thurs" -> "Thu")
DAY_PREFIX_LENGTH = 3


def weekday_abbr(day: date | datetime) -> str:
    """Return the three-letter day name for a date, e.g. "Wed"."""
    return DAY_NAMES[day.weekday()]


def normalize_day(fragment: str) -> str | None:
    """
    Map a free-text day fragment onto its canonical abbreviation.

    Args:
        fragment: Day text from an hours string (e.g. "Mon", "Tues", "Thurs")

    Returns:
        Canonical abbreviation, or None if the fragment names no weekday
    """
    prefix = fragment.strip()[:DAY_PREFIX_LENGTH].title()
    return prefix if prefix in DAY_TO_WEEKDAY else None


def days_in_range(
    start: str, end: str, weekday_order: tuple[str, ...] | list[str] = DAY_NAMES
) -> list[str]:
    """
    Expand an inclusive weekday range, wrapping past the end of the week.

    "Fri-Mon" covers Fri, Sat, Sun and Mon.

    Raises:
        ValueError: If either day is not in weekday_order
    """
    order = list(weekday_order)
    start_index = order.index(start)
    end_index = order.index(end)

    if start_index > end_index:
        return order[start_index:] + order[: end_index + 1]

    return order[start_index : end_index + 1]


def previous_day(day: str, weekday_order: tuple[str, ...] | list[str] = DAY_NAMES) -> str:
    """Return the day before the given one, wrapping Mon back to Sun."""
    order = list(weekday_order)
    return order[(order.index(day) - 1) % len(order)]
