"""Parser for free-text weekly hours strings.

Turns a restaurant's list of hours clauses such as "Mon-Fri 11 am - 9 pm" or
"Mon-Thu, Sun 11:30 am - 10 pm" into a mapping from weekday abbreviation to
its opening window.
"""

import logging
import re
from datetime import datetime, timedelta

from restaurant_hours.date_utils import DAY_NAMES, days_in_range, normalize_day
from restaurant_hours.models import DaySchedule, Schedule, TimeOfDay, anchor

logger = logging.getLogger(__name__)

# Formats tried, in order, for a single clock time ("11:30 am", "9 pm")
TIME_FORMATS = ("%I:%M %p", "%I %p")

# Separator between opening and closing time
TIME_RANGE_SEPARATOR = " - "

_CLOCK = r"\d{1,2}(?::\d{2})? (?:am|pm)"
TIME_RANGE_PATTERN = re.compile(
    rf"{_CLOCK}{TIME_RANGE_SEPARATOR}{_CLOCK}", re.IGNORECASE
)

# Day clause tokens: "Mon-Fri" (range) and "Sun" (lone day)
DAY_RANGE_TOKEN = re.compile(r"^([A-Z][A-Za-z]+)-([A-Z][A-Za-z]+)$")
LONE_DAY_TOKEN = re.compile(r"^[A-Z][A-Za-z]+$")
TOKEN_SEPARATOR = re.compile(r"[,\s]+")

# "Mon - Wed" is the same range as "Mon-Wed"
SPACED_HYPHEN = re.compile(r"\s*-\s*")


def parse_schedule(
    hour_strings: list[str] | tuple[str, ...],
    weekday_order: tuple[str, ...] | list[str] = DAY_NAMES,
    time_formats: tuple[str, ...] = TIME_FORMATS,
) -> Schedule:
    """
    Build a weekday -> DaySchedule mapping from raw hours strings.

    Strings are applied in order, so a later string overwrites any day an
    earlier one already assigned.

    Args:
        hour_strings: Hours clauses, e.g. ["Mon-Fri 11 am - 9 pm", "Sat 10 am - 2 pm"]
        weekday_order: The seven weekday abbreviations in week order
        time_formats: strptime formats tried for each clock time

    Returns:
        Dict keyed by weekday abbreviation. Days with no clause are absent.
    """
    schedule: dict[str, DaySchedule] = {}

    for hours in hour_strings:
        day_schedule, day_clause = _parse_time_range(hours, time_formats)
        if day_schedule is None:
            continue

        days = _classify_days(day_clause, weekday_order)
        if not days:
            logger.debug("No weekday found in hours string, skipping: %r", hours)
            continue

        for day in days:
            schedule[day] = day_schedule

    return schedule


def _parse_time_range(
    hours: str, time_formats: tuple[str, ...]
) -> tuple[DaySchedule | None, str]:
    """
    Extract the opening window and the remaining day clause from a string.

    Returns:
        Tuple of (DaySchedule, day clause), or (None, hours) if the string
        has no parseable time range
    """
    match = TIME_RANGE_PATTERN.search(hours)
    if not match:
        logger.warning("No time range in hours string: %r", hours)
        return (None, hours)

    open_text, close_text = match.group(0).split(TIME_RANGE_SEPARATOR)
    opens = parse_clock(open_text, time_formats)
    closes = parse_clock(close_text, time_formats)
    if opens is None or closes is None:
        return (None, hours)

    # Close at or before open means the window runs past midnight
    if closes <= opens:
        closes += timedelta(days=1)

    day_clause = f"{hours[: match.start()]} {hours[match.end() :]}"
    return (DaySchedule(open=opens, close=closes), day_clause)


def parse_clock(
    text: str, time_formats: tuple[str, ...] = TIME_FORMATS
) -> TimeOfDay | None:
    """
    Parse a clock time like "11 am" or "9:30 pm" into an anchored TimeOfDay.

    Returns:
        TimeOfDay or None if no format matches
    """
    for fmt in time_formats:
        try:
            return anchor(datetime.strptime(text.strip(), fmt))
        except ValueError:
            continue

    logger.warning("Failed to parse clock time: %s", text)
    return None


def _classify_days(
    day_clause: str, weekday_order: tuple[str, ...] | list[str]
) -> list[str]:
    """
    Tokenise a day clause and resolve the weekdays it covers.

    Only the first day-range token counts; every lone-day token counts.
    Range days come first so they are assigned before lone days.
    """
    range_days: list[str] = []
    lone_days: list[str] = []
    seen_range = False

    day_clause = SPACED_HYPHEN.sub("-", day_clause.strip())
    for token in TOKEN_SEPARATOR.split(day_clause):
        if not token:
            continue

        range_match = DAY_RANGE_TOKEN.match(token)
        if range_match:
            if seen_range:
                logger.debug("Ignoring extra day range %r", token)
                continue
            seen_range = True
            range_days = _expand_range(*range_match.groups(), weekday_order)
        elif LONE_DAY_TOKEN.match(token):
            day = normalize_day(token)
            if day in weekday_order:
                lone_days.append(day)
            else:
                logger.debug("Ignoring non-weekday token %r", token)

    return range_days + lone_days


def _expand_range(
    start_text: str, end_text: str, weekday_order: tuple[str, ...] | list[str]
) -> list[str]:
    start = normalize_day(start_text)
    end = normalize_day(end_text)
    if start not in weekday_order or end not in weekday_order:
        logger.warning("Unknown weekday in range %s-%s", start_text, end_text)
        return []
    return days_in_range(start, end, weekday_order)
