"""Answer "which restaurants are open at this date and time?"."""

import logging
from collections.abc import Iterable
from datetime import date, datetime, time

from restaurant_hours.availability import is_open
from restaurant_hours.models import Query, Restaurant, TimeOfDay, anchor

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
QUERY_TIME_FORMATS = ("%H:%M", "%I:%M %p")


class InvalidInputError(ValueError):
    """Date or time text could not be parsed."""

    def __init__(self, fields: tuple[str, ...]):
        self.fields = fields
        super().__init__(f"Invalid {' and '.join(fields)}")


def parse_query_date(value: str | date) -> date | None:
    """
    Parse a query date in YYYY-MM-DD form.

    Returns:
        date object or None if parsing fails
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except (AttributeError, ValueError):
        logger.debug("Failed to parse query date: %r", value)
        return None


def parse_query_time(value: str | time | datetime) -> TimeOfDay | None:
    """
    Parse a query time as "15:00" or "3:00 pm" into an anchored TimeOfDay.

    Returns:
        TimeOfDay or None if parsing fails
    """
    if isinstance(value, (time, datetime)):
        return anchor(value)

    for fmt in QUERY_TIME_FORMATS:
        try:
            return anchor(datetime.strptime(value.strip(), fmt))
        except (AttributeError, ValueError):
            continue

    logger.debug("Failed to parse query time: %r", value)
    return None


def check_input(date_value, time_value) -> tuple[str, ...]:
    """
    Report which of the date and time inputs are unparseable.

    Returns:
        Names of the invalid fields ("date", "time"); empty if both are valid
    """
    invalid = []
    if parse_query_date(date_value) is None:
        invalid.append("date")
    if parse_query_time(time_value) is None:
        invalid.append("time")
    return tuple(invalid)


def build_query(date_value, time_value) -> Query:
    """
    Build a Query from date and time input.

    Raises:
        InvalidInputError: Listing every field that failed to parse
    """
    query_date = parse_query_date(date_value)
    query_time = parse_query_time(time_value)

    invalid = tuple(
        field
        for field, parsed in (("date", query_date), ("time", query_time))
        if parsed is None
    )
    if invalid:
        raise InvalidInputError(invalid)

    return Query(date=query_date, time=query_time)


def find_open_restaurants(
    restaurants: Iterable[Restaurant], date_value, time_value
) -> list[Restaurant]:
    """
    Filter restaurants down to those open at the given date and time.

    Input order is preserved; nothing is reordered or deduplicated.

    Args:
        restaurants: Parsed restaurants
        date_value: Query date (date or "YYYY-MM-DD")
        time_value: Query time (time, datetime, "HH:MM" or "h:mm am")

    Returns:
        Open restaurants, possibly empty

    Raises:
        InvalidInputError: If date or time can't be parsed
    """
    query = build_query(date_value, time_value)
    weekday = query.weekday

    matches = [
        restaurant
        for restaurant in restaurants
        if is_open(restaurant.schedule, weekday, query.time)
    ]

    logger.debug(
        "%d restaurants open on %s at %s", len(matches), weekday, f"{query.time:%H:%M}"
    )
    return matches
