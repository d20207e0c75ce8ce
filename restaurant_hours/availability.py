"""Check whether a parsed schedule is open at a given weekday and time."""

from datetime import time, timedelta

from restaurant_hours.date_utils import DAY_NAMES, previous_day
from restaurant_hours.models import Schedule, TimeOfDay, anchor


def is_open(
    schedule: Schedule,
    weekday: str,
    instant: TimeOfDay | time,
    weekday_order: tuple[str, ...] | list[str] = DAY_NAMES,
) -> bool:
    """
    Return True if the schedule is open on weekday at instant.

    Both window ends are exclusive. Besides the weekday's own window, the
    previous day's window is checked when it runs past midnight, so
    "Fri 10 pm - 2 am" is open at Sat 1 am.

    Args:
        schedule: Parsed weekday -> DaySchedule mapping
        weekday: Day abbreviation of the query date (e.g. "Sat")
        instant: Clock time of the query; any date part is replaced by ANCHOR_DATE
        weekday_order: The seven weekday abbreviations in week order
    """
    instant = anchor(instant)

    today = schedule.get(weekday)
    if today and today.contains(instant):
        return True

    if weekday not in weekday_order:
        return False

    yesterday = schedule.get(previous_day(weekday, weekday_order))
    if yesterday and yesterday.overnight:
        return yesterday.contains(instant + timedelta(days=1))

    return False
