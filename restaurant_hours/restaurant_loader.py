"""Load restaurant hours records and parse them into Restaurant objects."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

import requests

from restaurant_hours import config
from restaurant_hours.date_utils import DAY_NAMES
from restaurant_hours.models import RawRestaurant, Restaurant
from restaurant_hours.schedule_parser import TIME_FORMATS, parse_schedule

logger = logging.getLogger(__name__)

REMOTE_SCHEMES = ("http://", "https://")


class LoadError(Exception):
    """The hours source is missing, unreadable, or malformed."""


def load_restaurants(
    source: str | Path | Sequence[dict],
    weekday_order: tuple[str, ...] | list[str] = DAY_NAMES,
    time_formats: tuple[str, ...] = TIME_FORMATS,
) -> list[Restaurant]:
    """
    Load restaurants and parse each one's weekly schedule.

    Args:
        source: JSON file path, http(s) URL, or already decoded records
        weekday_order: The seven weekday abbreviations in week order
        time_formats: strptime formats tried for each clock time

    Returns:
        List of Restaurant objects, in source order

    Raises:
        LoadError: If the source can't be read or a record is malformed
    """
    restaurants = [
        Restaurant(
            name=raw.name,
            schedule=parse_schedule(raw.times, weekday_order, time_formats),
        )
        for raw in load_raw_restaurants(source)
    ]

    logger.info("Loaded %d restaurants", len(restaurants))
    return restaurants


def load_raw_restaurants(source: str | Path | Sequence[dict]) -> list[RawRestaurant]:
    """
    Read and validate restaurant records without parsing their hours.

    Raises:
        LoadError: If the source can't be read or a record is malformed
    """
    if isinstance(source, (str, Path)):
        data = _read_source(source)
    else:
        data = source

    if not isinstance(data, (list, tuple)):
        raise LoadError(
            f"Expected a list of restaurants, got {type(data).__name__}"
        )

    return [_to_raw_restaurant(record, index) for index, record in enumerate(data)]


def _read_source(source: str | Path):
    """Fetch and decode the JSON document behind a path or URL."""
    if isinstance(source, str) and source.startswith(REMOTE_SCHEMES):
        return _fetch_remote(source)

    filepath = Path(source)
    if not filepath.exists():
        error_msg = f"File not found: {filepath}"
        logger.error(error_msg)
        raise LoadError(error_msg)

    try:
        with open(filepath, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise LoadError(f"Could not read {filepath}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise LoadError(f"Invalid JSON in {filepath}: {e}") from e


def _fetch_remote(url: str):
    try:
        logger.info("Fetching restaurant hours from %s", url)
        response = requests.get(url, timeout=config.HTTP_TIMEOUT)
        response.raise_for_status()
        return response.json()
    except requests.Timeout as e:
        raise LoadError(f"Request timed out: {url}") from e
    except requests.RequestException as e:
        raise LoadError(f"Request failed: {e}") from e
    except ValueError as e:
        raise LoadError(f"Invalid JSON from {url}: {e}") from e


def _to_raw_restaurant(record, index: int) -> RawRestaurant:
    if not isinstance(record, dict):
        raise LoadError(f"Record {index} is not an object")

    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        raise LoadError(f"Record {index} is missing a name")

    times = record.get("times")
    if not isinstance(times, list) or not all(isinstance(t, str) for t in times):
        raise LoadError(f"Record {index} ({name}) has no list of hours strings")

    return RawRestaurant(name=name, times=tuple(times))
