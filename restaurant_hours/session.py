"""Session state: the restaurant list loaded once and queried many times."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from restaurant_hours.models import Restaurant
from restaurant_hours.query import find_open_restaurants
from restaurant_hours.restaurant_loader import load_restaurants


@dataclass(frozen=True)
class RestaurantSession:
    """
    Restaurants loaded for one run of the app.

    Built once after the hours source is read, then passed to every query.
    Queries never modify it.
    """

    restaurants: tuple[Restaurant, ...]

    @classmethod
    def from_source(cls, source: str | Path | Sequence[dict]) -> "RestaurantSession":
        """Load a session; LoadError propagates to the caller."""
        return cls(restaurants=tuple(load_restaurants(source)))

    @property
    def names(self) -> list[str]:
        return [restaurant.name for restaurant in self.restaurants]

    def __len__(self) -> int:
        return len(self.restaurants)

    def find_open(self, date_value, time_value) -> list[Restaurant]:
        """Restaurants open at the given date and time, in load order."""
        return find_open_restaurants(self.restaurants, date_value, time_value)

    def find_open_now(self, now: datetime | None = None) -> list[Restaurant]:
        """Restaurants open at the current local date and time."""
        if now is None:
            now = datetime.now()
        return self.find_open(now.date(), now.time())
