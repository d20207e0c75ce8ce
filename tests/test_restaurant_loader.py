"""Tests for the restaurant loader."""

import json

import pytest
import requests

from restaurant_hours import restaurant_loader
from restaurant_hours.models import RawRestaurant
from restaurant_hours.restaurant_loader import (
    LoadError,
    load_raw_restaurants,
    load_restaurants,
)

RECORDS = [
    {"name": "Bida Manda", "times": ["Mon-Thu, Sun 11:30 am - 10 pm", "Fri-Sat 11:30 am - 11 pm"]},
    {"name": "Dashi", "times": ["Fri 10 pm - 2 am"]},
]


@pytest.fixture
def hours_file(tmp_path):
    filepath = tmp_path / "rest_hours.json"
    filepath.write_text(json.dumps(RECORDS), encoding="utf-8")
    return filepath


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class TestLoadRestaurants:
    """Tests for load_restaurants function."""

    def test_load_from_file(self, hours_file):
        restaurants = load_restaurants(hours_file)

        assert [r.name for r in restaurants] == ["Bida Manda", "Dashi"]
        assert set(restaurants[0].schedule) == set(
            ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
        )
        assert list(restaurants[1].schedule) == ["Fri"]

    def test_load_from_string_path(self, hours_file):
        assert len(load_restaurants(str(hours_file))) == 2

    def test_load_from_records(self):
        restaurants = load_restaurants(RECORDS)
        assert [r.name for r in restaurants] == ["Bida Manda", "Dashi"]

    def test_empty_source(self, tmp_path):
        """Test that an empty list is a valid, empty source."""
        filepath = tmp_path / "empty.json"
        filepath.write_text("[]", encoding="utf-8")

        assert load_restaurants(filepath) == []

    def test_schedules_are_read_only(self):
        restaurant = load_restaurants(RECORDS)[1]
        with pytest.raises(TypeError):
            restaurant.schedule["Sat"] = restaurant.schedule["Fri"]

    def test_load_from_url(self, monkeypatch):
        """Test that http(s) sources are fetched with requests."""
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return FakeResponse(RECORDS)

        monkeypatch.setattr(restaurant_loader.requests, "get", fake_get)

        restaurants = load_restaurants("https://example.com/rest_hours.json")

        assert [r.name for r in restaurants] == ["Bida Manda", "Dashi"]
        assert calls[0][0] == "https://example.com/rest_hours.json"


class TestLoadErrors:
    """Tests for malformed or unreadable sources."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError, match="File not found"):
            load_restaurants(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        filepath = tmp_path / "broken.json"
        filepath.write_text("[{", encoding="utf-8")

        with pytest.raises(LoadError, match="Invalid JSON"):
            load_restaurants(filepath)

    def test_top_level_not_a_list(self):
        with pytest.raises(LoadError, match="Expected a list"):
            load_restaurants({"name": "Dashi", "times": []})

    def test_record_not_an_object(self):
        with pytest.raises(LoadError, match="Record 0 is not an object"):
            load_restaurants(["Dashi"])

    def test_missing_name(self):
        """Test that a record without a name fails the whole load."""
        records = RECORDS + [{"times": ["Sun 8 am - 10 pm"]}]

        with pytest.raises(LoadError, match="Record 2 is missing a name"):
            load_restaurants(records)

    def test_blank_name(self):
        with pytest.raises(LoadError, match="missing a name"):
            load_restaurants([{"name": "  ", "times": []}])

    def test_missing_times(self):
        with pytest.raises(LoadError, match="no list of hours strings"):
            load_restaurants([{"name": "Dashi"}])

    def test_times_not_strings(self):
        with pytest.raises(LoadError, match="no list of hours strings"):
            load_restaurants([{"name": "Dashi", "times": [42]}])

    def test_http_error(self, monkeypatch):
        monkeypatch.setattr(
            restaurant_loader.requests,
            "get",
            lambda url, timeout: FakeResponse([], status_code=404),
        )

        with pytest.raises(LoadError, match="Request failed"):
            load_restaurants("http://example.com/rest_hours.json")

    def test_timeout(self, monkeypatch):
        def fake_get(url, timeout):
            raise requests.Timeout("slow")

        monkeypatch.setattr(restaurant_loader.requests, "get", fake_get)

        with pytest.raises(LoadError, match="timed out"):
            load_restaurants("https://example.com/rest_hours.json")

    def test_remote_invalid_json(self, monkeypatch):
        monkeypatch.setattr(
            restaurant_loader.requests,
            "get",
            lambda url, timeout: FakeResponse(ValueError("Expecting value")),
        )

        with pytest.raises(LoadError, match="Invalid JSON"):
            load_restaurants("https://example.com/rest_hours.json")


class TestLoadRawRestaurants:
    """Tests for load_raw_restaurants function."""

    def test_keeps_hours_text(self, hours_file):
        raw = load_raw_restaurants(hours_file)

        assert raw[1] == RawRestaurant(name="Dashi", times=("Fri 10 pm - 2 am",))

    def test_file_not_utf8(self, tmp_path):
        """Test that undecodable bytes fail as a load error."""
        filepath = tmp_path / "rest_hours.json"
        filepath.write_bytes(b'[{"name": "\xff\xfe", "times": []}]')

        with pytest.raises(LoadError, match="Invalid JSON"):
            load_restaurants(filepath)
