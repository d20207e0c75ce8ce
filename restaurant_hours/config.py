"""Runtime settings, read from environment variables."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

# Path or http(s) URL of the restaurant hours JSON
RESTAURANT_HOURS_SOURCE = os.getenv(
    "RESTAURANT_HOURS_SOURCE", str(BASE_DIR / "data" / "rest_hours.json")
)

LOG_LEVEL = os.getenv("RESTAURANT_HOURS_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("RESTAURANT_HOURS_LOG_FILE", "app.log")

# Seconds to wait for a remote hours source
HTTP_TIMEOUT = float(os.getenv("RESTAURANT_HOURS_HTTP_TIMEOUT", "30"))
