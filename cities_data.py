# cities_data.py
from __future__ import annotations

import json
import logging
import os
import pathlib
import time
from typing import Any, List, Optional

import requests

logger = logging.getLogger(__name__)

DATA_DIR = pathlib.Path(__file__).resolve().parent / "data"
CITIES_FILE = pathlib.Path(os.environ.get("CITIES_FILE", DATA_DIR / "cities.json"))

# Optional remote source; when unset the local file is the only source.
CITIES_URL = os.environ.get("CITIES_URL")

CACHE_TTL_SECONDS = int(os.environ.get("CITIES_CACHE_TTL_SECONDS", 60 * 60 * 6))  # 6 hours
FETCH_TIMEOUT_SECONDS = 12


def _as_city_list(data: Any) -> List[Any]:
    """Accept a bare JSON array or {"cities": [...]}. Anything else is empty."""
    if isinstance(data, dict):
        data = data.get("cities")
    return data if isinstance(data, list) else []


def load_cities(path: Optional[pathlib.Path] = None) -> List[Any]:
    path = pathlib.Path(path) if path is not None else CITIES_FILE
    with path.open("r", encoding="utf-8") as f:
        return _as_city_list(json.load(f))


def fetch_cities(url: str) -> List[Any]:
    r = requests.get(url, timeout=FETCH_TIMEOUT_SECONDS)
    r.raise_for_status()
    return _as_city_list(r.json())


# --- Cache ---
_CITIES_CACHE = {"data": None, "fetched_at": 0.0}


def clear_cache() -> None:
    _CITIES_CACHE["data"] = None
    _CITIES_CACHE["fetched_at"] = 0.0


def get_cities_cached() -> List[Any]:
    now = time.time()

    if _CITIES_CACHE["data"] is not None and (now - _CITIES_CACHE["fetched_at"]) <= CACHE_TTL_SECONDS:
        return _CITIES_CACHE["data"]

    if not CITIES_URL:
        data = load_cities()
        _CITIES_CACHE["data"] = data
        _CITIES_CACHE["fetched_at"] = now
        return data

    try:
        data = fetch_cities(CITIES_URL)
        _CITIES_CACHE["data"] = data
        _CITIES_CACHE["fetched_at"] = now
        return data

    except (requests.RequestException, ValueError) as e:
        # Refresh failed but we have old data: serve stale cache
        if _CITIES_CACHE["data"] is not None:
            logger.warning("Cities refresh failed; serving stale cache. Error: %s", e)
            return _CITIES_CACHE["data"]

        try:
            data = load_cities()
        except (OSError, ValueError) as e2:
            logger.warning("Failed to load local cities file: %s", e2)
            raise e

        _CITIES_CACHE["data"] = data
        _CITIES_CACHE["fetched_at"] = now
        logger.warning("Loaded cities from local file %s", CITIES_FILE)
        return data
