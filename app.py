# app.py
import math
import os

import requests
from flask import Flask, jsonify, render_template, request
from flask_wtf import CSRFProtect

from cities_data import get_cities_cached
from rules.kai import (
    KAI_WORD,
    cities_on_island,
    has_kai,
    has_name_containing,
    population_by_island,
    population_cities_kai,
    total_population,
)
from utils import norm_match


app = Flask(__name__)


# --- Security / config ---
app.secret_key = os.environ.get("FLASK_SECRET_KEY", "dev-only-change-me")
app.config.update(
    SESSION_COOKIE_HTTPONLY=True,
    SESSION_COOKIE_SAMESITE="Lax",
    SESSION_COOKIE_SECURE=bool(
        os.environ.get("FLASK_HTTPS")
    ),  # set FLASK_HTTPS=1 behind HTTPS
)

csrf = CSRFProtect(app)

LOAD_ERRORS = (OSError, ValueError, requests.RequestException)


def load_cities_or_none():
    try:
        return get_cities_cached()
    except LOAD_ERRORS as e:
        app.logger.warning(f"Cities unavailable: {e}")
        return None


def _select(cities, island):
    """Apply the optional ?island= filter."""
    island = (island or "").strip()
    return cities_on_island(cities, island) if island else cities


def _records_from_body():
    """JSON array body, or None if the body is anything else."""
    data = request.get_json(silent=True)
    return data if isinstance(data, list) else None


# --- Routes ---

@app.route("/", methods=["GET", "POST"])
def index():
    word = KAI_WORD
    island = ""
    if request.method == "POST":
        word = (request.form.get("word") or "").strip() or KAI_WORD
        island = (request.form.get("island") or "").strip()

    cities = load_cities_or_none()
    if cities is None:
        by_island, found, count = {}, False, 0
    else:
        selected = _select(cities, island)
        by_island = population_by_island(selected, word)
        found = has_name_containing(selected, word)
        count = len(selected)

    return render_template(
        "index.html",
        word=word,
        normalized_word=norm_match(word),
        island=island,
        by_island=sorted(by_island.items()),
        total=total_population(by_island),
        found=found,
        city_count=count,
        unavailable=cities is None,
    )


@csrf.exempt
@app.route("/api/has-kai", methods=["GET", "POST"])
def api_has_kai():
    if request.method == "POST":
        records = _records_from_body()
        if records is None:
            return jsonify({"error": "expected a JSON array of city records"}), 400
    else:
        cities = load_cities_or_none()
        if cities is None:
            return jsonify({"error": "cities data unavailable"}), 503
        records = _select(cities, request.args.get("island"))

    return jsonify({"hasKai": has_kai(records)})


@csrf.exempt
@app.route("/api/population-kai", methods=["GET", "POST"])
def api_population_kai():
    if request.method == "POST":
        records = _records_from_body()
        if records is None:
            return jsonify({"error": "expected a JSON array of city records"}), 400
    else:
        cities = load_cities_or_none()
        if cities is None:
            return jsonify({"error": "cities data unavailable"}), 503
        records = _select(cities, request.args.get("island"))

    by_island = population_cities_kai(records)
    total = total_population(by_island)
    # finite inputs can still sum past float range; JSON has no Infinity
    if not math.isfinite(total):
        return jsonify({"error": "population total out of range"}), 422
    return jsonify({"populationCitiesKai": by_island, "total": total})


@app.get("/health")
def health():
    return "ok", 200


def warm_cities_cache():
    try:
        get_cities_cached()
        app.logger.info("Cities cache warmed")
    except LOAD_ERRORS as e:
        app.logger.warning(f"Cache warm failed: {e}")


# Warm cache when worker starts
warm_cities_cache()


if __name__ == "__main__":

    app.run(debug=True)
