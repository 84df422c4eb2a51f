# report.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import requests

from cities_data import fetch_cities, get_cities_cached, load_cities
from rules.kai import (
    KAI_WORD,
    cities_on_island,
    has_name_containing,
    population_by_island,
    total_population,
)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="island-cities-report",
        description="Population by island of cities whose name contains a word (default: kai).",
    )
    p.add_argument("--word", default=KAI_WORD, help="word to look for in city names")
    p.add_argument("--island", help="only consider cities on this island")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--file", help="JSON file with city records")
    src.add_argument("--url", help="URL serving a JSON array of city records")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)

    try:
        if args.file:
            cities = load_cities(Path(args.file))
        elif args.url:
            cities = fetch_cities(args.url)
        else:
            cities = get_cities_cached()
    except (OSError, ValueError, requests.RequestException) as e:
        raise SystemExit(
            f"could not load cities: {e} (pass --file/--url or set CITIES_FILE; "
            f"the bundled data/cities.json is only found from a checkout or editable install)"
        )

    if args.island:
        cities = cities_on_island(cities, args.island)

    by_island = population_by_island(cities, args.word)
    label = "Kai" if args.word == KAI_WORD else f"[{args.word}]"

    print(f"populationCities{label}:", by_island)
    print("total:", total_population(by_island))
    print(f"has{label}:", has_name_containing(cities, args.word))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
