# rules/kai.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List

from rules.records import (
    Number,
    is_record,
    record_island,
    record_name,
    record_population,
)
from utils import name_contains_word

KAI_WORD = "kai"


def has_name_containing(records: Iterable[Any], word: str) -> bool:
    """True on the first record whose name contains `word`; stops scanning there."""
    for item in records:
        if not is_record(item):
            continue
        if name_contains_word(record_name(item), word):
            return True
    return False


def population_by_island(records: Iterable[Any], word: str) -> Dict[str, Number]:
    """
    Returns {island: total population of cities whose name contains `word`}.

    Order of checks:
      - non-records are skipped
      - names that don't match are skipped
      - a negative population drops the record (no key is created)
      - a missing or non-finite population counts as 0 (the key is still created)
      - missing/blank islands are grouped under "Unknown"
    """
    acc: Dict[str, Number] = {}

    for item in records:
        if not is_record(item):
            continue
        if not name_contains_word(record_name(item), word):
            continue

        pop = record_population(item)
        if pop < 0:
            continue

        island = record_island(item)
        acc[island] = acc.get(island, 0) + pop

    return acc


def total_population(by_island: Dict[str, Number]) -> Number:
    return sum(by_island.values())


def cities_on_island(records: Iterable[Any], island: str) -> List[Any]:
    """Records whose raw "island" value equals `island` exactly."""
    return [c for c in records if is_record(c) and c.get("island") == island]


def has_kai(records: Iterable[Any]) -> bool:
    return has_name_containing(records, KAI_WORD)


def population_cities_kai(records: Iterable[Any]) -> Dict[str, Number]:
    return population_by_island(records, KAI_WORD)
