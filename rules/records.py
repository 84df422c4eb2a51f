# rules/records.py
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Union

Number = Union[int, float]

UNKNOWN_ISLAND = "Unknown"

# What counts as blank around an island name: ASCII whitespace, line/paragraph
# separators, the Zs space separators and the BOM (U+FEFF).
# Not str.isspace(): U+001C-U+001F and U+0085 are not blank here.
BLANK_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def is_record(item: Any) -> bool:
    """City records are decoded JSON objects; anything else is skipped."""
    return isinstance(item, Mapping)


def record_name(item: Mapping) -> Any:
    return item.get("name")


def record_population(item: Mapping) -> Number:
    """
    Finite numbers only. Missing, non-numeric, NaN/inf -> 0.
    bool is excluded even though it subclasses int.
    Negative values are returned as-is; callers decide what to do with them.
    """
    pop = item.get("population")
    if isinstance(pop, bool) or not isinstance(pop, (int, float)):
        return 0
    if isinstance(pop, float) and not math.isfinite(pop):
        return 0
    return pop


def record_island(item: Mapping) -> str:
    """Island verbatim if it's a non-blank string, otherwise "Unknown"."""
    island = item.get("island")
    if isinstance(island, str) and island.strip(BLANK_CHARS):
        return island
    return UNKNOWN_ISLAND
