import math

from rules.records import (
    UNKNOWN_ISLAND,
    is_record,
    record_island,
    record_name,
    record_population,
)


def test_is_record_only_accepts_mappings():
    assert is_record({})
    assert is_record({"name": "Kailua"})
    for item in [None, 0, "Kailua", ["Kailua"], 3.5, True]:
        assert not is_record(item)


def test_record_name_missing():
    assert record_name({}) is None
    assert record_name({"name": 42}) == 42


def test_record_population_finite_numbers_only():
    assert record_population({"population": 100}) == 100
    assert record_population({"population": 12.5}) == 12.5
    assert record_population({"population": -5}) == -5
    assert record_population({}) == 0
    assert record_population({"population": "100"}) == 0
    assert record_population({"population": None}) == 0
    assert record_population({"population": True}) == 0
    assert record_population({"population": math.nan}) == 0
    assert record_population({"population": math.inf}) == 0
    assert record_population({"population": -math.inf}) == 0


def test_record_island_defaults_to_unknown():
    assert record_island({"island": "Oahu"}) == "Oahu"
    # used verbatim, not trimmed
    assert record_island({"island": " Maui "}) == " Maui "
    assert record_island({}) == UNKNOWN_ISLAND
    assert record_island({"island": "   "}) == UNKNOWN_ISLAND
    assert record_island({"island": ""}) == UNKNOWN_ISLAND
    assert record_island({"island": 7}) == UNKNOWN_ISLAND


def test_record_island_blank_characters():
    for blank in ["\ufeff", "\u3000", "\u00a0\u2028", "\t\r\n"]:
        assert record_island({"island": blank}) == UNKNOWN_ISLAND
    # information separators are not blank
    assert record_island({"island": "\x1c"}) == "\x1c"
