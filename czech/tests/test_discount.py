#!/usr/bin/env python3
"""
test_discount.py

Parsing of the discount text and merging it into an analysis.
"""

import sys
import unicodedata
from pathlib import Path

import pytest

# Add parent directories to path for lib imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "scripts"))

from lib.analysis_result import AnalysisResult
from lib.diacritics import DIACRITIC_DISPLAY, STANDALONE_TO_COMBINING
from lib.discount import parse_discount
from lib.merger import classify_discount_key, merge_discount
from lib.text_analyzer import analyze_text

ACUTE = "\u0301"
CARON = "\u030c"

SAMPLE = "Příliš žluťoučký kůň úpěl ďábelské ódy! 2024 #@"


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

def test_lookup_tables_are_inverse():
    assert len(DIACRITIC_DISPLAY) == len(STANDALONE_TO_COMBINING) == 9
    for mark, glyph in DIACRITIC_DISPLAY.items():
        assert STANDALONE_TO_COMBINING[glyph] == mark


def test_lookup_tables_are_read_only():
    with pytest.raises(TypeError):
        DIACRITIC_DISPLAY["x"] = "y"


# ---------------------------------------------------------------------------
# parse_discount
# ---------------------------------------------------------------------------

def test_standalone_glyph_means_combining_mark():
    assert parse_discount("´", False) == {ACUTE: 1}
    assert parse_discount("ˇˇ", True) == {CARON: 2}


def test_composed_character_discounts_base_and_mark():
    assert parse_discount("á", False) == {"A": 1, ACUTE: 1}
    assert parse_discount("á", True) == {"a": 1, f"{ACUTE}_SMALL": 1}
    assert parse_discount("Č", True) == {"C": 1, f"{CARON}_CAP": 1}


def test_whitespace_is_stripped():
    assert parse_discount(" a a\n\t", False) == {"A": 2}


def test_empty_discount():
    assert parse_discount("", False) == {}
    assert parse_discount("   ", True) == {}


def test_only_letters_are_folded():
    assert parse_discount("aA1!ß", False) == {"A": 2, "1": 1, "!": 1, "ß": 1}
    assert parse_discount("aA", True) == {"a": 1, "A": 1}


@pytest.mark.parametrize("case_sensitive", [True, False])
def test_decomposed_discount_matches_composed(case_sensitive: bool):
    text = "Čáp ŮŽ"
    decomposed = unicodedata.normalize("NFD", text)
    assert decomposed != text
    assert parse_discount(decomposed, case_sensitive) == parse_discount(text, case_sensitive)


def test_bare_mark_takes_case_of_preceding_base():
    assert parse_discount(f"C{CARON}a{ACUTE}", True) == {
        "C": 1, f"{CARON}_CAP": 1, "a": 1, f"{ACUTE}_SMALL": 1,
    }


@pytest.mark.parametrize("case_sensitive", [True, False])
def test_discounting_decomposed_text_zeroes_everything(case_sensitive: bool):
    decomposed = unicodedata.normalize("NFD", SAMPLE)
    original = analyze_text(decomposed, case_sensitive)
    merged = merge_discount(original, parse_discount(decomposed, case_sensitive))

    assert merged.diacritics
    for category, table in original.tables():
        merged_table = merged.table(category)
        assert merged_table.keys() == table.keys()
        assert all(merged_table[key] == 0 for key in table)


def test_non_letter_base_is_still_discounted():
    assert parse_discount("й", False) == {"И": 1, "\u0306": 1}


# ---------------------------------------------------------------------------
# classify_discount_key
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("key,expected", [
    (f"{ACUTE}_CAP", "diacritics"),
    (f"{ACUTE}_SMALL", "diacritics"),
    (ACUTE, "diacritics"),
    ("x", "letters"),
    ("X", "letters"),
    ("7", "numbers"),
    ("_", "symbols"),
    ("ß", "symbols"),
    ("\u0306", "symbols"),
])
def test_classify_discount_key(key: str, expected: str):
    assert classify_discount_key(key) == expected


# ---------------------------------------------------------------------------
# merge_discount
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("case_sensitive", [True, False])
def test_discounting_the_text_itself_zeroes_everything(case_sensitive: bool):
    original = analyze_text(SAMPLE, case_sensitive)
    merged = merge_discount(original, parse_discount(SAMPLE, case_sensitive))

    for category, table in original.tables():
        merged_table = merged.table(category)
        assert merged_table.keys() == table.keys()
        assert all(merged_table[key] == 0 for key in table)


def test_absent_character_goes_negative():
    merged = merge_discount(analyze_text("b", False), parse_discount("a", False))
    assert merged.letters == {"B": 1, "A": -1}


def test_absent_diacritic_goes_negative():
    merged = merge_discount(analyze_text("a", True), parse_discount("´", True))
    assert merged.diacritics == {ACUTE: -1}

    merged = merge_discount(analyze_text("a", True), parse_discount("É", True))
    assert merged.letters == {"a": 1, "E": -1}
    assert merged.diacritics == {f"{ACUTE}_CAP": -1}


def test_over_discount_is_not_clamped():
    merged = merge_discount(analyze_text("a", False), parse_discount("aaa", False))
    assert merged.letters == {"A": -2}


def test_merge_does_not_mutate_inputs():
    original = analyze_text("aab1!", False)
    snapshot = original.to_dict()
    discount = parse_discount("a1?", False)

    merged = merge_discount(original, discount)

    assert original.to_dict() == snapshot
    assert discount == {"A": 1, "1": 1, "?": 1}
    assert merged.letters == {"A": 1, "B": 1}
    assert merged.numbers == {"1": 0}
    assert merged.symbols == {"!": 1, "?": -1}


def test_key_is_credited_to_first_matching_category_only():
    result = AnalysisResult(letters={"Q": 2}, symbols={"Q": 5})
    merged = merge_discount(result, {"Q": 1})
    assert merged.letters == {"Q": 1}
    assert merged.symbols == {"Q": 5}


def test_non_positive_discount_for_absent_key_is_ignored():
    merged = merge_discount(AnalysisResult(), {"Q": 0, "R": -3})
    assert merged == AnalysisResult()
