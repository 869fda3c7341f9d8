#!/usr/bin/env python3
"""
Ordering of (character key, count) entries for display.

Two modes:
- frequency: highest count first; equal counts keep their input order
- alphabetical: letters, then diacritics, then symbols, then digits; within a
  tier by Czech collation of the displayed character
"""

from enum import Enum
from typing import Iterable, Optional

from .classifier import is_digit, is_letter
from .collation import CollationKey, czech_sort_key
from .diacritics import display_form, is_diacritic_key

Entry = tuple[str, int]

TIER_LETTER = 0
TIER_DIACRITIC = 1
TIER_SYMBOL = 2
TIER_DIGIT = 3


class SortMode(str, Enum):
    ALPHABETICAL = "alphabetical"
    FREQUENCY = "frequency"


def parse_sort_mode(mode: str) -> SortMode:
    """Get a SortMode by value."""
    try:
        return SortMode(mode)
    except ValueError:
        raise ValueError(
            f"Unknown sort mode: {mode}. Available: {[m.value for m in SortMode]}"
        ) from None


def type_tier(key: str) -> int:
    """Tier of a character key for alphabetical sorting."""
    if is_diacritic_key(key):
        return TIER_DIACRITIC
    if is_letter(key):
        return TIER_LETTER
    if is_digit(key):
        return TIER_DIGIT
    return TIER_SYMBOL


def sort_characters(
    entries: Iterable[Entry],
    mode: str,
    case_sensitive: bool,
    collate: Optional[CollationKey] = None,
) -> list[Entry]:
    """
    Sort entries for display.

    Args:
        entries: (key, count) pairs, e.g. dict.items() of a frequency table
        mode: "alphabetical" or "frequency"
        case_sensitive: Passed to the collation key in alphabetical mode
        collate: Key function (text, case_sensitive) -> comparable;
            defaults to czech_sort_key

    Returns:
        New sorted list; the input is not modified
    """
    mode = parse_sort_mode(mode)

    if mode is SortMode.FREQUENCY:
        return sorted(entries, key=lambda entry: -entry[1])

    collate = collate or czech_sort_key
    return sorted(
        entries,
        key=lambda entry: (
            type_tier(entry[0]),
            collate(display_form(entry[0]).char, case_sensitive),
        ),
    )
