#!/usr/bin/env python3
"""
Subtract a discount table from an analysis result.

Counts may go negative ("discounted more than present"). That is a valid
state that the report shows as-is.
"""

from .analysis_result import CATEGORIES, AnalysisResult, CharacterCounts
from .classifier import is_digit, is_letter
from .diacritics import is_diacritic_key


def classify_discount_key(key: str) -> str:
    """
    Pick the category for a discount key that no table holds yet.

    Returns:
        One of "diacritics", "letters", "numbers", "symbols"
    """
    if is_diacritic_key(key):
        return "diacritics"
    if is_letter(key):
        return "letters"
    if is_digit(key):
        return "numbers"
    return "symbols"


def merge_discount(result: AnalysisResult, discount: CharacterCounts) -> AnalysisResult:
    """
    Apply discount to a copy of result.

    Each discount key is credited to the first category (letters, diacritics,
    numbers, symbols) that already holds it. Keys found nowhere are classified
    and inserted with a negative count.

    Args:
        result: Output of analyze_text; left untouched
        discount: Output of parse_discount

    Returns:
        New AnalysisResult with the discount applied
    """
    merged = result.copy()

    for key, count in discount.items():
        for category in CATEGORIES:
            table = merged.table(category)
            if key in table:
                table[key] = table[key] - count
                break
        else:
            if count > 0:
                merged.table(classify_discount_key(key))[key] = -count

    return merged
