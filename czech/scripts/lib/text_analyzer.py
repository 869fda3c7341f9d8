#!/usr/bin/env python3
"""
text_analyzer.py

Builds the letter / diacritic / number / symbol frequency tables for a text.

Each code point is canonically decomposed (NFD). A composed character such as
'á' contributes its base letter to the letters table and each trailing
combining mark to the diacritics table:

    'á' -> 'a' + U+0301  ->  letters['A'] += 1, diacritics[U+0301] += 1

Usage:
    from lib.text_analyzer import analyze_text
    result = analyze_text("Příliš žluťoučký kůň", case_sensitive=False)
"""

import unicodedata

from .analysis_result import AnalysisResult, increment
from .classifier import fold_case, is_digit, is_letter, is_upper, is_whitespace
from .diacritics import diacritic_key


def decompose(char: str) -> tuple[str, str]:
    """
    Canonically decompose a single code point.

    Returns:
        Tuple of (base character, trailing combining marks). The marks string
        is empty when the character has no canonical decomposition.
    """
    normalized = unicodedata.normalize("NFD", char)
    return normalized[0], normalized[1:]


def is_combining_mark(char: str) -> bool:
    """True for a bare combining mark, as found in already-decomposed text."""
    return unicodedata.combining(char) != 0


def analyze_text(text: str, case_sensitive: bool) -> AnalysisResult:
    """
    Count every non-whitespace code point of text into one of four tables.

    A bare combining mark (already-decomposed text) is counted as a
    diacritic with the case of the preceding base character, not as a
    symbol. Decomposed and composed text give the same tables.

    Args:
        text: Any Unicode text (empty is fine)
        case_sensitive: Keep letter case in keys and tag diacritics with the
            case (CAP/SMALL) of the letter they sit on

    Returns:
        AnalysisResult with non-negative counts and disjoint keys
    """
    result = AnalysisResult()
    # Case of the last base character, for marks that arrive on their own
    previous_upper = False

    for char in text:
        if is_whitespace(char):
            continue

        base, marks = decompose(char)

        if marks:
            # Character has diacritics (e.g., 'Č' -> 'C' + U+030C)
            upper = is_upper(base)
            letter_key = fold_case(base, case_sensitive)
            if is_letter(letter_key):
                increment(result.letters, letter_key)

            for mark in marks:
                increment(result.diacritics, diacritic_key(mark, upper, case_sensitive))

            previous_upper = upper
        elif is_combining_mark(char):
            # Decomposed input: 'a' followed by U+0301 counts like 'á'
            increment(result.diacritics, diacritic_key(char, previous_upper, case_sensitive))
        elif is_digit(char):
            increment(result.numbers, char)
            previous_upper = False
        elif is_letter(char):
            increment(result.letters, fold_case(char, case_sensitive))
            previous_upper = is_upper(char)
        else:
            increment(result.symbols, char)
            previous_upper = is_upper(char)

    return result


def count_input_characters(text: str) -> int:
    """Number of code points in text that are not whitespace."""
    return sum(1 for char in text if not is_whitespace(char))
