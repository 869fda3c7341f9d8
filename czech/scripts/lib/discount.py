#!/usr/bin/env python3
"""
Parse the "discount" text: characters the user wants subtracted from the
analysis.

The text goes through the same decomposition as the main text, but produces a
single flat table. A standalone glyph such as '´' stands for its combining
mark, so typing it subtracts one acute accent. Typing 'á' subtracts both an
'A' and an acute accent.
"""

from .analysis_result import CharacterCounts, increment
from .classifier import fold_case, is_letter, is_upper, strip_whitespace
from .diacritics import STANDALONE_TO_COMBINING, diacritic_key
from .text_analyzer import decompose, is_combining_mark


def parse_discount(text: str, case_sensitive: bool) -> CharacterCounts:
    """
    Build the discount table for text.

    Args:
        text: Characters to subtract; whitespace is ignored
        case_sensitive: Same meaning as for analyze_text

    Returns:
        Dict mapping character key -> positive count
    """
    discount: CharacterCounts = {}
    previous_upper = False

    for char in strip_whitespace(text):
        combining = STANDALONE_TO_COMBINING.get(char)
        if combining:
            increment(discount, combining)
            continue

        base, marks = decompose(char)

        if marks:
            upper = is_upper(base)
            increment(discount, fold_case(base, case_sensitive))
            for mark in marks:
                increment(discount, diacritic_key(mark, upper, case_sensitive))
            previous_upper = upper
        elif is_combining_mark(char):
            increment(discount, diacritic_key(char, previous_upper, case_sensitive))
        else:
            key = char.upper() if is_letter(char) and not case_sensitive else char
            increment(discount, key)
            previous_upper = is_upper(char)

    return discount
