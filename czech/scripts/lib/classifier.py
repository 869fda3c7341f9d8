#!/usr/bin/env python3
"""
Single code point classification.

Only ASCII letters and digits are recognized as such. Accented letters become
ASCII through NFD before they get here; anything else that is not whitespace
(ß, ł, Cyrillic, punctuation, emoji) is a symbol.
"""

from enum import Enum


class CharClass(Enum):
    LETTER = "letter"
    DIGIT = "digit"
    WHITESPACE = "whitespace"
    SYMBOL = "symbol"


# U+FEFF is not whitespace for str.isspace() but shows up at the start of
# uploaded files and was never counted.
_EXTRA_WHITESPACE = frozenset("\ufeff")


def is_letter(char: str) -> bool:
    return len(char) == 1 and ("A" <= char <= "Z" or "a" <= char <= "z")


def is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def is_whitespace(char: str) -> bool:
    return char.isspace() or char in _EXTRA_WHITESPACE


def classify(char: str) -> CharClass:
    """Classify one code point; total over all input."""
    if is_whitespace(char):
        return CharClass.WHITESPACE
    if is_digit(char):
        return CharClass.DIGIT
    if is_letter(char):
        return CharClass.LETTER
    return CharClass.SYMBOL


def is_upper(char: str) -> bool:
    """True if char has case and differs from its lowercase form."""
    return char == char.upper() and char != char.lower()


def fold_case(char: str, case_sensitive: bool) -> str:
    """Uppercase the key unless counting case-sensitively."""
    return char if case_sensitive else char.upper()


def strip_whitespace(text: str) -> str:
    return "".join(ch for ch in text if not is_whitespace(ch))
