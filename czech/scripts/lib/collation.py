#!/usr/bin/env python3
"""
collation.py

Sort keys for Czech alphabetical ordering. Used by:
- sorter.py (default collation for alphabetical mode)

The sorter only needs a key function with the signature
``key(text, case_sensitive) -> comparable``. Two are provided:

1. czech_sort_key: table-driven Czech order, no system locale needed
2. collation_key(locale_name): wraps locale.strxfrm for a system locale

Czech collation facts encoded in the table:
- Č, Ř, Š, Ž and the digraph CH are letters of their own (CH sorts after H)
- Á, Ď, É, Ě, Í, Ň, Ó, Ť, Ú, Ů, Ý sort with their base letter and only
  differ at the accent level
- lowercase sorts before uppercase when case matters
"""

import locale
import unicodedata
from typing import Any, Callable

# Type alias for injectable collation functions
CollationKey = Callable[[str, bool], Any]

# ---------------------------------------------------------------------------
# Czech Alphabet Table
# ---------------------------------------------------------------------------

CZECH_ALPHABET = (
    "A", "B", "C", "Č", "D", "E", "F", "G", "H", "CH", "I", "J", "K", "L", "M",
    "N", "O", "P", "Q", "R", "Ř", "S", "Š", "T", "U", "V", "W", "X", "Y", "Z", "Ž",
)

PRIMARY_INDEX = {letter: index for index, letter in enumerate(CZECH_ALPHABET)}

# Accented letters that share a primary weight with their base letter
SECONDARY_LETTERS = {
    "Á": ("A", 1),
    "Ď": ("D", 1),
    "É": ("E", 1),
    "Ě": ("E", 2),
    "Í": ("I", 1),
    "Ň": ("N", 1),
    "Ó": ("O", 1),
    "Ť": ("T", 1),
    "Ú": ("U", 1),
    "Ů": ("U", 2),
    "Ý": ("Y", 1),
}

# Primary groups: symbols < digits < Czech letters < other letters
GROUP_SYMBOL = 0
GROUP_DIGIT = 1
GROUP_CZECH = 2
GROUP_OTHER_LETTER = 3

# Secondary weights for accents outside the Czech table start here
FOREIGN_ACCENT_BASE = 10


def _tokenize(text: str) -> list[str]:
    """Split text into collation elements, joining C+H into one."""
    normalized = unicodedata.normalize("NFC", text)
    tokens = []
    i = 0
    while i < len(normalized):
        pair = normalized[i:i + 2]
        if pair.upper() == "CH":
            tokens.append(pair)
            i += 2
        else:
            tokens.append(normalized[i])
            i += 1
    return tokens


def _weights(token: str) -> tuple[tuple[int, int], int, int]:
    """Return (primary, secondary, tertiary) weights for one collation element."""
    tertiary = 1 if token[0].isupper() else 0
    upper = token.upper()

    if upper in PRIMARY_INDEX:
        return (GROUP_CZECH, PRIMARY_INDEX[upper]), 0, tertiary

    if upper in SECONDARY_LETTERS:
        base, secondary = SECONDARY_LETTERS[upper]
        return (GROUP_CZECH, PRIMARY_INDEX[base]), secondary, tertiary

    if "0" <= token <= "9":
        return (GROUP_DIGIT, ord(token) - ord("0")), 0, 0

    decomposed = unicodedata.normalize("NFD", token)
    base, marks = decomposed[0], decomposed[1:]
    secondary = FOREIGN_ACCENT_BASE + ord(marks[0]) if marks else 0

    if base.upper() in PRIMARY_INDEX:
        # Accented Latin letter that Czech does not use (Ä, Ç, Ñ, ...)
        return (GROUP_CZECH, PRIMARY_INDEX[base.upper()]), secondary, tertiary

    if base.isalpha():
        return (GROUP_OTHER_LETTER, ord(base.lower())), secondary, tertiary

    return (GROUP_SYMBOL, ord(token)), 0, 0


def czech_sort_key(text: str, case_sensitive: bool = False) -> tuple:
    """
    Sort key approximating Czech collation.

    Case-insensitive keys compare letters and accents only, so 'a' and 'A'
    tie. Case-sensitive keys add a case level with lowercase first.
    """
    primaries, secondaries, tertiaries = [], [], []
    for token in _tokenize(text):
        primary, secondary, tertiary = _weights(token)
        primaries.append(primary)
        secondaries.append(secondary)
        tertiaries.append(tertiary)

    if case_sensitive:
        return tuple(primaries), tuple(secondaries), tuple(tertiaries)
    return tuple(primaries), tuple(secondaries)


def collation_key(locale_name: str = "cs_CZ.UTF-8") -> CollationKey:
    """
    Build a key function backed by the system collation for locale_name.

    Sets LC_COLLATE for the whole process and does not restore it. The
    returned key reads the current LC_COLLATE on every call, so a later
    setlocale() changes its ordering. Callers that need the previous locale
    back should save locale.setlocale(locale.LC_COLLATE) first.

    Raises:
        locale.Error: If the locale is not installed on this system
    """
    locale.setlocale(locale.LC_COLLATE, locale_name)

    def key(text: str, case_sensitive: bool = False) -> str:
        return locale.strxfrm(text if case_sensitive else text.casefold())

    return key


if __name__ == "__main__":
    sample = ["ch", "h", "c", "č", "Á", "a", "Z", "ž", "ů", "u", "1", "~"]
    print("Czech order:", " ".join(sorted(sample, key=lambda s: czech_sort_key(s, True))))
