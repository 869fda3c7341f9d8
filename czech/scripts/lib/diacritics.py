#!/usr/bin/env python3
"""
Diacritic lookup tables and character-key helpers.

Combining marks are counted under their own code point, and shown to the user
as the standalone glyph a person would type (U+0301 is shown as ´).
In case-sensitive mode a mark key also records the case of the letter it was
attached to: "<mark>_CAP" or "<mark>_SMALL".
"""

import unicodedata
from types import MappingProxyType
from typing import NamedTuple, Optional

# Combining code point -> standalone display glyph
DIACRITIC_DISPLAY = MappingProxyType({
    '\u0301': '´',  # Acute accent (čárka)
    '\u030C': 'ˇ',  # Caron (háček)
    '\u0302': 'ˆ',  # Circumflex
    '\u0308': '¨',  # Diaeresis
    '\u030A': '°',  # Ring above (kroužek)
    '\u0303': '~',  # Tilde
    '\u0300': '`',  # Grave accent
    '\u030B': '˝',  # Double acute
    '\u0327': '¸',  # Cedilla
})

# Standalone display glyph -> combining code point
STANDALONE_TO_COMBINING = MappingProxyType(
    {glyph: mark for mark, glyph in DIACRITIC_DISPLAY.items()}
)

COMPOSITE_SEPARATOR = "_"
CAP = "CAP"
SMALL = "SMALL"

CASE_LABELS = {
    CAP: "velké",
    SMALL: "malé",
}


class KeyDisplay(NamedTuple):
    """How a character key is presented: glyph plus optional case label."""
    char: str
    label: Optional[str] = None


def is_known_diacritic(key: str) -> bool:
    """True if key is one of the combining marks with a display glyph."""
    return key in DIACRITIC_DISPLAY


def diacritic_key(mark: str, is_upper: bool, case_sensitive: bool) -> str:
    """
    Build the table key for a combining mark.

    Args:
        mark: The combining code point
        is_upper: Whether the base letter the mark was attached to is uppercase
        case_sensitive: When False the mark itself is the key

    Returns:
        "<mark>" or "<mark>_CAP" / "<mark>_SMALL"
    """
    if not case_sensitive:
        return mark
    return f"{mark}{COMPOSITE_SEPARATOR}{CAP if is_upper else SMALL}"


def split_composite_key(key: str) -> Optional[tuple[str, str]]:
    """
    Split a composite diacritic key into (mark, case tag).

    Returns None for anything that is not "<mark>_CAP" or "<mark>_SMALL",
    including the underscore symbol on its own.
    """
    mark, sep, tag = key.rpartition(COMPOSITE_SEPARATOR)
    if not sep or not mark or tag not in CASE_LABELS:
        return None
    return mark, tag


def is_diacritic_key(key: str) -> bool:
    """True for composite keys and for bare known combining marks."""
    return split_composite_key(key) is not None or is_known_diacritic(key)


def display_form(key: str) -> KeyDisplay:
    """Resolve a character key to the glyph and case label shown to the user."""
    parts = split_composite_key(key)
    if parts:
        mark, tag = parts
        return KeyDisplay(DIACRITIC_DISPLAY.get(mark, mark), CASE_LABELS[tag])
    return KeyDisplay(DIACRITIC_DISPLAY.get(key, key))


if __name__ == "__main__":
    print(f"{'Mark':<8}{'Glyph':<8}Name")
    print("-" * 40)
    for mark, glyph in DIACRITIC_DISPLAY.items():
        print(f"U+{ord(mark):04X}  {glyph:<8}{unicodedata.name(mark)}")
