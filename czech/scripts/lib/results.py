#!/usr/bin/env python3
"""
results.py

Ties the engine together: analyze, parse the discount, merge, and shape the
outcome into display entries.

    report = run_analysis("Žluťoučký kůň", discount_text="ů")
    report.stats.total
    build_entries(report.original, report.discount, "all", "frequency", False)
"""

from dataclasses import dataclass
from typing import Optional

from .analysis_result import AnalysisResult, CharacterCounts
from .collation import CollationKey
from .diacritics import display_form
from .discount import parse_discount
from .merger import merge_discount
from .sorter import sort_characters
from .stats import Stats, compute_stats
from .text_analyzer import analyze_text, count_input_characters

ALL_CATEGORIES = "all"


# ---------------------------------------------------------------------------
# Data Classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CharacterEntry:
    """One row of the results view."""
    key: str                  # Table key (may be a composite diacritic key)
    char: str                 # Glyph shown to the user
    label: Optional[str]      # "velké" / "malé" for case-tagged diacritics
    count: int                # Count after discount (may be negative)
    original_count: int       # Count before discount
    discounted: int           # Amount requested in the discount text

    @property
    def is_negative(self) -> bool:
        return self.count < 0


@dataclass
class AnalysisReport:
    """Everything one analysis run produces."""
    case_sensitive: bool
    input_length: int
    original: AnalysisResult
    discount: CharacterCounts
    final: AnalysisResult
    stats: Stats

    def to_dict(self) -> dict:
        return {
            "caseSensitive": self.case_sensitive,
            "inputLength": self.input_length,
            "stats": self.stats.to_dict(),
            "original": self.original.to_dict(),
            "discount": dict(self.discount),
            "final": self.final.to_dict(),
        }


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------

def filter_category(result: AnalysisResult, category: str) -> CharacterCounts:
    """
    Select the table for category, or all tables merged for "all".

    Raises:
        ValueError: If category is unknown
    """
    if category == ALL_CATEGORIES:
        merged: CharacterCounts = {}
        for _, table in result.tables():
            merged.update(table)
        return merged
    return dict(result.table(category))


def lookup_count(result: AnalysisResult, key: str) -> int:
    """Count for key from the first category holding it, else 0."""
    for _, table in result.tables():
        if key in table:
            return table[key]
    return 0


def build_entries(
    original: AnalysisResult,
    discount: CharacterCounts,
    category: str,
    mode: str,
    case_sensitive: bool,
    collate: Optional[CollationKey] = None,
) -> list[CharacterEntry]:
    """
    Merge, filter and sort into display rows.

    Args:
        original: Analysis of the main text
        discount: Parsed discount text
        category: "all" or one of CATEGORIES
        mode: "alphabetical" or "frequency"
        case_sensitive: Whether keys keep letter case
        collate: Optional collation key for alphabetical mode

    Returns:
        List of CharacterEntry in display order
    """
    final = merge_discount(original, discount)
    visible = filter_category(final, category)

    entries = []
    for key, count in sort_characters(visible.items(), mode, case_sensitive, collate):
        display = display_form(key)
        entries.append(CharacterEntry(
            key=key,
            char=display.char,
            label=display.label,
            count=count,
            original_count=lookup_count(original, key),
            discounted=discount.get(key, 0),
        ))
    return entries


# ---------------------------------------------------------------------------
# Entry Point
# ---------------------------------------------------------------------------

def run_analysis(text: str, discount_text: str = "", case_sensitive: bool = False) -> AnalysisReport:
    """Analyze text, subtract discount_text, and compute statistics."""
    original = analyze_text(text, case_sensitive)
    discount = parse_discount(discount_text, case_sensitive)
    final = merge_discount(original, discount)

    return AnalysisReport(
        case_sensitive=case_sensitive,
        input_length=count_input_characters(text),
        original=original,
        discount=discount,
        final=final,
        stats=compute_stats(final),
    )
