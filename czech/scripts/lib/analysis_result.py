#!/usr/bin/env python3
"""
Result containers shared by the analyzer, merger and report code.
"""

from dataclasses import dataclass, field
from typing import Iterator

# Type alias for a character histogram: key -> count
CharacterCounts = dict[str, int]

# Fixed category order; the merger searches tables in this order
CATEGORIES = ("letters", "diacritics", "numbers", "symbols")


@dataclass
class AnalysisResult:
    """Four frequency tables, one per category."""
    letters: CharacterCounts = field(default_factory=dict)
    diacritics: CharacterCounts = field(default_factory=dict)
    numbers: CharacterCounts = field(default_factory=dict)
    symbols: CharacterCounts = field(default_factory=dict)

    def table(self, category: str) -> CharacterCounts:
        if category not in CATEGORIES:
            raise ValueError(f"Unknown category: {category}. Available: {list(CATEGORIES)}")
        return getattr(self, category)

    def tables(self) -> Iterator[tuple[str, CharacterCounts]]:
        for category in CATEGORIES:
            yield category, getattr(self, category)

    def copy(self) -> "AnalysisResult":
        """Independent copy; mutating it never touches this result."""
        return AnalysisResult(**{category: dict(table) for category, table in self.tables()})

    def to_dict(self) -> dict[str, CharacterCounts]:
        return {category: dict(table) for category, table in self.tables()}


def increment(table: CharacterCounts, key: str, amount: int = 1) -> None:
    table[key] = table.get(key, 0) + amount
