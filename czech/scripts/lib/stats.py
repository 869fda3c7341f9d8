#!/usr/bin/env python3
"""Aggregate counts over an analysis result."""

from dataclasses import asdict, dataclass

from .analysis_result import AnalysisResult


@dataclass(frozen=True)
class Stats:
    total: int = 0
    letters: int = 0
    diacritics: int = 0
    numbers: int = 0
    symbols: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def compute_stats(result: AnalysisResult) -> Stats:
    """Sum each table; total is the sum of the four sums."""
    sums = {category: sum(table.values()) for category, table in result.tables()}
    return Stats(total=sum(sums.values()), **sums)
