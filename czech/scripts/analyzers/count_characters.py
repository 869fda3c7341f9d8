#!/usr/bin/env python3
"""
count_characters.py

Counts letters, diacritic marks, numbers and symbols in a text, optionally
subtracting a "discount" text, and prints the results as markdown tables.

Defaults for case sensitivity, sort mode and category come from CETNIK_*
settings (see lib/config.py); command-line flags override them.

Usage:
    python analyzers/count_characters.py input.txt [--discount TEXT]
        [--discount-file PATH] [--[no-]case-sensitive] [--category CATEGORY]
        [--sort {alphabetical,frequency}] [--json OUTPUT] [--dry-run]
    python analyzers/count_characters.py --text "Příliš žluťoučký kůň"
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path for lib imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from lib.config import CATEGORY_CHOICES, Settings, load_settings
from lib.report_io import iter_report_errors, read_text_file, write_json_document
from lib.results import AnalysisReport, CharacterEntry, build_entries, run_analysis
from lib.sorter import SortMode

STATS_LABELS = [
    ("total", "Celkem"),
    ("letters", "Písmena"),
    ("diacritics", "Diakritika"),
    ("symbols", "Symboly"),
    ("numbers", "Čísla"),
]


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def read_source(path: str) -> str:
    """Read text from a file path, or from stdin for "-"."""
    if path == "-":
        return sys.stdin.read()
    return read_text_file(Path(path))


def fail(message: str):
    print(f"Error: {message}")
    sys.exit(1)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def print_stats(report: AnalysisReport) -> None:
    stats = report.stats.to_dict()
    print("| " + " | ".join(label for _, label in STATS_LABELS) + " |")
    print("|" + "|".join("-" * (len(label) + 2) for _, label in STATS_LABELS) + "|")
    print("| " + " | ".join(str(stats[field]) for field, _ in STATS_LABELS) + " |")


def print_entries(entries: list[CharacterEntry]) -> None:
    if not entries:
        print("   Nothing to show.")
        return

    print("| Char | Case | Count | Original | Discounted |")
    print("|------|------|-------|----------|------------|")
    for entry in entries:
        label = entry.label or "-"
        discounted = f"-{entry.discounted}" if entry.discounted > 0 else "-"
        print(f"| {entry.char} | {label} | {entry.count} | {entry.original_count} | {discounted} |")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count letters, diacritics, numbers and symbols in a text")
    parser.add_argument("input", nargs="?", help="Text file to analyze ('-' for stdin)")
    parser.add_argument("--text", help="Analyze this text instead of a file")
    parser.add_argument("--discount", default="", help="Characters to subtract from the counts")
    parser.add_argument("--discount-file", help="Read characters to subtract from a file")
    parser.add_argument("--case-sensitive", action=argparse.BooleanOptionalAction,
                        default=settings.case_sensitive,
                        help="Distinguish a/A and tag diacritics with the letter case")
    parser.add_argument("--category", choices=CATEGORY_CHOICES, default=settings.category,
                        help="Which category to list")
    parser.add_argument("--sort", choices=[m.value for m in SortMode], default=settings.sort_mode.value,
                        help="Order of the listed characters")
    parser.add_argument("--json", type=Path, help="Write the full report to this JSON file")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be done without writing files")
    return parser


def main(argv: Optional[list[str]] = None):
    try:
        settings = load_settings()
    except ValueError as e:
        fail(str(e))

    args = build_parser(settings).parse_args(argv)

    print("Counting Characters")
    print("=" * 40)

    # Step 1: Read input
    print("\n1. Reading input...")
    try:
        if args.text is not None:
            text = args.text
        elif args.input:
            text = read_source(args.input)
        else:
            fail("Provide an input file or --text")

        discount_text = args.discount
        if args.discount_file:
            discount_text += read_text_file(Path(args.discount_file))
    except FileNotFoundError as e:
        fail(f"File not found: {e.filename}")
    except UnicodeDecodeError as e:
        fail(f"Input is not valid UTF-8: {e}")

    # Step 2: Analyze
    print("\n2. Analyzing...")
    report = run_analysis(text, discount_text, args.case_sensitive)
    print(f"   {report.input_length} znaků")
    if report.discount:
        print(f"   Discounting {sum(report.discount.values())} characters")

    # Step 3: Statistics
    print("\n3. Statistics")
    print_stats(report)

    # Step 4: Detailed results
    print(f"\n4. Results ({args.category}, {args.sort})")
    entries = build_entries(report.original, report.discount, args.category, args.sort, args.case_sensitive)
    print_entries(entries)

    # Step 5: Write report
    if args.json:
        doc = report.to_dict()
        errors = iter_report_errors(doc)
        if errors:
            fail("Report failed validation:\n" + "\n".join(f"  - {err}" for err in errors))

        if args.dry_run:
            print(f"\n5. DRY RUN - would write {args.json}")
        elif write_json_document(doc, args.json):
            print(f"\n5. Written report to {args.json}")
        else:
            print(f"\n5. Report unchanged: {args.json}")


if __name__ == '__main__':
    main()
