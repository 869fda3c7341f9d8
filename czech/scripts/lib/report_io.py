#!/usr/bin/env python3
"""
report_io.py

Read input text files and write/validate analysis report documents.
"""

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft7Validator

from .paths import REPORT_SCHEMA_PATH


# ---------------------------------------------------------------------------
# Text Input
# ---------------------------------------------------------------------------

def read_text_file(filepath: Path) -> str:
    """
    Read a UTF-8 text file, dropping a leading byte order mark.

    Raises:
        FileNotFoundError: If the file does not exist
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, "r", encoding="utf-8-sig") as f:
        return f.read()


# ---------------------------------------------------------------------------
# Schema Validation
# ---------------------------------------------------------------------------

def load_report_schema(schema_path: Path = REPORT_SCHEMA_PATH) -> dict[str, Any]:
    """Load the analysis report JSON Schema."""
    with open(schema_path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_report(doc: dict, schema_path: Path = REPORT_SCHEMA_PATH) -> None:
    """
    Validate a report document against the schema.

    Raises:
        jsonschema.ValidationError: The first (best-matching) validation error
    """
    validator = Draft7Validator(load_report_schema(schema_path))
    validator.validate(doc)


def iter_report_errors(doc: dict, schema_path: Path = REPORT_SCHEMA_PATH) -> list[str]:
    """Return every validation error as "path: message"."""
    validator = Draft7Validator(load_report_schema(schema_path))
    messages = []
    for error in validator.iter_errors(doc):
        path = ".".join(str(p) for p in error.absolute_path) or "(root)"
        messages.append(f"{path}: {error.message}")
    return messages


# ---------------------------------------------------------------------------
# JSON Document Writing
# ---------------------------------------------------------------------------

def write_json_document(doc: dict, filepath: Path) -> bool:
    """
    Write a JSON document with standard formatting.

    Uses ensure_ascii=False, indent=2, and adds trailing newline.

    Args:
        doc: The document to write
        filepath: Path to write to

    Returns:
        True if file was created or content changed, False if unchanged
    """
    if filepath.exists():
        with open(filepath, "r", encoding="utf-8") as f:
            try:
                existing = json.load(f)
                if existing == doc:
                    return False  # No change
            except json.JSONDecodeError:
                pass  # File is corrupted, overwrite it

    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(doc, f, ensure_ascii=False, indent=2)
        f.write("\n")

    return True
