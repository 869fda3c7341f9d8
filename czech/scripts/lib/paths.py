#!/usr/bin/env python3
"""
paths.py

Centralized path configuration for the Czech character counter.
All scripts should import paths from this module rather than defining them locally.
"""

from pathlib import Path

# ---------------------------------------------------------------------------
# Base Directories
# ---------------------------------------------------------------------------

LIB_DIR = Path(__file__).resolve().parent
SCRIPT_DIR = LIB_DIR.parent
CZECH_ROOT = SCRIPT_DIR.parent
PROJECT_ROOT = CZECH_ROOT.parent

# ---------------------------------------------------------------------------
# Data Directories
# ---------------------------------------------------------------------------

DATA_DIR = CZECH_ROOT / "data"

# JSON Schema for analysis report documents
REPORT_SCHEMA_PATH = DATA_DIR / "analysis-report.schema.json"

# ---------------------------------------------------------------------------
# Output Directories
# ---------------------------------------------------------------------------

DOCS_DIR = CZECH_ROOT / "docs"
REPORTS_DIR = DOCS_DIR / "reports"

# ---------------------------------------------------------------------------
# Settings (CETNIK_* defaults)
# ---------------------------------------------------------------------------

ENV_FILE = PROJECT_ROOT / ".env"
