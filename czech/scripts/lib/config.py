#!/usr/bin/env python3
"""
config.py

Default settings for the character counter, read from the environment.

A .env file at the project root (see paths.ENV_FILE) is loaded first;
variables already set in the environment win over it.

    CETNIK_CASE_SENSITIVE=true
    CETNIK_SORT_MODE=frequency
    CETNIK_CATEGORY=letters
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .analysis_result import CATEGORIES
from .paths import ENV_FILE
from .results import ALL_CATEGORIES
from .sorter import SortMode, parse_sort_mode

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}

CATEGORY_CHOICES = (ALL_CATEGORIES, *CATEGORIES)


@dataclass(frozen=True)
class Settings:
    case_sensitive: bool = False
    sort_mode: SortMode = SortMode.ALPHABETICAL
    category: str = ALL_CATEGORIES


def parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (got {value!r})")


def parse_category(category: str) -> str:
    if category not in CATEGORY_CHOICES:
        raise ValueError(f"Unknown category: {category}. Available: {list(CATEGORY_CHOICES)}")
    return category


def load_settings(env_file: Path = ENV_FILE) -> Settings:
    """
    Load settings from env_file (if present) and the process environment.

    Raises:
        ValueError: If a CETNIK_* variable holds an invalid value
    """
    if env_file.exists():
        load_dotenv(env_file, override=False)

    defaults = Settings()

    try:
        sort_mode = parse_sort_mode(os.environ.get("CETNIK_SORT_MODE", defaults.sort_mode.value))
    except ValueError as e:
        raise ValueError(f"CETNIK_SORT_MODE: {e}") from None

    try:
        category = parse_category(os.environ.get("CETNIK_CATEGORY", defaults.category))
    except ValueError as e:
        raise ValueError(f"CETNIK_CATEGORY: {e}") from None

    return Settings(
        case_sensitive=parse_bool(
            "CETNIK_CASE_SENSITIVE", os.environ.get("CETNIK_CASE_SENSITIVE", "")
        ),
        sort_mode=sort_mode,
        category=category,
    )
