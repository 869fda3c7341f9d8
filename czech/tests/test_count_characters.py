#!/usr/bin/env python3
"""
test_count_characters.py

Command-line runs of analyzers/count_characters.py.
"""

import json
import sys
from pathlib import Path

import pytest

# Add parent directories to path for lib imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "scripts"))

from analyzers.count_characters import main
from lib.report_io import validate_report

ENV_NAMES = ("CETNIK_CASE_SENSITIVE", "CETNIK_SORT_MODE", "CETNIK_CATEGORY")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_text_argument(capsys):
    main(["--text", "aá1!"])
    out = capsys.readouterr().out

    assert "4 znaků" in out
    assert "| Celkem | Písmena | Diakritika | Symboly | Čísla |" in out
    assert "| 5 | 2 | 1 | 1 | 1 |" in out
    assert "| A | - | 2 | 2 | - |" in out
    assert "| ´ | - | 1 | 1 | - |" in out


def test_file_input_with_discount(tmp_path: Path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("kůň kůň", encoding="utf-8")

    main([str(source), "--discount", "ů", "--category", "letters", "--sort", "frequency"])
    out = capsys.readouterr().out

    assert "Discounting 2 characters" in out
    assert "4. Results (letters, frequency)" in out
    assert "| K | - | 2 | 2 | - |" in out
    assert "| U | - | 1 | 2 | -1 |" in out


def test_case_sensitive_labels(capsys):
    main(["--text", "Áá", "--case-sensitive", "--category", "diacritics"])
    out = capsys.readouterr().out

    assert "| ´ | velké | 1 | 1 | - |" in out
    assert "| ´ | malé | 1 | 1 | - |" in out


def test_discount_file(tmp_path: Path, capsys):
    discount = tmp_path / "discount.txt"
    discount.write_text("x\n", encoding="utf-8")

    main(["--text", "a", "--discount-file", str(discount), "--sort", "alphabetical"])
    out = capsys.readouterr().out

    assert "| X | - | -1 | 0 | -1 |" in out


def test_json_report_is_written(tmp_path: Path, capsys):
    target = tmp_path / "out" / "report.json"

    main(["--text", "Žluťoučký kůň", "--discount", "ˇ", "--json", str(target)])
    out = capsys.readouterr().out

    assert f"Written report to {target}" in out
    doc = json.loads(target.read_text(encoding="utf-8"))
    validate_report(doc)
    assert doc["inputLength"] == 12

    main(["--text", "Žluťoučký kůň", "--discount", "ˇ", "--json", str(target)])
    assert "Report unchanged" in capsys.readouterr().out


def test_dry_run_writes_nothing(tmp_path: Path, capsys):
    target = tmp_path / "report.json"
    main(["--text", "abc", "--json", str(target), "--dry-run"])

    assert "DRY RUN" in capsys.readouterr().out
    assert not target.exists()


def test_settings_provide_defaults(clean_env, capsys):
    clean_env.setenv("CETNIK_CATEGORY", "numbers")
    main(["--text", "a1"])
    out = capsys.readouterr().out

    assert "4. Results (numbers, alphabetical)" in out
    assert "| A |" not in out


def test_flag_overrides_case_sensitive_setting(clean_env, capsys):
    clean_env.setenv("CETNIK_CASE_SENSITIVE", "true")

    main(["--text", "aA", "--category", "letters"])
    out = capsys.readouterr().out
    assert "| a | - | 1 | 1 | - |" in out
    assert "| A | - | 1 | 1 | - |" in out

    main(["--text", "aA", "--no-case-sensitive", "--category", "letters"])
    assert "| A | - | 2 | 2 | - |" in capsys.readouterr().out


def test_empty_results(capsys):
    main(["--text", "   "])
    assert "Nothing to show." in capsys.readouterr().out


def test_missing_file_exits(tmp_path: Path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.txt")])
    assert exc.value.code == 1
    assert "Error: File not found" in capsys.readouterr().out


def test_missing_input_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1
    assert "Error: Provide an input file or --text" in capsys.readouterr().out


def test_invalid_setting_exits(clean_env, capsys):
    clean_env.setenv("CETNIK_SORT_MODE", "random")
    with pytest.raises(SystemExit) as exc:
        main(["--text", "a"])
    assert exc.value.code == 1
    assert "CETNIK_SORT_MODE" in capsys.readouterr().out
