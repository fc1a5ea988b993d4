from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from randkit.cli import app


def test_text_words_with_lexicon(tmp_path: Path) -> None:
    words = tmp_path / "words.txt"
    words.write_text("alpha\nbeta\n", encoding="utf-8")
    result = CliRunner().invoke(
        app, ["text", "--length", "4", "--unit", "word", "--lexicon", str(words)]
    )
    assert result.exit_code == 0
    tokens = result.stdout.strip().split(" ")
    assert len(tokens) == 4
    assert set(tokens) <= {"alpha", "beta"}


def test_text_uses_config_defaults(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yml"
    cfg.write_text("generation:\n  length: 2\n  unit: sentence\n", encoding="utf-8")
    result = CliRunner().invoke(app, ["text", "--config", str(cfg), "--secure"])
    assert result.exit_code == 0
    lines = result.stdout.strip().split("\n")
    assert len(lines) == 2
    assert all(line.endswith(".") for line in lines)


def test_text_zero_length() -> None:
    result = CliRunner().invoke(app, ["text", "-n", "0"])
    assert result.exit_code == 0
    assert result.stdout.strip() == ""


def test_int_range() -> None:
    result = CliRunner().invoke(app, ["int", "--", "-5", "5"])
    assert result.exit_code == 0
    assert -5 <= int(result.stdout) < 5


def test_int_inverted_range_exits_5() -> None:
    result = CliRunner().invoke(app, ["int", "10", "3"])
    assert result.exit_code == 5


def test_string_charset() -> None:
    result = CliRunner().invoke(app, ["string", "12", "--charset", "xy", "--fast"])
    assert result.exit_code == 0
    assert re.fullmatch(r"[xy]{12}", result.stdout.strip())


def test_pick() -> None:
    result = CliRunner().invoke(app, ["pick", "red", "green"])
    assert result.exit_code == 0
    assert result.stdout.strip() in {"red", "green"}


def test_pick_without_choices_exits_5() -> None:
    result = CliRunner().invoke(app, ["pick"])
    assert result.exit_code == 5


def test_slug() -> None:
    result = CliRunner().invoke(app, ["slug", "Café au Lait!"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "cafe-au-lait"


def test_bad_config_exits_4(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    result = CliRunner().invoke(app, ["text", "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_missing_config_exits_4(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["int", "3", "--config", str(tmp_path / "nope.yml")])
    assert result.exit_code == 4


def test_empty_lexicon_exits_5(tmp_path: Path) -> None:
    words = tmp_path / "words.txt"
    words.write_text("\n", encoding="utf-8")
    result = CliRunner().invoke(app, ["text", "--lexicon", str(words)])
    assert result.exit_code == 5


def test_unknown_unit_exits_5() -> None:
    result = CliRunner().invoke(app, ["text", "--unit", "chapter"])
    assert result.exit_code == 5


def test_env_secure_flag(monkeypatch: Any) -> None:
    monkeypatch.setenv("RANDKIT_SECURE", "yes")
    result = CliRunner().invoke(app, ["string", "8"])
    assert result.exit_code == 0
    assert len(result.stdout.strip()) == 8


def test_repeated_invocations_share_one_process() -> None:
    runner = CliRunner()
    first = runner.invoke(app, ["int", "3"])
    second = runner.invoke(app, ["int", "3", "--verbose"])
    third = runner.invoke(app, ["string", "4"])
    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert third.exit_code == 0, third.output
    assert int(second.stdout.strip().splitlines()[-1]) in {0, 1, 2}


def test_int_single_bound_secure() -> None:
    result = CliRunner().invoke(app, ["int", "7", "--secure"])
    assert result.exit_code == 0
    assert 0 <= int(result.stdout) < 7


def test_date_uses_default_french_locale() -> None:
    result = CliRunner().invoke(app, ["date", "2024-03-05", "--format", "dddd D MMMM YYYY"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "mardi 5 mars 2024"


def test_date_reads_dates_section_from_config(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yml"
    cfg.write_text(
        "dates:\n  locale: en\n  separator: ' | '\n  unique: true\n", encoding="utf-8"
    )
    result = CliRunner().invoke(
        app,
        [
            "date",
            "2024-03-05",
            "2024-03-05",
            "2024-12-25",
            "--format",
            "ddd D MMM",
            "--config",
            str(cfg),
        ],
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "Tue 5 Mar | Wed 25 Dec"


def test_date_locale_option_overrides_config() -> None:
    result = CliRunner().invoke(app, ["date", "2024-03-05", "-f", "MMMM", "--locale", "en"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "March"


def test_date_default_preset() -> None:
    result = CliRunner().invoke(app, ["date", "2024-03-05"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "05/03/2024"


def test_date_without_values_formats_now() -> None:
    result = CliRunner().invoke(app, ["date", "-f", "YYYY"])
    assert result.exit_code == 0
    assert re.fullmatch(r"\d{4}", result.stdout.strip())


def test_date_unparseable_exits_5() -> None:
    result = CliRunner().invoke(app, ["date", "not-a-date"])
    assert result.exit_code == 5


def test_date_unknown_locale_exits_5() -> None:
    result = CliRunner().invoke(app, ["date", "2024-03-05", "--locale", "de"])
    assert result.exit_code == 5
