"""Tests for the slugline command-line interface."""
from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from slugline.cli import build_parser, main, resolve_cli_options


def test_cli_slugs_positional_text(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["Hello", "World"])

    assert exit_code == 0
    assert capsys.readouterr().out == "hello-world\n"


def test_cli_ascii_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--ascii", "Český Krumlov"]) == 0
    assert capsys.readouterr().out == "cesky-krumlov\n"


def test_cli_reads_lines_from_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("One\n\nTwo words\n"))

    assert main(["--separator", "_"]) == 0
    assert capsys.readouterr().out == "one\ntwo_words\n"


def test_cli_detailed_outputs_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--detailed", "--ascii", "--emoji", "name", "Hi 🚀"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["slug"] == "hi-rocket"
    assert payload["tokens"] == ["hi", "rocket"]
    assert payload["steps"]


def test_cli_preset_and_flags(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--preset", "cyber", "--max-length", "9", "C++ & C# 🚀"]) == 0
    assert capsys.readouterr().out == "cpp\n"


def test_cli_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "slug.yaml"
    config_path.write_text("separator: .\nalphabet: ascii\n", encoding="utf-8")

    assert main(["--config", str(config_path), "Straße Eins"]) == 0
    assert capsys.readouterr().out == "strasse.eins\n"


def test_cli_missing_config_reports_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--config", str(tmp_path / "missing.yaml"), "x"]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_cli_overrides_map_to_options() -> None:
    parser = build_parser()
    args = parser.parse_args(
        [
            "--symbols",
            "off",
            "--stopwords",
            "foo, bar",
            "--drop-numbers",
            "--keep-case",
            "--no-strict",
            "--unknown",
            "drop",
            "--mode",
            "semantic",
            "--reserved",
            "admin",
            "root",
            "--fallback",
            "empty",
            "--",
            "text",
        ]
    )

    options = resolve_cli_options(args)

    assert options.symbols is None
    assert options.stopwords == ("foo", "bar")
    assert options.keep_numbers is False
    assert options.lowercase is False
    assert options.strict is False
    assert options.unknown == "drop"
    assert options.mode == "semantic"
    assert options.reserved == ("admin", "root")
    assert options.fallback == "empty"
    assert args.text == ["text"]


def test_cli_rejects_invalid_separator_choice() -> None:
    with pytest.raises(SystemExit):
        main(["--separator", "/", "x"])
