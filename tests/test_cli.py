"""CLI parser behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from docnav import cli
from docnav.cli import _build_parser


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "lists"])
    assert args.verbose is True
    assert args.command == "lists"
    assert args.path == "."


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["samples", "--verbose"])
    assert args.verbose is True
    assert args.command == "samples"


def test_cli_accepts_pages_and_offline_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(["lists", "site", "--pages", "pages.yml"])
    assert args.path == "site"
    assert args.pages == "pages.yml"

    args = parser.parse_args(["samples", "--offline"])
    assert args.offline is True


def test_cli_main_reports_missing_manifest(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda **_: None)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["lists", str(tmp_path)])

    assert excinfo.value.code == 1


def test_cli_main_writes_lists(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda **_: None)
    (tmp_path / "pages.yml").write_text(
        "- link: guide/a.html\n  fields: {page.title: A, page.type: guide}\n", encoding="utf-8"
    )

    cli.main(["lists", str(tmp_path), "--pages", str(tmp_path / "pages.yml")])

    assert "Metadata lists written" in capsys.readouterr().out
    assert (tmp_path / "out" / "jd_lists_unified.js").exists()


def test_cli_collects_debug_areas() -> None:
    parser = _build_parser()

    assert parser.parse_args(["lists"]).debug_area == []
    args = parser.parse_args(["--debug-area", "samples", "--debug-area", "writer", "samples"])
    assert args.debug_area == ["samples", "writer"]

    with pytest.raises(SystemExit):
        parser.parse_args(["--debug-area", "network", "lists"])


def test_cli_main_passes_debug_areas(tmp_path: Path, monkeypatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: calls.append(kwargs))

    assert cli.main(["--debug-area", "samples", "samples", str(tmp_path)]) is None

    assert calls == [{"verbose": False, "debug_areas": ["samples"]}]
