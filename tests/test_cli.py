"""CLI behaviour tests."""

from __future__ import annotations

import json

import pytest

from signalcomplete.cli import _build_parser, _offset_for, main


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()

    assert parser.parse_args(["--verbose", "signals", "Button"]).verbose is True
    assert parser.parse_args(["signals", "Button", "--verbose"]).verbose is True


def test_cli_complete_requires_a_position() -> None:
    parser = _build_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["complete", "App.jsx"])


def test_offset_for_line_and_column() -> None:
    buffer = "one\n<Button pr\nthree"

    assert _offset_for(buffer, 2, None) == len("one\n<Button pr")
    assert _offset_for(buffer, 2, 9) == len("one\n<Button ")


def test_signals_command_prints_json(project, capsys) -> None:
    project.write({"components/Button.jsx": 'lease("Busy", "loading"); signals.pill'})

    main(["signals", "Button", "--root", str(project.path()), "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert [(item["name"], item["category"]) for item in payload] == [
        ("loading", "lease"),
        ("pill", "signal"),
    ]


def test_signals_command_exits_when_component_missing(project) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["signals", "Ghost", "--root", str(project.path())])

    assert excinfo.value.code == 1


def test_scan_command_honours_strategy(project, capsys) -> None:
    project.write({"Field.jsx": "inputSignal.invalid; signals.primary"})

    main(["scan", str(project.path("Field.jsx")), "--strategy", "inputs"])

    out = capsys.readouterr().out
    assert "invalid" in out
    assert "primary" not in out


def test_complete_command_lists_suggestions(project, capsys) -> None:
    project.write(
        {
            "components/Button.jsx": "signals.dense",
            "App.jsx": "<Button dens",
        }
    )

    main(
        [
            "complete",
            str(project.path("App.jsx")),
            "--line",
            "1",
            "--root",
            str(project.path()),
        ]
    )

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    assert "dense" in lines[0]
