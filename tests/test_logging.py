"""Logging configuration tests."""

from __future__ import annotations

import logging

import pytest

from signalcomplete.cli import main
from signalcomplete.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    configure_logging()


def test_get_logger_nests_under_package() -> None:
    assert get_logger().name == "signalcomplete"
    assert get_logger("engine").name == "signalcomplete.engine"


def test_console_handler_is_quiet_unless_verbose() -> None:
    logger = configure_logging()
    [handler] = logger.handlers
    assert handler.level == logging.WARNING

    logger = configure_logging(verbose=True)
    [handler] = logger.handlers
    assert handler.level == logging.DEBUG


def test_log_file_records_debug_messages(tmp_path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    configure_logging(log_file=log_file)

    get_logger("engine").debug("Cache hit for %s", "Button.jsx")

    assert "DEBUG signalcomplete.engine: Cache hit for Button.jsx" in log_file.read_text(encoding="utf-8")


def test_cli_log_file_option_captures_lookup_misses(project, tmp_path) -> None:
    log_file = tmp_path / "cli.log"

    with pytest.raises(SystemExit):
        main(["--log-file", str(log_file), "signals", "Ghost", "--root", str(project.path())])

    assert "No source file found for component 'Ghost'" in log_file.read_text(encoding="utf-8")
