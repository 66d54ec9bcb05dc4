"""Tests for scngen logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from scngen.logging import configure_logging, console_level, get_logger


@pytest.fixture(autouse=True)
def _reset_scngen_logger():
    yield
    logger = logging.getLogger("scngen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_console_level(verbose: bool, quiet: bool, expected: int) -> None:
    assert console_level(verbose=verbose, quiet=quiet) == expected


def test_configure_logging_tags_records_with_command(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(command="render")

    get_logger("cli").info("hello")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[scngen render] INFO hello" in captured.err


def test_file_sink_keeps_debug_records_when_console_is_quiet(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    log_file = tmp_path / "a" / "b" / "scngen.log"

    configure_logging(quiet=True, log_file=log_file)
    get_logger("serializer").debug("detail")
    get_logger("cli").info("progress")

    assert capsys.readouterr().err == ""
    text = log_file.read_text(encoding="utf-8")
    assert "DEBUG scngen.serializer: detail" in text
    assert "INFO scngen.cli: progress" in text


def test_reconfiguring_replaces_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
