import logging
from pathlib import Path

from fqcheck.common.logging import setup_logging


def _close_root_handlers():
    for handler in logging.getLogger().handlers:
        handler.close()


def test_log_file_written_with_chosen_detail(tmp_path: Path):
    setup_logging(
        omit_log=False,
        directory=str(tmp_path),
        filename="run.log",
        severity="DEBUG",
        verbosity="LOW",
        silent_mode=True,
    )
    try:
        logging.getLogger("fqcheck.test").debug("hello")
        assert (tmp_path / "run.log").read_text() == "DEBUG:fqcheck.test:hello\n"
    finally:
        _close_root_handlers()


def test_severity_filters_messages(tmp_path: Path):
    setup_logging(
        omit_log=False,
        directory=str(tmp_path),
        filename="run.log",
        severity="WARNING",
        verbosity="LOW",
        silent_mode=True,
    )
    try:
        logging.getLogger("fqcheck.test").info("quiet")
        logging.getLogger("fqcheck.test").warning("loud")
        assert (tmp_path / "run.log").read_text() == "WARNING:fqcheck.test:loud\n"
    finally:
        _close_root_handlers()


def test_stdout_only(tmp_path: Path, capsys):
    setup_logging(
        omit_log=True,
        directory=str(tmp_path),
        filename="run.log",
        severity="INFO",
        verbosity="LOW",
    )
    try:
        logging.getLogger("fqcheck.test").info("to stdout")
        assert "INFO:fqcheck.test:to stdout" in capsys.readouterr().out
    finally:
        logging.basicConfig(force=True, handlers=[])
    assert not (tmp_path / "run.log").exists()


def test_silent_and_no_log_installs_no_handlers(tmp_path: Path):
    setup_logging(
        omit_log=True,
        directory=str(tmp_path),
        filename="run.log",
        severity="INFO",
        verbosity="MEDIUM",
        silent_mode=True,
    )
    assert logging.getLogger().handlers == []
