import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from flagwright.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_cli_mode_uses_rich(restore_root_logger):
    setup_logging(mode="cli", log_filename=None)
    assert any(isinstance(handler, RichHandler) for handler in restore_root_logger.handlers)


def test_json_mode_from_environment(monkeypatch, restore_root_logger):
    monkeypatch.setenv("FLAGWRIGHT_LOG_MODE", "json")
    setup_logging(log_filename=None)
    (handler,) = restore_root_logger.handlers
    assert isinstance(handler.formatter, JsonFormatter)


def test_file_handler(tmp_path, restore_root_logger):
    log_file = tmp_path / "flagwright.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    logging.getLogger("flagwright").debug("resolving %s", "-n")
    for handler in restore_root_logger.handlers:
        handler.flush()
    assert '"message": "resolving -n"' in log_file.read_text(encoding="UTF-8")


def test_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode: xml"):
        setup_logging(mode="xml", log_filename=None)
