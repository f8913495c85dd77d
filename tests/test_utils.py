import logging

import pytest
from rich.logging import RichHandler

from progopts.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)


def test_setup_logging_cli_mode():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_json_mode_with_file(tmp_path):
    log_file = tmp_path / "progopts.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    logging.getLogger("progopts").debug("hello")
    for handler in handlers:
        handler.flush()
    assert "hello" in log_file.read_text()
    for handler in handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()


def test_setup_logging_env_mode(monkeypatch):
    monkeypatch.setenv("PROGOPTS_LOG_MODE", "cli")
    setup_logging()
    assert isinstance(logging.getLogger().handlers[0], RichHandler)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")
