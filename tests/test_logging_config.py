import logging
from logging.handlers import RotatingFileHandler

import pytest

from core.config import AppSettings
from core.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def _ours(root):
    return [h for h in root.handlers if getattr(h, "_gamestatus_handler", False)]


def test_repeated_calls_do_not_duplicate_handlers():
    settings = AppSettings(_env_file=None, log_level="WARNING")

    configure_logging(settings)
    root = configure_logging(settings)

    handlers = _ours(root)
    assert len(handlers) == 1
    assert handlers[0].level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    root = configure_logging(AppSettings(_env_file=None, log_level="chatty"))

    assert _ours(root)[0].level == logging.INFO


def test_debug_file_is_rotating(tmp_path):
    log_path = tmp_path / "debug.log"
    root = configure_logging(AppSettings(_env_file=None, debug_log_enabled=True, debug_log_path=log_path))

    file_handlers = [h for h in _ours(root) if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 5 * 1024 * 1024
    assert file_handlers[0].backupCount == 3

    logging.getLogger("gamestatus.test").debug("hello file")
    file_handlers[0].flush()
    assert "hello file" in log_path.read_text(encoding="utf-8")
