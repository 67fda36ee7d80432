import logging
from logging.handlers import RotatingFileHandler

import pytest

from flighthub_api.app.core.logging_config import UVICORN_LOGGERS, setup_logging


def own_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_flighthub_handler", False)]


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    saved_level = root.level
    saved = own_handlers()
    for handler in saved:
        root.removeHandler(handler)
    yield root
    for handler in own_handlers():
        root.removeHandler(handler)
        handler.close()
    for handler in saved:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_installs_console_handler_once(clean_root):
    setup_logging("INFO")
    setup_logging("DEBUG")

    assert len(own_handlers()) == 1
    assert clean_root.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(clean_root):
    setup_logging("chatty")

    assert clean_root.level == logging.INFO


def test_log_file_is_rotated_handler(clean_root, tmp_path):
    log_path = tmp_path / "flighthub.log"

    setup_logging("INFO", str(log_path))
    logging.getLogger("flighthub_api.test").info("seeded %d flights", 3)

    file_handlers = [h for h in own_handlers() if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    file_handlers[0].flush()
    assert "[INFO] flighthub_api.test: seeded 3 flights" in log_path.read_text(encoding="utf-8")


def test_uvicorn_loggers_propagate_to_root(clean_root):
    logging.getLogger("uvicorn.access").addHandler(logging.NullHandler())
    logging.getLogger("uvicorn.access").propagate = False

    setup_logging("INFO")

    for name in UVICORN_LOGGERS:
        assert logging.getLogger(name).propagate is True
        assert logging.getLogger(name).handlers == []
