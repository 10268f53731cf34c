import logging

import pytest

from contractor_registry.app.core.logging_config import setup_logging


@pytest.fixture
def bare_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_writes_to_log_file(bare_root_logger, tmp_path):
    bare_root_logger.handlers = []  # drop pytest's per-phase LogCaptureHandlers
    log_file = tmp_path / "logs" / "registry.log"

    setup_logging("debug", str(log_file))
    logging.getLogger("contractor_registry.test").debug("seeded %d records", 24)
    for handler in bare_root_logger.handlers:
        handler.flush()

    assert bare_root_logger.level == logging.DEBUG
    assert len(bare_root_logger.handlers) == 2
    assert "[DEBUG] contractor_registry.test: seeded 24 records" in log_file.read_text(encoding="utf-8")


def test_setup_logging_unknown_level_means_info(bare_root_logger):
    bare_root_logger.handlers = []  # drop pytest's per-phase LogCaptureHandlers
    setup_logging("chatty")
    assert bare_root_logger.level == logging.INFO
    assert len(bare_root_logger.handlers) == 1


def test_setup_logging_keeps_existing_handlers(bare_root_logger):
    bare_root_logger.handlers = []  # drop pytest's per-phase LogCaptureHandlers
    existing = logging.NullHandler()
    bare_root_logger.addHandler(existing)

    setup_logging("DEBUG")

    assert bare_root_logger.handlers == [existing]
