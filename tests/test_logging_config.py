import logging
from pathlib import Path

import pytest

from people_api.app.core.config import Settings
from people_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging
from people_api.app.main import create_app


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    previous = logger.level
    yield logger
    logger.setLevel(previous)


def test_level_is_applied_on_every_call(package_logger: logging.Logger) -> None:
    assert setup_logging("DEBUG") == logging.DEBUG
    assert package_logger.level == logging.DEBUG

    assert setup_logging("warning") == logging.WARNING
    assert package_logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(package_logger: logging.Logger) -> None:
    assert setup_logging("chatty") == logging.INFO
    assert package_logger.level == logging.INFO


def test_create_app_applies_configured_level(package_logger: logging.Logger, store, clock) -> None:
    create_app(Settings(log_level="ERROR", seed_sample_data=False), store=store, clock=clock)
    assert package_logger.level == logging.ERROR

    create_app(Settings(log_level="DEBUG", seed_sample_data=False), store=store, clock=clock)
    assert package_logger.level == logging.DEBUG


def test_file_handler_is_added_once_per_path(package_logger: logging.Logger, tmp_path: Path) -> None:
    logfile = tmp_path / "people.log"
    root = logging.getLogger()

    try:
        setup_logging("INFO", str(logfile))
        setup_logging("INFO", str(logfile))
        file_handlers = [
            handler
            for handler in root.handlers
            if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == logfile.resolve()
        ]

        assert len(file_handlers) == 1
        logging.getLogger("people_api.tests").info("written to file")
        file_handlers[0].flush()
        assert "written to file" in logfile.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == logfile.resolve():
                root.removeHandler(handler)
                handler.close()
