"""
Tests for loguru setup.
"""

import sys

import pytest
from loguru import logger

from note_search.config import Settings
from note_search.search.engine import SearchEngine
from note_search.utils.logger import setup_logger


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_installs_console_and_file_handlers(self, tmp_path):
        handler_ids = setup_logger(level="info", log_file=tmp_path / "logs" / "notes.log")

        assert len(handler_ids) == 2
        assert (tmp_path / "logs").is_dir()

    def test_console_only(self):
        assert len(setup_logger(level="WARNING")) == 1

    def test_file_keeps_package_records(self, tmp_path):
        log_file = tmp_path / "notes.log"
        setup_logger(level="info", log_file=log_file)

        SearchEngine(settings=Settings(_env_file=None))
        logger.info("unrelated info record")
        logger.warning("unrelated warning record")
        logger.remove()

        text = log_file.read_text()
        assert "Created search engine" in text
        assert "unrelated warning record" in text
        assert "unrelated info record" not in text

    def test_level_applies_to_package_records(self, tmp_path):
        log_file = tmp_path / "notes.log"
        setup_logger(level="warning", log_file=log_file)

        SearchEngine(settings=Settings(_env_file=None))
        logger.remove()

        assert "Created search engine" not in log_file.read_text()
