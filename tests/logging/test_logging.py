"""Tests for the sexpand logger hierarchy and CLI level mapping."""

import logging
import sys
from io import StringIO

import pytest

from sexpand.logging import (
    ROOT_LOGGER_NAME,
    get_logger,
    level_for_flags,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Start and end every test with an unconfigured ``sexpand`` logger."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def captured() -> StringIO:
    """Install a StringIO-backed handler on the ``sexpand`` logger."""
    stream = StringIO()
    setup_root_logger(
        level=logging.INFO,
        format_string="%(levelname)s %(name)s %(message)s",
        handler=logging.StreamHandler(stream),
    )
    return stream


class TestLevelForFlags:
    """Tests for level_for_flags."""

    def test_default_is_info(self) -> None:
        assert level_for_flags() == logging.INFO

    def test_verbose_is_debug(self) -> None:
        assert level_for_flags(verbose=True) == logging.DEBUG

    def test_quiet_is_warning(self) -> None:
        assert level_for_flags(quiet=True) == logging.WARNING

    def test_verbose_wins_over_quiet(self) -> None:
        assert level_for_flags(verbose=True, quiet=True) == logging.DEBUG


class TestLoggerHierarchy:
    """Module loggers inherit from the ``sexpand`` logger."""

    def test_module_logger_writes_through_root_handler(self, captured) -> None:
        get_logger("sexpand.notation.parser").info("parsed")
        assert captured.getvalue() == "INFO sexpand.notation.parser parsed\n"

    def test_debug_filtered_until_level_lowered(self, captured) -> None:
        logger = get_logger("sexpand.template")
        logger.debug("hidden")
        assert captured.getvalue() == ""

        set_global_log_level(level_for_flags(verbose=True))
        logger.debug("shown")
        assert "shown" in captured.getvalue()

    def test_level_change_reaches_existing_and_new_loggers(self) -> None:
        existing = get_logger("sexpand.cli")
        set_global_log_level(logging.WARNING)
        assert existing.getEffectiveLevel() == logging.WARNING
        assert get_logger("sexpand.config").getEffectiveLevel() == logging.WARNING

    def test_setup_is_idempotent(self, captured) -> None:
        setup_root_logger(level=logging.DEBUG)
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.INFO

    def test_default_handler_writes_to_stderr(self) -> None:
        """stdout is left free for expansion results."""
        setup_root_logger()
        (handler,) = logging.getLogger(ROOT_LOGGER_NAME).handlers
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
