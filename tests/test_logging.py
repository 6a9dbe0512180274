"""
Tests for artiver.logging module.
"""

from __future__ import annotations

import io

from artiver.logging import (
    DefaultLogger,
    SilentLogger,
    get_global_logger,
    get_logger,
    set_global_logger,
)
from artiver.versioning import parse


class TestDefaultLogger:
    """Tests for DefaultLogger."""

    def test_quiet_by_default(self, capsys):
        """Test that nothing is printed without flags."""
        logger = DefaultLogger()
        logger.verbose("GATES", "hidden")
        logger.debug("GATES", "hidden")
        assert capsys.readouterr().out == ""

    def test_verbose(self, capsys):
        """Test verbose mode prints verbose but not debug lines."""
        logger = DefaultLogger(verbose=True)
        logger.verbose("CONFIG", "shown")
        logger.debug("CONFIG", "hidden")
        assert capsys.readouterr().out == "[CONFIG] shown\n"

    def test_debug_implies_verbose(self, capsys):
        """Test debug mode prints both levels."""
        logger = get_logger(debug=True)
        logger.verbose("A", "one")
        logger.debug("B", "two")
        assert capsys.readouterr().out == "[A] one\n[B] two\n"

    def test_custom_stream(self, capsys):
        """Test writing to a stream other than stdout."""
        buf = io.StringIO()
        DefaultLogger(verbose=True, stream=buf).verbose("GATES", "x")
        assert buf.getvalue() == "[GATES] x\n"
        assert capsys.readouterr().out == ""

    def test_get_logger_without_flags_is_silent(self):
        """Test that get_logger() with no flags returns a silent logger."""
        assert isinstance(get_logger(), SilentLogger)


class TestGlobalLogger:
    """Tests for the global logger."""

    def test_default_is_silent(self):
        """Test the global logger starts out silent."""
        assert isinstance(get_global_logger(), SilentLogger)

    def test_set_global_logger(self):
        """Test replacing the global logger."""
        logger = DefaultLogger(verbose=True)
        set_global_logger(logger)
        assert get_global_logger() is logger

    def test_parse_uses_global_logger(self, capsys):
        """Test that parse reports through the global logger."""
        set_global_logger(DefaultLogger(debug=True))
        parse("1.0b1")
        assert "[VERSION] Parsed '1.0b1' -> 1.0b1" in capsys.readouterr().out

    def test_silent_logger_prints_nothing(self, capsys):
        """Test that parsing is quiet with the silent logger."""
        set_global_logger(SilentLogger())
        parse("1.0b1")
        assert capsys.readouterr().out == ""
