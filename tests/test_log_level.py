"""Tests for log levels"""

import pytest

from android_logging import InvalidLevelError, LogLevel, rank_of
from android_logging.core.log_level import LEVEL_FROM_NAME, LEVEL_NAMES

NAMES = ["Fatal", "Error", "Warn", "Info", "Debug", "Trace"]


class TestLogLevel:
    """Test log level functionality."""

    def test_rank_order(self):
        assert [rank_of(name) for name in NAMES] == [0, 1, 2, 3, 4, 5]

    def test_log_levels(self):
        assert LogLevel.FATAL < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.DEBUG
        assert LogLevel.DEBUG < LogLevel.TRACE

    def test_from_string(self):
        assert LogLevel.from_string("Debug") == LogLevel.DEBUG
        assert LogLevel.from_string("Warn") == LogLevel.WARN

    @pytest.mark.parametrize("name", ["debug", "DEBUG", "Warning", "Verbose", "", " Info", None, 3])
    def test_from_string_rejects_unknown(self, name):
        with pytest.raises(InvalidLevelError):
            LogLevel.from_string(name)

    def test_invalid_level_is_value_error(self):
        with pytest.raises(ValueError, match="Invalid log level supplied: Loud"):
            rank_of("Loud")

    def test_label_and_letter(self):
        assert [level.label for level in LogLevel] == NAMES
        assert [level.letter for level in LogLevel] == ["F", "E", "W", "I", "D", "T"]
        assert str(LogLevel.INFO) == "Info"

    def test_coerce(self):
        assert LogLevel.coerce(LogLevel.TRACE) is LogLevel.TRACE
        assert LogLevel.coerce("Error") is LogLevel.ERROR
        with pytest.raises(InvalidLevelError):
            LogLevel.coerce("error")

    def test_name_tables_are_inverse(self):
        assert len(LEVEL_NAMES) == 6
        for level, name in LEVEL_NAMES.items():
            assert LEVEL_FROM_NAME[name] is level
