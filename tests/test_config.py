"""Tests for quicknotes.config module."""

import logging
import os

import pytest

from quicknotes import config


class TestDataDir:
    """Tests for data directory resolution."""

    def test_env_override_is_created(self, tmp_path, monkeypatch):
        """QUICKNOTES_DATA_DIR is used and created on demand."""
        target = tmp_path / 'nested' / 'data'
        monkeypatch.setenv('QUICKNOTES_DATA_DIR', str(target))

        assert config.get_data_dir() == str(target)
        assert target.is_dir()

    def test_db_path_inside_data_dir(self, tmp_path, monkeypatch):
        """The database file lives in the data directory."""
        monkeypatch.setenv('QUICKNOTES_DATA_DIR', str(tmp_path))

        assert config.get_db_path() == os.path.join(str(tmp_path), 'notes.db')


class TestSearchDelay:
    """Tests for get_search_delay_ms."""

    @pytest.mark.parametrize(
        'value,expected',
        [
            (None, 200),
            ('50', 50),
            ('0', 0),
            ('-10', 0),
            ('soon', 200),
        ],
    )
    def test_values(self, monkeypatch, value, expected):
        """Valid integers are used, others fall back to the default."""
        if value is None:
            monkeypatch.delenv('QUICKNOTES_SEARCH_DELAY_MS', raising=False)
        else:
            monkeypatch.setenv('QUICKNOTES_SEARCH_DELAY_MS', value)

        assert config.get_search_delay_ms() == expected


class TestFirstWeekday:
    """Tests for get_first_weekday."""

    @pytest.mark.parametrize(
        'value,expected',
        [
            (None, 0),
            ('6', 6),
            ('3', 3),
            ('7', 0),
            ('-1', 0),
            ('sunday', 0),
        ],
    )
    def test_values(self, monkeypatch, value, expected):
        """Days 0-6 are accepted, anything else means Monday."""
        if value is None:
            monkeypatch.delenv('QUICKNOTES_FIRST_WEEKDAY', raising=False)
        else:
            monkeypatch.setenv('QUICKNOTES_FIRST_WEEKDAY', value)

        assert config.get_first_weekday() == expected


class TestLogging:
    """Tests for log level handling."""

    @pytest.mark.parametrize(
        'value,expected',
        [
            ('DEBUG', logging.DEBUG),
            ('warning', logging.WARNING),
            ('nonsense', logging.INFO),
            ('', logging.INFO),
        ],
    )
    def test_get_log_level(self, monkeypatch, value, expected):
        """LOG_LEVEL names map to logging levels."""
        monkeypatch.setenv('LOG_LEVEL', value)
        assert config.get_log_level() == expected

    def test_setup_logging_returns_package_logger(self, monkeypatch):
        """setup_logging hands back the quicknotes logger."""
        monkeypatch.setenv('LOG_LEVEL', 'DEBUG')
        logger = config.setup_logging()
        assert logger.name == 'quicknotes'
