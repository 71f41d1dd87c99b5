# SPDX-License-Identifier: GPL-3.0-or-later
"""Environment-driven configuration and logging setup."""

import logging
import os

from quicknotes.constants import (
    DATA_DIR_NAME,
    DB_FILENAME,
    FIRST_WEEKDAY,
    SEARCH_DELAY_MS,
)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_env(key, default=None):
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def get_env_int(key, default):
    """Get environment variable as integer, falling back on bad values."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_data_dir() -> str:
    """Directory holding the notes database, created on demand.

    ``QUICKNOTES_DATA_DIR`` wins; otherwise the XDG user data dir from GLib.
    """
    data_dir = get_env('QUICKNOTES_DATA_DIR')
    if not data_dir:
        from gi.repository import GLib
        data_dir = os.path.join(GLib.get_user_data_dir(), DATA_DIR_NAME)
    os.makedirs(data_dir, exist_ok=True)
    return data_dir


def get_db_path() -> str:
    return os.path.join(get_data_dir(), DB_FILENAME)


def get_search_delay_ms() -> int:
    delay = get_env_int('QUICKNOTES_SEARCH_DELAY_MS', SEARCH_DELAY_MS)
    return max(delay, 0)


def get_first_weekday() -> int:
    """Week start for the "Past Week" section, 0 (Monday) to 6 (Sunday)."""
    day = get_env_int('QUICKNOTES_FIRST_WEEKDAY', FIRST_WEEKDAY)
    return day if 0 <= day <= 6 else FIRST_WEEKDAY


def get_log_level() -> int:
    name = (get_env('LOG_LEVEL', 'INFO') or 'INFO').upper()
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else logging.INFO


def setup_logging() -> logging.Logger:
    """Configure root logging and return the package logger."""
    logging.basicConfig(format=LOG_FORMAT, level=get_log_level())
    return logging.getLogger('quicknotes')
