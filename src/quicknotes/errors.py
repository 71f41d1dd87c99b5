# SPDX-License-Identifier: GPL-3.0-or-later


class NoteStoreError(Exception):
    """Base class for note storage failures."""


class StorageUnavailable(NoteStoreError):
    """The notes database could not be opened or initialised."""


class WriteFailed(NoteStoreError):
    """A note could not be inserted, committed or deleted."""
