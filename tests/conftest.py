"""Shared test fixtures."""

from datetime import datetime

import pytest

from quicknotes.note import Note
from quicknotes.note_store import NoteStore


def make_note(title='', content='', modified=None, created=None, note_id=None):
    """Build a Note with explicit timestamps."""
    if modified is None:
        modified = datetime(2024, 6, 15, 9, 0)
    if created is None:
        created = modified
    return Note(
        id=note_id or f'note-{title or content or modified.isoformat()}',
        title=title,
        content=content,
        creation_date=created,
        modification_date=modified,
    )


@pytest.fixture
def note_factory():
    return make_note


@pytest.fixture
def store(tmp_path):
    """A NoteStore backed by a temporary database file."""
    note_store = NoteStore(db_path=str(tmp_path / 'notes.db'))
    yield note_store
    note_store.close()
