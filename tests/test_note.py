"""Tests for quicknotes.note module."""

from datetime import datetime, timedelta, timezone

from quicknotes.note import Note


class TestNoteNew:
    """Tests for Note.new."""

    def test_new_note_is_empty_with_equal_timestamps(self):
        """A fresh note has no text and both dates set to now."""
        note = Note.new()

        assert note.title == ''
        assert note.content == ''
        assert note.creation_date == note.modification_date
        assert note.creation_date.tzinfo is not None

    def test_new_notes_get_distinct_ids(self):
        """Ids are unique per note."""
        ids = {Note.new().id for _ in range(50)}
        assert len(ids) == 50

    def test_explicit_now(self):
        """An injected clock reading is used for both dates."""
        now = datetime(2024, 6, 15, 10, 0, tzinfo=timezone.utc)
        note = Note.new(title='t', content='c', now=now)

        assert note.creation_date == now
        assert note.modification_date == now


class TestNoteDisplay:
    """Tests for display helpers."""

    def test_display_title_placeholder(self):
        """Empty titles display as New Note."""
        assert Note.new().display_title == 'New Note'
        assert Note.new(title='Shopping').display_title == 'Shopping'

    def test_preview_limits_lines(self):
        """Preview keeps only the first two lines."""
        note = Note.new(content='one\ntwo\nthree\nfour')
        assert note.preview_text == 'one\ntwo'

    def test_preview_empty(self):
        """No content means no preview."""
        assert Note.new().preview_text == ''


class TestNoteEdit:
    """Tests for Note.edit and Note.touch."""

    def setup_method(self):
        self.created = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
        self.note = Note.new(title='a', content='b', now=self.created)

    def test_edit_with_changes_bumps_modification_date(self):
        """Changing text updates the modification date."""
        later = self.created + timedelta(hours=3)

        changed = self.note.edit('a2', 'b', now=later)

        assert changed is True
        assert self.note.title == 'a2'
        assert self.note.modification_date == later
        assert self.note.creation_date == self.created

    def test_edit_without_changes_keeps_dates(self):
        """Re-applying the same text is not a modification."""
        later = self.created + timedelta(hours=3)

        changed = self.note.edit('a', 'b', now=later)

        assert changed is False
        assert self.note.modification_date == self.created

    def test_touch_never_precedes_creation(self):
        """A clock reading before creation is clamped."""
        self.note.touch(self.created - timedelta(days=1))
        assert self.note.modification_date == self.created
