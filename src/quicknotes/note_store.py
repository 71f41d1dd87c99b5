# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import sqlite3
from datetime import datetime, timezone

from quicknotes.errors import StorageUnavailable, WriteFailed
from quicknotes.note import Note

logger = logging.getLogger(__name__)

_ORDER_COLUMNS = {
    'modification_date': 'updated_at',
    'creation_date': 'created_at',
}


def _to_db_time(moment: datetime) -> str:
    # Naive values are host local time; everything is stored as UTC.
    return moment.astimezone(timezone.utc).isoformat(timespec='microseconds')


def _from_db_time(value: str) -> datetime:
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


class NoteStore:

    def __init__(self, db_path=None):
        if db_path is None:
            from quicknotes.config import get_db_path
            db_path = get_db_path()
        self.db_path = db_path

        try:
            self._db = sqlite3.connect(db_path)
            self._db.execute('PRAGMA journal_mode=WAL')
            self._db.row_factory = sqlite3.Row
            self._create_tables()
        except sqlite3.Error as exc:
            logger.error('Cannot open notes database %s: %s', db_path, exc)
            raise StorageUnavailable(f'cannot open {db_path}: {exc}') from exc
        logger.debug('Opened notes database %s', db_path)

    def _create_tables(self):
        self._db.executescript('''
            CREATE TABLE IF NOT EXISTS notes (
                id TEXT PRIMARY KEY,
                title TEXT NOT NULL DEFAULT '',
                content TEXT NOT NULL DEFAULT '',
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );

            CREATE INDEX IF NOT EXISTS notes_updated_at
                ON notes (updated_at);
        ''')

    def _write(self, sql, params, action):
        try:
            cursor = self._db.execute(sql, params)
            self._db.commit()
        except sqlite3.Error as exc:
            self._db.rollback()
            logger.error('Failed to %s: %s', action, exc)
            raise WriteFailed(f'failed to {action}: {exc}') from exc
        return cursor

    # --- Notes CRUD ---

    def insert_note(self, note: Note):
        self._write(
            'INSERT INTO notes (id, title, content, created_at, updated_at) '
            'VALUES (?, ?, ?, ?, ?)',
            (
                note.id, note.title, note.content,
                _to_db_time(note.creation_date),
                _to_db_time(note.modification_date),
            ),
            f'insert note {note.id}',
        )
        logger.debug('Inserted note %s', note.id)

    def create_note(self, title='', content='') -> Note:
        note = Note.new(title=title, content=content)
        self.insert_note(note)
        return note

    def get_note(self, note_id) -> Note | None:
        row = self._db.execute(
            'SELECT * FROM notes WHERE id = ?', (note_id,)
        ).fetchone()
        if row is None:
            return None
        return self._row_to_note(row)

    def get_all_notes(self, order_by='modification_date', descending=True) -> list[Note]:
        """All notes as fresh objects, newest modification first by default."""
        try:
            column = _ORDER_COLUMNS[order_by]
        except KeyError:
            raise ValueError(f'cannot order notes by {order_by!r}') from None
        direction = 'DESC' if descending else 'ASC'
        rows = self._db.execute(
            f'SELECT * FROM notes ORDER BY {column} {direction}, id {direction}'
        ).fetchall()
        return [self._row_to_note(row) for row in rows]

    def commit_note(self, note: Note):
        """Persist the title, content and modification date of a stored note."""
        cursor = self._write(
            'UPDATE notes SET title = ?, content = ?, updated_at = ? '
            'WHERE id = ?',
            (note.title, note.content,
             _to_db_time(note.modification_date), note.id),
            f'commit note {note.id}',
        )
        if cursor.rowcount == 0:
            logger.error('Commit for unknown note %s', note.id)
            raise WriteFailed(f'note {note.id} is not stored')
        logger.debug('Committed note %s', note.id)

    def delete_note(self, note):
        """Delete by note or id. Missing notes are ignored."""
        note_id = note.id if isinstance(note, Note) else note
        self._write(
            'DELETE FROM notes WHERE id = ?', (note_id,),
            f'delete note {note_id}',
        )
        logger.debug('Deleted note %s', note_id)

    # --- Helpers ---

    def _row_to_note(self, row) -> Note:
        return Note(
            id=row['id'],
            title=row['title'],
            content=row['content'],
            creation_date=_from_db_time(row['created_at']),
            modification_date=_from_db_time(row['updated_at']),
        )

    def close(self):
        self._db.close()
