# SPDX-License-Identifier: GPL-3.0-or-later

import logging

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from gi.repository import Adw, Gio, GObject, Gtk

from quicknotes.constants import APP_ID, APP_NAME, VERSION
from quicknotes.errors import StorageUnavailable, WriteFailed
from quicknotes.main_window import MainWindow
from quicknotes.note_store import NoteStore

logger = logging.getLogger(__name__)


class QuickNotesApp(Adw.Application):

    __gsignals__ = {
        'note-changed': (GObject.SignalFlags.RUN_LAST, None, (str,)),
        'note-created': (GObject.SignalFlags.RUN_LAST, None, (str,)),
        'note-deleted': (GObject.SignalFlags.RUN_LAST, None, (str,)),
        'storage-error': (GObject.SignalFlags.RUN_LAST, None, (str,)),
    }

    def __init__(self, version=VERSION, db_path=None, **kwargs):
        super().__init__(
            application_id=APP_ID,
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
            **kwargs,
        )
        self.version = version
        self.store = None
        self._db_path = db_path
        self._editor_windows = {}

    def do_startup(self):
        Adw.Application.do_startup(self)
        try:
            self.store = NoteStore(self._db_path)
        except StorageUnavailable:
            logger.critical('Notes storage is unavailable, quitting')
            self.quit()
            return
        logger.info('Notes loaded from %s', self.store.db_path)
        self._setup_actions()
        self._setup_shortcuts()

    def do_shutdown(self):
        for win in list(self._editor_windows.values()):
            win.close()
        if self.store is not None:
            self.store.close()
            self.store = None
        logger.info('Shut down')
        Adw.Application.do_shutdown(self)

    def _setup_actions(self):
        actions = [
            ('new-note', self._on_new_note),
            ('about', self._on_about),
            ('quit', self._on_quit),
            ('shortcuts', self._on_shortcuts),
        ]
        for name, callback in actions:
            action = Gio.SimpleAction.new(name, None)
            action.connect('activate', callback)
            self.add_action(action)

    def _setup_shortcuts(self):
        self.set_accels_for_action('app.new-note', ['<Control>n'])
        self.set_accels_for_action('app.quit', ['<Control>q'])
        self.set_accels_for_action('app.shortcuts', ['<Control>question'])
        self.set_accels_for_action('win.search', ['<Control>f'])
        self.set_accels_for_action('win.done', ['<Control>Return'])

    def do_activate(self):
        if self.store is None:
            return
        win = self.get_active_window()
        if win and isinstance(win, MainWindow):
            win.present()
            return
        win = MainWindow(application=self)
        win.present()

    # --- Store operations used by the windows ---

    def commit_note(self, note):
        """Persist an edited note. Returns False if the write failed."""
        try:
            self.store.commit_note(note)
        except WriteFailed as exc:
            self.emit('storage-error', f'Could not save “{note.display_title}”')
            logger.warning('Commit failed: %s', exc)
            return False
        self.emit('note-changed', note.id)
        return True

    def delete_note(self, note_id):
        """Delete a note, then drop its open editor. Returns False on failure."""
        try:
            self.store.delete_note(note_id)
        except WriteFailed as exc:
            self.emit('storage-error', 'Could not delete note')
            logger.warning('Delete failed: %s', exc)
            return False
        self.close_editor(note_id)
        self.emit('note-deleted', note_id)
        return True

    def open_note(self, note_id):
        from quicknotes.note_editor import NoteEditorWindow

        if note_id in self._editor_windows:
            self._editor_windows[note_id].present()
            return

        note = self.store.get_note(note_id)
        if note is None:
            logger.debug('Note %s vanished before opening', note_id)
            return

        win = NoteEditorWindow(
            application=self, note=note,
            transient_for=self.get_active_window(),
        )
        self._editor_windows[note_id] = win
        win.connect('destroy', self._on_editor_destroyed, note_id)
        win.present()

    def _on_editor_destroyed(self, win, note_id):
        # Blocked closes never get here, so the editor stays registered.
        if self._editor_windows.get(note_id) is win:
            del self._editor_windows[note_id]

    def close_editor(self, note_id):
        win = self._editor_windows.get(note_id)
        if win:
            win.discard()

    # --- Actions ---

    def _on_new_note(self, action, param):
        try:
            note = self.store.create_note()
        except WriteFailed as exc:
            self.emit('storage-error', 'Could not create note')
            logger.warning('Create failed: %s', exc)
            return
        self.emit('note-created', note.id)
        self.open_note(note.id)

    def _on_about(self, action, param):
        about = Adw.AboutDialog(
            application_name=APP_NAME,
            application_icon=APP_ID,
            version=self.version,
            license_type=Gtk.License.GPL_3_0,
        )
        about.present(self.get_active_window())

    def _on_quit(self, action, param):
        for win in list(self._editor_windows.values()):
            win.close()
        if self._editor_windows:
            logger.warning(
                'Not quitting, %d editor(s) have unsaved edits',
                len(self._editor_windows),
            )
            return
        self.quit()

    def _on_shortcuts(self, action, param):
        from quicknotes.shortcuts import ShortcutsWindow
        win = ShortcutsWindow(transient_for=self.get_active_window())
        win.present()
