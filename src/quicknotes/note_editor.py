# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from dataclasses import replace

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from gi.repository import Adw, Gio, Gtk

from quicknotes.constants import UNTITLED_TITLE

logger = logging.getLogger(__name__)


class NoteEditorWindow(Adw.Window):
    """Title and body editor for a single note.

    Edits stay local to the widgets until "Done" or window close, which
    commit them through the application's store in one write.
    """

    def __init__(self, application, note, **kwargs):
        super().__init__(
            application=application,
            **kwargs,
        )
        self._app = application
        self._note = note
        self._discarded = False

        self.set_default_size(400, 500)
        self.set_title(note.display_title)

        self._build_ui()
        self._load_note()
        self._setup_actions()
        self._focus_initial_field()

    def _build_ui(self):
        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)

        header = Adw.HeaderBar()
        header.add_css_class('flat')

        done_btn = Gtk.Button(label='Done')
        done_btn.add_css_class('suggested-action')
        done_btn.connect('clicked', lambda b: self.activate_action('win.done'))
        header.pack_end(done_btn)
        main_box.append(header)

        self._title_entry = Gtk.Entry(placeholder_text='Title')
        self._title_entry.add_css_class('title-2')
        self._title_entry.set_margin_start(12)
        self._title_entry.set_margin_end(12)
        self._title_entry.set_margin_top(6)
        self._title_entry.set_margin_bottom(6)
        self._title_entry.connect('changed', self._on_title_changed)
        main_box.append(self._title_entry)

        main_box.append(Gtk.Separator())

        scrolled = Gtk.ScrolledWindow(vexpand=True, hexpand=True)
        self._text_view = Gtk.TextView(
            wrap_mode=Gtk.WrapMode.WORD_CHAR,
            left_margin=12, right_margin=12,
            top_margin=8, bottom_margin=8,
        )
        self._buffer = self._text_view.get_buffer()
        scrolled.set_child(self._text_view)
        main_box.append(scrolled)

        self.set_content(main_box)

    def _load_note(self):
        self._title_entry.set_text(self._note.title)
        self._buffer.set_text(self._note.content)

    def _setup_actions(self):
        action_group = Gio.SimpleActionGroup()
        done_action = Gio.SimpleAction.new('done', None)
        done_action.connect('activate', self._on_done)
        action_group.add_action(done_action)
        self.insert_action_group('win', action_group)

    def _focus_initial_field(self):
        if self._note.title:
            self._text_view.grab_focus()
        else:
            self._title_entry.grab_focus()

    def _on_title_changed(self, entry):
        self.set_title(entry.get_text() or UNTITLED_TITLE)

    def _current_content(self):
        start, end = self._buffer.get_bounds()
        return self._buffer.get_text(start, end, True)

    def commit(self):
        """Write pending edits, bumping the modification date on change."""
        if self._discarded:
            return True
        edited = replace(self._note)
        if not edited.edit(self._title_entry.get_text(), self._current_content()):
            return True
        logger.debug('Committing edits to note %s', edited.id)
        if not self._app.commit_note(edited):
            return False
        self._note = edited
        return True

    def discard(self):
        """Close without committing, used when the note was deleted."""
        self._discarded = True
        self.close()

    def _on_done(self, action, param):
        if self.commit():
            self.close()

    def do_close_request(self):
        # A failed commit keeps the window, and its edits, open.
        return not self.commit()
