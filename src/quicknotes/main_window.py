# SPDX-License-Identifier: GPL-3.0-or-later

import logging
from datetime import datetime

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')

from gi.repository import Adw, Gio, GObject, Gtk

from quicknotes.config import get_first_weekday, get_search_delay_ms
from quicknotes.constants import APP_ID, APP_NAME
from quicknotes.debounce import Debouncer
from quicknotes.note_row import NoteRow, SectionHeader
from quicknotes.projection import project

logger = logging.getLogger(__name__)


class MainWindow(Adw.ApplicationWindow):

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._app = self.get_application()
        self._search_query = ''
        self._search = Debouncer(self._refresh_notes, get_search_delay_ms())
        self._signal_handlers = []
        self._first_weekday = get_first_weekday()

        self.set_title(APP_NAME)
        self.set_default_size(420, 640)
        self.set_icon_name(APP_ID)

        self._build_ui()
        self._setup_actions()
        self._connect_signals()
        self._refresh_notes()

    def _build_ui(self):
        toolbar_view = Adw.ToolbarView()

        header = Adw.HeaderBar()
        header.set_title_widget(Adw.WindowTitle(title=APP_NAME))

        self._search_btn = Gtk.ToggleButton(
            icon_name='system-search-symbolic',
            tooltip_text='Search (Ctrl+F)',
        )
        self._search_btn.connect('toggled', self._on_search_toggled)
        header.pack_start(self._search_btn)

        add_btn = Gtk.Button(
            icon_name='document-edit-symbolic',
            tooltip_text='Add Note (Ctrl+N)',
        )
        add_btn.connect('clicked', lambda b: self._app.activate_action('new-note'))
        header.pack_end(add_btn)

        menu = Gio.Menu()
        menu.append('Keyboard Shortcuts', 'app.shortcuts')
        menu.append(f'About {APP_NAME}', 'app.about')
        header.pack_end(Gtk.MenuButton(
            icon_name='open-menu-symbolic',
            menu_model=menu,
        ))
        toolbar_view.add_top_bar(header)

        self._search_bar = Gtk.SearchBar()
        self._search_entry = Gtk.SearchEntry(
            placeholder_text='Search notes',
            hexpand=True,
        )
        self._search_entry.connect('search-changed', self._on_search_changed)
        self._search_entry.connect('activate', lambda e: self._search.flush())
        self._search_bar.set_child(self._search_entry)
        self._search_bar.connect_entry(self._search_entry)
        self._search_bar.bind_property(
            'search-mode-enabled', self._search_btn, 'active',
            GObject.BindingFlags.BIDIRECTIONAL,
        )
        toolbar_view.add_top_bar(self._search_bar)

        scroll = Gtk.ScrolledWindow(vexpand=True)
        self._list = Gtk.ListBox(selection_mode=Gtk.SelectionMode.NONE)
        self._list.add_css_class('navigation-sidebar')
        self._list.connect('row-activated', self._on_row_activated)
        scroll.set_child(self._list)

        self._empty_state = Adw.StatusPage(
            icon_name='document-new-symbolic',
            title='No Notes',
            description='Press Ctrl+N to create a note',
        )
        self._no_results = Adw.StatusPage(
            icon_name='edit-find-symbolic',
            title='No Results',
            description='No notes match your search',
        )

        self._stack = Gtk.Stack()
        self._stack.add_named(scroll, 'list')
        self._stack.add_named(self._empty_state, 'empty')
        self._stack.add_named(self._no_results, 'no-results')
        toolbar_view.set_content(self._stack)

        self._toast_overlay = Adw.ToastOverlay()
        self._toast_overlay.set_child(toolbar_view)
        self.set_content(self._toast_overlay)

    def _setup_actions(self):
        search_action = Gio.SimpleAction.new('search', None)
        search_action.connect('activate', lambda *a: self._search_btn.set_active(True))
        self.add_action(search_action)

    def _connect_signals(self):
        self._signal_handlers = [
            self._app.connect('note-changed', self._on_note_signal),
            self._app.connect('note-created', self._on_note_signal),
            self._app.connect('note-deleted', self._on_note_signal),
            self._app.connect('storage-error', self._on_storage_error),
        ]

    def _disconnect_signals(self):
        for handler_id in self._signal_handlers:
            self._app.disconnect(handler_id)
        self._signal_handlers = []

    def do_close_request(self):
        self._search.cancel()
        self._disconnect_signals()
        return False

    def _on_note_signal(self, app, note_id):
        self._refresh_notes()

    def _on_storage_error(self, app, message):
        self._show_toast(message)

    def _on_search_toggled(self, btn):
        if btn.get_active():
            self._search_entry.grab_focus()
        elif self._search_query:
            self._search_entry.set_text('')
            self._search_query = ''
            self._search.cancel()
            self._refresh_notes()

    def _on_search_changed(self, entry):
        self._search_query = entry.get_text()
        self._search.trigger()

    # --- Refresh ---

    def _refresh_notes(self):
        child = self._list.get_first_child()
        while child:
            next_child = child.get_next_sibling()
            self._list.remove(child)
            child = next_child

        notes = self._app.store.get_all_notes()
        sections = project(
            notes, self._search_query, datetime.now().astimezone(),
            first_weekday=self._first_weekday,
        )
        logger.debug(
            'Showing %d sections for query %r', len(sections), self._search_query
        )

        if not sections:
            self._stack.set_visible_child_name(
                'no-results' if notes else 'empty'
            )
            return

        self._stack.set_visible_child_name('list')
        for label, section_notes in sections:
            self._list.append(SectionHeader(label))
            for note in section_notes:
                row = NoteRow(note)
                row.connect('delete-requested', self._on_delete_requested)
                self._list.append(row)

    def _on_row_activated(self, listbox, row):
        if isinstance(row, NoteRow):
            self._app.open_note(row.note_id)

    def _on_delete_requested(self, row, note_id):
        if self._app.delete_note(note_id):
            self._show_toast('Note deleted')

    def _show_toast(self, message):
        self._toast_overlay.add_toast(Adw.Toast(title=message, timeout=3))
