# SPDX-License-Identifier: GPL-3.0-or-later

import gi
gi.require_version('Gtk', '4.0')

from gi.repository import GObject, Gtk, Pango

from quicknotes.constants import PREVIEW_MAX_LINES


class SectionHeader(Gtk.ListBoxRow):
    """Non-interactive row carrying a date section label."""

    def __init__(self, label, **kwargs):
        super().__init__(activatable=False, selectable=False, **kwargs)
        title = Gtk.Label(label=label, xalign=0)
        title.add_css_class('heading')
        title.add_css_class('dim-label')
        title.set_margin_start(12)
        title.set_margin_top(12)
        title.set_margin_bottom(4)
        self.set_child(title)


class NoteRow(Gtk.ListBoxRow):
    """List row showing a note title and a short content preview."""

    __gsignals__ = {
        'delete-requested': (GObject.SignalFlags.RUN_LAST, None, (str,)),
    }

    def __init__(self, note, **kwargs):
        super().__init__(**kwargs)
        self._note = note

        box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        box.set_margin_start(12)
        box.set_margin_end(6)
        box.set_margin_top(8)
        box.set_margin_bottom(8)

        text = Gtk.Box(
            orientation=Gtk.Orientation.VERTICAL,
            spacing=2,
            hexpand=True,
        )
        title_label = Gtk.Label(
            label=note.display_title,
            xalign=0,
            ellipsize=Pango.EllipsizeMode.END,
        )
        title_label.add_css_class('heading')
        text.append(title_label)

        if note.content:
            preview_label = Gtk.Label(
                label=note.preview_text,
                xalign=0,
                wrap=True,
                lines=PREVIEW_MAX_LINES,
                ellipsize=Pango.EllipsizeMode.END,
            )
            preview_label.add_css_class('dim-label')
            text.append(preview_label)
        box.append(text)

        delete_btn = Gtk.Button(
            icon_name='user-trash-symbolic',
            tooltip_text='Delete Note',
            valign=Gtk.Align.CENTER,
        )
        delete_btn.add_css_class('flat')
        delete_btn.connect(
            'clicked', lambda b: self.emit('delete-requested', self._note.id)
        )
        box.append(delete_btn)

        self.set_child(box)

    @property
    def note_id(self):
        return self._note.id
