# SPDX-License-Identifier: GPL-3.0-or-later

import gi
gi.require_version('Gtk', '4.0')
from gi.repository import Gtk

SHORTCUTS = [
    ('New Note', '<Control>n'),
    ('Search Notes', '<Control>f'),
    ('Keyboard Shortcuts', '<Control>question'),
    ('Quit', '<Control>q'),
]

EDITOR_SHORTCUTS = [
    ('Done', '<Control>Return'),
]


class ShortcutsWindow(Gtk.ShortcutsWindow):

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        section = Gtk.ShortcutsSection(visible=True, section_name='shortcuts')
        section.append(self._build_group('General', SHORTCUTS))
        section.append(self._build_group('Editor', EDITOR_SHORTCUTS))
        self.add_section(section)

    def _build_group(self, title, shortcuts):
        group = Gtk.ShortcutsGroup(title=title, visible=True)
        for label, accel in shortcuts:
            group.append(Gtk.ShortcutsShortcut(
                title=label,
                accelerator=accel,
                visible=True,
            ))
        return group
