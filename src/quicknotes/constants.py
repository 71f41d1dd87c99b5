# SPDX-License-Identifier: GPL-3.0-or-later

APP_ID = 'io.github.quicknotes.QuickNotes'
APP_NAME = 'Notes'
VERSION = '0.1.0'

DATA_DIR_NAME = 'quicknotes'
DB_FILENAME = 'notes.db'

UNTITLED_TITLE = 'New Note'
PREVIEW_MAX_LINES = 2

SEARCH_DELAY_MS = 200

# 0 is Monday (ISO weeks), 6 is Sunday.
FIRST_WEEKDAY = 0
