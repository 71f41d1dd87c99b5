# SPDX-License-Identifier: GPL-3.0-or-later

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from quicknotes.constants import PREVIEW_MAX_LINES, UNTITLED_TITLE


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Note:
    id: str
    title: str
    content: str
    creation_date: datetime
    modification_date: datetime

    @classmethod
    def new(cls, title='', content='', now=None) -> 'Note':
        """Create an unsaved note with a fresh id and both timestamps at now."""
        if now is None:
            now = utc_now()
        return cls(
            id=str(uuid.uuid4()),
            title=title,
            content=content,
            creation_date=now,
            modification_date=now,
        )

    @property
    def display_title(self) -> str:
        return self.title or UNTITLED_TITLE

    @property
    def preview_text(self) -> str:
        """First lines of the content, for list row subtitles."""
        if not self.content:
            return ''
        return '\n'.join(self.content.splitlines()[:PREVIEW_MAX_LINES])

    def touch(self, now=None):
        """Mark the note as modified, never before its creation date."""
        if now is None:
            now = utc_now()
        self.modification_date = max(now, self.creation_date)

    def edit(self, title, content, now=None) -> bool:
        """Apply editor values. Returns True (and touches) only on change."""
        if title == self.title and content == self.content:
            return False
        self.title = title
        self.content = content
        self.touch(now)
        return True
