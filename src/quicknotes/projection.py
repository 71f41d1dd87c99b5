# SPDX-License-Identifier: GPL-3.0-or-later
"""
Search filtering and date sectioning of the note list.

Both steps are pure: they read notes and return new lists, so the caller
can re-run them on every store change or search edit.
"""

import calendar
import unicodedata
from datetime import timedelta

TODAY = 'Today'
YESTERDAY = 'Yesterday'
PAST_WEEK = 'Past Week'
EARLIER = 'Earlier'

BUCKET_LABELS = (TODAY, YESTERDAY, PAST_WEEK, EARLIER)

MONDAY = calendar.MONDAY
SUNDAY = calendar.SUNDAY


def _fold(text):
    return unicodedata.normalize('NFC', text).casefold()


def filter_notes(notes, query):
    """Notes whose title or content contains query, ignoring case.

    An empty query returns the notes unchanged. Input order is kept.
    """
    if query == '':
        return list(notes)
    needle = _fold(query)
    return [
        note for note in notes
        if needle in _fold(note.title) or needle in _fold(note.content)
    ]


def _local_date(moment):
    # Aware timestamps are shown in host local time; naive ones already are.
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.date()


def _week_start(day, first_weekday):
    return day - timedelta(days=(day.weekday() - first_weekday) % 7)


def bucket_for(moment, now, first_weekday=MONDAY):
    """Section label for a modification timestamp relative to now.

    Weeks start on first_weekday (0 is Monday, 6 is Sunday). The Monday
    default gives ISO weeks; pass SUNDAY for the US calendar.
    """
    day = _local_date(moment)
    today = _local_date(now)
    if day == today:
        return TODAY
    if day == today - timedelta(days=1):
        return YESTERDAY
    if _week_start(day, first_weekday) == _week_start(today, first_weekday):
        return PAST_WEEK
    return EARLIER


def group_notes(notes, now, first_weekday=MONDAY):
    """Split notes into labelled date sections.

    Returns ``[(label, [note, ...]), ...]`` with empty sections dropped.
    Sections are ordered by label text, so "Earlier" comes first and
    "Yesterday" last. Notes keep their input order inside a section.
    """
    buckets = {label: [] for label in BUCKET_LABELS}
    for note in notes:
        buckets[bucket_for(note.modification_date, now, first_weekday)].append(note)
    return sorted(
        ((label, members) for label, members in buckets.items() if members),
        key=lambda section: section[0],
    )


def project(notes, query, now, first_weekday=MONDAY):
    return group_notes(filter_notes(notes, query), now, first_weekday)
