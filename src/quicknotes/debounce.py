# SPDX-License-Identifier: GPL-3.0-or-later

from gi.repository import GLib


class Debouncer:
    """Run a callback once input has been quiet for delay_ms."""

    def __init__(self, callback, delay_ms):
        self._callback = callback
        self._delay_ms = delay_ms
        self._timeout_id = None

    @property
    def pending(self):
        return self._timeout_id is not None

    def trigger(self):
        """Schedule the callback. Resets the delay if already pending."""
        self.cancel()
        if self._delay_ms <= 0:
            self._callback()
            return
        self._timeout_id = GLib.timeout_add(self._delay_ms, self._fire)

    def cancel(self):
        if self._timeout_id is not None:
            GLib.source_remove(self._timeout_id)
            self._timeout_id = None

    def flush(self):
        """Run a pending callback right away."""
        if self.pending:
            self.cancel()
            self._callback()

    def _fire(self):
        self._timeout_id = None
        self._callback()
        return GLib.SOURCE_REMOVE
