"""Logging handler that shows log records as browser notifications.

While the terminal browser owns the screen, console logging is disabled;
this handler forwards warnings and errors to the app's toast notifications
so per-record problems (such as an undecodable icon) stay visible.
"""

import logging

from rich.markup import escape
from textual.app import App

_SEVERITIES = {
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


class NotifyLogHandler(logging.Handler):
    """Log handler that calls ``App.notify`` for each record.

    Example:
        >>> handler = NotifyLogHandler(app)
        >>> handler.setFormatter(logging.Formatter('%(message)s'))
        >>> logging.root.addHandler(handler)
    """

    def __init__(self, app: App, level: int = logging.WARNING):
        """Initialize the handler.

        Args:
            app: The running Textual app
            level: Minimum logging level to handle
        """
        super().__init__(level)
        self.app = app
        self._notify_count = 0

    def emit(self, record: logging.LogRecord) -> None:
        """Show a log record as a notification.

        Records emitted before the app is running are dropped.

        Args:
            record: The log record to emit
        """
        if not self.app.is_running:
            return

        try:
            message = self.format(record)
            severity = _SEVERITIES.get(record.levelno, "information")
            self.app.notify(escape(message), severity=severity)
            self._notify_count += 1
        except Exception:
            self.handleError(record)

    def get_notify_count(self) -> int:
        """Get the number of notifications shown."""
        return self._notify_count
