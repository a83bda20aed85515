"""Markdown file notification adapter.

Implements NotificationPort by appending one table row per borrow or
return to a markdown ledger. Useful for keeping an audit trail of
lending activity between runs.
"""

import logging
import re
from pathlib import Path

from librarian.core.models import LendingAction, LendingEvent
from librarian.core.ports import NotificationPort

logger = logging.getLogger(__name__)

LEDGER_HEADER = (
    "# Lending Ledger\n"
    "\n"
    "| Time (UTC) | Action | Member | Title |\n"
    "|---|---|---|---|\n"
)


class MarkdownNotificationAdapter(NotificationPort):
    """Appends lending activity to a markdown ledger file."""

    def __init__(self, ledger_path: str):
        """Initialize markdown notification adapter.

        Args:
            ledger_path: Markdown file to append to. Created, along with
                its parent directories, on first write.

        Raises:
            ValueError: If ledger_path points at an existing directory.
        """
        self.ledger_path = Path(ledger_path).resolve()
        if self.ledger_path.is_dir():
            raise ValueError(f"ledger_path is a directory: {ledger_path}")

    def notify_borrow(self, member_id: int, title: str) -> None:
        """Append a borrow row."""
        self._append(LendingEvent.now(LendingAction.BORROW, member_id, title))

    def notify_return(self, member_id: int, title: str) -> None:
        """Append a return row."""
        self._append(LendingEvent.now(LendingAction.RETURN, member_id, title))

    @staticmethod
    def _escape_cell(text: str) -> str:
        """Make text safe inside a markdown table cell."""
        text = re.sub(r"[\r\n]+", " ", text)
        return text.replace("\\", "\\\\").replace("|", "\\|")

    def _format_row(self, event: LendingEvent) -> str:
        timestamp = event.occurred_at.strftime("%Y-%m-%d %H:%M:%S")
        return (
            f"| {timestamp} | {event.action.value} | {event.member_id} "
            f"| {self._escape_cell(event.title)} |\n"
        )

    def _append(self, event: LendingEvent) -> None:
        """Write one row, adding the header if the file is new.

        Raises:
            OSError: If the ledger cannot be written.
        """
        try:
            self.ledger_path.parent.mkdir(parents=True, exist_ok=True)
            is_new = not self.ledger_path.exists() or self.ledger_path.stat().st_size == 0
            with self.ledger_path.open("a", encoding="utf-8") as f:
                if is_new:
                    f.write(LEDGER_HEADER)
                f.write(self._format_row(event))
        except OSError as e:
            logger.error(
                f"Failed to write lending ledger {self.ledger_path}: {e}",
                extra={"member_id": event.member_id, "title": event.title},
            )
            raise
