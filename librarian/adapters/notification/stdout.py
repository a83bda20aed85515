"""Stdout notification adapter.

Implements NotificationPort by printing one line per borrow or return
to the terminal.
"""

import logging

from librarian.core.models import LendingAction, LendingEvent
from librarian.core.ports import NotificationPort

logger = logging.getLogger(__name__)


class StdoutNotificationAdapter(NotificationPort):
    """Prints lending activity to stdout."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout notification adapter.

        Args:
            verbose: If True, prefix each line with the event timestamp.
        """
        self.verbose = verbose

    def notify_borrow(self, member_id: int, title: str) -> None:
        """Print a borrow notice."""
        print(self._format_event(LendingEvent.now(LendingAction.BORROW, member_id, title)))

    def notify_return(self, member_id: int, title: str) -> None:
        """Print a return notice."""
        print(self._format_event(LendingEvent.now(LendingAction.RETURN, member_id, title)))

    def _format_event(self, event: LendingEvent) -> str:
        verb = "borrowed" if event.action is LendingAction.BORROW else "returned"
        line = f"[{event.action.value.upper()}] Member {event.member_id} {verb} \"{event.title}\""
        if self.verbose:
            line = f"{event.occurred_at.isoformat()} {line}"
        return line
