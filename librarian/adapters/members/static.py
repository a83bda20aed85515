"""Static member directory adapter.

Implements MemberDirectoryPort from a fixed allow-list of member ids,
typically loaded from configuration.
"""

import logging
from collections.abc import Iterable

from librarian.core.ports import MemberDirectoryPort

logger = logging.getLogger(__name__)


class StaticMemberDirectory(MemberDirectoryPort):
    """Accepts members whose ids appear in a configured allow-list."""

    def __init__(self, member_ids: Iterable[int] = (), allow_any: bool = False):
        """Initialize the directory.

        Args:
            member_ids: Ids of members in good standing.
            allow_any: If True, accept any positive id regardless of the list.
        """
        self.member_ids = frozenset(member_ids)
        self.allow_any = allow_any

    def is_valid_member(self, member_id: int) -> bool:
        """Check member_id against the allow-list."""
        if not isinstance(member_id, int) or isinstance(member_id, bool):
            valid = False
        elif self.allow_any:
            valid = member_id > 0
        else:
            valid = member_id in self.member_ids

        if not valid:
            logger.debug(f"Member {member_id} rejected", extra={"member_id": member_id})
        return valid
