"""Fake MemberDirectoryPort implementation for testing."""

from librarian.core.ports import MemberDirectoryPort


class FakeMemberDirectoryPort(MemberDirectoryPort):
    """Member directory backed by a mutable set of valid ids."""

    def __init__(self, valid_ids: set[int] | None = None):
        """Initialize with the given valid member ids."""
        self.valid_ids: set[int] = set(valid_ids or ())
        self.checked_ids: list[int] = []

    def is_valid_member(self, member_id: int) -> bool:
        """Check membership, recording the call."""
        self.checked_ids.append(member_id)
        return member_id in self.valid_ids

    def add_member(self, member_id: int) -> None:
        """Mark a member as valid."""
        self.valid_ids.add(member_id)

    def revoke_member(self, member_id: int) -> None:
        """Mark a member as invalid."""
        self.valid_ids.discard(member_id)
