"""Domain models for the librarian lending service.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum


@dataclass
class Book:
    """One title's inventory line.

    The title is the natural lookup key. Only ``copies`` changes after
    creation, so this dataclass is intentionally mutable.
    """

    title: str
    copies: int

    def __post_init__(self) -> None:
        """Validate book invariants on creation or deserialization."""
        if not self.title or not self.title.strip():
            raise ValueError("title must be a non-empty string")
        if self.copies < 0:
            raise ValueError(f"copies must be >= 0, got {self.copies}")

    @property
    def is_available(self) -> bool:
        """True when at least one copy can be lent."""
        return self.copies > 0

    def take_copy(self) -> None:
        """Remove one copy from the shelf."""
        if self.copies == 0:
            raise ValueError(f"No copies of {self.title!r} left to take")
        self.copies -= 1

    def put_back(self, count: int = 1) -> None:
        """Add copies back to the shelf."""
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        self.copies += count


class LendingAction(Enum):
    """Kinds of lending notifications."""

    BORROW = "borrow"
    RETURN = "return"


@dataclass(frozen=True)
class LendingEvent:
    """A single borrow or return, as seen by notification adapters."""

    action: LendingAction
    member_id: int
    title: str
    occurred_at: datetime

    @classmethod
    def now(cls, action: LendingAction, member_id: int, title: str) -> "LendingEvent":
        """Create an event stamped with the current UTC time."""
        return cls(
            action=action,
            member_id=member_id,
            title=title,
            occurred_at=datetime.now(UTC),
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        return {
            "event": self.action.value,
            "member_id": self.member_id,
            "title": self.title,
            "occurred_at": self.occurred_at.isoformat(),
        }
