"""Port interfaces for the librarian lending service.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - BookStorePort: Look up and persist book records
   - MemberDirectoryPort: Decide whether a member may borrow
   - NotificationPort: Announce borrows and returns

2. **Driving Ports** (adapters/external systems call into core)
   - LibraryPort: Inventory and lending operations
"""

from abc import ABC, abstractmethod

from .models import Book


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class BookStorePort(ABC):
    """Port for looking up and persisting book records.

    The store owns the records. Callers fetch a record, change it, and
    hand it back through save_book; nothing may rely on the returned
    instance being shared with the store.
    """

    @abstractmethod
    def find_book(self, title: str) -> Book | None:
        """Retrieve a book by title.

        Args:
            title: Exact title of the book.

        Returns:
            Book if found, None otherwise.

        Raises:
            Exception: If the backing storage is unavailable.
        """

    @abstractmethod
    def save_book(self, book: Book) -> None:
        """Create or update a book record.

        Args:
            book: Book with its current copy count.

        Raises:
            Exception: If the backing storage is unavailable.
        """

    @abstractmethod
    def get_all_books(self) -> list[Book]:
        """Retrieve every book record.

        Returns:
            List of books in the store's iteration order.
            Empty list if the store holds no books.

        Raises:
            Exception: If the backing storage is unavailable.
        """


class MemberDirectoryPort(ABC):
    """Port for checking member eligibility."""

    @abstractmethod
    def is_valid_member(self, member_id: int) -> bool:
        """Check whether a member may borrow books.

        Args:
            member_id: Opaque member identifier.

        Returns:
            True if the member is known and in good standing.
        """


class NotificationPort(ABC):
    """Port for announcing lending activity.

    Adapters may print, append to a file, or call out over HTTP.
    Failures should raise; the core does not retry.
    """

    @abstractmethod
    def notify_borrow(self, member_id: int, title: str) -> None:
        """Announce that a member borrowed a book.

        Args:
            member_id: Member who borrowed the book.
            title: Title of the borrowed book.
        """

    @abstractmethod
    def notify_return(self, member_id: int, title: str) -> None:
        """Announce that a member returned a book.

        Args:
            member_id: Member who returned the book.
            title: Title of the returned book.
        """


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class LibraryPort(ABC):
    """Port for inventory and lending operations.

    Implemented by LibraryService; called by the CLI adapter.
    """

    @abstractmethod
    def add_book(self, title: str, copies_to_add: int) -> None:
        """Add copies of a title, creating the record if needed.

        Raises:
            InvalidArgumentError: If title is blank or copies_to_add <= 0.
        """

    @abstractmethod
    def borrow_book(self, member_id: int, title: str) -> bool:
        """Lend one copy of a title to a member.

        Returns:
            True if a copy was lent, False if none was available.

        Raises:
            InvalidOperationError: If the member is not valid.
        """

    @abstractmethod
    def return_book(self, member_id: int, title: str) -> bool:
        """Take back one copy of a title.

        Returns:
            True if the copy was shelved, False if the title is unknown.
        """

    @abstractmethod
    def get_available_books(self) -> list[Book]:
        """List books that have at least one copy on the shelf."""
