"""Library service: implements LibraryPort over the injected ports.

This is the only component with decision logic. It validates inputs,
adjusts copy counts on records fetched from the book store, hands the
records back for persistence and announces borrows and returns.
Errors raised by collaborators propagate unchanged.
"""

import logging

from .errors import InvalidArgumentError, InvalidOperationError
from .models import Book
from .ports import BookStorePort, LibraryPort, MemberDirectoryPort, NotificationPort

logger = logging.getLogger(__name__)


class LibraryService(LibraryPort):
    """Core implementation of LibraryPort."""

    def __init__(
        self,
        store: BookStorePort,
        members: MemberDirectoryPort,
        notification: NotificationPort,
    ):
        """Initialize the library service.

        Args:
            store: BookStorePort implementation for persistence.
            members: MemberDirectoryPort implementation for eligibility checks.
            notification: NotificationPort implementation for lending announcements.
        """
        self.store = store
        self.members = members
        self.notification = notification

    def add_book(self, title: str, copies_to_add: int) -> None:
        """Add copies of a title, creating the record on first sight.

        Args:
            title: Title of the book. Must not be blank.
            copies_to_add: Number of copies to add. Must be positive.

        Raises:
            InvalidArgumentError: If title is blank or copies_to_add <= 0.
                Raised before the store is touched.
        """
        if not isinstance(title, str) or not title.strip():
            raise InvalidArgumentError("title", "must be a non-empty string")
        if (
            not isinstance(copies_to_add, int)
            or isinstance(copies_to_add, bool)
            or copies_to_add <= 0
        ):
            raise InvalidArgumentError(
                "copies_to_add", f"must be a positive integer, got {copies_to_add!r}"
            )

        book = self.store.find_book(title)
        if book is None:
            book = Book(title=title, copies=copies_to_add)
            logger.info(
                f"New title added: {title}",
                extra={"title": title, "copies": copies_to_add},
            )
        else:
            book.put_back(copies_to_add)
            logger.info(
                f"Added {copies_to_add} copies of {title}",
                extra={"title": title, "copies": book.copies},
            )

        self.store.save_book(book)

    def borrow_book(self, member_id: int, title: str) -> bool:
        """Lend one copy of a title to a member.

        A title the store does not know is treated the same as a title
        with no copies left.

        Args:
            member_id: Member asking to borrow.
            title: Title to borrow.

        Returns:
            True if a copy was lent, False if none was available.

        Raises:
            InvalidOperationError: If the member directory rejects member_id.
        """
        if not self.members.is_valid_member(member_id):
            raise InvalidOperationError(member_id)

        book = self.store.find_book(title)
        if book is None or not book.is_available:
            logger.debug(
                f"No copies of {title} available",
                extra={"member_id": member_id, "title": title},
            )
            return False

        book.take_copy()
        self.store.save_book(book)
        self.notification.notify_borrow(member_id, title)

        logger.info(
            f"Member {member_id} borrowed {title}",
            extra={"member_id": member_id, "title": title, "copies": book.copies},
        )
        return True

    def return_book(self, member_id: int, title: str) -> bool:
        """Take back one copy of a title.

        Args:
            member_id: Member returning the book. Not validated.
            title: Title being returned.

        Returns:
            True if the copy was shelved, False if the title is unknown.
        """
        book = self.store.find_book(title)
        if book is None:
            logger.debug(
                f"Return of unknown title {title} ignored",
                extra={"member_id": member_id, "title": title},
            )
            return False

        book.put_back()
        self.store.save_book(book)
        self.notification.notify_return(member_id, title)

        logger.info(
            f"Member {member_id} returned {title}",
            extra={"member_id": member_id, "title": title, "copies": book.copies},
        )
        return True

    def get_available_books(self) -> list[Book]:
        """List books with at least one copy, in store order."""
        return [book for book in self.store.get_all_books() if book.is_available]
