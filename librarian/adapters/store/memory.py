"""In-memory book store adapter.

Implements BookStorePort with a dict keyed by title. Records are
returned by reference, so callers see each other's changes even
before they are saved. Contents are lost when the process exits.
"""

import logging
from collections.abc import Iterable

from librarian.core.models import Book
from librarian.core.ports import BookStorePort

logger = logging.getLogger(__name__)


class InMemoryBookStore(BookStorePort):
    """Dict-backed book store preserving insertion order."""

    def __init__(self, books: Iterable[Book] | None = None):
        """Initialize the store, optionally seeded with books.

        Args:
            books: Initial records. A later book with a duplicate title
                replaces the earlier one.
        """
        self._books: dict[str, Book] = {}
        for book in books or ():
            self._books[book.title] = book

    def find_book(self, title: str) -> Book | None:
        """Look up a book by title."""
        return self._books.get(title)

    def save_book(self, book: Book) -> None:
        """Insert or replace the record for book.title."""
        self._books[book.title] = book
        logger.debug(
            f"Saved {book.title}",
            extra={"title": book.title, "copies": book.copies},
        )

    def get_all_books(self) -> list[Book]:
        """Return all records in insertion order."""
        return list(self._books.values())

    def close(self) -> None:
        """Drop all records."""
        self._books.clear()
