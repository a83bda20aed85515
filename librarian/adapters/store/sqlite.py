"""SQLite book store adapter.

Implements BookStorePort using the standard library sqlite3 module.
Each lookup returns a fresh Book; changes reach the database only
through save_book.
"""

import logging
import sqlite3
from pathlib import Path

from librarian.core.models import Book
from librarian.core.ports import BookStorePort

logger = logging.getLogger(__name__)


class SQLiteBookStore(BookStorePort):
    """SQLite-backed book store with a single lazily opened connection."""

    def __init__(self, db_path: str):
        """Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file, or ":memory:".
        """
        self.db_path = db_path
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._conn: sqlite3.Connection | None = None
        self._schema_initialized = False

    def _get_connection(self) -> sqlite3.Connection:
        """Open the connection on first use."""
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path)
        return self._conn

    def close(self) -> None:
        """Close the connection if open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            self._schema_initialized = False

    def _init_schema(self) -> None:
        """Initialize database schema on first use.

        Only runs once per connection. Subsequent calls are no-ops.
        """
        if self._schema_initialized:
            return

        conn = self._get_connection()
        with conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS books (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT UNIQUE NOT NULL,
                    copies INTEGER NOT NULL DEFAULT 0 CHECK (copies >= 0)
                )
                """
            )
        self._schema_initialized = True

    def find_book(self, title: str) -> Book | None:
        """Look up a book by title."""
        self._init_schema()

        cursor = self._get_connection().execute(
            "SELECT title, copies FROM books WHERE title = ?", (title,)
        )
        row = cursor.fetchone()
        if row is None:
            return None
        return self._row_to_book(row)

    def save_book(self, book: Book) -> None:
        """Insert a new title or overwrite the copy count of an existing one."""
        self._init_schema()

        conn = self._get_connection()
        with conn:
            conn.execute(
                """
                INSERT INTO books (title, copies) VALUES (?, ?)
                ON CONFLICT(title) DO UPDATE SET copies = excluded.copies
                """,
                (book.title, book.copies),
            )
        logger.debug(
            f"Saved {book.title}",
            extra={"title": book.title, "copies": book.copies},
        )

    def get_all_books(self) -> list[Book]:
        """Return all records in the order they were first saved."""
        self._init_schema()

        cursor = self._get_connection().execute(
            "SELECT title, copies FROM books ORDER BY id"
        )
        return [self._row_to_book(row) for row in cursor.fetchall()]

    @staticmethod
    def _row_to_book(row: tuple[str, int]) -> Book:
        """Convert a database row to a Book.

        Raises:
            ValueError: If the row does not describe a valid book.
        """
        try:
            title, copies = row
            return Book(title=title, copies=int(copies))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Row parsing failed for {row!r}: {e}") from e
