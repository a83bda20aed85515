"""CLI command implementations for library operations.

Maps CLI commands (add, borrow, return, available) to LibraryPort
operations. Handles CLI-specific formatting and error reporting.
"""

import logging
from typing import Any

from librarian.core.errors import LibraryError
from librarian.core.ports import LibraryPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to LibraryPort.

    Every method returns a result dictionary with a "status" key:
    "success", "unavailable", "not_found" or "error".
    """

    def __init__(self, library: LibraryPort):
        """Initialize the CLI command handler.

        Args:
            library: LibraryPort implementation to execute commands.
        """
        self.library = library

    def add_book(self, title: str, copies: int) -> dict[str, Any]:
        """Add copies of a book via CLI.

        Args:
            title: Title of the book.
            copies: Number of copies to add.

        Returns:
            Dictionary with status and message.
        """
        try:
            self.library.add_book(title, copies)
        except LibraryError as e:
            logger.error(f"Failed to add book: {e}")
            return {
                "status": "error",
                "operation": "add",
                "title": title,
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "add",
            "title": title,
            "copies_added": copies,
            "message": f"Added {copies} copies of {title}",
        }

    def borrow_book(self, member_id: int, title: str) -> dict[str, Any]:
        """Borrow a book via CLI.

        Args:
            member_id: Member borrowing the book.
            title: Title to borrow.

        Returns:
            Dictionary with status and message.
        """
        try:
            borrowed = self.library.borrow_book(member_id, title)
        except LibraryError as e:
            logger.error(f"Failed to borrow book: {e}")
            return {
                "status": "error",
                "operation": "borrow",
                "member_id": member_id,
                "title": title,
                "message": str(e),
            }

        if not borrowed:
            return {
                "status": "unavailable",
                "operation": "borrow",
                "member_id": member_id,
                "title": title,
                "message": f"No copies of {title} available",
            }

        return {
            "status": "success",
            "operation": "borrow",
            "member_id": member_id,
            "title": title,
            "message": f"Member {member_id} borrowed {title}",
        }

    def return_book(self, member_id: int, title: str) -> dict[str, Any]:
        """Return a book via CLI.

        Args:
            member_id: Member returning the book.
            title: Title being returned.

        Returns:
            Dictionary with status and message.
        """
        if not self.library.return_book(member_id, title):
            return {
                "status": "not_found",
                "operation": "return",
                "member_id": member_id,
                "title": title,
                "message": f"Unknown title: {title}",
            }

        return {
            "status": "success",
            "operation": "return",
            "member_id": member_id,
            "title": title,
            "message": f"Member {member_id} returned {title}",
        }

    def list_available(self, output_format: str = "json") -> dict[str, Any]:
        """List books with copies on the shelf.

        Args:
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with the book list or status/message on error.
        """
        books = self.library.get_available_books()

        if output_format == "json":
            data: Any = [{"title": b.title, "copies": b.copies} for b in books]
        elif output_format == "text":
            data = self._format_books_as_text(books)
        else:
            return {
                "status": "error",
                "operation": "available",
                "message": f"Unsupported format: {output_format}",
            }

        return {
            "status": "success",
            "operation": "available",
            "count": len(books),
            "data": data,
        }

    @staticmethod
    def _format_books_as_text(books: list) -> str:
        if not books:
            return "No books available."
        width = max(len(b.title) for b in books)
        return "\n".join(f"{b.title.ljust(width)}  {b.copies}" for b in books)


def run_command(
    library: LibraryPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        library: LibraryPort implementation.
        command: Command name ('add', 'borrow', 'return', 'available').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized or a required argument is missing.
    """
    handler = CLICommandHandler(library)

    def require(name: str) -> Any:
        if name not in args:
            raise ValueError(f"Missing required parameter: {name}")
        return args[name]

    if command == "add":
        return handler.add_book(require("title"), require("copies"))

    elif command == "borrow":
        return handler.borrow_book(require("member_id"), require("title"))

    elif command == "return":
        return handler.return_book(require("member_id"), require("title"))

    elif command == "available":
        return handler.list_available(args.get("format", "json"))

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")
