"""Core domain logic for the librarian lending service.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import InvalidArgumentError, InvalidOperationError, LibraryError
from .models import Book, LendingAction, LendingEvent

__all__ = [
    "Book",
    "InvalidArgumentError",
    "InvalidOperationError",
    "LendingAction",
    "LendingEvent",
    "LibraryError",
]
