"""Errors raised by the librarian core."""


class LibraryError(Exception):
    """Base exception for library service errors."""


class InvalidArgumentError(LibraryError, ValueError):
    """An operation was called with an argument it cannot accept."""

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        super().__init__(f"{parameter}: {message}")


class InvalidOperationError(LibraryError):
    """The operation is not permitted for the given member."""

    def __init__(self, member_id: int, message: str = "invalid member"):
        self.member_id = member_id
        super().__init__(message)
