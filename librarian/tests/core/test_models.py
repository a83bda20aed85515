"""Unit tests for domain models and errors."""

from datetime import UTC, datetime

import pytest

from librarian.core.errors import (
    InvalidArgumentError,
    InvalidOperationError,
    LibraryError,
)
from librarian.core.models import Book, LendingAction, LendingEvent


class TestBook:
    """Tests for the Book model."""

    def test_valid_book(self) -> None:
        book = Book(title="Dune", copies=0)
        assert book.title == "Dune"
        assert book.copies == 0
        assert not book.is_available

    @pytest.mark.parametrize("title", ["", "  "])
    def test_blank_title_rejected(self, title: str) -> None:
        with pytest.raises(ValueError, match="title"):
            Book(title=title, copies=1)

    def test_negative_copies_rejected(self) -> None:
        with pytest.raises(ValueError, match="copies must be >= 0"):
            Book(title="Dune", copies=-1)

    def test_take_copy(self) -> None:
        book = Book(title="Dune", copies=1)
        book.take_copy()
        assert book.copies == 0

    def test_take_copy_from_empty_shelf(self) -> None:
        """Copies never go negative."""
        book = Book(title="Dune", copies=0)
        with pytest.raises(ValueError, match="No copies"):
            book.take_copy()
        assert book.copies == 0

    def test_put_back(self) -> None:
        book = Book(title="Dune", copies=1)
        book.put_back()
        book.put_back(3)
        assert book.copies == 5

    def test_put_back_requires_positive_count(self) -> None:
        with pytest.raises(ValueError):
            Book(title="Dune", copies=1).put_back(0)


class TestLendingEvent:
    """Tests for LendingEvent."""

    def test_to_dict(self) -> None:
        event = LendingEvent(
            action=LendingAction.RETURN,
            member_id=4,
            title="Dune",
            occurred_at=datetime(2026, 1, 15, 10, 0, 0, tzinfo=UTC),
        )
        assert event.to_dict() == {
            "event": "return",
            "member_id": 4,
            "title": "Dune",
            "occurred_at": "2026-01-15T10:00:00+00:00",
        }

    def test_now_is_timezone_aware(self) -> None:
        event = LendingEvent.now(LendingAction.BORROW, 1, "Dune")
        assert event.occurred_at.tzinfo is not None
        assert event.action is LendingAction.BORROW

    def test_is_frozen(self) -> None:
        event = LendingEvent.now(LendingAction.BORROW, 1, "Dune")
        with pytest.raises(AttributeError):
            event.title = "Other"  # type: ignore[misc]


class TestErrors:
    """Tests for the error hierarchy."""

    def test_invalid_argument_names_parameter(self) -> None:
        error = InvalidArgumentError("title", "must be a non-empty string")
        assert error.parameter == "title"
        assert str(error) == "title: must be a non-empty string"
        assert isinstance(error, LibraryError)
        assert isinstance(error, ValueError)

    def test_invalid_operation_defaults_message(self) -> None:
        error = InvalidOperationError(7)
        assert error.member_id == 7
        assert str(error) == "invalid member"
        assert isinstance(error, LibraryError)
