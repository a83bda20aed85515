"""Sanity tests for the fake port implementations."""

import pytest

from librarian.core.models import Book
from librarian.tests.fakes import (
    FakeBookStorePort,
    FakeMemberDirectoryPort,
    FakeNotificationPort,
)


class TestFakeBookStorePort:
    def test_tracks_calls(self) -> None:
        store = FakeBookStorePort([Book("A", 1)])

        assert store.find_book("A").copies == 1
        assert store.find_book("B") is None
        store.save_book(Book("B", 2))

        assert store.find_book_calls == ["A", "B"]
        assert [b.title for b in store.saved_books] == ["B"]
        assert [b.title for b in store.get_all_books()] == ["A", "B"]

    def test_add_does_not_record_save(self) -> None:
        store = FakeBookStorePort()
        book = store.add("A", 0)

        assert store.find_book("A") is book
        assert store.saved_books == []

    def test_failure_mode_and_reset(self) -> None:
        store = FakeBookStorePort()
        store.set_should_fail(True, "offline")

        with pytest.raises(RuntimeError, match="offline"):
            store.get_all_books()

        store.reset()
        assert store.get_all_books() == []


class TestFakeMemberDirectoryPort:
    def test_add_and_revoke(self) -> None:
        members = FakeMemberDirectoryPort()
        members.add_member(3)
        assert members.is_valid_member(3)

        members.revoke_member(3)
        assert not members.is_valid_member(3)
        assert members.checked_ids == [3, 3]


class TestFakeNotificationPort:
    def test_captures_and_resets(self) -> None:
        notification = FakeNotificationPort()
        notification.notify_borrow(1, "A")
        notification.notify_return(2, "B")

        assert notification.borrows == [(1, "A")]
        assert notification.returns == [(2, "B")]
        assert notification.notification_count == 2

        notification.reset()
        assert notification.notification_count == 0
