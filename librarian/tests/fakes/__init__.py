"""Fake/mock implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeBookStorePort: In-memory book persistence with call tracking
- FakeMemberDirectoryPort: Configurable set of valid members
- FakeNotificationPort: Captured notifications for assertion
"""

from .members import FakeMemberDirectoryPort
from .notification import FakeNotificationPort
from .store import FakeBookStorePort

__all__ = [
    "FakeBookStorePort",
    "FakeMemberDirectoryPort",
    "FakeNotificationPort",
]
