"""Test suite for the librarian lending service.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Integration tests for adapter implementations
   - Tests against real files, SQLite databases and stubbed HTTP

3. fakes/: Port implementations for testing
   - In-memory implementations of BookStorePort, MemberDirectoryPort, etc.
   - Used by core unit tests
"""
