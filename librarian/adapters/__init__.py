"""External adapters for the librarian lending service.

This package contains all external dependencies (SQLite, HTTP clients,
terminal I/O) and provides implementations of the core port interfaces.

Adapter Organization:

- store/: Adapters for book persistence (in-memory, SQLite)
- members/: Adapters for member eligibility checks
- notification/: Adapters for announcing lending activity (stdout, markdown, webhook)
- cli/: Command-line interface commands
"""
