"""Book store adapters for persistence.

Implementations support multiple backends:
- In-memory (process lifetime, shared records)
- SQLite (zero-config, single-file)
"""
