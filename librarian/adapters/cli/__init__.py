"""Command-line interface adapters.

Provides CLI commands for running the library:
- add: Add copies of a title
- borrow: Lend a copy to a member
- return: Take a copy back
- available: List titles with copies on the shelf
"""
