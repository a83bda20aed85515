"""librarian: a small library lending service built as ports and adapters."""
