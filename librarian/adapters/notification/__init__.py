"""Notification adapters for announcing lending activity.

Implementations support multiple output channels:
- Stdout (terminal line per event)
- Markdown file (append-only ledger)
- Webhook (JSON POST per event)
"""
