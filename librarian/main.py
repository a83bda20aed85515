"""Composition root for the librarian lending service.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Interactive CLI loop
"""

import json
import logging
import sys
from typing import Any

from librarian.adapters.cli.commands import run_command
from librarian.adapters.members.static import StaticMemberDirectory
from librarian.adapters.notification.markdown import MarkdownNotificationAdapter
from librarian.adapters.notification.stdout import StdoutNotificationAdapter
from librarian.adapters.notification.webhook import WebhookNotificationAdapter
from librarian.adapters.store.memory import InMemoryBookStore
from librarian.adapters.store.sqlite import SQLiteBookStore
from librarian.config import Settings, load_settings
from librarian.core.library_service import LibraryService
from librarian.core.ports import BookStorePort, LibraryPort, NotificationPort


def _run_cli_interactive(library: LibraryPort) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for library commands.

    Args:
        library: LibraryPort implementation the commands run against.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("librarian> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
                continue

            try:
                result = run_command(library, command, args)
                print(json.dumps(result, indent=2, default=str))
            except ValueError as e:
                logger.error(f"Command rejected: {e}")
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  add
    Add copies of a title, creating it if needed.
    Required: title, copies

    Example: add {"title": "Dune", "copies": 3}

  borrow
    Lend one copy of a title to a member.
    Required: member_id, title

    Example: borrow {"member_id": 1, "title": "Dune"}

  return
    Take back one copy of a title.
    Required: member_id, title

    Example: return {"member_id": 1, "title": "Dune"}

  available
    List titles with copies on the shelf.
    Optional: format (json, text)

    Example: available {"format": "text"}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_library_service(settings: Settings) -> tuple[LibraryService, list[Any]]:
    """Instantiate adapters from settings and wire the library service.

    Args:
        settings: Validated application settings.

    Returns:
        The wired service and the adapters that must be closed on shutdown.
    """
    logger = logging.getLogger(__name__)

    store: BookStorePort
    if settings.store_backend == "sqlite":
        store = SQLiteBookStore(db_path=settings.store_sqlite_path)
        logger.info(f"Book store initialized: {settings.store_sqlite_path}")
    else:
        store = InMemoryBookStore()
        logger.info("Book store initialized: in-memory")

    members = StaticMemberDirectory(
        member_ids=settings.valid_member_ids,
        allow_any=settings.allow_any_member,
    )
    logger.info(
        f"Member directory: {len(members.member_ids)} members"
        + (" (any member accepted)" if members.allow_any else "")
    )

    notification: NotificationPort
    if settings.notification_backend == "markdown":
        notification = MarkdownNotificationAdapter(ledger_path=settings.notification_output_path)
        logger.info("Notification adapter: Markdown")
    elif settings.notification_backend == "webhook":
        notification = WebhookNotificationAdapter(
            url=settings.webhook_url,
            timeout_seconds=settings.webhook_timeout_seconds,
        )
        logger.info("Notification adapter: Webhook")
    else:
        notification = StdoutNotificationAdapter(verbose=settings.debug)
        logger.info("Notification adapter: Stdout")

    service = LibraryService(store=store, members=members, notification=notification)
    closeables = [adapter for adapter in (store, notification) if hasattr(adapter, "close")]
    return service, closeables


def bootstrap() -> None:
    """Load configuration, wire adapters, and start the interactive CLI.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters and the library service
    4. Run the CLI loop
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading librarian...")

    service, closeables = build_library_service(settings)

    try:
        _run_cli_interactive(service)
    finally:
        for adapter in closeables:
            adapter.close()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
