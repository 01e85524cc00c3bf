"""
CLI main entry point.
"""

import argparse
import logging
import sys
from pathlib import Path

from ..client import ShishutsukanClient
from ..config import ClientConfig, ConfigValidationError, create_default_config, load_config
from ..errors import ShishutsukanError
from ..schemas import Expense, Genre

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_cli() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="shishutsukan",
        description="Manage expenses and genres on a Shishutsukan server",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.yaml"),
        help="Path to config file (default: config.yaml)",
    )
    parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Server base URL (overrides config and SHISHUTSUKAN_URL)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # expenses command
    expenses_parser = subparsers.add_parser("expenses", help="List, add or delete expenses")
    expense_actions = expenses_parser.add_subparsers(dest="action", required=True)

    expense_actions.add_parser("list", help="List all expenses")

    add_expense_parser = expense_actions.add_parser("add", help="Add an expense")
    add_expense_parser.add_argument("--date", type=str, required=True, help="Date, e.g. 2025-01-15")
    add_expense_parser.add_argument("--genre", type=str, required=True, help="Genre name")
    add_expense_parser.add_argument("--amount", type=int, required=True, help="Amount in yen")

    delete_expense_parser = expense_actions.add_parser("delete", help="Delete an expense")
    delete_expense_parser.add_argument("id", type=int, help="Expense ID")

    # genres command
    genres_parser = subparsers.add_parser("genres", help="List, add or delete genres")
    genre_actions = genres_parser.add_subparsers(dest="action", required=True)

    genre_actions.add_parser("list", help="List all genres")

    add_genre_parser = genre_actions.add_parser("add", help="Add a genre")
    add_genre_parser.add_argument("name", type=str, help="Genre name")

    delete_genre_parser = genre_actions.add_parser("delete", help="Delete a genre")
    delete_genre_parser.add_argument("id", type=int, help="Genre ID")

    # init-config command
    subparsers.add_parser("init-config", help="Write a default config file")

    return parser


def cmd_expenses(client: ShishutsukanClient, args: argparse.Namespace) -> int:
    """Run an expenses action."""
    if args.action == "list":
        expenses = client.get_expenses()
        for expense in expenses:
            print(f"  [{expense.id}] {expense.date}  {expense.genre}  ¥{expense.amount}")
        print(f"\n✓ {len(expenses)} expense(s)")
    elif args.action == "add":
        expense = Expense(date=args.date, genre=args.genre, amount=args.amount)
        result = client.add_expense(expense)
        print(f"✓ {result.message}")
    elif args.action == "delete":
        result = client.delete_expense(args.id)
        print(f"✓ {result.message}")
    return 0


def cmd_genres(client: ShishutsukanClient, args: argparse.Namespace) -> int:
    """Run a genres action."""
    if args.action == "list":
        genres = client.get_genres()
        for genre in genres:
            print(f"  [{genre.id}] {genre.name}  (created {genre.created_at})")
        print(f"\n✓ {len(genres)} genre(s)")
    elif args.action == "add":
        result = client.add_genre(Genre(name=args.name))
        print(f"✓ {result.message}")
    elif args.action == "delete":
        result = client.delete_genre(args.id)
        print(f"✓ {result.message}")
    return 0


def cmd_init_config(config_path: Path) -> int:
    """Write the default config file unless one exists."""
    if config_path.exists():
        print(f"❌ Config file already exists: {config_path}", file=sys.stderr)
        return 1
    create_default_config(config_path)
    print(f"✓ Wrote {config_path}")
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_cli()
    parsed = parser.parse_args(args)

    setup_logging(parsed.verbose)

    if not parsed.command:
        parser.print_help()
        return 1

    if parsed.command == "init-config":
        return cmd_init_config(parsed.config)

    # Load config
    try:
        config = load_config(parsed.config)
    except (ConfigValidationError, OSError) as e:
        print(f"❌ Failed to load config: {e}", file=sys.stderr)
        return 1

    if parsed.url:
        config = ClientConfig(base_url=parsed.url, timeout_seconds=config.timeout_seconds)

    problems = config.validate()
    if problems:
        for problem in problems:
            print(f"❌ {problem}", file=sys.stderr)
        return 1

    try:
        with ShishutsukanClient.from_config(config) as client:
            if parsed.command == "expenses":
                return cmd_expenses(client, parsed)
            elif parsed.command == "genres":
                return cmd_genres(client, parsed)
    except ShishutsukanError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
