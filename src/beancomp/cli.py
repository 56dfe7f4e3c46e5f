# beancomp.cli - Command line interface
"""
CLI entry point for beancomp.
"""
import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import Optional

from loguru import logger

from beancomp.version import __version__
from beancomp.cache import CacheManager
from beancomp.completion import CompletionProvider, CompletionRequest
from beancomp.config import Config, load_config
from beancomp.exceptions import BeancompError
from beancomp.log import setup_logger
from beancomp.syntax import CursorPosition
from beancomp.workspace import Workspace


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="beancomp",
        description="Beancount completion - resolve completions at a cursor position",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"beancomp {__version__}",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file",
    )

    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Disable index caching",
    )

    parser.add_argument(
        "--cache-dir",
        type=Path,
        help="Cache directory (default: ~/.cache/beancomp)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # complete subcommand
    complete_parser = subparsers.add_parser(
        "complete",
        help="Print completions at a position in a ledger file",
    )
    complete_parser.add_argument(
        "file",
        type=Path,
        help="Ledger file",
    )
    complete_parser.add_argument(
        "line",
        type=int,
        help="Zero-based line",
    )
    complete_parser.add_argument(
        "character",
        type=int,
        help="Zero-based character",
    )
    complete_parser.add_argument(
        "--trigger",
        help="Trigger character sent by the editor",
    )
    complete_parser.add_argument(
        "--date",
        help="Date to use as today (YYYY-MM-DD)",
    )
    complete_parser.add_argument(
        "--include",
        type=Path,
        action="append",
        default=[],
        help="Extra ledger file or directory for the knowledge base (can be repeated)",
    )
    _add_output_argument(complete_parser)

    # index subcommand
    index_parser = subparsers.add_parser(
        "index",
        help="Print accounts and strings known in ledger files",
    )
    index_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Ledger files or directories",
    )
    _add_output_argument(index_parser)

    # cache subcommand
    cache_parser = subparsers.add_parser(
        "cache",
        help="Inspect or clear the index cache",
    )
    cache_parser.add_argument(
        "action",
        choices=["stats", "clear"],
    )

    return parser


def _add_output_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o", "--output",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_logger(
        log_level="DEBUG" if args.debug else config.log_level,
        log_file=config.log_file,
    )

    if args.command is None:
        parser.print_help()
        return 1

    cache_manager = _create_cache_manager(args, config)

    if args.command == "complete":
        return run_complete(args, config, cache_manager)
    if args.command == "index":
        return run_index(args, config, cache_manager)
    return run_cache(args, config, cache_manager)


def _create_cache_manager(args, config: Config) -> Optional[CacheManager]:
    """Create the cache manager unless caching is disabled."""
    if args.no_cache or not config.cache_enabled:
        return None
    cache_manager = CacheManager(args.cache_dir or config.cache_dir)
    cache_manager.cleanup_old(config.cache_max_age_days)
    cache_manager.cleanup_by_size(config.cache_max_size_mb)
    return cache_manager


def _create_workspace(config: Config, cache_manager: Optional[CacheManager]) -> Optional[Workspace]:
    """Create a workspace, or report a missing grammar and return None."""
    try:
        return Workspace(
            cache_manager=cache_manager,
            extensions=config.ledger_extensions,
        )
    except ImportError as e:
        print(
            f"Error: Beancount grammar not available ({e}). "
            "Install it with: pip install 'beancomp[grammar]'",
            file=sys.stderr,
        )
        return None


def _load_paths(workspace: Workspace, paths: list[Path]) -> None:
    """Load files and directories into the workspace."""
    for path in paths:
        if path.is_dir():
            workspace.load_directory(path, recursive=True)
        elif path.is_file():
            try:
                workspace.load(path)
            except (OSError, UnicodeDecodeError, BeancompError) as e:
                logger.warning(f"Failed to load {path}: {e}")
        else:
            print(f"Warning: Not found: {path}", file=sys.stderr)


def run_complete(args, config: Config, cache_manager: Optional[CacheManager]) -> int:
    """Print completions at a position."""
    if not args.file.is_file():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1

    try:
        position = CursorPosition(args.line, args.character)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    today = None
    if args.date:
        try:
            today = date.fromisoformat(args.date)
        except ValueError:
            print(f"Error: Invalid date: {args.date}", file=sys.stderr)
            return 1

    workspace = _create_workspace(config, cache_manager)
    if workspace is None:
        return 1
    try:
        document = workspace.load(args.file)
    except (OSError, UnicodeDecodeError, BeancompError) as e:
        print(f"Error: Failed to load {args.file}: {e}", file=sys.stderr)
        return 1
    _load_paths(workspace, args.include)

    provider = CompletionProvider.from_config(
        config,
        clock=(lambda: today) if today else date.today,
    )
    request = CompletionRequest(
        uri=document.uri,
        position=position,
        trigger_character=args.trigger,
    )
    result = provider.complete(workspace.snapshot(), request)

    if args.output == "json":
        payload = None if result is None else [item.to_dict() for item in result]
        print(json.dumps(payload, indent=2))
    elif result is None:
        print("No completions")
    else:
        for item in result:
            print(f"{item.label}\t{item.detail}" if item.detail else item.label)

    return 0


def run_index(args, config: Config, cache_manager: Optional[CacheManager]) -> int:
    """Print the knowledge base of the given paths."""
    workspace = _create_workspace(config, cache_manager)
    if workspace is None:
        return 1
    _load_paths(workspace, args.paths)

    if not len(workspace):
        print("No documents loaded", file=sys.stderr)
        return 1

    if args.output == "json":
        print(json.dumps([doc.to_dict() for doc in workspace], indent=2))
        return 0

    for doc in workspace:
        print(doc)
        for account in doc.data.accounts:
            print(f"  account  {account}")
        for value in doc.data.strings:
            print(f"  string   {value}")
    return 0


def run_cache(args, config: Config, cache_manager: Optional[CacheManager]) -> int:
    """Show or clear the index cache."""
    if cache_manager is None:
        print("Cache is disabled", file=sys.stderr)
        return 1

    if args.action == "clear":
        count = cache_manager.clear()
        print(f"Removed {count} cache files")
        return 0

    stats = cache_manager.get_stats()
    print(f"Cache dir:  {cache_manager.cache_dir}")
    print(f"Files:      {stats['file_count']}")
    print(f"Size:       {stats['total_size_mb']} MB")
    return 0


if __name__ == "__main__":
    sys.exit(main())
