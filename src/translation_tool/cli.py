#!/usr/bin/env python3
"""Command-line interface for translation document operations.

Provides CLI access to progress, extract, backup and batch apply operations
on a single Qt .ts document.

Usage:
    translation-tool progress
    translation-tool extract 20
    translation-tool backup
    translation-tool apply translations.json
    translation-tool --document path/to/app_zh_CN.ts progress

Exit status is 0 on success or after printing usage, 1 when the document
or settings cannot be used, and 2 when a command's arguments are rejected.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .localization import OperationResult, ToolConfig, TranslationTool

DEFAULT_CLI_EXTRACT_LIMIT = 20


def print_result(result: OperationResult) -> None:
    """Print an operation result's logs to stdout and errors to stderr.

    Args:
        result: The operation result to display.
    """
    for log in result.logs:
        print(log)

    for error in result.errors:
        print(f"[FAIL] {error}", file=sys.stderr)


def cmd_progress(tool: TranslationTool) -> int:
    """Print completion statistics.

    Args:
        tool: TranslationTool instance.

    Returns:
        Exit code (0 for success, 1 if the document cannot be read).
    """
    result = tool.progress()
    if not result.success:
        print_result(result)
        return 1

    stats = result.details["stats"]
    bar_len = 20
    filled = int(stats.progress / 100 * bar_len) if stats.total else 0
    filled = max(0, min(bar_len, filled))
    bar = "█" * filled + "░" * (bar_len - filled)

    print("=== Translation Progress ===")
    print(f"Total:      {stats.total}")
    print(f"Completed:  {stats.completed}")
    print(f"Unfinished: {stats.unfinished}")
    print(f"Progress:   [{bar}] {stats.progress}%")
    return 0


def cmd_extract(tool: TranslationTool, limit: int) -> int:
    """Print up to ``limit`` unfinished entries.

    Args:
        tool: TranslationTool instance.
        limit: Maximum number of entries to print.

    Returns:
        Exit code (0 for success, 1 if the document cannot be read).
    """
    result = tool.extract(limit)
    if not result.success:
        print_result(result)
        return 1

    print(f"=== First {limit} unfinished entries ===\n")
    for index, entry in enumerate(result.details["entries"], start=1):
        print(f"[{index}] Context: {entry.context}")
        print(f"Source: {entry.source}\n")
    return 0


def cmd_backup(tool: TranslationTool) -> int:
    """Create a snapshot and print its path.

    Args:
        tool: TranslationTool instance.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    result = tool.backup()
    print_result(result)
    return 0 if result.success else 1


def cmd_apply(tool: TranslationTool, batch_file: Path) -> int:
    """Apply a JSON batch of translations.

    Args:
        tool: TranslationTool instance.
        batch_file: JSON object mapping source text to translations.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    result = tool.translate_file(batch_file)
    print_result(result)
    return 0 if result.success else 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="translation-tool",
        description="Progress, extraction and batch updates for a Qt .ts translation file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        exit_on_error=False,
        epilog="""
Examples:
  %(prog)s progress                  Show translation progress
  %(prog)s extract 50                List the first 50 unfinished entries
  %(prog)s backup                    Create a timestamped backup
  %(prog)s apply batch.json          Apply translations from a JSON object
        """,
    )

    parser.add_argument(
        "--document",
        type=Path,
        help="Path to the .ts document (default: from settings)",
    )
    parser.add_argument(
        "--backup-dir",
        type=Path,
        help="Directory that receives backups (default: from settings)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON settings file (default: ./translation_tool.json if present)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser(
        "progress",
        help="Show total, completed and unfinished counts",
    )

    extract_parser = subparsers.add_parser(
        "extract",
        help="List unfinished entries with their context",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Usage examples:
  translation-tool extract               First 20 unfinished entries
  translation-tool extract 100           First 100 unfinished entries
        """,
    )
    extract_parser.add_argument(
        "limit",
        nargs="?",
        type=int,
        default=DEFAULT_CLI_EXTRACT_LIMIT,
        help=f"Maximum number of entries (default: {DEFAULT_CLI_EXTRACT_LIMIT})",
    )

    subparsers.add_parser(
        "backup",
        help="Create a timestamped backup of the document",
    )

    apply_parser = subparsers.add_parser(
        "apply",
        help="Apply a JSON batch of translations (backs up first)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The batch file is a JSON object mapping source text, exactly as it
appears in the document, to the translated text:

  {"Hello": "你好", "Save": "保存"}
        """,
    )
    apply_parser.add_argument(
        "batch_file",
        type=Path,
        help="JSON file mapping source text to translations",
    )

    subparsers.add_parser(
        "help",
        help="Show this help message",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point.

    Args:
        argv: Command-line arguments; uses sys.argv if None.

    Returns:
        Exit code for the process.
    """
    parser = build_parser()
    try:
        args, extras = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        # Unknown commands fall back to the usage text
        print(f"Error: {e}", file=sys.stderr)
        parser.print_help()
        return 0
    if extras:
        # Exits with status 2, like argparse errors raised by the subcommands
        parser.error(f"unrecognized arguments: {' '.join(extras)}")

    if not args.command or args.command == "help":
        parser.print_help()
        return 0

    try:
        config = ToolConfig.load(
            settings_path=args.config,
            document_path=args.document,
            backup_dir=args.backup_dir,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    tool = TranslationTool(config)

    if not tool.is_document_detected():
        print(
            f"Warning: translation document not found at {config.document_path}. "
            "Use --document to specify it.",
            file=sys.stderr,
        )

    if args.command == "progress":
        return cmd_progress(tool)
    elif args.command == "extract":
        return cmd_extract(tool, args.limit)
    elif args.command == "backup":
        return cmd_backup(tool)
    elif args.command == "apply":
        return cmd_apply(tool, args.batch_file)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
