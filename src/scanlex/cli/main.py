# Copyright 2026 Scanlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the scanlex command-line interface."""

import argparse
import sys
from pathlib import Path

from scanlex.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    OutputFormat,
    ScanlexConfig,
    load_config,
    save_config,
)
from scanlex.lexer.scanner import Lexer, LexerError, LineTracking
from scanlex.lexer.tokens import Token
from scanlex.serialization import format_tokens, serialize

# ###############
# Public Interface
# ###############

EXIT_BAD_LEXING = 1


def main() -> None:
    """Run the scanlex CLI."""
    parser = argparse.ArgumentParser(
        prog="scanlex",
        description="scanlex - lexical analyzer for source files",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write a default configuration file",
        description=f"Create a default {CONFIG_FILE_NAME} in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to write the configuration to (default: current directory)",
    )

    # lex subcommand
    lex_parser = subparsers.add_parser(
        "lex",
        help="Tokenize files and print the tokens",
        description="Tokenize one or more files in order and print the combined token sequence.",
    )
    _add_source_arguments(lex_parser)
    lex_parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=None,
        help="Token listing format (default: from config, else text)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that files tokenize without errors",
        description="Tokenize one or more files and report only whether lexing succeeded.",
    )
    _add_source_arguments(check_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_source_arguments(subparser: argparse.ArgumentParser) -> None:
    """Add the arguments shared by subcommands that lex files."""
    subparser.add_argument("files", nargs="+", metavar="FILE", help="Source files, lexed in the given order")
    subparser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory, if present)",
    )
    subparser.add_argument(
        "--line-tracking",
        choices=[mode.value for mode in LineTracking],
        default=None,
        help="Whether line/column numbers continue across files or restart per file",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "lex":
        return _cmd_lex(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    try:
        save_config(ScanlexConfig(), config_file)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Wrote default configuration to '{config_file}'.")
    return 0


def _cmd_lex(args: argparse.Namespace) -> int:
    """Handle the lex subcommand."""
    config = _resolve_config(args)
    if config is None:
        return 1

    tokens = _lex_files(args.files, config)
    if tokens is None:
        return EXIT_BAD_LEXING

    if config.output_format is OutputFormat.JSON:
        print(serialize(tokens))
    elif tokens:
        print(format_tokens(tokens))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    config = _resolve_config(args)
    if config is None:
        return 1

    tokens = _lex_files(args.files, config)
    if tokens is None:
        return EXIT_BAD_LEXING

    print(f"Lexed {len(tokens)} token(s) from {len(args.files)} file(s). No issues found.")
    return 0


def _resolve_config(args: argparse.Namespace) -> ScanlexConfig | None:
    """Load the configuration and apply command-line overrides.

    Returns None after printing an error if the configuration cannot be loaded.
    """
    if args.config is not None:
        config_path: Path | None = Path(args.config)
    else:
        default_path = Path.cwd() / CONFIG_FILE_NAME
        config_path = default_path if default_path.exists() else None

    config = ScanlexConfig()
    if config_path is not None:
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return None

    if args.line_tracking is not None:
        config.line_tracking = LineTracking(args.line_tracking)
    if getattr(args, "format", None) is not None:
        config.output_format = OutputFormat(args.format)
    return config


def _lex_files(files: list[str], config: ScanlexConfig) -> list[Token] | None:
    """Read and lex *files* in order.

    Returns None after printing a diagnostic if a file cannot be read or lexing fails.
    """
    lexer = Lexer(line_tracking=config.line_tracking)
    for name in files:
        try:
            text = Path(name).read_text(encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot read '{name}': {exc}", file=sys.stderr)
            return None
        except UnicodeDecodeError as exc:
            print(f"Error: '{name}' is not valid UTF-8: {exc}", file=sys.stderr)
            return None
        lexer.feed_file(name, text)

    try:
        return lexer.lex()
    except LexerError as exc:
        print(exc, file=sys.stderr)
        return None
