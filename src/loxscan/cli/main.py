# Copyright 2026 loxscan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the loxscan command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from loxscan.config.settings import Settings, SettingsError, find_settings, load_settings
from loxscan.scanner.scanner import LexicalError, scan

# ###############
# Public Interface
# ###############

EXIT_OK = 0
EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66
EXIT_CONFIG = 78


def main() -> None:
    """Run the loxscan CLI."""
    parser = argparse.ArgumentParser(
        prog="loxscan",
        description="Scan Lox source into tokens. Without a script, start an interactive prompt.",
    )
    parser.add_argument(
        "script",
        nargs="*",
        help="Lox source file to scan (omit to start the interactive prompt)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a settings file (default: ./.loxscan.yaml if present)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored diagnostics",
    )

    args = parser.parse_args()
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Validate arguments, load settings, and run a script or the prompt."""
    if len(args.script) > 1:
        print("Usage: loxscan [script]", file=sys.stderr)
        return EXIT_USAGE

    try:
        settings = load_settings(args.config) if args.config is not None else find_settings(Path.cwd())
    except SettingsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    if args.no_color:
        settings = settings.model_copy(update={"color": False})

    if args.script:
        return _run_file(Path(args.script[0]), settings)
    return _run_prompt(settings)


def _run_file(path: Path, settings: Settings) -> int:
    """Scan a whole file and print its tokens."""
    try:
        source = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return EXIT_NO_INPUT
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return EXIT_NO_INPUT

    had_error = _run(source, settings)
    return EXIT_DATA_ERROR if had_error else EXIT_OK


def _run_prompt(settings: Settings) -> int:
    """Scan one line at a time until end of input."""
    while True:
        try:
            line = input(settings.prompt)
        except EOFError:
            print()
            return EXIT_OK
        # Errors on one line never affect the next.
        _run(line, settings)


def _run(source: str, settings: Settings) -> bool:
    """Scan ``source``, print tokens and diagnostics, and return whether any error occurred."""
    errors: list[LexicalError] = []

    def report(error: LexicalError) -> None:
        errors.append(error)
        _report(error, settings)

    for token in scan(source, on_error=report):
        if settings.show_lines:
            print(f"{token.line:4} {token}")
        else:
            print(token)
    return bool(errors)


def _report(error: LexicalError, settings: Settings) -> None:
    """Print one lexical error to stderr."""
    message = str(error)
    if settings.color:
        message = chalk.red(message)
    print(message, file=sys.stderr)
