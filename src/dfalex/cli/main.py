# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the dfalex command-line interface."""

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from yachalk import chalk

from dfalex.driver.batch import ReportWriteError, SourceReadError, discover_sources, scan_file, write_report
from dfalex.report.render import render_report
from dfalex.workspace.config import (
    CONFIG_FILE_NAME,
    DriverConfig,
    DriverConfigError,
    dump_driver_config,
    load_driver_config,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the dfalex CLI."""
    parser = argparse.ArgumentParser(
        prog="dfalex",
        description="dfalex - DFA-based lexical analyzer",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log driver progress to stderr",
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

    # scan subcommand
    scan_parser = subparsers.add_parser(
        "scan",
        help="Tokenize source files and report the results",
        description=(
            "Scan source files, print the token stream, statistics, identifier "
            "registry and lexical errors for each, and optionally write report files."
        ),
    )
    scan_parser.add_argument(
        "paths",
        nargs="+",
        help="Source files or directories to scan",
    )
    scan_parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: ./{CONFIG_FILE_NAME} if present)",
    )
    scan_parser.add_argument(
        "--report-dir",
        nargs="?",
        const="",
        default=None,
        help="Write one report file per source; without a value the configured report directory is used",
    )
    scan_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print plain, uncoloured output",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "scan":
        return _cmd_scan(args)
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

    config_file.write_text(dump_driver_config(DriverConfig()), encoding="utf-8")
    print(f"Wrote default configuration to '{config_file}'.")
    return 0


def _cmd_scan(args: argparse.Namespace) -> int:
    """Handle the scan subcommand."""
    try:
        config = _load_config(args.config)
    except DriverConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        sources = discover_sources([Path(p) for p in args.paths], config.source_suffixes)
    except SourceReadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not sources:
        print("No source files found.")
        return 0

    report_dir: Path | None = None
    if args.report_dir is not None:
        report_dir = Path(args.report_dir or config.report_directory)

    color = not args.no_color
    failed = False
    error_total = 0
    for source_path in sources:
        try:
            result = scan_file(source_path)
        except SourceReadError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            failed = True
            continue

        print(_paint(f"==> {source_path}", chalk.blue, color))
        _print_report(render_report(result, include_comments=config.include_comments), color)
        error_total += result.diagnostics.count()

        if report_dir is not None:
            try:
                written = write_report(source_path, result, report_dir, config.include_comments)
            except ReportWriteError as exc:
                print(f"Error: {exc}", file=sys.stderr)
                failed = True
                continue
            print(f"Report written to '{written}'.")

    summary = f"Scanned {len(sources)} file(s): {error_total} lexical error(s)."
    if error_total or failed:
        print(_paint(summary, chalk.red, color))
        return 1
    print(_paint(summary, chalk.green, color))
    return 0


def _load_config(explicit: str | None) -> DriverConfig:
    """Load the explicit config, else ./.dfalex.yaml if present, else defaults."""
    if explicit is not None:
        return load_driver_config(Path(explicit))
    default_path = Path.cwd() / CONFIG_FILE_NAME
    if default_path.exists():
        logger.debug("Using configuration %s", default_path)
        return load_driver_config(default_path)
    return DriverConfig()


def _print_report(text: str, color: bool) -> None:
    """Print a rendered report, highlighting rules and diagnostics."""
    for line in text.splitlines():
        if line.startswith("[LEXICAL ERROR]"):
            print(_paint(line, chalk.red, color))
        elif line.startswith("=") or line.isupper():
            print(_paint(line, chalk.blue, color))
        else:
            print(line)


def _paint(text: str, style: Callable[[str], str], color: bool) -> str:
    return style(text) if color else text
