"""Command line interface for flutter-scaffold."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import click

from . import __version__
from .config import ToolchainConfig
from .driver import FlutterDriver, Runner
from .errors import ScaffoldError
from .prompts import ClickPrompter, Prompter
from .scaffold import ScaffoldSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flutter-scaffold",
        description="Create a Flutter project with a feature-first directory layout",
    )
    parser.add_argument("-n", "--name", help="Name of the Flutter project")
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory in which the project is created (defaults to the current directory)",
    )
    parser.add_argument(
        "--flutter",
        metavar="PATH",
        help="flutter executable to run (defaults to $FLUTTER_SCAFFOLD_FLUTTER or 'flutter')",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every file and command")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    prompter: Prompter | None = None,
    runner: Runner | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    toolchain = ToolchainConfig.from_env()
    executable = args.flutter or toolchain.flutter_executable
    session = ScaffoldSession(prompter or ClickPrompter(), FlutterDriver(executable, runner))
    try:
        session.run(name=args.name, directory=args.directory)
    except ScaffoldError as exc:
        click.secho(f"error: {exc}", fg="red", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
