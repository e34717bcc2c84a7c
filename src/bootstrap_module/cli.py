"""Command line interface for bootstrapping a module from its templates."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from rich.console import Console

from .config import ModuleType, ProjectLayout
from .errors import ScaffoldError
from .prompts import PromptCollector
from .scaffold import ModuleScaffolder

LOGGER = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bootstrap-module",
        description="Turn this module skeleton into a concrete module",
    )
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Module directory to bootstrap (defaults to the current directory)",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="module_type",
        choices=[module_type.value for module_type in ModuleType],
        help="Module type; skips the corresponding question",
    )
    parser.add_argument(
        "-n",
        "--no-input",
        action="store_true",
        help="Accept the default answer for every question",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every file operation")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    return parser


def configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _run(args: argparse.Namespace, stream: TextIO | None) -> int:
    layout = ProjectLayout.from_root(args.root if args.root is not None else Path.cwd())
    collector = PromptCollector(
        layout.root,
        console=Console(),
        stream=stream,
        interactive=not args.no_input,
    )
    module_type = ModuleType(args.module_type) if args.module_type else None
    config = collector.collect(module_type)
    LOGGER.debug("Answers: %s", config.model_dump(mode="json"))

    scaffolder = ModuleScaffolder(layout)
    module_root = scaffolder.run(config)
    print(f"Module {config.package_name_dash} created at {module_root}")
    return 0


def main(argv: Sequence[str] | None = None, stream: TextIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args)
    try:
        return _run(args, stream)
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except EOFError:
        print("Aborted: input ended before every question was answered.", file=sys.stderr)
        return EXIT_FAILURE
    except (ScaffoldError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
