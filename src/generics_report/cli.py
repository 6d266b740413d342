"""
cli.py

Reads a Rust source file and prints a report of its generic type
parameters (with their trait bounds) and lifetime parameters, grouped by
the struct, trait or function they are declared on.

The file is parsed with tree-sitter; nothing is compiled or executed.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from .config import ConfigurationManager
from .console import ConsoleManager
from .core import GenericsReportService
from .errors import SourceParseError, SourceReadError
from .models import CONTEXT_MODES


class CliInterface:
    """
    Handles command-line arguments and application bootstrapping.
    """

    def __init__(self) -> None:
        self._parser = self._build_parser()

    def run(self, argv: list[str] | None = None) -> None:
        args = self._parser.parse_args(argv)

        logger = ConsoleManager(
            level=args.log_level or logging.INFO, no_color=args.no_color
        )

        try:
            config = self._build_config(args)
        except (FileNotFoundError, ValueError) as e:
            logger.critical(f"Configuration Error: {e}")
            sys.exit(1)

        source_path = Path(config["input_path"])
        service = GenericsReportService(app_config=config, logger=logger)

        try:
            report, collected = service.run_report(source_path)
        except SourceReadError as e:
            logger.error(str(e))
            sys.exit(1)
        except SourceParseError as e:
            logger.error(f"Unable to parse source code {source_path}:{e}")
            sys.exit(2)
        except Exception as e:
            logger.critical(
                f"An unexpected error occurred: {e}",
                exc_info=args.log_level == logging.DEBUG,
            )
            sys.exit(1)

        print(report)

        if args.print_summary:
            logger.print_summary(collected)

        sys.exit(0)

    def _build_config(self, args: argparse.Namespace) -> dict[str, Any]:
        overrides = {
            "input_path": args.source,
            "context_mode": args.context_mode,
            "collapse_bound_whitespace": args.collapse_bound_whitespace,
        }

        mgr = ConfigurationManager()
        return mgr.load_config(args.config, overrides)

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="generics-report",
            description="Report generic type parameters, trait bounds and "
            "lifetimes declared in a Rust source file.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Example:
  generics-report src/lib.rs --context-mode overwrite --print-summary
""",
        )

        parser.add_argument(
            "source",
            nargs="?",
            help="Rust source file to analyse (default: src/sample.rs).",
        )
        parser.add_argument("--config", help="Path to JSON/JSONC config.")
        parser.add_argument(
            "--context-mode",
            choices=CONTEXT_MODES,
            help="'stack' restores the enclosing declaration after a nested "
            "one; 'overwrite' keeps the last declaration seen.",
        )
        parser.add_argument(
            "--raw-bounds",
            action="store_false",
            dest="collapse_bound_whitespace",
            default=None,
            help="Print trait bounds exactly as written in the source.",
        )

        # Log
        log_g = parser.add_mutually_exclusive_group()
        log_g.add_argument(
            "-v",
            "--verbose",
            action="store_const",
            dest="log_level",
            const=logging.DEBUG,
        )
        log_g.add_argument(
            "-q", "--quiet", action="store_const", dest="log_level", const=logging.ERROR
        )
        parser.add_argument("--no-color", action="store_true")
        parser.add_argument("--print-summary", action="store_true")

        return parser


def main(argv: list[str] | None = None) -> None:
    CliInterface().run(argv)


if __name__ == "__main__":
    main()
