"""
terragrade command line entry point.

Usage:
    terragrade [-f PATH] [-d] [-h] [-v]
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from terragrade import __version__
from terragrade.cli.analyze import analyze_command
from terragrade.config.settings import load_settings
from terragrade.core.errors import main_with_error_handling
from terragrade.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terragrade",
        description="Security analysis for the providers in a Terraform lock file",
    )
    parser.add_argument(
        "-f",
        "--file",
        metavar="PATH",
        help="Path to Terraform lock file (default: .terraform.lock.hcl)",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug output")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"terragrade v{__version__}",
        help="Show version",
    )
    return parser


@main_with_error_handling()
def _run(args: argparse.Namespace) -> int:
    settings = load_settings()
    configure_logging(
        logging.DEBUG if args.debug else logging.WARNING,
        json_output=settings.log_json,
    )
    return analyze_command(args.file, debug=args.debug, settings=settings)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return _run(args)


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    sys.exit(main())
