"""Command-line argument parsing for git-list."""

import argparse
from typing import List, Optional

from git_extend.__version__ import __version__
from git_extend.constants import BASE_DIR_ENV_VAR, OUTPUT_FORMATS, OUTPUT_FORMAT_TREE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-list",
        description="List all git repositories and their status",
        epilog=f"The root directory defaults to the {BASE_DIR_ENV_VAR} environment variable.",
    )
    parser.add_argument(
        "-o",
        "--output",
        choices=OUTPUT_FORMATS,
        default=OUTPUT_FORMAT_TREE,
        help="Output format: tree, flat, or dump (default: tree)",
    )
    parser.add_argument(
        "-d",
        "--dir",
        help=f"Root directory to search for repositories (defaults to ${BASE_DIR_ENV_VAR})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Number of parallel workers for reading repositories (default: auto-detect)",
    )
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Read repositories one at a time (disable parallelism)",
    )
    parser.add_argument("--version", action="version", version=f"git-list {__version__}")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
