"""Command-line interface for git-extend.

This package provides the git-list entry point and argument parsing.
"""

from .main import main
from .args import parse_args

__all__ = ["main", "parse_args"]
