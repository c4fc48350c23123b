"""Formatting utilities for git-extend."""

from .status import (
    format_branch_label,
    format_branch_status,
    format_status_text,
    get_status_style,
)

__all__ = [
    "format_branch_label",
    "format_branch_status",
    "format_status_text",
    "get_status_style",
]
