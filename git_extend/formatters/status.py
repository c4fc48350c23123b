"""Branch status formatting utilities."""

from typing import Optional

from rich.text import Text

from git_extend.constants import STYLE_OK, STYLE_UNTRACKED, STYLE_WARNING
from git_extend.models.branch import (
    Ahead,
    Behind,
    BranchInfo,
    BranchStatus,
    Diverged,
    NoUpstream,
    Ok,
    Uncommitted,
    Untracked,
)


def format_branch_status(status: BranchStatus) -> str:
    """
    Format a branch status as display text.

    Args:
        status: One of the BranchStatus variants

    Returns:
        Display text, e.g. "ok", "2 ahead", "[ 3 untracked ]"

    Raises:
        TypeError: for anything that is not a BranchStatus variant
    """
    if isinstance(status, Ok):
        return "ok"
    if isinstance(status, Ahead):
        return f"{status.count} ahead"
    if isinstance(status, Behind):
        return f"{status.count} behind"
    if isinstance(status, Diverged):
        return f"{status.ahead} ahead {status.behind} behind"
    if isinstance(status, NoUpstream):
        return "no upstream"
    if isinstance(status, Uncommitted):
        return f"[ {status.count} uncommitted ]"
    if isinstance(status, Untracked):
        return f"[ {status.count} untracked ]"
    raise TypeError(f"Unknown branch status: {status!r}")


def get_status_style(status: BranchStatus) -> Optional[str]:
    """
    Rich style used to print a branch status.

    Returns:
        Style name, or None for unknown values
    """
    if isinstance(status, Ok):
        return STYLE_OK
    if isinstance(status, Untracked):
        return STYLE_UNTRACKED
    if isinstance(status, (Ahead, Behind, Diverged, NoUpstream, Uncommitted)):
        return STYLE_WARNING
    return None


def format_status_text(status: BranchStatus) -> Text:
    """Status text with its color."""
    return Text(format_branch_status(status), style=get_status_style(status) or "")


def format_branch_label(branch: BranchInfo) -> Text:
    """
    Format a branch line as "name status", or just the status for synthetic lines.

    Example:
        "main ok", "feature/x 1 ahead 2 behind", "[ 2 uncommitted ]"
    """
    label = Text()
    if not branch.is_synthetic:
        label.append(branch.name)
        label.append(" ")
    label.append_text(format_status_text(branch.status))
    return label
