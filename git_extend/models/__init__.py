"""Data models for git-extend."""

from .branch import (
    Ahead,
    Behind,
    BranchInfo,
    BranchStatus,
    Diverged,
    NoUpstream,
    Ok,
    Uncommitted,
    Untracked,
    classify_sync,
)
from .repository import RepositoryStatus
from .tree import TreeNode

__all__ = [
    "Ahead",
    "Behind",
    "BranchInfo",
    "BranchStatus",
    "Diverged",
    "NoUpstream",
    "Ok",
    "Uncommitted",
    "Untracked",
    "classify_sync",
    "RepositoryStatus",
    "TreeNode",
]
