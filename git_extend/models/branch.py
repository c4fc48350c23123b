"""Branch model and the branch status variants"""
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Ok:
    """Branch has an upstream and is exactly in sync with it."""


@dataclass(frozen=True)
class Ahead:
    """Branch has commits its upstream does not."""
    count: int


@dataclass(frozen=True)
class Behind:
    """Upstream has commits the branch does not."""
    count: int


@dataclass(frozen=True)
class Diverged:
    """Branch and upstream both have commits the other lacks."""
    ahead: int
    behind: int


@dataclass(frozen=True)
class NoUpstream:
    """No upstream configured, upstream gone, or tracking info unavailable."""


@dataclass(frozen=True)
class Uncommitted:
    """Number of modified or staged working-tree paths."""
    count: int


@dataclass(frozen=True)
class Untracked:
    """Number of untracked working-tree paths."""
    count: int


BranchStatus = Union[Ok, Ahead, Behind, Diverged, NoUpstream, Uncommitted, Untracked]


def classify_sync(ahead: int, behind: int) -> BranchStatus:
    """Map ahead/behind counts against an upstream onto a sync status."""
    if ahead and behind:
        return Diverged(ahead=ahead, behind=behind)
    if ahead:
        return Ahead(ahead)
    if behind:
        return Behind(behind)
    return Ok()


@dataclass
class BranchInfo:
    """A branch line of a repository.

    An empty name marks a synthetic line that only carries working-tree
    change counts.
    """
    name: str
    status: BranchStatus

    @property
    def is_synthetic(self) -> bool:
        return not self.name
