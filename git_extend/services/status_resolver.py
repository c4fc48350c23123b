"""Service for building the status record of a repository"""

from pathlib import Path
from typing import Callable, Dict, List, Union

from git_extend.logging_config import get_logger
from git_extend.models.branch import (
    BranchInfo,
    BranchStatus,
    NoUpstream,
    Uncommitted,
    Untracked,
)
from git_extend.models.repository import RepositoryStatus
from git_extend.services.git_service import GitService

logger = get_logger(__name__)


def merge_branch_statuses(
    local_branches: List[str], tracking: Dict[str, BranchStatus]
) -> Dict[str, BranchStatus]:
    """Combine enumerated branches with tracking results by branch name.

    The enumeration decides which branches exist: names only known to the
    tracking query are dropped, and branches it has no data for stay
    NoUpstream. The result keeps enumeration order.
    """
    statuses: Dict[str, BranchStatus] = {name: NoUpstream() for name in local_branches}
    for name, status in tracking.items():
        if name in statuses:
            statuses[name] = status
        else:
            logger.debug(f"Ignoring tracking info for unknown branch {name}")
    return statuses


def assemble_branches(
    current_branch: str,
    statuses: Dict[str, BranchStatus],
    uncommitted: int,
    untracked: int,
) -> List[BranchInfo]:
    """Order branch lines: current branch, change counts, then other branches."""
    branches = [BranchInfo(current_branch, statuses.get(current_branch, NoUpstream()))]

    if uncommitted > 0:
        branches.append(BranchInfo("", Uncommitted(uncommitted)))
    if untracked > 0:
        branches.append(BranchInfo("", Untracked(untracked)))

    for name, status in statuses.items():
        if name != current_branch:
            branches.append(BranchInfo(name, status))

    return branches


class StatusResolver:
    """Resolves the branch and working-tree status of repositories."""

    def __init__(self, git_service_factory: Callable[[Path], GitService] = GitService):
        """Initialize the resolver.

        Args:
            git_service_factory: Builds the GitService used for one repository
        """
        self.git_service_factory = git_service_factory

    def resolve(self, repo_path: Union[str, Path]) -> RepositoryStatus:
        """Build the status record of one repository.

        Raises:
            RepositoryOpenError: if the path cannot be opened as a repository
        """
        repo_path = Path(repo_path)
        logger.debug(f"Resolving status for {repo_path}")

        with self.git_service_factory(repo_path) as git_service:
            git_service.open()

            current_branch = git_service.get_current_branch()
            uncommitted, untracked = git_service.get_change_counts()
            local_branches = git_service.get_local_branches()
            tracking = git_service.get_tracking_info() if local_branches else {}

        statuses = merge_branch_statuses(local_branches, tracking)
        branches = assemble_branches(current_branch, statuses, uncommitted, untracked)

        logger.debug(
            f"{repo_path}: branch={current_branch}, branches={len(local_branches)}, "
            f"uncommitted={uncommitted}, untracked={untracked}"
        )
        return RepositoryStatus(path=repo_path, current_branch=current_branch, branches=branches)
