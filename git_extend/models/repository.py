"""Repository status model"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from git_extend.models.branch import BranchInfo


@dataclass
class RepositoryStatus:
    """Branch and working-tree status of one discovered repository."""

    path: Path
    current_branch: str
    branches: List[BranchInfo] = field(default_factory=list)

    def current_branch_info(self) -> Optional[BranchInfo]:
        """Entry of the checked-out branch, matched by exact name."""
        return next((b for b in self.branches if b.name == self.current_branch), None)
