"""Directory tree used by the tree renderer."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from git_extend.models.repository import RepositoryStatus


@dataclass
class TreeNode:
    """One path segment below the scanned root.

    The root node has an empty name. ``repo_status`` is set only on nodes
    that are themselves a discovered repository.
    """

    name: str = ""
    children: Dict[str, "TreeNode"] = field(default_factory=dict)
    repo_status: Optional[RepositoryStatus] = None

    def child(self, name: str) -> "TreeNode":
        """Return the child for ``name``, creating it if needed."""
        node = self.children.get(name)
        if node is None:
            node = TreeNode(name)
            self.children[name] = node
        return node

    def sorted_children(self) -> List["TreeNode"]:
        return [self.children[name] for name in sorted(self.children)]

    @property
    def is_repository(self) -> bool:
        return self.repo_status is not None
