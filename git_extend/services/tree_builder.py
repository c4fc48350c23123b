"""Builds the directory tree shown by the tree renderer"""

from pathlib import Path
from typing import Iterable, Union

from git_extend.logging_config import get_logger
from git_extend.models.repository import RepositoryStatus
from git_extend.models.tree import TreeNode

logger = get_logger(__name__)


def build_tree(statuses: Iterable[RepositoryStatus], root: Union[str, Path]) -> TreeNode:
    """Nest repository statuses under the path segments leading to them.

    Statuses outside ``root`` are dropped. A repository at ``root`` itself is
    attached to the returned root node. If two statuses share a path the
    last one wins.
    """
    root = Path(root)
    tree = TreeNode()

    for status in statuses:
        try:
            relative = Path(status.path).relative_to(root)
        except ValueError:
            logger.debug(f"Dropping {status.path}: not under {root}")
            continue

        node = tree
        for part in relative.parts:
            node = node.child(part)
        node.repo_status = status

    return tree
