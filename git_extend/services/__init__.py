"""Services for discovering repositories and reporting their status."""

from .git_service import GitService
from .repository_walker import RepositoryWalker, discover
from .status_resolver import StatusResolver
from .tree_builder import build_tree
from .display_service import DisplayService

__all__ = [
    "GitService",
    "RepositoryWalker",
    "discover",
    "StatusResolver",
    "build_tree",
    "DisplayService",
]
