"""Repository discovery below a root directory"""

import os
from pathlib import Path
from typing import AbstractSet, Iterator, Union

from git_extend.constants import EXCLUDED_DIRS, GIT_DIR_NAME
from git_extend.logging_config import get_logger

logger = get_logger(__name__)


def is_skipped_name(name: str, excluded: AbstractSet[str] = EXCLUDED_DIRS) -> bool:
    """Check a directory name against the hidden and excluded rules."""
    return name.startswith(".") or name in excluded


class RepositoryWalker:
    """Walks a directory tree and yields the roots of git working copies.

    A directory whose ``.git`` entry is a directory is a repository; the walk
    never descends into it, so nested repositories are not reported. Hidden
    and excluded directories are skipped by name before touching the
    filesystem, and symlinks are not followed.
    """

    def __init__(self, root: Union[str, Path], excluded: AbstractSet[str] = EXCLUDED_DIRS):
        self.root = Path(root)
        self.excluded = excluded

    def discover(self) -> Iterator[Path]:
        """Yield repository roots under the root directory, root inclusive."""
        yield from self._walk(self.root)

    def _walk(self, directory: Path) -> Iterator[Path]:
        git_dir = directory / GIT_DIR_NAME
        try:
            if not directory.is_dir():
                return
            has_git = git_dir.exists()
            is_repository = has_git and git_dir.is_dir()
        except OSError as e:
            logger.debug(f"Skipping unsearchable directory {directory}: {e}")
            return

        if has_git:
            # A .git file marks a submodule or linked worktree, not a repository root
            if is_repository:
                yield directory
            return

        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            return

        for entry in entries:
            if is_skipped_name(entry.name, self.excluded):
                continue
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                logger.debug(f"Skipping {entry.path}: {e}")
                continue
            if is_dir:
                yield from self._walk(Path(entry.path))


def discover(root: Union[str, Path]) -> Iterator[Path]:
    """Yield the repository roots found under ``root``."""
    return RepositoryWalker(root).discover()
