"""Rendering of repository statuses as tree, flat list or dump"""
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from rich.console import Console
from rich.text import Text

from git_extend.constants import (
    BRANCH_ALIGN_WIDTH,
    DEFAULT_REMOTE,
    NO_REPOSITORIES_MESSAGE,
    OUTPUT_FORMAT_DUMP,
    OUTPUT_FORMAT_FLAT,
    OUTPUT_FORMAT_TREE,
    TREE_BRANCH,
    TREE_LAST,
    TREE_PIPE,
    TREE_SPACE,
)
from git_extend.exceptions import InvalidOutputFormatError, RepositoryOpenError
from git_extend.formatters import format_branch_label, format_status_text
from git_extend.logging_config import get_logger
from git_extend.models.repository import RepositoryStatus
from git_extend.models.tree import TreeNode
from git_extend.services.git_service import GitService
from git_extend.services.tree_builder import build_tree

logger = get_logger(__name__)


def read_origin_url(repo_path: Path) -> Optional[str]:
    """Fetch URL of the origin remote of a repository, if it has one."""
    with GitService(repo_path) as git_service:
        try:
            git_service.open()
        except RepositoryOpenError as e:
            logger.debug(f"Could not reopen {repo_path}: {e}")
            return None
        return git_service.get_remote_url(DEFAULT_REMOTE)


class DisplayService:
    """Renders repository statuses and prints them to a rich console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        remote_url_reader: Callable[[Path], Optional[str]] = read_origin_url,
    ):
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.remote_url_reader = remote_url_reader

    def display(
        self,
        output_format: str,
        statuses: Sequence[RepositoryStatus],
        base_dir: Union[str, Path],
    ) -> None:
        """Print statuses in the requested format.

        Raises:
            InvalidOutputFormatError: for an unknown format
        """
        for line in self.render(output_format, statuses, base_dir):
            self.console.print(line)

    def render(
        self,
        output_format: str,
        statuses: Sequence[RepositoryStatus],
        base_dir: Union[str, Path],
    ) -> List[Text]:
        if output_format == OUTPUT_FORMAT_TREE:
            return self.render_tree(statuses, base_dir)
        if output_format == OUTPUT_FORMAT_FLAT:
            return self.render_flat(statuses)
        if output_format == OUTPUT_FORMAT_DUMP:
            return self.render_dump(statuses)
        raise InvalidOutputFormatError(output_format)

    def render_tree(
        self, statuses: Sequence[RepositoryStatus], base_dir: Union[str, Path]
    ) -> List[Text]:
        """Render statuses nested under the directories leading to them."""
        header = Text(str(base_dir))
        if not statuses:
            return [header, Text(NO_REPOSITORIES_MESSAGE)]

        tree = build_tree(statuses, base_dir)
        lines = [header]
        if tree.is_repository:
            # The scanned root is itself a repository
            self._append_branches(lines, header, str(base_dir), tree.repo_status, "")
        self._render_node(tree, "", True, lines)
        return lines

    def _render_node(self, node: TreeNode, prefix: str, is_last: bool, lines: List[Text]) -> None:
        guide = TREE_SPACE if is_last else TREE_PIPE

        if node.name:
            connector = TREE_LAST if is_last else TREE_BRANCH
            node_line = Text(f"{prefix}{connector}{node.name}")
            lines.append(node_line)
            if node.is_repository:
                self._append_branches(lines, node_line, node.name, node.repo_status, prefix + guide)

        children = node.sorted_children()
        child_prefix = prefix + guide if node.name else prefix
        for i, child in enumerate(children):
            self._render_node(child, child_prefix, i == len(children) - 1, lines)

    def _append_branches(
        self,
        lines: List[Text],
        node_line: Text,
        name: str,
        status: RepositoryStatus,
        continuation: str,
    ) -> None:
        """Attach branch lines to a repository node.

        The first named branch goes on the node line; the rest get their own
        lines padded towards BRANCH_ALIGN_WIDTH.
        """
        padding = " " * max(0, BRANCH_ALIGN_WIDTH - len(name))
        inline_done = False

        for branch in status.branches:
            label = format_branch_label(branch)
            if not inline_done and not branch.is_synthetic:
                node_line.append(" ")
                node_line.append_text(label)
                inline_done = True
            else:
                line = Text(f"{continuation}{padding}")
                line.append_text(label)
                lines.append(line)

    def render_flat(self, statuses: Sequence[RepositoryStatus]) -> List[Text]:
        """One line per repository with the status of its current branch.

        Working-tree change counts are not shown in this format.
        """
        lines = []
        for status in statuses:
            line = Text(str(status.path))
            current = status.current_branch_info()
            if current is not None:
                line.append(f" ({current.name}) ")
                line.append_text(format_status_text(current.status))
            lines.append(line)
        return lines

    def render_dump(self, statuses: Sequence[RepositoryStatus]) -> List[Text]:
        """One "<origin url> <branch>" line per repository that has an origin."""
        lines = []
        for status in statuses:
            url = self.remote_url_reader(status.path)
            if not url:
                logger.debug(f"{status.path}: no origin remote, leaving it out of the dump")
                continue
            lines.append(Text(f"{url} {status.current_branch}"))
        return lines
