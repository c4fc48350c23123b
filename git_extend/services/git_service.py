"""Git access service"""
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import git

from git_extend.constants import DEFAULT_REMOTE, DETACHED_HEAD, HEADS_PREFIX
from git_extend.exceptions import RepositoryOpenError
from git_extend.logging_config import get_logger
from git_extend.models.branch import BranchStatus, NoUpstream, classify_sync

logger = get_logger(__name__)

# for-each-ref fields, tab separated (git refuses control characters in ref names)
TRACKING_FORMAT = "%(refname:lstrip=2)%09%(upstream)%09%(upstream:track)"

_AHEAD_RE = re.compile(r"ahead (\S+?)(?:,|\]|$)")
_BEHIND_RE = re.compile(r"behind (\S+?)(?:,|\]|$)")


def _parse_count(token: Optional[str]) -> int:
    """Parse a commit count, falling back to 0 on garbage."""
    if token is None:
        return 0
    try:
        return int(token)
    except ValueError:
        logger.debug(f"Unparsable tracking count {token!r}, using 0")
        return 0


def parse_tracking(track: str, upstream: str = "") -> BranchStatus:
    """Classify the ``%(upstream:track)`` value of a branch.

    Args:
        track: "", "[ahead N]", "[behind N]", "[ahead N, behind M]" or "[gone]"
        upstream: full ref name of the configured upstream, "" when there is none

    Returns:
        The sync status of the branch
    """
    if not upstream:
        return NoUpstream()

    track = track.strip()
    if not track:
        return classify_sync(0, 0)
    if not (track.startswith("[") and track.endswith("]")):
        logger.debug(f"Unrecognized tracking info {track!r}")
        return NoUpstream()

    ahead_match = _AHEAD_RE.search(track)
    behind_match = _BEHIND_RE.search(track)
    if ahead_match is None and behind_match is None:
        # "[gone]": the upstream branch was deleted
        return NoUpstream()

    ahead = _parse_count(ahead_match.group(1) if ahead_match else None)
    behind = _parse_count(behind_match.group(1) if behind_match else None)
    return classify_sync(ahead, behind)


def parse_porcelain_counts(status_output: str) -> Tuple[int, int]:
    """Count changed paths in ``git status --porcelain`` output.

    Returns:
        (uncommitted, untracked)
    """
    uncommitted = 0
    untracked = 0
    for line in status_output.splitlines():
        if line.startswith("??"):
            untracked += 1
        elif line.strip():
            uncommitted += 1
    return uncommitted, untracked


class GitService:
    """Read-only access to one git repository."""

    def __init__(self, repo_path: Union[str, Path]):
        """Initialize the service.

        The repository is opened lazily on first use.

        Args:
            repo_path: Path to the root of the working copy
        """
        self.repo_path = Path(repo_path)
        self._repo: Optional[git.Repo] = None

    def open(self) -> git.Repo:
        """Open the repository.

        Raises:
            RepositoryOpenError: if the path is not a usable git repository
        """
        if self._repo is None:
            try:
                self._repo = git.Repo(self.repo_path)
            except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
                raise RepositoryOpenError(self.repo_path, "not a git repository") from e
            except (git.exc.GitError, OSError, ValueError) as e:
                raise RepositoryOpenError(self.repo_path, str(e)) from e
        return self._repo

    def _get_repo(self) -> git.Repo:
        return self.open()

    def get_current_branch(self) -> str:
        """Short name of the checked-out branch, or "HEAD" when detached or unborn."""
        try:
            repo = self._get_repo()
            head = repo.head
            if not head.is_valid():
                logger.debug(f"{self.repo_path}: HEAD is unborn")
                return DETACHED_HEAD
            ref_path = head.reference.path
        except TypeError:
            # GitPython raises TypeError for a detached HEAD
            logger.debug(f"{self.repo_path}: HEAD is detached")
            return DETACHED_HEAD
        except Exception as e:
            logger.debug(f"{self.repo_path}: could not read HEAD: {e}")
            return DETACHED_HEAD

        if not ref_path.startswith(HEADS_PREFIX):
            return DETACHED_HEAD
        return ref_path[len(HEADS_PREFIX):]

    def get_local_branches(self) -> List[str]:
        """Names of local branches in ref order."""
        try:
            repo = self._get_repo()
            return [head.name for head in repo.branches]
        except Exception as e:
            logger.debug(f"{self.repo_path}: could not list branches: {e}")
            return []

    def get_tracking_info(self) -> Dict[str, BranchStatus]:
        """Sync status of every local branch against its upstream.

        Returns an empty mapping when the query fails.
        """
        try:
            repo = self._get_repo()
            output = repo.git.for_each_ref(f"--format={TRACKING_FORMAT}", "refs/heads")
        except Exception as e:
            logger.debug(f"{self.repo_path}: tracking query failed: {e}")
            return {}

        tracking: Dict[str, BranchStatus] = {}
        for line in output.splitlines():
            fields = line.split("\t")
            if not fields[0]:
                continue
            name = fields[0]
            upstream = fields[1] if len(fields) > 1 else ""
            track = fields[2] if len(fields) > 2 else ""
            tracking[name] = parse_tracking(track, upstream)
        return tracking

    def get_change_counts(self) -> Tuple[int, int]:
        """Count uncommitted and untracked paths in the working tree.

        Returns:
            (uncommitted, untracked), both 0 when the status query fails
        """
        try:
            repo = self._get_repo()
            status = repo.git.status("--porcelain")
        except Exception as e:
            logger.debug(f"{self.repo_path}: status query failed: {e}")
            return 0, 0
        return parse_porcelain_counts(status)

    def get_remote_url(self, remote_name: str = DEFAULT_REMOTE) -> Optional[str]:
        """Fetch URL of a remote, or None if the remote or its URL is missing."""
        try:
            repo = self._get_repo()
            remote = repo.remote(remote_name)
            return remote.url
        except Exception as e:
            logger.debug(f"{self.repo_path}: no URL for remote {remote_name}: {e}")
            return None

    def close(self) -> None:
        """Release the repository and any git processes it keeps around."""
        if self._repo is not None:
            self._repo.close()
            self._repo = None

    def __enter__(self) -> "GitService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
