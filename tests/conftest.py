"""Pytest fixtures for git-extend tests"""
import tempfile
from pathlib import Path
from typing import Optional

import git
import pytest


def init_repo(path: Path, branch: str = "main", commit: bool = True) -> git.Repo:
    """Create a git repository at ``path``, optionally with an initial commit."""
    path.mkdir(parents=True, exist_ok=True)
    repo = git.Repo.init(path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    if commit:
        readme = path / "README.md"
        readme.write_text("# Test Repository\n")
        repo.index.add(["README.md"])
        repo.index.commit("Initial commit")
        repo.git.branch("-M", branch)
    return repo


def commit_file(repo: git.Repo, name: str, content: Optional[str] = None) -> None:
    """Write a file in the working tree and commit it."""
    path = Path(repo.working_dir) / name
    path.write_text(content if content is not None else f"{name}\n")
    repo.index.add([name])
    repo.index.commit(f"Add {name}")


def add_upstream(repo: git.Repo, remote_path: Path, branch: str = "main") -> git.Repo:
    """Create a bare remote, register it as origin and push ``branch`` with tracking."""
    remote = git.Repo.init(remote_path, bare=True)
    repo.create_remote("origin", str(remote_path))
    repo.git.push("-u", "origin", branch)
    return remote


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def scan_root(temp_dir):
    """Directory scanned for repositories."""
    root = temp_dir / "root"
    root.mkdir()
    return root


@pytest.fixture
def remotes_dir(temp_dir):
    """Directory for bare remotes, outside the scanned root."""
    remotes = temp_dir / "remotes"
    remotes.mkdir()
    return remotes


@pytest.fixture
def git_repo(scan_root):
    """A repository with one commit on main and no remote."""
    repo = init_repo(scan_root / "test_repo")
    yield repo
    repo.close()


@pytest.fixture
def tracked_repo(scan_root, remotes_dir):
    """A repository whose main branch tracks origin/main and is in sync."""
    repo = init_repo(scan_root / "tracked")
    add_upstream(repo, remotes_dir / "tracked.git")
    yield repo
    repo.close()


@pytest.fixture
def scenario_root(scan_root, remotes_dir):
    """a/repo1: clean main in sync; a/b/repo2: dev one ahead with two untracked files."""
    repo1 = init_repo(scan_root / "a" / "repo1")
    add_upstream(repo1, remotes_dir / "repo1.git")

    repo2 = init_repo(scan_root / "a" / "b" / "repo2", branch="dev")
    add_upstream(repo2, remotes_dir / "repo2.git", branch="dev")
    commit_file(repo2, "feature.txt")
    (scan_root / "a" / "b" / "repo2" / "one.txt").write_text("1\n")
    (scan_root / "a" / "b" / "repo2" / "two.txt").write_text("2\n")

    yield scan_root

    repo1.close()
    repo2.close()
