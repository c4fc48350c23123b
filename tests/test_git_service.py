"""Tests for GitService"""
from pathlib import Path
from unittest.mock import Mock, patch

import git
import pytest

from git_extend.exceptions import RepositoryOpenError
from git_extend.models.branch import Ahead, Behind, Diverged, NoUpstream, Ok
from git_extend.services.git_service import (
    GitService,
    parse_porcelain_counts,
    parse_tracking,
)
from tests.conftest import commit_file, init_repo

UPSTREAM = "refs/remotes/origin/main"


class TestParseTracking:
    """Test classification of %(upstream:track) values."""

    def test_no_upstream(self):
        assert parse_tracking("", "") == NoUpstream()

    def test_in_sync(self):
        assert parse_tracking("", UPSTREAM) == Ok()

    def test_ahead(self):
        assert parse_tracking("[ahead 2]", UPSTREAM) == Ahead(2)

    def test_behind(self):
        assert parse_tracking("[behind 3]", UPSTREAM) == Behind(3)

    def test_diverged(self):
        assert parse_tracking("[ahead 1, behind 4]", UPSTREAM) == Diverged(ahead=1, behind=4)

    def test_gone_upstream(self):
        assert parse_tracking("[gone]", UPSTREAM) == NoUpstream()

    def test_unparsable_count_defaults_to_zero(self):
        assert parse_tracking("[ahead x]", UPSTREAM) == Ok()
        assert parse_tracking("[ahead x, behind 2]", UPSTREAM) == Behind(2)

    def test_unrecognized_text(self):
        assert parse_tracking("garbage", UPSTREAM) == NoUpstream()


class TestParsePorcelainCounts:
    """Test counting of git status --porcelain lines."""

    def test_empty_output(self):
        assert parse_porcelain_counts("") == (0, 0)

    def test_mixed_lines(self):
        output = "\n".join([
            " M modified.txt",
            "M  staged.txt",
            "MM both.txt",
            "A  added.txt",
            "?? new.txt",
            "?? newdir/",
            "",
        ])
        assert parse_porcelain_counts(output) == (4, 2)

    def test_blank_lines_ignored(self):
        assert parse_porcelain_counts("\n   \n?? a\n") == (0, 1)


class TestGitServiceOpen:
    """Test opening repositories."""

    def test_open_valid_repository(self, git_repo):
        service = GitService(git_repo.working_dir)
        repo = service.open()
        assert Path(repo.working_dir) == Path(git_repo.working_dir)
        service.close()

    def test_open_empty_git_dir(self, scan_root):
        fake = scan_root / "fake"
        (fake / ".git").mkdir(parents=True)
        with pytest.raises(RepositoryOpenError):
            GitService(fake).open()

    def test_open_missing_path(self, scan_root):
        with pytest.raises(RepositoryOpenError):
            GitService(scan_root / "nonexistent").open()

    def test_context_manager_closes_repo(self, git_repo):
        with GitService(git_repo.working_dir) as service:
            service.open()
            assert service._repo is not None
        assert service._repo is None


class TestGitServiceBranches:
    """Test HEAD and branch enumeration."""

    def test_current_branch(self, git_repo):
        with GitService(git_repo.working_dir) as service:
            assert service.get_current_branch() == "main"

    def test_current_branch_with_slash(self, git_repo):
        git_repo.git.checkout("-b", "feature/test")
        with GitService(git_repo.working_dir) as service:
            assert service.get_current_branch() == "feature/test"

    def test_detached_head(self, git_repo):
        git_repo.git.checkout(git_repo.head.commit.hexsha)
        with GitService(git_repo.working_dir) as service:
            assert service.get_current_branch() == "HEAD"

    def test_unborn_head(self, scan_root):
        repo = init_repo(scan_root / "empty", commit=False)
        with GitService(repo.working_dir) as service:
            assert service.get_current_branch() == "HEAD"
            assert service.get_local_branches() == []
        repo.close()

    def test_local_branches(self, git_repo):
        git_repo.git.branch("zeta")
        git_repo.git.branch("alpha")
        with GitService(git_repo.working_dir) as service:
            assert service.get_local_branches() == ["alpha", "main", "zeta"]


class TestGitServiceTracking:
    """Test upstream tracking information."""

    def test_no_upstream(self, git_repo):
        with GitService(git_repo.working_dir) as service:
            assert service.get_tracking_info() == {"main": NoUpstream()}

    def test_in_sync(self, tracked_repo):
        with GitService(tracked_repo.working_dir) as service:
            assert service.get_tracking_info() == {"main": Ok()}

    def test_ahead(self, tracked_repo):
        commit_file(tracked_repo, "a.txt")
        commit_file(tracked_repo, "b.txt")
        with GitService(tracked_repo.working_dir) as service:
            assert service.get_tracking_info()["main"] == Ahead(2)

    def test_behind_and_diverged(self, tracked_repo):
        commit_file(tracked_repo, "pushed.txt")
        tracked_repo.git.push("origin", "main")
        tracked_repo.git.reset("--hard", "HEAD~1")
        with GitService(tracked_repo.working_dir) as service:
            assert service.get_tracking_info()["main"] == Behind(1)

        commit_file(tracked_repo, "local.txt")
        with GitService(tracked_repo.working_dir) as service:
            assert service.get_tracking_info()["main"] == Diverged(ahead=1, behind=1)

    def test_parses_for_each_ref_output(self, git_repo):
        service = GitService(git_repo.working_dir)
        mock_repo = Mock()
        mock_repo.git.for_each_ref.return_value = (
            f"main\t{UPSTREAM}\t[ahead 1]\n"
            "feature\t\t\n"
            "old\trefs/remotes/origin/old\t[gone]"
        )
        with patch.object(service, "_get_repo", return_value=mock_repo):
            tracking = service.get_tracking_info()

        assert tracking == {"main": Ahead(1), "feature": NoUpstream(), "old": NoUpstream()}

    def test_query_failure_returns_empty(self, git_repo):
        service = GitService(git_repo.working_dir)
        mock_repo = Mock()
        mock_repo.git.for_each_ref.side_effect = git.exc.GitCommandError("for-each-ref", 128)
        with patch.object(service, "_get_repo", return_value=mock_repo):
            assert service.get_tracking_info() == {}


class TestGitServiceChanges:
    """Test working-tree change counts."""

    def test_clean(self, git_repo):
        with GitService(git_repo.working_dir) as service:
            assert service.get_change_counts() == (0, 0)

    def test_modified_staged_and_untracked(self, git_repo):
        repo_path = Path(git_repo.working_dir)
        (repo_path / "README.md").write_text("changed\n")
        (repo_path / "staged.txt").write_text("staged\n")
        git_repo.index.add(["staged.txt"])
        (repo_path / "one.txt").write_text("1\n")
        (repo_path / "two.txt").write_text("2\n")

        with GitService(git_repo.working_dir) as service:
            assert service.get_change_counts() == (2, 2)

    def test_status_failure_returns_zero(self, git_repo):
        service = GitService(git_repo.working_dir)
        mock_repo = Mock()
        mock_repo.git.status.side_effect = git.exc.GitCommandError("status", 128)
        with patch.object(service, "_get_repo", return_value=mock_repo):
            assert service.get_change_counts() == (0, 0)


class TestGitServiceRemoteUrl:
    """Test reading remote URLs."""

    def test_origin_url(self, git_repo):
        git_repo.create_remote("origin", "git@github.com:test/test-repo.git")
        with GitService(git_repo.working_dir) as service:
            assert service.get_remote_url() == "git@github.com:test/test-repo.git"

    def test_missing_origin(self, git_repo):
        with GitService(git_repo.working_dir) as service:
            assert service.get_remote_url() is None

    def test_other_remote_name(self, git_repo):
        git_repo.create_remote("upstream", "https://example.com/test.git")
        with GitService(git_repo.working_dir) as service:
            assert service.get_remote_url("upstream") == "https://example.com/test.git"
            assert service.get_remote_url("origin") is None
