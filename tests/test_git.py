import shutil
import subprocess
from unittest.mock import MagicMock, patch

import pytest
from git_commit_guide.git import GitError, GitRepo

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(path, *args):
    subprocess.run(["git", *args], cwd=path, check=True, capture_output=True)


@pytest.fixture
def repo_dir(tmp_path):
    _git(tmp_path, "init", "-q")
    _git(tmp_path, "config", "user.email", "dev@example.com")
    _git(tmp_path, "config", "user.name", "Dev")
    return tmp_path


def test_run_wraps_called_process_error():
    error = subprocess.CalledProcessError(128, ["git", "diff"], stderr="fatal")
    with patch("subprocess.run", side_effect=error):
        with pytest.raises(GitError, match="Exit code: 128"):
            GitRepo()._run("diff")


def test_run_wraps_missing_git():
    with patch("subprocess.run", side_effect=FileNotFoundError()):
        with pytest.raises(GitError, match="not found"):
            GitRepo()._run("status")


@pytest.mark.parametrize(
    "error",
    [
        FileNotFoundError(),
        subprocess.CalledProcessError(1, ["git"]),
        UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"),
    ],
)
def test_get_staged_diff_returns_none_on_failure(error):
    with patch("subprocess.run", side_effect=error):
        assert GitRepo().get_staged_diff() is None


def test_get_staged_diff_returns_stdout():
    result = MagicMock(stdout="diff --git a/a b/a\n")
    with patch("subprocess.run", return_value=result) as run:
        assert GitRepo("/repo").get_staged_diff() == "diff --git a/a b/a\n"

    args, kwargs = run.call_args
    assert args[0] == ["git", "diff", "--cached"]
    assert str(kwargs["cwd"]) == "/repo"


@requires_git
def test_get_staged_diff_in_real_repository(repo_dir):
    (repo_dir / "notes.txt").write_text("remove old helper\n", encoding="utf-8")
    _git(repo_dir, "add", "notes.txt")

    diff = GitRepo(repo_dir).get_staged_diff()

    assert "diff --git a/notes.txt b/notes.txt" in diff
    assert "+remove old helper" in diff


@requires_git
def test_get_staged_diff_nothing_staged(repo_dir):
    assert GitRepo(repo_dir).get_staged_diff() == ""


@requires_git
def test_check_repository(repo_dir, tmp_path_factory):
    GitRepo(repo_dir).check_repository()
    with pytest.raises(GitError, match="Not a git repository"):
        GitRepo(tmp_path_factory.mktemp("plain")).check_repository()


@requires_git
def test_get_hooks_dir(repo_dir):
    assert GitRepo(repo_dir).get_hooks_dir().resolve() == (repo_dir / ".git" / "hooks").resolve()
