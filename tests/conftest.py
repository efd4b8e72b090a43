"""Shared fixtures: throwaway git repositories."""

import shutil
import subprocess
from pathlib import Path

import pytest

from gitrepo.lib.config import GitConfig, set_config

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def git(repo: Path, *args: str) -> str:
    """Run git directly in repo, bypassing gitrepo."""
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


def commit_file(repo: Path, message: str, name: str = "file.txt", content: str | None = None) -> str:
    """Write a file, commit it, return the new HEAD sha."""
    (repo / name).write_text(content if content is not None else message + "\n")
    git(repo, "add", name)
    git(repo, "commit", "-q", "-m", message)
    return git(repo, "rev-parse", "HEAD")


def _configure_identity(repo: Path) -> None:
    git(repo, "config", "user.name", "Test User")
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "commit.gpgsign", "false")


@pytest.fixture(autouse=True)
def default_config():
    set_config(GitConfig())
    yield
    set_config(GitConfig())


@pytest.fixture
def make_repo(tmp_path):
    """Factory: make_repo(name, branch) -> path of a repo with one commit."""

    def _make(name: str = "repo", branch: str = "main") -> Path:
        path = tmp_path / name
        path.mkdir()
        git(path, "init", "-q")
        git(path, "symbolic-ref", "HEAD", f"refs/heads/{branch}")
        _configure_identity(path)
        commit_file(path, "Initial commit", name="README")
        return path

    return _make


@pytest.fixture
def clone_repo(tmp_path):
    """Factory: clone_repo(source, name) -> path of a clone with origin set."""

    def _clone(source: Path, name: str = "clone") -> Path:
        path = tmp_path / name
        subprocess.run(
            ["git", "clone", "-q", str(source), str(path)],
            capture_output=True, text=True, check=True,
        )
        _configure_identity(path)
        return path

    return _clone
