"""Git branch and ref operations."""

import logging
from pathlib import Path

from gitrepo.git.errors import GitCommandError, DetachedHeadError
from gitrepo.git.runner import run_git, check_git, exit_status

logger = logging.getLogger(__name__)

# rev-parse --verify exits 1 when the ref does not resolve
VERIFY_FAILED = 1


def get_current_branch(cwd: Path | None = None) -> str:
    """
    Get the current branch name.

    Raises:
        DetachedHeadError: if HEAD is detached
        GitCommandError: if git fails (e.g. no commits yet)
    """
    branch = check_git(["rev-parse", "--abbrev-ref", "HEAD"], cwd).strip()
    if branch == "HEAD":
        raise DetachedHeadError("HEAD is detached")
    return branch


def rev_parse(ref: str, cwd: Path | None = None) -> str:
    """
    Resolve a ref to an object id.

    Returns an empty string when the ref does not resolve. Any other
    failure of the invocation is reported the same way, so callers that
    need to tell the two apart should use ref_exists() first.
    """
    result = run_git(["rev-parse", "-q", ref], cwd)
    if not result.success:
        logger.debug(f"rev-parse {ref!r} failed, returning empty id")
        return ""
    return result.stdout.strip()


def ref_exists(ref: str, cwd: Path | None = None) -> bool:
    """Check if the ref resolves in the repository."""
    try:
        check_git(["rev-parse", "--quiet", "--verify", ref], cwd)
    except GitCommandError as e:
        if exit_status(e) != VERIFY_FAILED:
            raise
        return False
    return True


def checkout(ref: str, remote: str = "", cwd: Path | None = None) -> None:
    """
    Checkout a ref.

    With a remote (e.g. "origin/main"), any local branch named ref is
    deleted first and recreated to track that remote.
    """
    if not remote:
        check_git(["checkout", ref], cwd)
        return
    deleted = run_git(["branch", "-D", ref], cwd)
    if not deleted.success:
        logger.debug(f"No local branch {ref!r} to delete before checkout")
    check_git(["checkout", "-b", ref, remote], cwd)


def merge(ref: str, cwd: Path | None = None) -> None:
    """Merge ref into the current branch."""
    check_git(["merge", ref], cwd)
