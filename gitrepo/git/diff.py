"""Git diff operations."""

from pathlib import Path

from gitrepo.git.errors import GitCommandError
from gitrepo.git.runner import check_git, exit_status

# diff --quiet exits 1 when there are differences
DIFF_PRESENT = 1


def has_local_diff(cwd: Path | None = None) -> bool:
    """Check if the working tree has changes vs HEAD (staged or unstaged)."""
    try:
        check_git(["diff", "--quiet", "HEAD"], cwd)
    except GitCommandError as e:
        if exit_status(e) != DIFF_PRESENT:
            raise
        return True
    return False
