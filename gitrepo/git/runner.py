"""Git command runner with timeout handling."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from gitrepo.git.errors import GitCommandError
from gitrepo.lib.config import get_config

logger = logging.getLogger(__name__)


@dataclass
class GitResult:
    """Result of a git command."""
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out


def run_git(
    args: list[str],
    cwd: Path | None = None,
    timeout: int | None = None,
) -> GitResult:
    """
    Run a git command with timeout handling.

    Args:
        args: Git command arguments (e.g., ["rev-parse", "HEAD"])
        cwd: Working directory for the command, None for the current one
        timeout: Timeout in seconds, None for the configured default

    Returns:
        GitResult with returncode, stdout, stderr, and timed_out flag

    Raises:
        GitCommandError: if git could not be started at all
    """
    config = get_config()
    if timeout is None:
        timeout = config.timeout
    cmd = [config.git_binary] + args
    logger.debug(f"Running {' '.join(cmd)} in {cwd or '.'}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=str(cwd) if cwd is not None else None,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.debug(f"git {' '.join(args)} timed out after {timeout}s")
        return GitResult(
            returncode=-1,
            stdout="",
            stderr=f"Command timed out after {timeout}s",
            timed_out=True,
        )
    except OSError as e:
        raise GitCommandError(args, None, str(e)) from e

    if result.returncode != 0:
        logger.debug(f"git {' '.join(args)} exited {result.returncode}: {result.stderr.strip()}")
    return GitResult(
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
    )


def check_git(
    args: list[str],
    cwd: Path | None = None,
    timeout: int | None = None,
) -> str:
    """Run a git command and return its stdout, raising GitCommandError on failure."""
    result = run_git(args, cwd, timeout)
    if not result.success:
        raise GitCommandError(
            args,
            None if result.timed_out else result.returncode,
            result.stderr,
            timed_out=result.timed_out,
        )
    return result.stdout


def exit_status(error: GitCommandError) -> int:
    """
    Recover the numeric exit status carried by a failed invocation.

    Raises the error itself when git never produced one (not started, timed out).
    """
    if error.returncode is None:
        raise error
    return error.returncode
