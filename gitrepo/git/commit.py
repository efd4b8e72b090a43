"""Git commit history operations."""

import logging
from dataclasses import dataclass
from pathlib import Path

from gitrepo.git.runner import check_git

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Commit:
    """One entry of a one-line log."""
    ref: str  # abbreviated id
    message: str  # first line of the commit message


def parse_log(output: str) -> list[Commit]:
    """
    Parse `git log --oneline` output.

    Each line is "<abbrev-id> <message>". Lines that do not split into two
    non-empty parts on the first space are skipped.
    Only newlines end a line; other separator characters stay in the message.
    """
    commits = []
    for line in output.strip().split("\n"):
        ref, _, message = line.partition(" ")
        if not ref or not message:
            if line:
                logger.debug(f"Skipping malformed log line: {line!r}")
            continue
        commits.append(Commit(ref=ref, message=message))
    return commits


def get_log(start: str, end: str, cwd: Path | None = None) -> list[Commit]:
    """
    Get commits in start..end, newest first.

    start is excluded and end included, as with git's range syntax.
    """
    output = check_git(["log", f"{start}..{end}", "--oneline"], cwd)
    return parse_log(output)


def reset_hard(ref: str, cwd: Path | None = None) -> None:
    """Reset the index and working tree to ref, discarding changes."""
    check_git(["reset", "--hard", ref], cwd)
