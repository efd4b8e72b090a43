"""Git remote operations."""

import re
from dataclasses import dataclass
from pathlib import Path

from gitrepo.git.errors import RemoteParseError
from gitrepo.git.runner import check_git

REMOTE_SSH_PATTERN = re.compile(r"git@\S+:(\w+)/(\w+)(\.git)?", re.ASCII)
REMOTE_HTTP_PATTERN = re.compile(r"https?://\S+/(\w+)/(\w+)(\.git)?", re.ASCII)


@dataclass(frozen=True)
class RemoteInfo:
    """Owner and repository name of a hosted remote."""
    owner: str
    name: str


def add_remote(name: str, url: str, cwd: Path | None = None) -> None:
    """Add a new remote to the repository."""
    check_git(["remote", "add", name, url], cwd)


def get_remote(name: str, cwd: Path | None = None) -> str:
    """Get the URL of a configured remote."""
    return check_git(["config", "--get", f"remote.{name}.url"], cwd).strip()


def fetch(remote: str = "", cwd: Path | None = None) -> None:
    """Fetch from remote (or the default remote)."""
    args = ["fetch"]
    if remote:
        args.append(remote)
    check_git(args, cwd)


def pull(remote: str, cwd: Path | None = None) -> None:
    """Pull from remote."""
    check_git(["pull", remote], cwd)


def parse_remote(remote: str) -> RemoteInfo:
    """
    Extract owner and name from a remote URL.

    Accepts SSH (git@host:owner/name[.git]) and HTTP(S)
    (https://host/owner/name[.git]) forms.

    Raises:
        RemoteParseError: if the URL matches neither form
    """
    if "http" in remote:
        pattern = REMOTE_HTTP_PATTERN
    elif "git@" in remote:
        pattern = REMOTE_SSH_PATTERN
    else:
        raise RemoteParseError(f"Unhandled remote {remote}", remote)

    match = pattern.search(remote)
    if not match:
        raise RemoteParseError(f"Unable to parse remote {remote}", remote)
    return RemoteInfo(owner=match.group(1), name=match.group(2))


def remote_origin(cwd: Path | None = None) -> RemoteInfo:
    """Get owner and name of the origin remote."""
    return parse_remote(get_remote("origin", cwd))
