"""gitrepo: typed, thread-safe access to the git command-line tool."""

from gitrepo.git import Commit, RemoteInfo
from gitrepo.git.errors import GitError, GitCommandError, RemoteParseError, DetachedHeadError
from gitrepo.repository import Repository

__all__ = [
    "Repository",
    "Commit",
    "RemoteInfo",
    "GitError",
    "GitCommandError",
    "RemoteParseError",
    "DetachedHeadError",
]
