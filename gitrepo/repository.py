"""
Repository handle bound to a checkout path.

Repository exposes the git operations without requiring the process working
directory to be inside the checkout. The path is handed to git explicitly on
every call, so handles for different checkouts never interfere. Calls on the
same checkout are serialized: each method holds the checkout's lock for its
whole git invocation (both invocations, for a checkout from a remote).
"""

import threading
import weakref
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from gitrepo import git
from gitrepo.git import Commit, RemoteInfo
from gitrepo.git.errors import GitCommandError

# Entries live only while some caller holds the lock object.
_locks: weakref.WeakValueDictionary = weakref.WeakValueDictionary()
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    """Get the lock shared by every handle on path."""
    key = path.resolve()
    with _locks_guard:
        lock = _locks.get(key)
        if lock is None:
            lock = threading.RLock()
            _locks[key] = lock
        return lock


@dataclass(frozen=True)
class Repository:
    """A git checkout at a fixed path. Holds no repository state."""
    path: Path

    def __post_init__(self):
        object.__setattr__(self, "path", Path(self.path))

    @contextmanager
    def locked(self):
        """
        Hold this checkout's lock across several operations.

        Methods called inside the block re-enter the same lock.
        """
        with _lock_for(self.path):
            yield self

    @contextmanager
    def _enter(self):
        with self.locked():
            if not self.path.is_dir():
                raise GitCommandError([], None, f"Cannot enter working directory {self.path}")
            yield self.path

    def add_remote(self, name: str, url: str) -> None:
        with self._enter() as cwd:
            git.add_remote(name, url, cwd=cwd)

    def remote(self, name: str) -> str:
        with self._enter() as cwd:
            return git.get_remote(name, cwd=cwd)

    def branch(self) -> str:
        with self._enter() as cwd:
            return git.get_current_branch(cwd=cwd)

    def rev_parse(self, ref: str) -> str:
        with self._enter() as cwd:
            return git.rev_parse(ref, cwd=cwd)

    def pull(self, remote: str) -> None:
        with self._enter() as cwd:
            git.pull(remote, cwd=cwd)

    def fetch(self, remote: str = "") -> None:
        with self._enter() as cwd:
            git.fetch(remote, cwd=cwd)

    def checkout(self, ref: str, remote: str = "") -> None:
        with self._enter() as cwd:
            git.checkout(ref, remote, cwd=cwd)

    def merge(self, ref: str) -> None:
        with self._enter() as cwd:
            git.merge(ref, cwd=cwd)

    def reset_hard(self, ref: str) -> None:
        with self._enter() as cwd:
            git.reset_hard(ref, cwd=cwd)

    def has_local_diff(self) -> bool:
        with self._enter() as cwd:
            return git.has_local_diff(cwd=cwd)

    def ref_exists(self, ref: str) -> bool:
        with self._enter() as cwd:
            return git.ref_exists(ref, cwd=cwd)

    def log(self, start: str, end: str) -> list[Commit]:
        with self._enter() as cwd:
            return git.get_log(start, end, cwd=cwd)

    def remote_origin(self) -> RemoteInfo:
        with self._enter() as cwd:
            return git.remote_origin(cwd=cwd)
