"""Git operations for gitrepo.

Each function maps one logical operation to one git invocation and parses
its output. Functions take an optional `cwd`; when omitted, git runs in the
process working directory and the caller is responsible for having set it.
Use gitrepo.Repository to bind operations to a path safely across threads.

Return type conventions:
- Functions returning None: side effect only, GitCommandError on failure.
  Examples: fetch(), pull(), checkout(), merge()
- Functions returning bool: a well-defined negative exit status maps to False,
  any other failure raises GitCommandError.
  Examples: has_local_diff(), ref_exists()
- Functions returning parsed values: GitCommandError on failure, except
  rev_parse() which returns "" for anything it cannot resolve.
"""

from gitrepo.git.errors import (
    GitError,
    GitCommandError,
    RemoteParseError,
    DetachedHeadError,
)
from gitrepo.git.runner import (
    GitResult,
    run_git,
    check_git,
    exit_status,
)
from gitrepo.git.branch import (
    get_current_branch,
    rev_parse,
    ref_exists,
    checkout,
    merge,
)
from gitrepo.git.commit import (
    Commit,
    parse_log,
    get_log,
    reset_hard,
)
from gitrepo.git.diff import (
    has_local_diff,
)
from gitrepo.git.remote import (
    RemoteInfo,
    add_remote,
    get_remote,
    fetch,
    pull,
    parse_remote,
    remote_origin,
)

__all__ = [
    # errors
    "GitError",
    "GitCommandError",
    "RemoteParseError",
    "DetachedHeadError",
    # runner
    "GitResult",
    "run_git",
    "check_git",
    "exit_status",
    # branch
    "get_current_branch",
    "rev_parse",
    "ref_exists",
    "checkout",
    "merge",
    # commit
    "Commit",
    "parse_log",
    "get_log",
    "reset_hard",
    # diff
    "has_local_diff",
    # remote
    "RemoteInfo",
    "add_remote",
    "get_remote",
    "fetch",
    "pull",
    "parse_remote",
    "remote_origin",
]
