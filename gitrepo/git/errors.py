"""Git error types."""


class GitError(Exception):
    """Base class for errors raised by gitrepo."""
    pass


class GitCommandError(GitError):
    """A git invocation could not run or exited with an unexpected status."""

    def __init__(
        self,
        args: list[str],
        returncode: int | None,
        stderr: str = "",
        timed_out: bool = False,
    ):
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr
        self.timed_out = timed_out
        detail = stderr.strip() or (f"exit status {returncode}" if returncode is not None else "not run")
        super().__init__(" ".join(["git"] + self.command) + f": {detail}")


class RemoteParseError(GitError, ValueError):
    """A remote URL matched none of the accepted shapes."""

    def __init__(self, message: str, remote: str):
        self.remote = remote
        super().__init__(message)


class DetachedHeadError(GitError):
    """HEAD does not point at a branch."""
    pass
