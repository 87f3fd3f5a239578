"""Git-related exception classes.

- GitError: git cannot be run or a command failed
- NoStagedChangesError: Nothing is staged, or only files on the ignore list
"""


class GitError(Exception):
    """Raised when a git command cannot be run or exits non-zero."""

    pass


class NoStagedChangesError(GitError):
    """Raised when the staged diff is empty once ignored files are left out.

    Covers an empty index as well as an index holding only ignored files
    such as lock files. The hook treats both as nothing to describe.
    """

    pass
