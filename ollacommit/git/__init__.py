"""Git context collector module for ollacommit.

This package provides:
- exceptions: GitError, NoStagedChangesError
- runner: _run_git_command, get_repo_root
- diff: get_staged_files, get_staged_diff, truncate_diff_lines,
        _exclude_pathspecs
"""

from ollacommit.git.exceptions import (
    GitError,
    NoStagedChangesError,
)

from ollacommit.git.runner import (
    _run_git_command,
    get_repo_root,
)

from ollacommit.git.diff import (
    get_staged_files,
    get_staged_diff,
    truncate_diff_lines,
    _exclude_pathspecs,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Diff
    "get_staged_files",
    "get_staged_diff",
    "truncate_diff_lines",
    "_exclude_pathspecs",
]
