"""Staged diff capture and bounding.

Contains:
- get_staged_files: List the paths staged for the next commit
- get_staged_diff: Get the staged diff, excluding ignored files
- truncate_diff_lines: Keep only the first N lines of a diff
- _exclude_pathspecs: Turn ignore patterns into git exclude pathspecs
"""

import logging
from typing import Optional

from ollacommit.config import DEFAULT_IGNORE_PATTERNS
from ollacommit.git.exceptions import NoStagedChangesError
from ollacommit.git.runner import _run_git_command

logger = logging.getLogger(__name__)

# Whole work tree, whatever the current directory
_TOP_PATHSPEC = ":/"


def get_staged_files() -> list[str]:
    """Get list of staged file paths, relative to the repository root.

    Returns:
        List of staged file paths.
    """
    output = _run_git_command(["diff", "--staged", "--name-only", "-z"], strip=False)
    return [path for path in output.split("\0") if path]


def _exclude_pathspecs(patterns: list[str]) -> list[str]:
    """Build git exclude pathspecs for ignore patterns.

    Each pattern matches at any depth: "poetry.lock" excludes both
    poetry.lock and web/poetry.lock, ".idea/*" excludes .idea/workspace.xml
    wherever the .idea directory sits.

    Args:
        patterns: Glob patterns from the ignore list.

    Returns:
        One ":(top,exclude,glob)" pathspec per pattern.
    """
    pathspecs = []
    for pattern in patterns:
        pattern = pattern.strip().lstrip("/")
        if not pattern:
            continue
        if not pattern.startswith("**/"):
            pattern = f"**/{pattern}"
        pathspecs.append(f":(top,exclude,glob){pattern}")
    return pathspecs


def get_staged_diff(ignore_patterns: Optional[list[str]] = None) -> str:
    """Get the full staged diff, excluding files that match ignore patterns.

    A single git call is made whatever the size of the index. The diff is
    returned unbounded and verbatim; callers apply truncate_diff_lines().

    Args:
        ignore_patterns: Glob patterns of files to leave out. Defaults to
            DEFAULT_IGNORE_PATTERNS.

    Returns:
        The staged diff string.

    Raises:
        NoStagedChangesError: If nothing (or only ignored files) is staged.
        GitError: If a git command fails.
    """
    if ignore_patterns is None:
        ignore_patterns = DEFAULT_IGNORE_PATTERNS

    diff = _run_git_command(
        ["diff", "--staged", "--", _TOP_PATHSPEC] + _exclude_pathspecs(ignore_patterns),
        strip=False,
    )
    if diff.strip():
        return diff

    # Only reached for an empty diff, to tell the two skip reasons apart
    if get_staged_files():
        raise NoStagedChangesError("Only ignored files (or no textual changes) are staged.")
    raise NoStagedChangesError("No staged changes found.")


def truncate_diff_lines(diff: str, max_lines: int) -> str:
    """Keep only the first max_lines lines of a diff.

    Args:
        diff: The diff text.
        max_lines: Maximum number of lines to keep.

    Returns:
        The diff unchanged if it is short enough, otherwise its head.
    """
    lines = diff.split("\n")
    if len(lines) <= max_lines:
        return diff

    logger.info(f"Truncating staged diff from {len(lines)} to {max_lines} lines")
    return "\n".join(lines[:max_lines])
