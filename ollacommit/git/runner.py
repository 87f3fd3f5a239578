"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its decoded output
- get_repo_root: Get the root directory of the current git repository
"""

import subprocess
from pathlib import Path

from ollacommit.git.exceptions import GitError

# Paths in diff headers and --name-only output stay as UTF-8 instead of octal escapes
_GIT_OPTIONS = ["-c", "core.quotepath=false"]


def _run_git_command(args: list[str], strip: bool = True) -> str:
    """Run a git command and return its output.

    The environment is inherited, so variables git sets for hooks
    (GIT_DIR, GIT_INDEX_FILE) are honored. Output is decoded as UTF-8 with
    undecodable bytes replaced, since staged files may use any encoding.

    Args:
        args: List of arguments to pass to git.
        strip: Strip surrounding whitespace. Diff output is kept verbatim.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If git cannot be started or exits non-zero.
    """
    try:
        result = subprocess.run(
            ["git"] + _GIT_OPTIONS + args,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    except OSError as e:
        raise GitError(f"Could not run git {args[0] if args else ''}: {e}")

    return result.stdout.strip() if strip else result.stdout


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        return Path(_run_git_command(["rev-parse", "--show-toplevel"]))
    except GitError:
        raise GitError("Not in a git repository. Run ollacommit from inside a git work tree.")
