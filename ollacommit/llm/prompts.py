"""Prompt construction for commit message generation."""

PROMPT_PREAMBLE = """You write git commit messages for staged changes.

Rules:
- Output ONLY the commit message. No explanations. No quotes. No markdown.
- Use the Conventional Commits format: type(optional scope): description
- Types: feat, fix, docs, style, refactor, perf, test, build, ci, chore, revert
- Title in imperative mood, at most 72 characters.
- Optionally add a short body after one blank line.

Staged diff:
"""


def build_prompt(diff: str) -> str:
    """Build the full prompt for a (pre-truncated) staged diff.

    Args:
        diff: The staged diff text.

    Returns:
        The rule preamble followed by the diff.
    """
    return PROMPT_PREAMBLE + diff
