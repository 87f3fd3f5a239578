"""prepare-commit-msg hook logic.

Git calls the hook with the path of the commit message file and, optionally,
the source of the commit (message, template, merge, squash or commit). The
hook either leaves that file untouched or replaces it with the model's
answer, and it never fails the commit.
"""

import logging
import os
import shutil
import tempfile
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Union

from ollacommit.git import NoStagedChangesError, get_staged_diff, truncate_diff_lines
from ollacommit.global_config import HookSettings, load_settings
from ollacommit.llm import BaseLLMProvider, LLMError, build_prompt, get_provider

logger = logging.getLogger(__name__)

DiffReader = Callable[[list[str]], str]


class CommitSource(str, Enum):
    """Second argument git passes to prepare-commit-msg."""

    MESSAGE = "message"
    TEMPLATE = "template"
    MERGE = "merge"
    SQUASH = "squash"
    COMMIT = "commit"


# Merges have their own message and amends already have one
SKIP_SOURCES = frozenset({CommitSource.MERGE.value, CommitSource.COMMIT.value})


class HookOutcome(str, Enum):
    """What a hook invocation did. Never mapped to an exit status."""

    SKIPPED_SOURCE = "skipped-source"
    NO_STAGED_CHANGES = "no-staged-changes"
    NO_RESPONSE = "no-response"
    EMPTY_RESPONSE = "empty-response"
    WRITTEN = "written"
    FAILED = "failed"


def should_skip(source: Optional[str]) -> bool:
    """Return True for commit sources that must keep their message."""
    return source in SKIP_SOURCES


def write_commit_message(message_file: Path, message: str) -> None:
    """Replace the commit message file with message, atomically.

    The text is written to a sibling temporary file which is then moved over
    the original, so the file is never left half-written.

    Args:
        message_file: Path of the commit message file.
        message: The exact text to store.
    """
    message_file = Path(message_file)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{message_file.name}.", dir=message_file.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(message)
        if message_file.exists():
            shutil.copymode(message_file, tmp_name)
        os.replace(tmp_name, message_file)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def generate_message(
    provider: BaseLLMProvider,
    settings: HookSettings,
    diff_reader: Optional[DiffReader] = None,
) -> Optional[str]:
    """Generate a commit message for the staged changes.

    Args:
        provider: Inference provider to call.
        settings: Effective hook settings.
        diff_reader: Returns the staged diff for a list of ignore patterns.
            Defaults to get_staged_diff.

    Returns:
        The generated text, or None if the model answered with nothing.

    Raises:
        NoStagedChangesError: If there is nothing to describe.
        LLMError: If the inference call failed.
    """
    read_diff = diff_reader or get_staged_diff
    diff = read_diff(settings.ignore)
    if not diff.strip():
        raise NoStagedChangesError("Staged diff is empty.")

    prompt = build_prompt(truncate_diff_lines(diff, settings.max_diff_lines))
    message = provider.generate(prompt, timeout=settings.timeout)

    if message is None or not message.strip():
        return None
    return message


def prepare_commit_message(
    message_file: Union[str, Path],
    source: Optional[str],
    provider: BaseLLMProvider,
    settings: HookSettings,
    diff_reader: Optional[DiffReader] = None,
) -> HookOutcome:
    """Run the guarded decision sequence for one hook invocation.

    Args:
        message_file: Path of the commit message file.
        source: Commit source indicator, or None for a plain `git commit`.
        provider: Inference provider to call.
        settings: Effective hook settings.
        diff_reader: Returns the staged diff for a list of ignore patterns.

    Returns:
        The outcome of the invocation.

    Raises:
        GitError: If git itself fails.
        OSError: If the message file cannot be written.
    """
    if should_skip(source):
        logger.info(f"Skipping generation for commit source '{source}'")
        return HookOutcome.SKIPPED_SOURCE

    try:
        message = generate_message(provider, settings, diff_reader)
    except NoStagedChangesError as e:
        logger.info(f"Nothing to describe: {e}")
        return HookOutcome.NO_STAGED_CHANGES
    except LLMError as e:
        logger.warning(f"No usable response from model '{provider.model}': {e}")
        return HookOutcome.NO_RESPONSE

    if message is None:
        logger.warning(f"Model '{provider.model}' returned an empty message")
        return HookOutcome.EMPTY_RESPONSE

    write_commit_message(Path(message_file), message)
    logger.info(f"Wrote generated commit message to {message_file}")
    return HookOutcome.WRITTEN


def run_hook(
    message_file: Union[str, Path],
    source: Optional[str] = None,
    provider: Optional[BaseLLMProvider] = None,
    settings: Optional[HookSettings] = None,
    diff_reader: Optional[DiffReader] = None,
) -> HookOutcome:
    """Fail-open entry point for the prepare-commit-msg hook.

    Every error, including invalid configuration, a missing git binary and
    write failures, is logged and reported as HookOutcome.FAILED.

    Args:
        message_file: Path of the commit message file.
        source: Commit source indicator, or None for a plain `git commit`.
        provider: Inference provider. Built from settings when omitted.
        settings: Effective settings. Loaded from config when omitted.
        diff_reader: Returns the staged diff for a list of ignore patterns.

    Returns:
        The outcome of the invocation.
    """
    try:
        if settings is None:
            settings = load_settings()
        if provider is None:
            provider = get_provider(settings)
        return prepare_commit_message(message_file, source, provider, settings, diff_reader)
    except Exception:
        logger.exception("Commit message generation failed; leaving the message untouched")
        return HookOutcome.FAILED
