"""CLI command for previewing a generated message without committing."""

from typing import Optional

import typer

from ollacommit.git import (
    GitError,
    NoStagedChangesError,
    get_repo_root,
    get_staged_diff,
    truncate_diff_lines,
)
from ollacommit.global_config import GlobalConfigError, load_settings
from ollacommit.hook import generate_message
from ollacommit.llm import LLMError, build_prompt, get_provider


def preview_command(
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Override the configured model",
    ),
    max_diff_lines: Optional[int] = typer.Option(
        None,
        "--max-diff-lines",
        min=1,
        help="Override the number of diff lines sent to the model",
    ),
    show_prompt: bool = typer.Option(
        False,
        "--show-prompt",
        help="Print the prompt instead of calling the model",
    ),
) -> None:
    """Print the message the hook would write for the staged changes."""
    try:
        get_repo_root()
        settings = load_settings()
    except (GitError, GlobalConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    overrides = {}
    if model:
        overrides["model"] = model
    if max_diff_lines:
        overrides["max_diff_lines"] = max_diff_lines
    if overrides:
        settings = settings.model_copy(update=overrides)

    try:
        if show_prompt:
            diff = get_staged_diff(settings.ignore)
            typer.echo(build_prompt(truncate_diff_lines(diff, settings.max_diff_lines)))
            return

        message = generate_message(get_provider(settings), settings)
    except NoStagedChangesError as e:
        typer.echo(f"Error: {e} Stage your changes first with: git add <files>", err=True)
        raise typer.Exit(1)
    except (GitError, LLMError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if message is None:
        typer.echo(f"Model '{settings.model}' returned an empty message.", err=True)
        raise typer.Exit(1)

    typer.echo(message)
