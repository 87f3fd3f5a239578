"""CLI command invoked by the prepare-commit-msg git hook.

A hook script only needs to forward its arguments:

    #!/bin/sh
    exec ollacommit hook "$@"
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from ollacommit.hook import run_hook
from ollacommit.log import configure_logging

logger = logging.getLogger(__name__)


def hook_command(
    message_file: Path = typer.Argument(
        ...,
        help="Path to the commit message file (first hook argument)",
    ),
    source: Optional[str] = typer.Argument(
        None,
        help="Commit source: message, template, merge, squash or commit",
    ),
    commit_sha: Optional[str] = typer.Argument(
        None,
        help="Commit object name, passed by git for amends (ignored)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Also log to stderr",
    ),
) -> None:
    """Generate a commit message for the staged changes. Always exits 0."""
    configure_logging(verbose=verbose)
    outcome = run_hook(message_file, source)
    logger.debug(f"Hook finished with outcome '{outcome.value}'")
    raise typer.Exit(0)
