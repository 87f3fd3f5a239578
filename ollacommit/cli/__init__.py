"""CLI entry point for ollacommit.

This module combines the hook command, the preview command and the
configuration subcommands into a single application.
"""

import typer

from ollacommit.cli.config import config_app
from ollacommit.cli.hook import hook_command
from ollacommit.cli.preview import preview_command

# Main application
app = typer.Typer(
    name="ollacommit",
    help="ollacommit: commit messages from a local model, via prepare-commit-msg",
    add_completion=False,
)

app.add_typer(config_app, name="config")

app.command("hook")(hook_command)
app.command("preview")(preview_command)


__all__ = [
    "app",
    "config_app",
    "hook_command",
    "preview_command",
]
