"""CLI commands for global configuration management."""

import typer

from ollacommit import global_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global ollacommit configuration in ~/.ollacommit/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        settings = global_config.load_settings()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    config_file = global_config.get_config_file_path()
    location = str(config_file) if config_file.exists() else "defaults (no config file)"

    typer.echo(f"ollacommit configuration ({location}):")
    typer.echo()
    typer.echo(f"  Host: {settings.host}")
    typer.echo(f"  Model: {settings.model}")
    typer.echo(f"  Timeout: {settings.timeout:g}s")
    typer.echo(f"  Max Diff Lines: {settings.max_diff_lines}")

    if settings.ignore:
        typer.echo()
        typer.echo("  Ignore Patterns:")
        for pattern in settings.ignore:
            typer.echo(f"    - {pattern}")

    typer.echo()
    typer.echo(f"  Log File: {global_config.get_log_file_path()}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        ...,
        help=f"Setting name ({', '.join(global_config.SETTABLE_KEYS)})",
    ),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a value in ~/.ollacommit/config.yaml."""
    try:
        saved = global_config.set_config_value(key.lower().replace("-", "_"), value)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to {saved}")
