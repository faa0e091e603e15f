"""Config CLI commands: show, validate."""

from __future__ import annotations

import json

import click


@click.group("config")
def config_group() -> None:
    """Inspect the agent configuration."""


@config_group.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Print the resolved configuration as JSON."""
    from scorekeeper.config.loader import load_config

    config = load_config(ctx.obj.get("config_path"))
    click.echo(json.dumps(config.model_dump(by_alias=True), indent=2))


@config_group.command("validate")
@click.pass_context
def config_validate(ctx: click.Context) -> None:
    """Validate scorekeeper.yaml against the schema."""
    from scorekeeper.config.loader import load_config

    try:
        config = load_config(ctx.obj.get("config_path"))
    except Exception as e:
        click.echo(f"Config validation failed: {e}", err=True)
        raise SystemExit(1) from None

    penalties = sum(1 for c in config.checks if c.points < 0)
    click.echo("Config is valid.")
    click.echo(f"  Name: {config.name or '(unnamed)'}")
    click.echo(f"  Checks: {len(config.checks)} ({penalties} penalties)")
    click.echo(f"  Mode: {'local' if config.local else 'remote only'}"
               f"{', remote ' + config.remote if config.remote else ''}")
    click.echo(f"  Data dir: {config.output.data_dir}")
