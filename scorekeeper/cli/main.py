"""Top-level CLI entry point for scorekeeper."""

from __future__ import annotations

import logging

import click

from scorekeeper import __version__


@click.group()
@click.version_option(version=__version__, prog_name="scorekeeper")
@click.option(
    "--config",
    type=click.Path(),
    default=None,
    envvar="SCOREKEEPER_CONFIG",
    help="Path to scorekeeper.yaml",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """Scorekeeper -- security competition scoring agent."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


# Register sub-commands
from scorekeeper.cli.checks_cmd import checks_cmd  # noqa: E402
from scorekeeper.cli.config_cmd import config_group  # noqa: E402
from scorekeeper.cli.score import score_cmd  # noqa: E402

cli.add_command(checks_cmd, "checks")
cli.add_command(config_group, "config")
cli.add_command(score_cmd, "score")
