"""CLI command: scorekeeper checks -- list checks with allocated points."""

from __future__ import annotations

import click


@click.command("checks")
@click.pass_context
def checks_cmd(ctx: click.Context) -> None:
    """List configured checks and the points each is worth this run."""
    from scorekeeper.config.loader import load_config
    from scorekeeper.engine.allocator import allocate_points

    config = load_config(ctx.obj.get("config_path"))
    checks = config.build_checks()
    if not checks:
        click.echo("No checks configured.")
        return

    summary = allocate_points(checks)
    for i, check in enumerate(checks, 1):
        groups = (
            f"pass={len(check.pass_)} override={len(check.pass_override)} "
            f"fail={len(check.fail)}"
        )
        click.echo(f"  {i:3d}. {check.points:+4d}  {check.message}  [{groups}]")

    click.echo(f"\nTotal possible: {summary.total_points} points "
               f"across {summary.scored_vulns} scored checks")
    if summary.fallback:
        click.echo(f"Note: {summary.assigned} checks received the fallback point value")
