"""CLI command: scorekeeper score -- run one scoring cycle."""

from __future__ import annotations

import logging

import click

logger = logging.getLogger(__name__)


@click.command("score")
@click.option("--dry-run", is_flag=True, help="Score but don't save the report or score")
@click.option("--no-report", is_flag=True, help="Skip writing the HTML report")
@click.pass_context
def score_cmd(ctx: click.Context, dry_run: bool, no_report: bool) -> None:
    """Evaluate every configured check and tally the score.

    Writes the HTML report, compares the score with the previous run and
    announces any gain or loss.
    """
    from scorekeeper.config.loader import load_config
    from scorekeeper.engine.controller import run_cycle

    try:
        config = load_config(ctx.obj.get("config_path"))
    except Exception as e:
        click.echo(f"Config validation failed: {e}", err=True)
        raise SystemExit(1) from None

    click.echo(f"Scorekeeper: {config.title}")
    click.echo("=" * 40)
    if dry_run:
        click.echo("DRY RUN -- report and score will not be saved")

    def notify(message: str) -> None:
        click.echo(f"\n>>> {message}")

    result = run_cycle(
        config,
        notifier=notify,
        persist=not dry_run,
        write_html=not no_report,
    )

    if not result.status.ok:
        click.echo(f"[{result.status.color.upper()}] {result.status.message}")

    if not result.scored:
        click.echo("Remote server unreachable; no score recorded.")
        return

    state = result.state
    click.echo(f"\nScore: {state.score} / {state.total_points}")
    click.echo(f"Vulnerabilities fixed: {state.vulns_found} of {state.scored_vulns}")

    if state.penalties:
        click.echo(f"\nPenalties ({len(state.penalties)}):")
        for item in state.penalties:
            click.echo(f"  {item.points:+4d}  {item.message}")

    if result.delta is not None and result.delta != 0:
        click.echo(f"\nChange since last run: {result.delta:+d}")

    if result.report_path is not None:
        click.echo(f"Report: {result.report_path}")
