"""Run controller -- one full agent cycle around a scoring pass.

Local mode (``config.local``):
  1. Score checks
  2. If a remote is configured, ping it and report when reachable
  3. Write the HTML report

Remote-only mode:
  1. Ping the remote; if unreachable, write a blank report and stop
  2. Score checks and report them
  3. If reporting fails, discard the score
  4. Write the HTML report

Both modes then compare the score against the previous run, notify on a
gain or loss, and save the new score.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Protocol

from scorekeeper.config.defaults import (
    GAINED_POINTS_MESSAGE,
    LOST_POINTS_MESSAGE,
    STATUS_NO_CHECKS,
    STATUS_OK,
)
from scorekeeper.config.loader import resolve_path
from scorekeeper.config.schema import AgentConfig
from scorekeeper.engine.conditions import ConditionEvaluator
from scorekeeper.engine.models import Check, RunStatus, ScoreState
from scorekeeper.engine.orchestrator import run_scoring_pass
from scorekeeper.engine.resolver import Evaluator
from scorekeeper.output.report import build_report, write_report
from scorekeeper.storage.previous import PriorScoreStore

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]


class Reporter(Protocol):
    """Transport to a remote scoring server."""

    def ping(self) -> bool:
        """Return True when the server is reachable."""
        ...

    def report(self, state: ScoreState, status: RunStatus) -> bool:
        """Send a finished ScoreState. Return False on failure."""
        ...


def log_notification(message: str) -> None:
    """Default notifier: gains at INFO, losses at WARNING."""
    if message == LOST_POINTS_MESSAGE:
        logger.warning(message)
    else:
        logger.info(message)


# ---------------------------------------------------------------------------
# Cycle result
# ---------------------------------------------------------------------------

@dataclass
class CycleResult:
    """Everything one agent cycle produced."""

    state: ScoreState = field(default_factory=ScoreState)
    status: RunStatus = field(default_factory=RunStatus)
    connected: bool = False
    reported: bool = False
    scored: bool = False
    previous_score: int | None = None
    report_path: Path | None = None

    @property
    def delta(self) -> int | None:
        """Score change since the previous run, when one was recorded."""
        if self.previous_score is None or not self.scored:
            return None
        return self.state.score - self.previous_score


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------

def check_config_data(checks: list[Check]) -> RunStatus:
    """Flag configurations with no checks. Scoring proceeds either way."""
    if not checks:
        logger.warning(STATUS_NO_CHECKS[1])
        return RunStatus(*STATUS_NO_CHECKS)
    return RunStatus(*STATUS_OK)


def _ping(reporter: Reporter | None) -> bool:
    if reporter is None:
        return False
    try:
        return bool(reporter.ping())
    except Exception as e:
        logger.error("Remote server check failed: %s", e)
        return False


def _report(reporter: Reporter, state: ScoreState, status: RunStatus) -> bool:
    try:
        return bool(reporter.report(state, status))
    except Exception as e:
        logger.error("Score reporting failed: %s", e)
        return False


def notify_delta(
    previous: int | None,
    score: int,
    notifier: Notifier,
) -> None:
    """Send a gain/loss notification when the score moved."""
    if previous is None:
        logger.warning("Reading from previous.txt failed. This is probably fine.")
        return
    if previous < score:
        notifier(GAINED_POINTS_MESSAGE)
    elif previous > score:
        notifier(LOST_POINTS_MESSAGE)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def run_cycle(
    config: AgentConfig,
    checks: list[Check] | None = None,
    evaluator: Evaluator | None = None,
    reporter: Reporter | None = None,
    notifier: Notifier | None = None,
    store: PriorScoreStore | None = None,
    persist: bool = True,
    write_html: bool = True,
) -> CycleResult:
    """Run one scoring cycle.

    Parameters:
        config: Validated agent configuration.
        checks: Checks to score. Defaults to fresh checks built from
            ``config``; pass the same list across cycles to keep allocated
            points.
        evaluator: Condition evaluator. Defaults to ``ConditionEvaluator()``.
        reporter: Remote transport. Only used when ``config.remote`` is set.
        notifier: Receives gain/loss messages. Defaults to logging.
        store: Prior-score store. Defaults to ``previous.txt`` in the data dir.
        persist: When False, neither the report nor the score is saved.
        write_html: When False, skip the HTML report.
    """
    if checks is None:
        checks = config.build_checks()
    if evaluator is None:
        evaluator = ConditionEvaluator()
    if notifier is None:
        notifier = log_notification
    if store is None:
        store = PriorScoreStore(
            resolve_path(config.output.data_dir) / config.output.previous_score_file
        )
    if not config.remote:
        reporter = None

    result = CycleResult(status=check_config_data(checks))
    max_workers = config.scoring.max_workers

    if config.local:
        result.state = run_scoring_pass(checks, evaluator, max_workers)
        result.scored = True
        if reporter is not None:
            result.connected = _ping(reporter)
            if result.connected:
                result.reported = _report(reporter, result.state, result.status)
    else:
        result.connected = _ping(reporter)
        if not result.connected:
            logger.warning("Connection failed-- generating blank report.")
            _write(result, config, persist and write_html)
            return result
        result.state = run_scoring_pass(checks, evaluator, max_workers)
        result.scored = True
        result.reported = _report(reporter, result.state, result.status)
        if not result.reported:
            result.state = ScoreState()
            logger.warning("Local is disabled, scoring data removed.")

    _write(result, config, persist and write_html)

    result.previous_score = store.read()
    notify_delta(result.previous_score, result.state.score, notifier)
    if persist:
        store.write(result.state.score)
    return result


def _write(result: CycleResult, config: AgentConfig, enabled: bool) -> None:
    if not enabled:
        return
    page = build_report(
        result.state,
        result.status,
        title=config.title,
        connected=result.scored,
    )
    result.report_path = write_report(
        page, resolve_path(config.output.report_dir), config.output.report_file,
    )
