"""run_scoring_pass() -- one complete evaluate-and-aggregate cycle.

  1. Start from a fresh ScoreState
  2. Allocate points to unassigned checks (mutates the checks)
  3. Resolve every check on its own worker thread
  4. Wait for all of them
  5. Fold the results into the ScoreState in check order

Worker threads only return ``CheckResult`` values; the fold runs on the
calling thread after the join, so the state is never shared.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from scorekeeper.engine.allocator import allocate_points
from scorekeeper.engine.models import Check, CheckResult, ScoreState
from scorekeeper.engine.resolver import Evaluator, score_check

logger = logging.getLogger(__name__)


def _resolve_all(
    checks: list[Check],
    evaluator: Evaluator,
    max_workers: int | None,
) -> list[CheckResult]:
    if not checks:
        return []

    workers = max_workers or len(checks)
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="check") as pool:
        futures = [pool.submit(score_check, check, evaluator) for check in checks]
        results: list[CheckResult] = []
        for check, future in zip(checks, futures):
            try:
                results.append(future.result())
            except Exception as e:
                logger.error("Check %r failed to resolve: %s", check.message, e)
                results.append(CheckResult(check=check, passed=False))
    return results


def run_scoring_pass(
    checks: list[Check],
    evaluator: Evaluator,
    max_workers: int | None = None,
) -> ScoreState:
    """Score ``checks`` and return the finished ScoreState.

    Parameters:
        checks: Configured checks. Zero-point checks get their points
            assigned in place.
        evaluator: Callable ``(Condition) -> bool``.
        max_workers: Thread pool size. ``None`` means one thread per check.
    """
    state = ScoreState()

    allocation = allocate_points(checks)
    state.total_points = allocation.total_points
    state.scored_vulns = allocation.scored_vulns

    for result in _resolve_all(checks, evaluator, max_workers):
        state.record(result)

    logger.info("Finished running all checks.")
    logger.info("Score: %d", state.score)
    return state
