"""Check resolution: reduce a check's condition groups to one pass/fail.

Precedence, lowest to highest:
  Pass          -- all conditions must be true (empty list passes)
  PassOverride  -- the first true condition forces a pass
  Fail          -- the first true condition forces a failure

Override and fail groups stop evaluating at the first true condition.
A condition whose evaluation raises counts as false.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from scorekeeper.engine.models import Check, CheckResult, Condition

logger = logging.getLogger(__name__)

Evaluator = Callable[[Condition], bool]


def evaluate_condition(evaluator: Evaluator, condition: Condition) -> bool:
    """Evaluate one condition, degrading any error to ``False``."""
    try:
        result = bool(evaluator(condition))
    except Exception as e:
        logger.warning("Condition %s could not be evaluated: %s", condition, e)
        return False
    logger.debug("Result of %s was %s", condition, result)
    return result


def _all_true(evaluator: Evaluator, conditions: Iterable[Condition]) -> bool:
    # Every pass condition is evaluated, even after the first false
    return all([evaluate_condition(evaluator, c) for c in conditions])


def _any_true(evaluator: Evaluator, conditions: Iterable[Condition]) -> bool:
    return any(evaluate_condition(evaluator, c) for c in conditions)


def resolve_check(check: Check, evaluator: Evaluator) -> bool:
    """Return whether ``check`` passes under ``evaluator``."""
    status = _all_true(evaluator, check.pass_)
    logger.debug("Result of all pass conditions for %r was %s", check.message, status)

    if _any_true(evaluator, check.pass_override):
        logger.debug("Pass override matched for %r", check.message)
        status = True

    if _any_true(evaluator, check.fail):
        logger.debug("Fail condition matched for %r", check.message)
        status = False

    return status


def score_check(check: Check, evaluator: Evaluator) -> CheckResult:
    """Resolve ``check`` and wrap the outcome for the orchestrator's fold."""
    passed = resolve_check(check, evaluator)
    if passed:
        if check.points >= 0:
            logger.info("Check passed: %s - %d pts", check.message, check.points)
        else:
            logger.info("Penalty triggered: %s - %d pts", check.message, check.points)
    return CheckResult(check=check, passed=passed)
