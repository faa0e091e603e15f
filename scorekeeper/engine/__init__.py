"""Check evaluation and point-allocation engine.

Public API:
  run_scoring_pass   -- Allocate, resolve all checks concurrently -> ScoreState
  allocate_points    -- Fill in zero-point checks toward a 100-point total
  resolve_check      -- Reduce one check's condition groups to pass/fail
  ConditionEvaluator -- Default dispatcher for built-in condition kinds
  Check, Condition, ScoreItem, ScoreState -- Engine data model
"""

from scorekeeper.engine.allocator import AllocationSummary, allocate_points
from scorekeeper.engine.conditions import ConditionEvaluator
from scorekeeper.engine.models import Check, Condition, RunStatus, ScoreItem, ScoreState
from scorekeeper.engine.orchestrator import run_scoring_pass
from scorekeeper.engine.resolver import resolve_check

__all__ = [
    "AllocationSummary",
    "Check",
    "Condition",
    "ConditionEvaluator",
    "RunStatus",
    "ScoreItem",
    "ScoreState",
    "allocate_points",
    "resolve_check",
    "run_scoring_pass",
]
