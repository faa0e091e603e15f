"""Automatic point allocation for checks without an explicit value.

Checks authored with ``points: 0`` share whatever is left of the 100-point
budget once explicit rewards are counted.  Penalties never take part.

  1. Sum explicit rewards into ``total_points``.
  2. If the budget is already spent, or there are too many unassigned checks
     to give each at least one point, every unassigned check gets the flat
     ``FALLBACK_POINTS`` value.
  3. Otherwise split the remainder evenly, then hand out the integer-division
     leftover one point at a time in check order until the total is 100.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import cycle

from scorekeeper.config.defaults import (
    FALLBACK_POINTS,
    MAX_DISTRIBUTED_CHECKS,
    TARGET_TOTAL_POINTS,
)
from scorekeeper.engine.models import Check

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AllocationSummary:
    total_points: int = 0
    scored_vulns: int = 0
    assigned: int = 0
    fallback: bool = False


def allocate_points(checks: list[Check]) -> AllocationSummary:
    """Assign points in place to every check whose ``points`` is zero.

    Returns an ``AllocationSummary``; ``total_points`` is exactly 100 after
    an even distribution, and includes the fallback points when the flat
    value was used.
    """
    unassigned = [c for c in checks if c.points == 0]
    total_points = sum(c.points for c in checks if c.points > 0)
    scored_vulns = sum(1 for c in checks if c.points >= 0)

    if not unassigned:
        return AllocationSummary(total_points, scored_vulns)

    points_left = TARGET_TOTAL_POINTS - total_points

    if points_left <= 0 or len(unassigned) > MAX_DISTRIBUTED_CHECKS:
        logger.info(
            "Assigning fallback value of %d points to %d checks "
            "(%d points already assigned)",
            FALLBACK_POINTS, len(unassigned), total_points,
        )
        for check in unassigned:
            check.points = FALLBACK_POINTS
        total_points += FALLBACK_POINTS * len(unassigned)
        return AllocationSummary(total_points, scored_vulns, len(unassigned), True)

    points_each = points_left // len(unassigned)
    for check in unassigned:
        check.points = points_each
    total_points += points_each * len(unassigned)

    # Round-robin the remainder in check order
    remaining = cycle(unassigned)
    while total_points < TARGET_TOTAL_POINTS:
        next(remaining).points += 1
        total_points += 1

    logger.debug(
        "Distributed %d points across %d unassigned checks (%d each)",
        points_left, len(unassigned), points_each,
    )
    return AllocationSummary(total_points, scored_vulns, len(unassigned), False)
