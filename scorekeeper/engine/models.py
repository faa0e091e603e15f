"""Engine data model: checks, conditions, and the per-run score record.

``Check`` and ``Condition`` come from configuration and live for the whole
process.  ``ScoreState`` is rebuilt from scratch for every scoring pass and
is only written by the orchestrator's fold step, never by worker threads.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

# ---------------------------------------------------------------------------
# Configuration-owned types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Condition:
    """One atomic testable fact, interpreted by the condition evaluator."""
    type: str
    arg1: str = ""
    arg2: str = ""
    arg3: str = ""

    def __str__(self) -> str:
        args = ", ".join(repr(a) for a in (self.arg1, self.arg2, self.arg3) if a)
        return f"{self.type}({args})"


@dataclass
class Check:
    """One scored rule.

    Attributes:
        message: Human-readable label shown in reports.
        points: Positive = reward, negative = penalty, zero = allocate
            automatically.  Rewritten at most once per run by
            ``allocate_points()``.
        pass_: All must evaluate true for the check to pass.
        pass_override: Any true forces a pass.
        fail: Any true forces a failure, overriding everything else.
    """
    message: str = ""
    points: int = 0
    pass_: list[Condition] = field(default_factory=list)
    pass_override: list[Condition] = field(default_factory=list)
    fail: list[Condition] = field(default_factory=list)

    @property
    def is_penalty(self) -> bool:
        return self.points < 0


# ---------------------------------------------------------------------------
# Run-scoped results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScoreItem:
    """One resolved check's contribution to the reward or penalty ledger."""
    message: str
    points: int


@dataclass(frozen=True)
class CheckResult:
    """Outcome of resolving one check, produced on a worker thread."""
    check: Check
    passed: bool


@dataclass(frozen=True)
class RunStatus:
    """Overall health of a run, shown at the top of the report."""
    color: str = "green"
    message: str = "OK"

    @property
    def ok(self) -> bool:
        return self.color == "green"


@dataclass
class ScoreState:
    """Aggregate result of one scoring pass."""

    score: int = 0
    contribs: int = 0
    """Sum of positive contributions."""
    detracts: int = 0
    """Sum of penalty contributions (zero or negative)."""
    total_points: int = 0
    """Sum of all positive check values after allocation."""
    scored_vulns: int = 0
    """Number of checks with ``points >= 0``."""
    points: list[ScoreItem] = field(default_factory=list)
    penalties: list[ScoreItem] = field(default_factory=list)

    def record(self, result: CheckResult) -> None:
        """Fold one check outcome into the ledgers and counters."""
        if not result.passed:
            return
        check = result.check
        item = ScoreItem(check.message, check.points)
        if check.is_penalty:
            self.penalties.append(item)
            self.detracts += check.points
        else:
            self.points.append(item)
            self.contribs += check.points
        self.score += check.points

    @property
    def vulns_found(self) -> int:
        return len(self.points)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
