"""Property-based tests using Hypothesis.

Invariants that hold for ANY check list:
- score == contribs + detracts
- Fail beats everything, PassOverride beats Pass
- Allocation reaches exactly 100 whenever the even split applies
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from scorekeeper.engine.allocator import allocate_points
from scorekeeper.engine.models import Check, Condition
from scorekeeper.engine.orchestrator import run_scoring_pass
from scorekeeper.engine.resolver import resolve_check

from conftest import FakeEvaluator

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

conditions = st.sampled_from([Condition("true"), Condition("false")])
condition_lists = st.lists(conditions, max_size=4)
point_values = st.integers(min_value=-30, max_value=60)

checks = st.builds(
    Check,
    message=st.text(max_size=10),
    points=point_values,
    pass_=condition_lists,
    pass_override=condition_lists,
    fail=condition_lists,
)


def _any_true(conds: list[Condition]) -> bool:
    return any(c.type == "true" for c in conds)


# ---------------------------------------------------------------------------
# Resolution properties
# ---------------------------------------------------------------------------

class TestResolutionProperties:
    @given(check=checks)
    def test_fail_always_wins(self, check):
        check.fail.append(Condition("true"))
        assert resolve_check(check, FakeEvaluator()) is False

    @given(check=checks)
    def test_override_wins_without_fail(self, check):
        check.fail = [c for c in check.fail if c.type == "false"]
        check.pass_override.append(Condition("true"))
        assert resolve_check(check, FakeEvaluator()) is True

    @given(pass_=condition_lists, points=st.integers(min_value=1, max_value=50))
    def test_pass_only_is_conjunction(self, pass_, points):
        check = Check(points=points, pass_=pass_)
        expected = all(c.type == "true" for c in pass_)
        assert resolve_check(check, FakeEvaluator()) is expected

    @given(check=checks)
    def test_outcome_matches_precedence(self, check):
        expected = all(c.type == "true" for c in check.pass_)
        if _any_true(check.pass_override):
            expected = True
        if _any_true(check.fail):
            expected = False
        assert resolve_check(check, FakeEvaluator()) is expected


# ---------------------------------------------------------------------------
# Scoring pass properties
# ---------------------------------------------------------------------------

class TestScoringPassProperties:
    @settings(max_examples=50, deadline=None)
    @given(check_list=st.lists(checks, max_size=15))
    def test_score_equals_contribs_plus_detracts(self, check_list):
        state = run_scoring_pass(check_list, FakeEvaluator())
        assert state.score == state.contribs + state.detracts
        assert state.contribs >= 0
        assert state.detracts <= 0
        assert state.contribs == sum(item.points for item in state.points)
        assert state.detracts == sum(item.points for item in state.penalties)


# ---------------------------------------------------------------------------
# Allocation properties
# ---------------------------------------------------------------------------

class TestAllocationProperties:
    @given(points=st.lists(point_values, max_size=40))
    def test_even_split_totals_100(self, points):
        check_list = [Check(points=p) for p in points]
        explicit = sum(p for p in points if p > 0)
        unassigned = points.count(0)
        summary = allocate_points(check_list)

        if unassigned and explicit < 100:
            assert summary.total_points == 100
            assert sum(c.points for c in check_list if c.points > 0) == 100
        elif unassigned:
            assert all(c.points == 3 for c, p in zip(check_list, points) if p == 0)
            assert summary.total_points == explicit + 3 * unassigned
        else:
            assert summary.total_points == explicit

    @given(points=st.lists(point_values, max_size=40))
    def test_penalties_never_change(self, points):
        check_list = [Check(points=p) for p in points]
        allocate_points(check_list)
        for check, original in zip(check_list, points):
            if original < 0:
                assert check.points == original
            else:
                assert check.points >= 0

    @given(n=st.integers(min_value=1, max_value=100))
    def test_split_is_near_even(self, n):
        check_list = [Check() for _ in range(n)]
        allocate_points(check_list)
        values = [c.points for c in check_list]
        assert max(values) - min(values) <= 1
        assert values == sorted(values, reverse=True)
