"""Tests for check resolution: pass / override / fail precedence."""

from __future__ import annotations

from scorekeeper.engine.models import Check, CheckResult, Condition
from scorekeeper.engine.resolver import evaluate_condition, resolve_check, score_check

from conftest import FakeEvaluator

TRUE = Condition("true")
FALSE = Condition("false")


# ---------------------------------------------------------------------------
# Tests: pass group
# ---------------------------------------------------------------------------

class TestPassConditions:
    def test_empty_check_passes(self, evaluator):
        assert resolve_check(Check(points=5), evaluator) is True

    def test_all_true_passes(self, evaluator):
        check = Check(points=5, pass_=[TRUE, TRUE, TRUE])
        assert resolve_check(check, evaluator) is True

    def test_any_false_fails(self, evaluator):
        check = Check(points=5, pass_=[TRUE, FALSE, TRUE])
        assert resolve_check(check, evaluator) is False

    def test_every_pass_condition_evaluated(self, evaluator):
        """Pass conditions are all evaluated, even after a false one."""
        check = Check(points=5, pass_=[FALSE, Condition("a"), Condition("b")])
        resolve_check(check, evaluator)
        assert [c.type for c in evaluator.calls] == ["false", "a", "b"]


# ---------------------------------------------------------------------------
# Tests: pass override group
# ---------------------------------------------------------------------------

class TestPassOverride:
    def test_override_forces_pass(self, evaluator):
        check = Check(points=5, pass_=[FALSE], pass_override=[FALSE, TRUE])
        assert resolve_check(check, evaluator) is True

    def test_no_override_true_keeps_baseline(self, evaluator):
        check = Check(points=5, pass_=[FALSE], pass_override=[FALSE, FALSE])
        assert resolve_check(check, evaluator) is False

    def test_override_short_circuits(self, evaluator):
        check = Check(
            points=5,
            pass_override=[Condition("first", "1"), TRUE, Condition("never")],
        )
        resolve_check(check, evaluator)
        assert Condition("never") not in evaluator.calls
        assert Condition("first", "1") in evaluator.calls


# ---------------------------------------------------------------------------
# Tests: fail group
# ---------------------------------------------------------------------------

class TestFail:
    def test_fail_beats_pass(self, evaluator):
        check = Check(points=5, pass_=[TRUE], fail=[TRUE])
        assert resolve_check(check, evaluator) is False

    def test_fail_beats_override(self, evaluator):
        check = Check(points=5, pass_=[TRUE], pass_override=[TRUE], fail=[FALSE, TRUE])
        assert resolve_check(check, evaluator) is False

    def test_false_fail_conditions_ignored(self, evaluator):
        check = Check(points=5, pass_=[TRUE], fail=[FALSE, FALSE])
        assert resolve_check(check, evaluator) is True

    def test_fail_short_circuits(self, evaluator):
        check = Check(points=5, fail=[TRUE, Condition("never")])
        resolve_check(check, evaluator)
        assert Condition("never") not in evaluator.calls


# ---------------------------------------------------------------------------
# Tests: evaluator errors
# ---------------------------------------------------------------------------

class TestEvaluatorErrors:
    def test_error_counts_as_false(self):
        ev = FakeEvaluator(raises=("broken",))
        assert evaluate_condition(ev, Condition("broken")) is False

    def test_broken_pass_condition_fails_check(self):
        ev = FakeEvaluator(raises=("broken",))
        check = Check(points=5, pass_=[TRUE, Condition("broken")])
        assert resolve_check(check, ev) is False

    def test_broken_fail_condition_does_not_fail_check(self):
        ev = FakeEvaluator(raises=("broken",))
        check = Check(points=5, pass_=[TRUE], fail=[Condition("broken")])
        assert resolve_check(check, ev) is True

    def test_truthy_results_coerced_to_bool(self):
        def ev(condition):
            return "yes"

        assert evaluate_condition(ev, TRUE) is True


# ---------------------------------------------------------------------------
# Tests: score_check
# ---------------------------------------------------------------------------

class TestScoreCheck:
    def test_returns_check_result(self, evaluator):
        check = Check(message="Removed user", points=10, pass_=[TRUE])
        result = score_check(check, evaluator)
        assert result == CheckResult(check=check, passed=True)

    def test_penalty_result(self, evaluator):
        check = Check(message="Deleted home dir", points=-10, pass_=[TRUE])
        assert score_check(check, evaluator).passed is True
