"""Shared test fixtures for scorekeeper.

Provides a deterministic fake condition evaluator and a config whose output
paths point into a temporary directory.
"""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from scorekeeper.config.schema import AgentConfig
from scorekeeper.engine.models import Condition


class FakeEvaluator:
    """Evaluates ``Condition("true")`` as True and anything else as False.

    ``results`` overrides outcomes per condition type; types listed in
    ``raises`` raise RuntimeError.  Every call is recorded in ``calls``.
    """

    def __init__(
        self,
        results: dict[str, bool] | None = None,
        raises: tuple[str, ...] = (),
    ):
        self.results = results or {}
        self.raises = raises
        self.calls: list[Condition] = []
        self._lock = threading.Lock()

    def __call__(self, condition: Condition) -> bool:
        with self._lock:
            self.calls.append(condition)
        if condition.type in self.raises:
            raise RuntimeError(f"cannot evaluate {condition.type}")
        return self.results.get(condition.type, condition.type == "true")


@pytest.fixture
def evaluator() -> FakeEvaluator:
    return FakeEvaluator()


@pytest.fixture
def test_config(tmp_path: Path) -> AgentConfig:
    """Config with two simple checks and temp output paths."""
    return AgentConfig(
        name="test-image",
        title="Test Round",
        output={
            "data_dir": str(tmp_path / "data"),
            "report_dir": str(tmp_path / "reports"),
        },
        checks=[
            {"message": "Removed backdoor", "pass": [{"type": "true"}]},
            {"message": "Enabled firewall", "pass": [{"type": "false"}]},
        ],
    )
