"""Pydantic models for scorekeeper.yaml validation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from scorekeeper.config.defaults import OUTPUT_DEFAULTS
from scorekeeper.engine.models import Check, Condition


# ---------------------------------------------------------------------------
# Check Configs
# ---------------------------------------------------------------------------

class ConditionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: str
    arg1: str = ""
    arg2: str = ""
    arg3: str = ""

    @field_validator("type")
    @classmethod
    def type_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("condition type must not be blank")
        return v.strip()

    @field_validator("arg1", "arg2", "arg3", mode="before")
    @classmethod
    def coerce_args_to_str(cls, v: Any) -> Any:
        """YAML turns bare numbers and booleans into non-strings."""
        if v is None:
            return ""
        if isinstance(v, (int, float, bool)):
            return str(v)
        return v

    def to_condition(self) -> Condition:
        return Condition(type=self.type, arg1=self.arg1, arg2=self.arg2, arg3=self.arg3)


class CheckConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = ""
    points: int = 0
    pass_: list[ConditionConfig] = Field(default_factory=list, alias="pass")
    pass_override: list[ConditionConfig] = Field(default_factory=list)
    fail: list[ConditionConfig] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        """Accept ``PassOverride``/``passoverride`` spellings and null lists."""
        if isinstance(data, dict):
            normalized: dict[str, Any] = {}
            for key, value in data.items():
                k = key.lower() if isinstance(key, str) else key
                if k == "passoverride":
                    k = "pass_override"
                normalized[k] = value
            for key in ("pass", "pass_override", "fail"):
                if key in normalized and normalized[key] is None:
                    normalized[key] = []
            return normalized
        return data

    def to_check(self) -> Check:
        return Check(
            message=self.message,
            points=self.points,
            pass_=[c.to_condition() for c in self.pass_],
            pass_override=[c.to_condition() for c in self.pass_override],
            fail=[c.to_condition() for c in self.fail],
        )


# ---------------------------------------------------------------------------
# Scoring Config
# ---------------------------------------------------------------------------

class ScoringConfig(BaseModel):
    max_workers: int | None = None
    """Thread pool size; ``None`` runs one thread per check."""

    @field_validator("max_workers")
    @classmethod
    def workers_positive(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError(f"max_workers must be >= 1, got {v}")
        return v


# ---------------------------------------------------------------------------
# Output Config
# ---------------------------------------------------------------------------

class OutputConfig(BaseModel):
    data_dir: str = OUTPUT_DEFAULTS["data_dir"]
    report_dir: str = OUTPUT_DEFAULTS["report_dir"]
    previous_score_file: str = OUTPUT_DEFAULTS["previous_score_file"]
    report_file: str = OUTPUT_DEFAULTS["report_file"]


# ---------------------------------------------------------------------------
# Top-Level Config
# ---------------------------------------------------------------------------

class AgentConfig(BaseModel):
    """Root configuration model for a scoring agent."""

    version: int = 1
    name: str = ""
    title: str = "Scoring Report"
    local: bool = True
    remote: str = ""
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    checks: list[CheckConfig] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def coerce_none_to_defaults(cls, data: Any) -> Any:
        """YAML parses empty keys as None. Coerce to proper defaults."""
        if isinstance(data, dict):
            if "check" in data and "checks" not in data:
                data["checks"] = data.pop("check")
            if data.get("checks", []) is None:
                data["checks"] = []
            if data.get("remote", "") is None:
                data["remote"] = ""
        return data

    def build_checks(self) -> list[Check]:
        """Convert configured checks into fresh engine ``Check`` objects."""
        return [c.to_check() for c in self.checks]
