"""Configuration loading, validation, and defaults."""

from scorekeeper.config.loader import load_config
from scorekeeper.config.schema import AgentConfig

__all__ = ["load_config", "AgentConfig"]
