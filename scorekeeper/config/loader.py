"""Agent configuration loading: YAML parsing and ${ENV} expansion."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from scorekeeper.config.schema import AgentConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATHS = [
    Path("scorekeeper.yaml"),
    Path("~/.scorekeeper/scorekeeper.yaml"),
]

# ${NAME} or ${NAME:-fallback}
_ENV_PATTERN = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def _expand_env_vars(value: Any) -> Any:
    """Recursively expand ${ENV_VAR} references in strings, dicts and lists.

    Unset variables expand to their ``:-`` fallback, or to an empty string.
    """
    if isinstance(value, str):
        return _ENV_PATTERN.sub(
            lambda m: os.environ.get(m.group(1), m.group(2) or ""), value
        )
    if isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    return value


def _find_config_file(explicit_path: str | Path | None = None) -> Path | None:
    if explicit_path is not None:
        path = Path(explicit_path).expanduser()
        if not path.is_file():
            logger.warning("Config file not found: %s", path)
            return None
        return path

    for candidate in DEFAULT_CONFIG_PATHS:
        resolved = candidate.expanduser()
        if resolved.is_file():
            return resolved
    return None


def load_config(path: str | Path | None = None) -> AgentConfig:
    """Load and validate the agent configuration.

    Resolution order:
    1. Explicit path argument
    2. scorekeeper.yaml in the current directory
    3. ~/.scorekeeper/scorekeeper.yaml
    4. All defaults (an agent with no checks)

    Raises:
        ValueError: the file does not hold a YAML mapping.
        pydantic.ValidationError: the mapping does not match the schema.
    """
    config_path = _find_config_file(path)

    raw: Any = {}
    if config_path is None:
        logger.info("No config file found, using defaults")
    else:
        logger.info("Loading config from %s", config_path)
        raw = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(raw, dict):
            raise ValueError(
                f"{config_path}: expected a mapping at the top level, "
                f"got {type(raw).__name__}"
            )
        raw = _expand_env_vars(raw)

    config = AgentConfig.model_validate(raw)
    logger.debug("Config loaded: name=%r, %d checks", config.name, len(config.checks))
    return config


def resolve_path(path_str: str | Path) -> Path:
    """Expand ``~`` and make a configured path absolute."""
    return Path(path_str).expanduser().resolve()
