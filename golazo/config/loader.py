import logging
import os
import re
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel

from golazo.config.schema import GolazoConfig

logger = logging.getLogger(__name__)

_ENV_VAR_RE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

DEFAULT_CONFIG_PATH = Path("~/.golazo/golazo.yml")


def expand_env_vars(value: object) -> object:
    """Recursively replace ${VAR} references in strings with environment values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(v) for v in value]
    return value


def _warn_unknown_keys(model: BaseModel, path: str, config_path: Path) -> None:
    """Recursively warn about unknown keys in a model and its nested models."""
    if model.model_extra:
        logger.warning("Unknown keys in %s at %s: %s", path, config_path, list(model.model_extra.keys()))

    for field_name, field_value in model.__dict__.items():
        if isinstance(field_value, BaseModel):
            _warn_unknown_keys(field_value, f"{path}.{field_name}", config_path)


def load_config(path: Path) -> GolazoConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Path to golazo.yml.

    Returns:
        The validated configuration; defaults when the file is missing or unreadable.

    Raises:
        pydantic.ValidationError: If the file holds invalid values.
    """
    if not path.exists():
        return GolazoConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to read config file %s: %s", path, e)
        return GolazoConfig()

    if not isinstance(raw, dict):
        logger.warning("Ignoring config file %s: top level is not a mapping", path)
        return GolazoConfig()

    model = GolazoConfig.model_validate(expand_env_vars(raw))
    _warn_unknown_keys(model, "root", path)
    return model


def load_global_config(path: Optional[Path] = None) -> GolazoConfig:
    """Load user configuration (GOLAZO_CONFIG_PATH, else ~/.golazo/golazo.yml)."""
    if path is None:
        env_path = os.getenv("GOLAZO_CONFIG_PATH")
        path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
    return load_config(path.expanduser())
