"""Configuration management.

Settings come from a YAML file (GOLAZO_CONFIG_PATH or ~/.golazo/golazo.yml)
validated by pydantic. A .env file in the working directory is loaded first
so ${VAR} references and GOLAZO_* variables can live there.
"""

from dotenv import load_dotenv

from golazo.config.loader import DEFAULT_CONFIG_PATH, expand_env_vars, load_config, load_global_config
from golazo.config.schema import DataConfig, GolazoConfig, LoggingConfig, UIConfig

load_dotenv()

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DataConfig",
    "GolazoConfig",
    "LoggingConfig",
    "UIConfig",
    "expand_env_vars",
    "load_config",
    "load_global_config",
]
