"""
Runtime configuration for the RuleBot service.

Settings come from an optional YAML file (with ``${VAR}`` and
``${VAR:-default}`` substitution) and are then overridden by
environment variables.
"""
import logging
import os
import re
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field

DEFAULT_PORT = 5050
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def _substitute_env_vars(text: str) -> str:
    """Replace ${VAR_NAME} and ${VAR_NAME:-default} with environment variable values."""
    def replacer(match):
        var_expr = match.group(1)
        if ":-" in var_expr:
            var_name, default_val = var_expr.split(":-", 1)
            return os.getenv(var_name, default_val)
        return os.getenv(var_expr, "")

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def _read_config(config_path: str) -> dict:
    yaml_content = Path(config_path).read_text(encoding="utf-8")
    yaml_content = _substitute_env_vars(yaml_content)
    config = yaml.safe_load(yaml_content)
    if not isinstance(config, dict):
        return {}
    settings = config.get("settings")
    return settings if isinstance(settings, dict) else {}


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from YAML and the environment.

    Args:
        config_path: Path to a YAML config file. Falls back to RULEBOT_CONFIG.

    Returns:
        Validated Settings

    Raises:
        FileNotFoundError: If the config file does not exist
        pydantic.ValidationError: If a value is invalid (e.g. port out of range)
    """
    values = {}
    config_path = config_path or os.getenv("RULEBOT_CONFIG")
    if config_path:
        values.update(_read_config(config_path))

    if os.getenv("PORT"):
        values["port"] = os.getenv("PORT")
    if os.getenv("HOST"):
        values["host"] = os.getenv("HOST")
    if os.getenv("RULEBOT_CORS_ORIGINS"):
        values["cors_origins"] = [o.strip() for o in os.getenv("RULEBOT_CORS_ORIGINS").split(",") if o.strip()]
    if os.getenv("RULEBOT_LOG_LEVEL"):
        values["log_level"] = os.getenv("RULEBOT_LOG_LEVEL")

    return Settings(**values)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stdout once."""
    logging.basicConfig(
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
