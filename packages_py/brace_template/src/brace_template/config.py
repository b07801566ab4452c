"""
Formatter configuration.

Settings come from explicit overrides, then BRACE_TEMPLATE_* environment
variables (optionally loaded from a .env file), then defaults.
"""
import os
import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

ENV_EMIT_WARNINGS = "BRACE_TEMPLATE_EMIT_WARNINGS"
ENV_LOG_NON_SCALAR = "BRACE_TEMPLATE_LOG_NON_SCALAR"
ENV_ALLOW_PRIVATE = "BRACE_TEMPLATE_ALLOW_PRIVATE"

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


def resolve_bool(override: Any, env_key: str, default: bool) -> bool:
    """
    Resolve a boolean setting in priority order:
    1. Explicit override (if not None)
    2. Environment variable
    3. Default value
    Unrecognised strings fall back to the default.
    """
    value = override if override is not None else os.getenv(env_key)
    if value is None or value == "":
        return default
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        return default
    return bool(value)


class FormatterConfig(BaseModel):
    """Settings shared by the resolver and formatter."""
    model_config = ConfigDict(frozen=True)

    emit_warnings: bool = Field(default=True, description="Emit NonScalarResultWarning through the warnings module")
    log_non_scalar: bool = Field(default=True, description="Log a warning when an expression yields a non-scalar value")
    allow_private_accessors: bool = Field(default=False, description="Allow accessor names starting with an underscore")


def load_config(
    overrides: Optional[Dict[str, Any]] = None,
    env_file: Optional[str] = None
) -> FormatterConfig:
    """Build a FormatterConfig from overrides, environment and defaults."""
    if env_file and os.path.exists(env_file):
        load_dotenv(env_file)
        logger.debug(f"Loaded environment from {env_file}")

    overrides = overrides or {}
    defaults = FormatterConfig()

    config = FormatterConfig(
        emit_warnings=resolve_bool(overrides.get("emit_warnings"), ENV_EMIT_WARNINGS, defaults.emit_warnings),
        log_non_scalar=resolve_bool(overrides.get("log_non_scalar"), ENV_LOG_NON_SCALAR, defaults.log_non_scalar),
        allow_private_accessors=resolve_bool(
            overrides.get("allow_private_accessors"), ENV_ALLOW_PRIVATE, defaults.allow_private_accessors
        ),
    )
    logger.debug(f"Formatter config resolved: {config.model_dump()}")
    return config


_current_config: Optional[FormatterConfig] = None


def get_config() -> FormatterConfig:
    """Return the process-wide default config, loading it on first use."""
    global _current_config
    if _current_config is None:
        _current_config = load_config()
    return _current_config


def set_config(config: Optional[FormatterConfig]) -> None:
    """Replace the process-wide default config; None reloads it on next use."""
    global _current_config
    _current_config = config
