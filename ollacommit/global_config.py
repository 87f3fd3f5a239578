"""Global configuration management for ollacommit.

Handles user-level configuration stored in ~/.ollacommit/:
- config.yaml: inference host, model, timeout and diff bounds
- hook.log: log written by the prepare-commit-msg hook

Effective settings are resolved in order of increasing precedence:
built-in defaults, config.yaml, environment variables (a .env file in the
working directory is loaded first).
"""

import os
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from ollacommit.config import (
    DEFAULT_IGNORE_PATTERNS,
    DEFAULT_MAX_DIFF_LINES,
    DEFAULT_MODEL,
    DEFAULT_OLLAMA_HOST,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_OVERRIDES,
)


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".ollacommit"

# Keys that `ollacommit config set` may change
SETTABLE_KEYS = ("host", "model", "timeout", "max_diff_lines")


class HookSettings(BaseModel):
    """Effective settings for one hook invocation."""

    host: str = DEFAULT_OLLAMA_HOST
    model: str = DEFAULT_MODEL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    max_diff_lines: int = DEFAULT_MAX_DIFF_LINES
    ignore: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS))

    @field_validator("host")
    @classmethod
    def normalize_host(cls, v: str) -> str:
        """Accept OLLAMA_HOST-style values such as 127.0.0.1:11434."""
        v = v.strip()
        if not v:
            raise ValueError("host cannot be empty")
        if not v.startswith(("http://", "https://")):
            v = f"http://{v}"
        return v.rstrip("/")

    @field_validator("model")
    @classmethod
    def model_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("model cannot be empty")
        return v.strip()

    @field_validator("timeout")
    @classmethod
    def timeout_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be greater than zero")
        return v

    @field_validator("max_diff_lines")
    @classmethod
    def max_diff_lines_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_diff_lines must be greater than zero")
        return v


def get_global_config_dir() -> Path:
    """Get the global ollacommit configuration directory.

    Returns:
        Path to ~/.ollacommit/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.ollacommit/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.ollacommit/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def get_log_file_path() -> Path:
    """Get path to the hook log file.

    Returns:
        Path to ~/.ollacommit/hook.log
    """
    return get_global_config_dir() / "hook.log"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.ollacommit/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file cannot be read or is not a mapping.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except Exception as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.ollacommit/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except Exception as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def _env_overrides() -> Dict[str, str]:
    """Collect non-empty environment overrides keyed by setting name."""
    overrides = {}
    for key, env_var in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            overrides[key] = value
    return overrides


def load_settings() -> HookSettings:
    """Resolve the effective hook settings.

    Returns:
        Validated HookSettings.

    Raises:
        GlobalConfigError: If config.yaml is unreadable or a value is invalid.
    """
    load_dotenv()

    values = {
        key: value
        for key, value in load_global_config().items()
        if key in HookSettings.model_fields
    }
    values.update(_env_overrides())

    try:
        return HookSettings(**values)
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid configuration: {e}")


def set_config_value(key: str, value: str) -> Any:
    """Validate and persist a single setting in config.yaml.

    Args:
        key: One of SETTABLE_KEYS.
        value: The raw value as typed by the user.

    Returns:
        The normalized value that was saved.

    Raises:
        GlobalConfigError: If the key is unknown or the value is invalid.
    """
    if key not in SETTABLE_KEYS:
        raise GlobalConfigError(
            f"Unknown setting '{key}'. Valid settings: {', '.join(SETTABLE_KEYS)}"
        )

    config = load_global_config()
    try:
        validated = HookSettings(**{key: value})
    except ValidationError as e:
        raise GlobalConfigError(f"Invalid value for {key}: {e.errors()[0]['msg']}")

    normalized = getattr(validated, key)
    config[key] = normalized
    save_global_config(config)
    return normalized
