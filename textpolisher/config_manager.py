"""Configuration manager for persistent settings."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional, List, Dict, Callable, Tuple

from .logger import get_logger
from .openai_corrector import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    DEFAULT_PRESET,
    PROMPT_PRESETS,
    RemoteSettings,
)

logger = get_logger(__name__)

API_KEY_ENV_VAR = "OPENAI_API_KEY"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# Configuration validation schema
CONFIG_SCHEMA: Dict[str, Tuple[Callable[[Any], bool], Callable[[Any], bool], str]] = {
    "api_key": (lambda x: isinstance(x, str), lambda x: True, "Must be a string"),
    "model_name": (lambda x: isinstance(x, str), lambda x: len(x) > 0, "Must be a non-empty string"),
    "prompt_preset": (lambda x: isinstance(x, str), lambda x: x in PROMPT_PRESETS, "Must be a known preset"),
    "temperature": (_is_number, lambda x: 0.0 <= x <= 2.0, "Must be between 0.0 and 2.0"),
    "max_tokens": (lambda x: isinstance(x, int) and not isinstance(x, bool), lambda x: 1 <= x <= 16384, "Must be between 1 and 16384"),
    "api_base_url": (lambda x: isinstance(x, str), lambda x: len(x) > 0, "Must be a non-empty string"),
    "connect_timeout": (_is_number, lambda x: x > 0, "Must be a positive number"),
    "read_timeout": (_is_number, lambda x: x > 0, "Must be a positive number"),
}


def validate_config_value(key: str, value: Any) -> Tuple[bool, str]:
    """Validate a single configuration value.

    Args:
        key: Configuration key
        value: Value to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if key not in CONFIG_SCHEMA:
        return True, ""  # Unknown keys are allowed (for forward compatibility)

    type_check, validator, error_msg = CONFIG_SCHEMA[key]

    if not type_check(value):
        return False, f"{key}: {error_msg} (got {type(value).__name__})"

    if not validator(value):
        return False, f"{key}: {error_msg} (value: {value})"

    return True, ""


def validate_config(config: Dict[str, Any]) -> Tuple[bool, List[str]]:
    """Validate entire configuration dictionary.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    for key, value in config.items():
        is_valid, error_msg = validate_config_value(key, value)
        if not is_valid:
            errors.append(error_msg)

    return len(errors) == 0, errors


class ConfigManager:
    """
    Manages application configuration with JSON persistence.

    The API key lives here as well; an empty stored key falls back to the
    OPENAI_API_KEY environment variable when read.
    """

    def __init__(self, config_file: str = "textpolisher_config.json", config_dir: Optional[Path] = None):
        """Initialize config manager."""
        self.config_dir = Path(config_dir) if config_dir else Path.home() / ".textpolisher"
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file = self.config_dir / config_file
        self.config = self._load_config()

    def _load_config(self) -> dict:
        """Load configuration from file."""
        data = None
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load config: {e}")

        if not isinstance(data, dict):
            return self.get_default_config()

        # Ensure new schema keys exist
        merged = self.get_default_config()
        merged.update(data)
        return merged

    def load_config(self) -> None:
        """Reload configuration from disk."""
        self.config = self._load_config()

    @staticmethod
    def get_default_config() -> dict:
        """Return default configuration."""
        return {
            "api_key": "",
            "model_name": DEFAULT_MODEL,
            "prompt_preset": DEFAULT_PRESET,
            "temperature": 0.3,
            "max_tokens": 2000,
            "api_base_url": DEFAULT_BASE_URL,
            "connect_timeout": 10.0,
            "read_timeout": 30.0,
        }

    def save(self) -> bool:
        """Save current configuration to file with validation."""
        is_valid, errors = validate_config(self.config)
        if not is_valid:
            logger.warning(f"Config validation errors: {'; '.join(errors)}")
            logger.warning("Saving anyway, but some values may be invalid")

        try:
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=2)
            return True
        except OSError as e:
            logger.error(f"Failed to save config: {e}")
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set configuration value and save."""
        self.config[key] = value
        self.save()

    def _get_valid(self, key: str) -> Any:
        """Return the stored value, or the default when it fails validation."""
        value = self.get(key)
        is_valid, error_msg = validate_config_value(key, value)
        if not is_valid:
            logger.warning(f"Ignoring invalid setting: {error_msg}")
            return self.get_default_config()[key]
        return value

    def get_api_key(self) -> Optional[str]:
        """Get saved API key, falling back to the environment."""
        key = self.get("api_key", "")
        if isinstance(key, str) and key.strip():
            return key
        return os.getenv(API_KEY_ENV_VAR) or None

    def set_api_key(self, api_key: str) -> None:
        """Save API key."""
        self.set("api_key", api_key.strip())

    def clear_api_key(self) -> None:
        """Remove the saved API key."""
        self.set("api_key", "")

    def has_api_key(self) -> bool:
        """Check whether a non-blank API key is available."""
        key = self.get_api_key()
        return key is not None and bool(key.strip())

    def get_model_name(self) -> str:
        """Get saved model name."""
        return self._get_valid("model_name")

    def set_model_name(self, model_name: str) -> None:
        """Save model name."""
        self.set("model_name", model_name)

    def get_prompt_preset(self) -> str:
        """Get the selected correction prompt preset."""
        return self._get_valid("prompt_preset")

    def set_prompt_preset(self, preset: str) -> None:
        """Save prompt preset; unknown names are rejected."""
        key = preset.strip().lower()
        if key not in PROMPT_PRESETS:
            raise ValueError(f"Unknown prompt preset: {preset}")
        self.set("prompt_preset", key)

    def get_temperature(self) -> float:
        return float(self._get_valid("temperature"))

    def set_temperature(self, temperature: float) -> None:
        """Save sampling temperature, clamped to 0.0-2.0."""
        self.set("temperature", max(0.0, min(2.0, round(float(temperature), 2))))

    def get_max_tokens(self) -> int:
        return int(self._get_valid("max_tokens"))

    def set_max_tokens(self, max_tokens: int) -> None:
        """Save the output token bound, clamped to 1-16384."""
        self.set("max_tokens", max(1, min(16384, int(max_tokens))))

    def get_remote_settings(self) -> RemoteSettings:
        """Build the chat-completion settings from the stored values."""
        return RemoteSettings(
            model_name=self.get_model_name(),
            max_tokens=self.get_max_tokens(),
            temperature=self.get_temperature(),
            base_url=self._get_valid("api_base_url"),
            connect_timeout=float(self._get_valid("connect_timeout")),
            read_timeout=float(self._get_valid("read_timeout")),
        )

    def reset_to_defaults(self) -> bool:
        """Reset all settings to default values, keeping the API key."""
        api_key = self.get("api_key", "")
        self.config = self.get_default_config()
        self.config["api_key"] = api_key
        success = self.save()
        if success:
            logger.info("Configuration reset to defaults")
        return success

    def delete_config_file(self) -> bool:
        """Delete the configuration file completely."""
        try:
            if self.config_file.exists():
                self.config_file.unlink()
                logger.info("Configuration file deleted")
                return True
            return False
        except OSError as e:
            logger.error(f"Failed to delete config file: {e}")
            return False
