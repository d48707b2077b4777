"""Configuration utilities for the form validator.

This module loads validator defaults with the following rules:
- Primary source: `formvalidator_config.json` at the working directory root.
- Overrides: environment variables, then optional text files under `config/`.
- Validation: Pydantic models enforce value constraints.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator


CONFIG_DIR = Path("config")
ROOT_CONFIG = Path("formvalidator_config.json")
logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        # Recoverable: an unreadable override falls through to the next source
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


class ValidatorConfig(BaseModel):
    default_group: str = Field(default="Default")
    invalid_message: str = Field(default="This value is not valid.")
    extra_fields_message: str = Field(default="This form should not contain extra fields.")
    allow_extra_fields: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    @field_validator("default_group")
    @classmethod
    def group_must_be_non_empty(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("default_group must be a non-empty string")
        return v

    @field_validator("log_level")
    @classmethod
    def level_must_be_allowed(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def load_config() -> ValidatorConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables
    2) Text files in `config/` (optional)
    3) formvalidator_config.json at project root (primary base)
    4) Model defaults
    """

    base = _read_json_file(ROOT_CONFIG)
    defaults = ValidatorConfig.model_fields

    def _base(key: str) -> Optional[str]:
        if not isinstance(base, dict) or base.get(key) is None:
            return None
        value = base[key]
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def _pick(env_key: str, file_key: str, field: str) -> str:
        value = _env(env_key) or _read_config_file(file_key) or _base(field)
        if value is None:
            default = defaults[field].default
            if isinstance(default, bool):
                return "true" if default else "false"
            return str(default)
        return value

    allow_extra_text = _pick("FORMVALIDATOR_ALLOW_EXTRA_FIELDS", "allow_extra_fields", "allow_extra_fields")

    try:
        return ValidatorConfig(
            default_group=_pick("FORMVALIDATOR_DEFAULT_GROUP", "default_group", "default_group").strip(),
            invalid_message=_pick("FORMVALIDATOR_INVALID_MESSAGE", "invalid_message", "invalid_message"),
            extra_fields_message=_pick(
                "FORMVALIDATOR_EXTRA_FIELDS_MESSAGE", "extra_fields_message", "extra_fields_message"
            ),
            allow_extra_fields=str(allow_extra_text).strip().lower() == "true",
            log_level=_pick("FORMVALIDATOR_LOG_LEVEL", "log_level", "log_level"),
        )
    except PydanticValidationError as e:
        logger.error("Invalid validator configuration: %s", e)
        raise


__all__ = [
    "ValidatorConfig",
    "load_config",
]
