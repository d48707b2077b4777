"""Configuration and error code mapping for the form validator."""

from __future__ import annotations

from formvalidator.config.settings import ValidatorConfig, load_config

__all__ = ["ValidatorConfig", "load_config"]
