"""Violation record produced for form nodes."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    message_template: str
    parameters: Dict[str, str] = Field(default_factory=dict)
    invalid_value: Any = None
    code: Optional[str] = None
    # Exception or failure object that triggered the violation, if any
    cause: Any = None
    constraint: Any = None


__all__ = ["Violation"]
