"""Constraint references attached to form nodes."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from formvalidator.config.error_mapping import NO_SUCH_FIELD_ERROR, NOT_SYNCHRONIZED_ERROR


class FormConstraint:
    """Form-level constraint that synthesized violations are attributed to.

    Compared by identity; each validation pass passes its own instance.
    """

    NOT_SYNCHRONIZED_ERROR = NOT_SYNCHRONIZED_ERROR
    NO_SUCH_FIELD_ERROR = NO_SUCH_FIELD_ERROR

    def __repr__(self) -> str:
        return f"<FormConstraint at {id(self):#x}>"


class ExplicitConstraint(BaseModel):
    """A constraint declared directly on a node, validated in one group."""

    model_config = ConfigDict(frozen=True)

    constraint: Any
    group: str = "Default"


__all__ = ["FormConstraint", "ExplicitConstraint"]
