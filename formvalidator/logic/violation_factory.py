"""Construction of violations the form validator raises itself.

Provides helpers returning `Violation` records with fixed codes so the
validator does not embed codes or placeholder names.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable
import logging

from formvalidator.config.error_mapping import (
    EXTRA_FIELDS_PARAMETER,
    NO_SUCH_FIELD_ERROR,
    NOT_SYNCHRONIZED_ERROR,
    VALUE_PARAMETER,
)
from formvalidator.models.form_node import FormNode, is_scalar
from formvalidator.models.violation import Violation


logger = logging.getLogger(__name__)


def render_value(value: Any) -> str:
    """Render submitted input for the `{{ value }}` placeholder."""
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if is_scalar(value):
        return str(value)
    return type(value).__name__


def render_extra_fields(names: Iterable[str]) -> str:
    """Render names as `"a", "b", "c"`, preserving order."""
    return ", ".join(f'"{name}"' for name in names)


def violation_not_synchronized(node: FormNode, constraint: Any) -> Violation:
    """Return the violation for a node whose input failed to transform."""
    parameters: Dict[str, str] = {VALUE_PARAMETER: render_value(node.view_data)}
    parameters.update(node.invalid_message_parameters)
    violation = Violation(
        message_template=node.invalid_message,
        parameters=parameters,
        invalid_value=node.view_data,
        code=NOT_SYNCHRONIZED_ERROR,
        cause=node.transformation_failure,
        constraint=constraint,
    )
    logger.info("violation.build node=%s", node.name, extra={"code": violation.code})
    return violation


def violation_extra_fields(node: FormNode, constraint: Any) -> Violation:
    """Return the violation for a compound node that received unknown fields."""
    violation = Violation(
        message_template=node.extra_fields_message,
        parameters={EXTRA_FIELDS_PARAMETER: render_extra_fields(node.submitted_extra_field_names)},
        invalid_value=node.extra_data,
        code=NO_SUCH_FIELD_ERROR,
        constraint=constraint,
    )
    logger.info("violation.build node=%s", node.name, extra={"code": violation.code})
    return violation


__all__ = [
    "render_value",
    "render_extra_fields",
    "violation_not_synchronized",
    "violation_extra_fields",
]
