"""Validation group resolution and dispatch for submitted form trees.

Business logic lives in `formvalidator/logic/`, the tree and value types in
`formvalidator/models/`, and defaults plus error codes in
`formvalidator/config/`.
"""

from __future__ import annotations

from formvalidator.logic.execution_context import ConstraintValidationPort, ExecutionContext
from formvalidator.logic.form_validator import FormGroupValidator
from formvalidator.logic.group_resolver import GroupResolver, resolve_validation_groups
from formvalidator.logic.recording_port import RecordingPort
from formvalidator.models.constraints import ExplicitConstraint, FormConstraint
from formvalidator.models.form_node import FormNode, SubmitButton
from formvalidator.models.group_spec import GroupCallback, GroupMethod, GroupSequence, StaticGroups
from formvalidator.models.violation import Violation

__all__ = [
    "ConstraintValidationPort",
    "ExecutionContext",
    "ExplicitConstraint",
    "FormConstraint",
    "FormGroupValidator",
    "FormNode",
    "GroupCallback",
    "GroupMethod",
    "GroupResolver",
    "GroupSequence",
    "RecordingPort",
    "StaticGroups",
    "SubmitButton",
    "Violation",
    "resolve_validation_groups",
]
