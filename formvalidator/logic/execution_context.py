"""Shared validation context and the constraint engine port.

The constraint engine is external. The validator reaches it only through
`ConstraintValidationPort`; both the engine and the validator append
violations to the same ordered list held by `ExecutionContext`.
"""

from __future__ import annotations

from typing import Any, List, Protocol, Union, runtime_checkable

from formvalidator.models.group_spec import GroupSequence, StaticGroups
from formvalidator.models.violation import Violation

ResolvedGroups = Union[StaticGroups, GroupSequence]


@runtime_checkable
class ConstraintValidationPort(Protocol):
    def validate_implicit(self, data: Any, groups: ResolvedGroups) -> None:
        """Validate `data` against its own mapped constraints in `groups`."""

    def validate_explicit(self, data: Any, constraint: Any, group: str) -> None:
        """Validate `data` against a single constraint in one group."""


class ExecutionContext:
    def __init__(self, port: ConstraintValidationPort) -> None:
        self.port = port
        self.violations: List[Violation] = []

    def add_violation(self, violation: Violation) -> Violation:
        self.violations.append(violation)
        return violation


__all__ = ["ConstraintValidationPort", "ExecutionContext", "ResolvedGroups"]
