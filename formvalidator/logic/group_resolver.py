"""Validation group resolution for form nodes.

Collapses a node's effective GroupSpec into concrete groups:

- a clicked submit button with its own groups wins outright
- otherwise the node's own spec, else the nearest ancestor's
- otherwise the configured default group

Callback and method variants are invoked with the node under validation and
must return group names or a GroupSequence. Resolution has no side effects.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from formvalidator.logic.errors import InvalidValidationGroupsError
from formvalidator.logic.execution_context import ResolvedGroups
from formvalidator.models.form_node import FormNode, SubmitButton
from formvalidator.models.group_spec import (
    GroupCallback,
    GroupMethod,
    GroupSequence,
    GroupSpec,
    StaticGroups,
)

logger = logging.getLogger(__name__)

DEFAULT_GROUP = "Default"


def find_clicked_button(node: FormNode) -> Optional[SubmitButton]:
    """Return the clicked button recorded on the node or its nearest ancestor."""
    for current in node.iter_lineage():
        if current.clicked_button is not None:
            return current.clicked_button
    return None


def effective_group_spec(node: FormNode, default_group: str = DEFAULT_GROUP) -> GroupSpec:
    button = find_clicked_button(node)
    if button is not None and button.validation_groups is not None:
        return button.validation_groups
    for current in node.iter_lineage():
        if current.validation_groups is not None:
            return current.validation_groups
    return StaticGroups.of(default_group)


def _coerce_result(result: Any, spec: GroupSpec) -> ResolvedGroups:
    if isinstance(result, (StaticGroups, GroupSequence)):
        return result
    if isinstance(result, str):
        return StaticGroups.of(result)
    if isinstance(result, (list, tuple)) and all(isinstance(g, str) for g in result):
        return StaticGroups(groups=tuple(result))
    raise InvalidValidationGroupsError(
        f"{spec.kind} validation groups must return group names or a GroupSequence, "
        f"got {type(result).__name__}"
    )


def resolve_group_spec(spec: GroupSpec, node: FormNode) -> ResolvedGroups:
    if isinstance(spec, (StaticGroups, GroupSequence)):
        return spec
    if isinstance(spec, GroupCallback):
        return _coerce_result(spec.func(node), spec)
    if isinstance(spec, GroupMethod):
        method = getattr(spec.receiver, spec.method, None)
        if not callable(method):
            raise InvalidValidationGroupsError(
                f"{type(spec.receiver).__name__} has no callable {spec.method!r}"
            )
        return _coerce_result(method(node), spec)
    raise InvalidValidationGroupsError(f"unknown validation groups spec {spec!r}")


def resolve_validation_groups(node: FormNode, default_group: str = DEFAULT_GROUP) -> ResolvedGroups:
    """Return the groups the node's data is validated in."""
    groups = resolve_group_spec(effective_group_spec(node, default_group), node)
    logger.debug("groups_resolved node=%s kind=%s groups=%s", node.name, groups.kind, list(groups.groups))
    return groups


class GroupResolver:
    """Injectable wrapper around `resolve_validation_groups`."""

    def __init__(self, default_group: str = DEFAULT_GROUP) -> None:
        self.default_group = default_group

    def resolve(self, node: FormNode) -> ResolvedGroups:
        return resolve_validation_groups(node, self.default_group)


__all__ = [
    "DEFAULT_GROUP",
    "GroupResolver",
    "effective_group_spec",
    "find_clicked_button",
    "resolve_group_spec",
    "resolve_validation_groups",
]
