"""Form-level validation dispatch.

For one node, decides which calls go to the constraint engine port and which
violations are synthesized directly:

1. Nodes holding scalar data that do not cascade make no port calls.
2. Unsynchronized nodes make no port calls and report NOT_SYNCHRONIZED,
   unless a direct child failed too (the child reports instead).
3. Synchronized nodes have their data validated in the resolved groups when
   the node is the root or cascades, then each explicit constraint in its own
   group, in declaration order.
4. Compound nodes that received unknown fields report NO_SUCH_FIELD unless
   extra fields are allowed.

Synthesized violations are attributed to the form constraint passed in, never
to a child's constraint.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from formvalidator.config import ValidatorConfig, load_config
from formvalidator.logic.execution_context import ExecutionContext, ResolvedGroups
from formvalidator.logic.group_resolver import GroupResolver
from formvalidator.logic.violation_factory import violation_extra_fields, violation_not_synchronized
from formvalidator.models.form_node import FormNode, SubmitButton, is_scalar
from formvalidator.models.group_spec import GroupSequence

logger = logging.getLogger(__name__)


def allows_dispatch(node: FormNode) -> bool:
    """Scalar data is only sent to the port when the node cascades."""
    return node.is_cascaded or not is_scalar(node.data)


def allows_data_walking(node: FormNode) -> bool:
    """The node's own data is walked only at the root or when the node cascades."""
    if is_scalar(node.data):
        return False
    return node.is_root or node.is_cascaded


def has_groups(groups: ResolvedGroups) -> bool:
    if isinstance(groups, GroupSequence):
        return True
    return not groups.is_empty


def children_synchronized(node: FormNode) -> bool:
    return all(child.is_synchronized for child in node.children.values())


class FormGroupValidator:
    def __init__(
        self,
        context: ExecutionContext,
        resolver: Optional[GroupResolver] = None,
        config: Optional[ValidatorConfig] = None,
    ) -> None:
        self.context = context
        if resolver is None:
            cfg = config or load_config()
            resolver = GroupResolver(default_group=cfg.default_group)
        self.resolver = resolver

    def validate(self, node: FormNode, constraint: Any) -> None:
        """Validate one node; violations land in the shared context."""
        if node.is_synchronized:
            self._dispatch(node)
        elif children_synchronized(node):
            self.context.add_violation(violation_not_synchronized(node, constraint))
        else:
            logger.debug("not_synchronized_deferred_to_child node=%s", node.name)

        if node.is_compound and node.submitted_extra_field_names and not node.allow_extra_fields:
            self.context.add_violation(violation_extra_fields(node, constraint))

    def validate_tree(self, root: FormNode, constraint: Any) -> None:
        """Validate every form node under `root`, parents before children."""
        for node in root.walk():
            if isinstance(node, SubmitButton):
                continue
            self.validate(node, constraint)

    def _dispatch(self, node: FormNode) -> None:
        if not allows_dispatch(node):
            logger.debug("dispatch_skipped_scalar node=%s", node.name)
            return

        port = self.context.port
        groups = self.resolver.resolve(node)

        if has_groups(groups) and allows_data_walking(node):
            logger.debug("validate_implicit node=%s groups=%s", node.name, list(groups.groups))
            port.validate_implicit(node.data, groups)

        for explicit in node.explicit_constraints:
            logger.debug("validate_explicit node=%s group=%s", node.name, explicit.group)
            port.validate_explicit(node.data, explicit.constraint, explicit.group)


__all__ = [
    "FormGroupValidator",
    "allows_dispatch",
    "allows_data_walking",
    "children_synchronized",
    "has_groups",
]
