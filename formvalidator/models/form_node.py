"""Form tree model handed to the validator.

Nodes are built once per submission, mutated by the external binder through
the `record_*` methods, then treated as read-only during validation. Parent
links are weak references used for navigation only; the parent owns its
children.
"""

from __future__ import annotations

import weakref
from decimal import Decimal
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

from formvalidator.config import ValidatorConfig, load_config
from formvalidator.logic.errors import NodeStateError
from formvalidator.models.constraints import ExplicitConstraint
from formvalidator.models.group_spec import GroupSpec, coerce_group_spec


_UNSET = object()

SCALAR_TYPES = (str, bytes, bytearray, bool, int, float, complex, Decimal)


def is_scalar(value: Any) -> bool:
    """Scalars carry no nested structure for the constraint engine to walk."""
    return value is None or isinstance(value, SCALAR_TYPES)


class FormNode:
    """One field or fieldset of a submitted form."""

    def __init__(
        self,
        name: str,
        *,
        data: Any = None,
        compound: bool = False,
        cascade: bool = False,
        validation_groups: Any = None,
        constraints: Iterable[ExplicitConstraint] = (),
        invalid_message: Optional[str] = None,
        invalid_message_parameters: Optional[Mapping[str, Any]] = None,
        extra_fields_message: Optional[str] = None,
        allow_extra_fields: Optional[bool] = None,
        config: Optional[ValidatorConfig] = None,
    ) -> None:
        if None in (invalid_message, extra_fields_message, allow_extra_fields) and config is None:
            config = load_config()
        self.name = name
        self.data = data
        self.is_compound = bool(compound)
        self.is_cascaded = bool(cascade)
        self.validation_groups: Optional[GroupSpec] = coerce_group_spec(validation_groups)
        self.explicit_constraints: tuple[ExplicitConstraint, ...] = tuple(constraints)
        self.invalid_message = invalid_message if invalid_message is not None else config.invalid_message
        # Message parameters are rendered as text
        self.invalid_message_parameters: Dict[str, str] = {
            str(key): str(value) for key, value in (invalid_message_parameters or {}).items()
        }
        self.extra_fields_message = (
            extra_fields_message if extra_fields_message is not None else config.extra_fields_message
        )
        self.allow_extra_fields = (
            allow_extra_fields if allow_extra_fields is not None else config.allow_extra_fields
        )
        self.children: Dict[str, FormNode] = {}
        self._parent: Optional[weakref.ReferenceType] = None
        self._view_data: Any = _UNSET
        self._transformation_failure: Optional[BaseException] = None
        self._extra_data: Optional[Dict[str, Any]] = None
        self._clicked_button: Optional[SubmitButton] = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    # -----------------------------
    # Tree navigation
    # -----------------------------

    @property
    def parent(self) -> Optional["FormNode"]:
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def add(self, child: "FormNode") -> "FormNode":
        """Attach `child` under this node and return self for chaining."""
        if not self.is_compound:
            raise NodeStateError(f"cannot add {child.name!r} to non-compound node {self.name!r}")
        if child.parent is not None:
            raise NodeStateError(f"{child.name!r} already belongs to {child.parent.name!r}")
        if child.name in self.children:
            raise NodeStateError(f"{self.name!r} already has a child named {child.name!r}")
        child._parent = weakref.ref(self)
        self.children[child.name] = child
        return self

    def iter_lineage(self) -> Iterator["FormNode"]:
        """Yield this node, then each ancestor up to the root."""
        node: Optional[FormNode] = self
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator["FormNode"]:
        """Depth-first, parent before children, children in insertion order."""
        yield self
        for child in self.children.values():
            yield from child.walk()

    # -----------------------------
    # Binding state (set once before validation)
    # -----------------------------

    @property
    def view_data(self) -> Any:
        """Raw submitted input, or the bound data if nothing was submitted."""
        return self.data if self._view_data is _UNSET else self._view_data

    @property
    def transformation_failure(self) -> Optional[BaseException]:
        return self._transformation_failure

    @property
    def is_synchronized(self) -> bool:
        return self._transformation_failure is None

    @property
    def extra_data(self) -> Dict[str, Any]:
        return dict(self._extra_data or {})

    @property
    def submitted_extra_field_names(self) -> List[str]:
        return list(self._extra_data or {})

    @property
    def clicked_button(self) -> Optional["SubmitButton"]:
        return self._clicked_button

    def record_view_data(self, view_data: Any) -> None:
        if self._view_data is not _UNSET:
            raise NodeStateError(f"view data already recorded for {self.name!r}")
        self._view_data = view_data

    def record_transformation_failure(self, failure: BaseException, view_data: Any = _UNSET) -> None:
        """Mark the node as not synchronized; `failure` becomes the violation cause."""
        if self._transformation_failure is not None:
            raise NodeStateError(f"transformation failure already recorded for {self.name!r}")
        if view_data is not _UNSET:
            self.record_view_data(view_data)
        self._transformation_failure = failure

    def record_extra_data(self, extra: Mapping[str, Any]) -> None:
        """Store submitted keys that have no matching child, in submission order."""
        if not self.is_compound:
            raise NodeStateError(f"extra data can only be recorded on compound nodes, not {self.name!r}")
        if self._extra_data is not None:
            raise NodeStateError(f"extra data already recorded for {self.name!r}")
        self._extra_data = dict(extra)

    def record_clicked_button(self, button: "SubmitButton") -> None:
        if self._clicked_button is not None:
            raise NodeStateError(f"clicked button already recorded for {self.name!r}")
        self._clicked_button = button


class SubmitButton(FormNode):
    """Submit button whose own validation groups override the form's when clicked."""

    def __init__(self, name: str, *, validation_groups: Any = None) -> None:
        super().__init__(
            name,
            validation_groups=validation_groups,
            invalid_message="",
            extra_fields_message="",
            allow_extra_fields=True,
        )


def build_constraints(pairs: Sequence[tuple]) -> tuple[ExplicitConstraint, ...]:
    """Build ExplicitConstraint entries from `(constraint, group)` pairs."""
    return tuple(ExplicitConstraint(constraint=c, group=g) for c, g in pairs)


__all__ = ["FormNode", "SubmitButton", "build_constraints", "is_scalar"]
