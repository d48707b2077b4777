"""Validation group specifications.

A node's `validation_groups` option is stored as one variant of a tagged
union. Resolution dispatches on `kind` only; a plain string is always a
group name and is never looked up as a function.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from formvalidator.logic.errors import InvalidValidationGroupsError


class StaticGroups(BaseModel):
    """Ordered list of group names, used verbatim."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["static"] = "static"
    groups: Tuple[str, ...] = ()

    @classmethod
    def of(cls, *names: str) -> "StaticGroups":
        return cls(groups=tuple(names))

    @property
    def is_empty(self) -> bool:
        return len(self.groups) == 0


class GroupSequence(BaseModel):
    """Groups evaluated in order; a later group only runs if earlier ones pass.

    The ordering semantics belong to the constraint engine. The validator
    only forwards the sequence.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["sequence"] = "sequence"
    groups: Tuple[str, ...] = ()

    @classmethod
    def of(cls, *names: str) -> "GroupSequence":
        return cls(groups=tuple(names))


class GroupCallback(BaseModel):
    """Callable invoked with the node under validation."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["callback"] = "callback"
    func: Callable[..., Any]


class GroupMethod(BaseModel):
    """Method looked up on `receiver` by attribute and invoked with the node."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["method"] = "method"
    receiver: Any
    method: str


GroupSpec = Annotated[
    Union[StaticGroups, GroupSequence, GroupCallback, GroupMethod],
    Field(discriminator="kind"),
]

_VARIANTS = (StaticGroups, GroupSequence, GroupCallback, GroupMethod)


def coerce_group_spec(value: Any) -> Optional[GroupSpec]:
    """Convert a raw `validation_groups` option value into a GroupSpec variant.

    - None stays None (inherit from the parent chain)
    - a string becomes a single-element StaticGroups
    - a list/tuple of strings becomes StaticGroups, order preserved
    - a 2-tuple of (non-string receiver, method name) becomes GroupMethod
    - any other callable becomes GroupCallback
    """
    if value is None:
        return None
    if isinstance(value, _VARIANTS):
        return value
    if isinstance(value, str):
        return StaticGroups.of(value)
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and not isinstance(value[0], str)
        and isinstance(value[1], str)
    ):
        return GroupMethod(receiver=value[0], method=value[1])
    if isinstance(value, (list, tuple)):
        if all(isinstance(g, str) for g in value):
            return StaticGroups(groups=tuple(value))
        raise InvalidValidationGroupsError(
            f"validation groups must be strings, got {[type(g).__name__ for g in value]}"
        )
    if callable(value):
        return GroupCallback(func=value)
    raise InvalidValidationGroupsError(
        f"unsupported validation groups option of type {type(value).__name__}"
    )


__all__ = [
    "StaticGroups",
    "GroupSequence",
    "GroupCallback",
    "GroupMethod",
    "GroupSpec",
    "coerce_group_spec",
]
