"""Exceptions raised by the form validator.

Only malformed validation group configuration is fatal. Transformation
failures are recorded on nodes and reported as violations instead.
"""

from __future__ import annotations


class FormValidatorError(Exception):
    pass


class InvalidValidationGroupsError(FormValidatorError, ValueError):
    """Validation groups option could not be resolved to groups or a sequence."""


class TransformationFailedError(FormValidatorError):
    """Submitted input could not be transformed into the node's data.

    Instances are stored on the node as the violation cause; the validator
    never raises them.
    """


class NodeStateError(FormValidatorError):
    """A binding-time mutator was applied to a node in an invalid state."""


__all__ = [
    "FormValidatorError",
    "InvalidValidationGroupsError",
    "TransformationFailedError",
    "NodeStateError",
]
