"""Recording constraint port for dry runs and tests.

Buffers every port call in order and optionally forwards it to a real
constraint engine, so the dispatch decisions for a form tree can be
inspected without evaluating any constraint.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple
import logging

from formvalidator.logic.execution_context import ConstraintValidationPort, ResolvedGroups

logger = logging.getLogger(__name__)

IMPLICIT = "implicit"
EXPLICIT = "explicit"


class RecordingPort:
    def __init__(self, delegate: Optional[ConstraintValidationPort] = None) -> None:
        self.delegate = delegate
        self.calls: List[Tuple[Any, ...]] = []

    def validate_implicit(self, data: Any, groups: ResolvedGroups) -> None:
        logger.info("port_call kind=%s groups=%s", IMPLICIT, list(groups.groups))
        self.calls.append((IMPLICIT, data, groups))
        if self.delegate is not None:
            self.delegate.validate_implicit(data, groups)

    def validate_explicit(self, data: Any, constraint: Any, group: str) -> None:
        logger.info("port_call kind=%s constraint=%s group=%s", EXPLICIT, type(constraint).__name__, group)
        self.calls.append((EXPLICIT, data, constraint, group))
        if self.delegate is not None:
            self.delegate.validate_explicit(data, constraint, group)

    def get_calls(self, clear: bool = True) -> List[Tuple[Any, ...]]:
        """Return buffered calls; optionally clear the buffer."""
        calls = list(self.calls)
        if clear:
            self.calls.clear()
        return calls


__all__ = ["EXPLICIT", "IMPLICIT", "RecordingPort"]
