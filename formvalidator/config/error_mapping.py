"""Central error code mapping for synthesized form violations.

Single source of truth for the codes and message placeholders attached to
violations that the form validator builds itself. Logic modules must import
from here instead of hardcoding strings.
"""

from __future__ import annotations

# Raw submitted input could not be transformed into the node's data
NOT_SYNCHRONIZED_ERROR = "1dafa156-89e1-4736-b832-419c2e501fca"

# Compound node received submitted keys it has no child for
NO_SUCH_FIELD_ERROR = "6e5212ed-a197-4339-99aa-5654798a4854"

VALUE_PARAMETER = "{{ value }}"
EXTRA_FIELDS_PARAMETER = "{{ extra_fields }}"

VIOLATION_CODE_MAP = {
    "not_synchronized": {"code": NOT_SYNCHRONIZED_ERROR, "parameter": VALUE_PARAMETER},
    "no_such_field": {"code": NO_SUCH_FIELD_ERROR, "parameter": EXTRA_FIELDS_PARAMETER},
}

__all__ = [
    "NOT_SYNCHRONIZED_ERROR",
    "NO_SUCH_FIELD_ERROR",
    "VALUE_PARAMETER",
    "EXTRA_FIELDS_PARAMETER",
    "VIOLATION_CODE_MAP",
]
