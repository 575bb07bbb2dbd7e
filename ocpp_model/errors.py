"""Error taxonomy for the OCPP data model.

Setters raise :class:`PropertyConstraintError` the moment a value fails its
field's constraints.  An entity that merely fails ``validate()`` is not an
error; only :meth:`Entity.require_valid` turns that into
:class:`InvalidEntityError` for callers that want to stop before sending.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .report import ValidationReport


class OCPPModelError(Exception):
    """Base class for all errors raised by the data model.

    Attributes:
        code: Error code following the ``ocpp:model/...`` pattern
        message: Human-readable error message
        details: Additional error context
    """

    def __init__(
        self, code: str, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to ``{code, message, details}``."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class PropertyConstraintError(OCPPModelError, ValueError):
    """Raised when a value assigned to a field violates its constraints.

    The entity keeps the value it had before the assignment.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            code="ocpp:model/property_constraint",
            message=f"{field} {reason}",
            details={"field": field, "value": repr(value), "reason": reason, **(details or {})},
        )
        self.field = field
        self.value = value
        self.reason = reason


class InvalidEntityError(OCPPModelError):
    """Raised by ``require_valid()`` when an entity is not well-formed."""

    def __init__(self, entity: str, report: "ValidationReport") -> None:
        super().__init__(
            code="ocpp:model/invalid_entity",
            message=f"{entity} is invalid: " + "; ".join(report.messages()),
            details={"entity": entity, "violations": len(report.violations)},
        )
        self.entity = entity
        self.report = report
