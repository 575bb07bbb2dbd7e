"""Self-validating data model for OCPP messages.

Version specific types live in :mod:`ocpp_model.v16` and
:mod:`ocpp_model.v201`; this package exposes the shared machinery.
"""

from .entity import Entity, Validatable
from .errors import InvalidEntityError, OCPPModelError, PropertyConstraintError
from .report import ValidationReport, Violation

__all__ = [
    "Entity",
    "InvalidEntityError",
    "OCPPModelError",
    "PropertyConstraintError",
    "Validatable",
    "ValidationReport",
    "Violation",
]
