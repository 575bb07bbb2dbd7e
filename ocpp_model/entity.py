"""Base model for self-validating protocol entities.

Entities are pydantic models validated on assignment: a rejected value
raises :class:`PropertyConstraintError` and the field keeps its previous
value.  :meth:`Entity.validate` runs the same model validator again over the
current state, so assignment and on-demand checks share one set of rules.
Nested entities are revalidated too, which is what makes ``validate()``
transitive.
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    Callable,
    Iterable,
    List,
    Protocol,
    Tuple,
    TypeVar,
    runtime_checkable,
)

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import InvalidEntityError, PropertyConstraintError
from .report import ValidationReport, Violation, violations_from

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Entity")


@runtime_checkable
class Validatable(Protocol):
    """Anything that can confirm its own well-formedness."""

    def validate(self) -> bool:
        ...


def _fluent_setter(name: str) -> Callable[[E, Any], E]:
    def setter(self: E, value: Any) -> E:
        setattr(self, name, value)
        return self

    setter.__name__ = f"with_{name}"
    setter.__doc__ = f"Set ``{name}`` and return this entity."
    return setter


def _hashable(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(item) for item in value)
    if isinstance(value, dict):
        return frozenset((key, _hashable(item)) for key, item in value.items())
    return value


def _constraint_error(entity: str, exc: ValidationError) -> PropertyConstraintError:
    first = violations_from(exc)[0]
    logger.debug("Rejected %s.%s=%r: %s", entity, first.field, first.value, first.reason)
    return PropertyConstraintError(first.field, first.value, first.reason)


class Entity(BaseModel):
    """A structured record that is part of a protocol message.

    Subclasses are final: once a class declares fields it can't be
    extended, which keeps equality and hashing tied to one concrete type.
    Required fields go through ``__init__``; optional ones are set
    afterwards, directly or via the generated ``with_<field>()`` methods::

        component = Component("Inverter").with_instance("left").with_evse(EVSE(1))

    Assigning an entity to a field stores a validated copy, so the parent
    owns its children outright.
    """

    model_config = ConfigDict(
        # Reject bad values at assignment time, keeping the old value
        validate_assignment=True,
        # No silent coercion: "3" is not an int, True is not a number
        strict=True,
        extra="forbid",
        # OCPP decimals are always finite
        allow_inf_nan=False,
        # Re-check nested entities whenever the parent is validated
        revalidate_instances="always",
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _constraint_error(type(self).__name__, exc) from exc

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        for base in cls.__mro__[1:]:
            if base is not Entity and issubclass(base, Entity) and base.model_fields:
                raise TypeError(f"{base.__name__} is final and can't be subclassed")
        for name in cls.model_fields:
            method = f"with_{name}"
            if method not in vars(cls):
                setattr(cls, method, _fluent_setter(name))

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except ValidationError as exc:
            raise _constraint_error(type(self).__name__, exc) from exc

    def __delattr__(self, name: str) -> None:
        if name in type(self).model_fields:
            raise AttributeError(f"{name} can't be deleted; assign None instead")
        super().__delattr__(name)

    def _values(self) -> Tuple[Any, ...]:
        return tuple(self.__dict__.get(name) for name in type(self).model_fields)

    def violations(self) -> List[Violation]:
        """Collect every violation in the entity graph, innermost paths first."""
        try:
            self.__pydantic_validator__.validate_python(self)
        except ValidationError as exc:
            return violations_from(exc)
        return []

    def validate(self) -> bool:  # type: ignore[override]
        """Return whether every field currently satisfies its constraints.

        Nested entities are validated transitively.  Unset optional fields
        count as valid.  This only reads state.
        """
        return not self.violations()

    def validation_report(self) -> ValidationReport:
        return ValidationReport(entity=type(self).__name__, violations=self.violations())

    def require_valid(self: E) -> E:
        """Return ``self`` if valid, else raise :class:`InvalidEntityError`."""
        report = self.validation_report()
        if report.valid:
            return self
        logger.warning(
            "%s failed validation with %d violation(s): %s",
            type(self).__name__,
            len(report.violations),
            "; ".join(report.messages()),
        )
        raise InvalidEntityError(type(self).__name__, report)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__qualname__,) + _hashable(self._values()))

    def __repr_args__(self) -> Iterable[Tuple[str, Any]]:
        yield from super().__repr_args__()
        yield "is_valid", self.validate()
