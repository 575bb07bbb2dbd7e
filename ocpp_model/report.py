"""Validation results that can be logged or returned by an API layer."""

from __future__ import annotations

from typing import Any, List, Mapping, Sequence, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_serializer
from pydantic import Field as PydanticField

_JSON_SCALARS = (str, int, float, bool, type(None))
_INPUT_PREFIX = "Input should be "


class Violation(BaseModel):
    """A single field that failed its constraints."""

    model_config = ConfigDict(frozen=True)

    field: str
    value: Any = None
    reason: str

    @property
    def message(self) -> str:
        return f"{self.field} {self.reason}"

    @field_serializer("value", when_used="json")
    def _serialize_value(self, value: Any) -> Any:
        return value if isinstance(value, _JSON_SCALARS) else repr(value)


class ValidationReport(BaseModel):
    """Every violation found in an entity graph, in field declaration order."""

    model_config = ConfigDict(frozen=True)

    entity: str
    violations: List[Violation] = PydanticField(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.violations

    def messages(self) -> List[str]:
        return [violation.message for violation in self.violations]


def field_path(loc: Sequence[Union[int, str]]) -> str:
    """Render a pydantic error location as ``evse.id`` / ``periods[1].limit``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


def reason_for(error: Mapping[str, Any]) -> str:
    """Phrase a pydantic error so it reads after the field name."""
    ctx = error.get("ctx") or {}
    value = error.get("input")
    kind = error["type"]
    # None only fails on fields that don't admit absence
    if kind == "missing" or value is None:
        return "is required"
    if kind == "string_too_long":
        return f"must be at most {ctx['max_length']} characters (got {len(value)})"
    if kind == "string_too_short":
        return f"must be at least {ctx['min_length']} characters (got {len(value)})"
    if kind == "too_short":
        return f"must contain at least {ctx['min_length']} item(s) (got {ctx['actual_length']})"
    if kind == "too_long":
        return f"must contain at most {ctx['max_length']} item(s) (got {ctx['actual_length']})"
    msg = error["msg"]
    if msg.startswith(_INPUT_PREFIX):
        return "must be " + msg[len(_INPUT_PREFIX):]
    return msg[:1].lower() + msg[1:]


def violations_from(exc: ValidationError) -> List[Violation]:
    found = []
    for error in exc.errors():
        # a missing field reports the whole parent mapping as its input
        value = None if error["type"] == "missing" else error.get("input")
        found.append(Violation(field=field_path(error["loc"]), value=value, reason=reason_for(error)))
    return found
