"""Constrained field types shared by the OCPP versions."""

from typing import Annotated

from pydantic import Field, NonNegativeFloat, NonNegativeInt, StringConstraints

from .constants import (
    CI_STRING_20,
    CI_STRING_25,
    CI_STRING_36,
    CI_STRING_50,
    CI_STRING_255,
    CI_STRING_500,
    CI_STRING_1000,
    MAX_NUMBER_PHASES,
    MIN_NUMBER_PHASES,
)

CiString20 = Annotated[str, StringConstraints(max_length=CI_STRING_20)]
CiString25 = Annotated[str, StringConstraints(max_length=CI_STRING_25)]
CiString36 = Annotated[str, StringConstraints(max_length=CI_STRING_36)]
CiString50 = Annotated[str, StringConstraints(max_length=CI_STRING_50)]
CiString255 = Annotated[str, StringConstraints(max_length=CI_STRING_255)]
CiString500 = Annotated[str, StringConstraints(max_length=CI_STRING_500)]
CiString1000 = Annotated[str, StringConstraints(max_length=CI_STRING_1000)]

NumberOfPhases = Annotated[int, Field(ge=MIN_NUMBER_PHASES, le=MAX_NUMBER_PHASES)]

__all__ = [
    "CiString20",
    "CiString25",
    "CiString36",
    "CiString50",
    "CiString255",
    "CiString500",
    "CiString1000",
    "NonNegativeFloat",
    "NonNegativeInt",
    "NumberOfPhases",
]
