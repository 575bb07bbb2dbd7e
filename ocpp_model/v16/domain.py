"""OCPP 1.6 smart charging types.

These are the building blocks of a ``SetChargingProfile`` request.  Their
required fields default to ``None`` so a deserializer can build a partially
received schedule and ask ``validate()`` afterwards; assigning ``None`` to
one of them is still rejected.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional, Union

from ocpp.v16.enums import ChargingRateUnitType
from pydantic import Field

from ..entity import Entity
from ..types import NonNegativeFloat, NonNegativeInt, NumberOfPhases


class ChargingSchedulePeriod(Entity):
    """One interval of a charging schedule.

    ``start_period`` is the offset in seconds from the start of the
    schedule and ``limit`` the power (W) or current (A) cap that applies
    from then on.
    """

    start_period: NonNegativeInt = None
    limit: float = None
    number_phases: Optional[NumberOfPhases] = None


class ChargingSchedule(Entity):
    """A limit profile over time, made of one or more periods."""

    duration: Optional[NonNegativeInt] = None
    start_schedule: Optional[datetime] = None
    # wire values ("A", "W") are accepted as well as enum members
    charging_rate_unit: ChargingRateUnitType = Field(default=None, strict=False)
    charging_schedule_period: List[ChargingSchedulePeriod] = Field(default=None, min_length=1)
    min_charging_rate: Optional[NonNegativeFloat] = None

    def __init__(
        self,
        charging_rate_unit: Optional[Union[ChargingRateUnitType, str]] = None,
        charging_schedule_period: Optional[List[ChargingSchedulePeriod]] = None,
        **data: Any,
    ) -> None:
        if charging_rate_unit is not None:
            data["charging_rate_unit"] = charging_rate_unit
        if charging_schedule_period is not None:
            data["charging_schedule_period"] = charging_schedule_period
        super().__init__(**data)
