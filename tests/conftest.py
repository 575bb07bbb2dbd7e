"""Shared pytest fixtures for the OCPP data model tests."""

from __future__ import annotations

import pytest

from ocpp_model.v16 import ChargingSchedule, ChargingSchedulePeriod
from ocpp_model.v201 import EVSE, Component, CustomData


@pytest.fixture
def period() -> ChargingSchedulePeriod:
    return ChargingSchedulePeriod(start_period=0, limit=32.0)


@pytest.fixture
def schedule() -> ChargingSchedule:
    return ChargingSchedule(
        "A",
        [
            ChargingSchedulePeriod(start_period=0, limit=32.0),
            ChargingSchedulePeriod(start_period=3600, limit=16.0, number_phases=3),
        ],
    )


@pytest.fixture
def component() -> Component:
    return Component("Inverter")


@pytest.fixture
def full_component() -> Component:
    return (
        Component("Inverter")
        .with_instance("left")
        .with_evse(EVSE(1).with_connector_id(2))
        .with_custom_data(CustomData("com.example"))
    )
