"""OCPP 1.6 entity types."""

from .domain import ChargingSchedule, ChargingSchedulePeriod

__all__ = ["ChargingSchedule", "ChargingSchedulePeriod"]
