"""OCPP 2.0.1 entity types."""

from .domain import EVSE, Component, CustomData

__all__ = ["Component", "CustomData", "EVSE"]
