"""OCPP 2.0.1 device model types.

Unlike the 1.6 types, constructors here take every required field and
reject an invalid one straight away.
"""

from __future__ import annotations

from typing import Any, Optional

from ..entity import Entity
from ..types import CiString50, CiString255, NonNegativeInt


class CustomData(Entity):
    """Vendor specific extension point carried by most 2.0.1 types."""

    vendor_id: CiString255

    def __init__(self, vendor_id: str, **data: Any) -> None:
        super().__init__(vendor_id=vendor_id, **data)


class EVSE(Entity):
    """Electric Vehicle Supply Equipment.

    ``id`` 0 addresses the charging station as a whole.
    """

    custom_data: Optional[CustomData] = None
    id: NonNegativeInt
    connector_id: Optional[NonNegativeInt] = None

    def __init__(self, id: int, **data: Any) -> None:
        super().__init__(id=id, **data)


class Component(Entity):
    """A physical or logical component.

    ``name`` should come from the list of standardized component names
    where possible; ``instance`` tells apart components that exist more
    than once.  Both are case insensitive.
    """

    custom_data: Optional[CustomData] = None
    evse: Optional[EVSE] = None
    name: CiString50
    instance: Optional[CiString50] = None

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)
