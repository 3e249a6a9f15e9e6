# parking_app/models/vehicle.py
"""
Registered vehicles.
The same Vehicle object sits in the active set and in history while it is
parked, so checkout updates are visible through both.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class VehicleType(str, Enum):
    CAR = "CAR"
    BIKE = "BIKE"
    TRUCK = "TRUCK"


class PaymentMode(str, Enum):
    CASH = "cash"
    CARD = "card"
    UPI = "upi"
    PENDING = "pending"


@dataclass
class Vehicle:
    id: str
    plate_number: str
    owner_name: str
    vehicle_type: VehicleType
    entry_time: datetime
    exit_time: Optional[datetime] = None        # set once, at checkout
    slot_id: Optional[str] = None               # last slot occupied
    payment_amount: Optional[int] = None        # fee computed at checkout
    payment_mode: Optional[PaymentMode] = None  # None until a payment is recorded

    @property
    def is_checked_out(self) -> bool:
        return self.exit_time is not None

    @property
    def status(self) -> str:
        if self.exit_time is not None:
            return "checked_out"
        return "parked" if self.slot_id else "registered"

    def __repr__(self):
        return f"<Vehicle {self.plate_number} type={self.vehicle_type.value} status={self.status}>"
