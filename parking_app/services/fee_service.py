# parking_app/services/fee_service.py
"""
Parking fee calculation.

The base rate covers the first hour (or any part of it). Every further
started hour is billed at the hourly rate:

    hours = ceil((exit_time - entry_time) / 1h)
    fee   = base_rate + max(0, hours - 1) * hourly_rate
"""

import math
from dataclasses import dataclass
from datetime import datetime

from parking_app.models import VehicleType

SECONDS_PER_HOUR = 60 * 60


@dataclass(frozen=True)
class ParkingRate:
    base_rate: int
    hourly_rate: int


RATES = {
    VehicleType.CAR:   ParkingRate(base_rate=50, hourly_rate=30),
    VehicleType.BIKE:  ParkingRate(base_rate=30, hourly_rate=20),
    VehicleType.TRUCK: ParkingRate(base_rate=80, hourly_rate=50),
}


def billable_hours(entry_time: datetime, exit_time: datetime) -> int:
    """Started hours between entry and exit. A clock skew never yields negative hours."""
    seconds = (exit_time - entry_time).total_seconds()
    return max(0, math.ceil(seconds / SECONDS_PER_HOUR))


def calculate_parking_fee(entry_time: datetime, exit_time: datetime, vehicle_type: VehicleType) -> int:
    rate = RATES[VehicleType(vehicle_type)]
    hours = billable_hours(entry_time, exit_time)
    return rate.base_rate + max(0, hours - 1) * rate.hourly_rate
