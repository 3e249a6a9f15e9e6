# parking_app/schemas/vehicle.py
import re
from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import Optional
from parking_app.config import settings
from parking_app.models import PaymentMode, VehicleType


class VehicleCreate(BaseModel):
    plate_number: str
    owner_name: str
    vehicle_type: VehicleType

    @field_validator("plate_number")
    @classmethod
    def check_plate_format(cls, value: str) -> str:
        value = value.strip()
        if not re.match(settings.PLATE_NUMBER_PATTERN, value):
            raise ValueError("Please enter a valid plate number (e.g., MH12AB1234)")
        return value

    @field_validator("owner_name")
    @classmethod
    def check_owner_name(cls, value: str) -> str:
        value = value.strip()
        if len(value) < settings.OWNER_NAME_MIN_LENGTH:
            raise ValueError(f"Name must be at least {settings.OWNER_NAME_MIN_LENGTH} characters")
        return value


class VehicleOut(BaseModel):
    id: str
    plate_number: str
    owner_name: str
    vehicle_type: VehicleType
    entry_time: datetime
    exit_time: Optional[datetime]
    slot_id: Optional[str]
    payment_amount: Optional[int]
    payment_mode: PaymentMode        # pending until a payment is recorded
    status: str                      # registered | parked | checked_out

    @field_validator("payment_mode", mode="before")
    @classmethod
    def show_pending(cls, value):
        return PaymentMode.PENDING if value is None else value

    class Config:
        from_attributes = True


class VehicleLookupOut(BaseModel):
    plate_number: str
    found: bool
    active: bool = False             # registered or parked, not checked out
    vehicle: Optional[VehicleOut] = None


class FeeEstimateOut(BaseModel):
    vehicle_id: str
    fee: int
    currency: str
