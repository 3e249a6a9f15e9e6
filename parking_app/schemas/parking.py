# parking_app/schemas/parking.py
from pydantic import BaseModel
from typing import Optional
from parking_app.schemas.parking_slot import ParkingSlotOut
from parking_app.schemas.vehicle import VehicleOut


class ParkRequest(BaseModel):
    vehicle_id: str
    slot_id: str


class ParkOut(BaseModel):
    status: str
    vehicle: VehicleOut
    slot: ParkingSlotOut
    previous_slot_id: Optional[str] = None


class CheckoutOut(BaseModel):
    status: str
    fee: int
    currency: str
    vehicle: VehicleOut
