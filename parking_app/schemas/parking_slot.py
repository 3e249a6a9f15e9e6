# parking_app/schemas/parking_slot.py
from pydantic import BaseModel
from parking_app.models import VehicleType


class ParkingSlotOut(BaseModel):
    id: str
    number: int
    vehicle_type: VehicleType
    floor: int
    is_occupied: bool

    class Config:
        from_attributes = True
