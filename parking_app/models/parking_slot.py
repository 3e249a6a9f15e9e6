# parking_app/models/parking_slot.py
"""Parking slots. Created once with the inventory; only is_occupied ever changes."""

from dataclasses import dataclass

from parking_app.models.vehicle import VehicleType


@dataclass
class ParkingSlot:
    id: str                    # "{floor}-{C|B|T}-{index}", e.g. "2-B-7"
    number: int                # sequential across the whole facility
    vehicle_type: VehicleType
    floor: int
    is_occupied: bool = False

    def __repr__(self):
        return f"<ParkingSlot {self.id} #{self.number} occupied={self.is_occupied}>"
