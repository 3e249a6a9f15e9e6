# parking_app/services/slot_service.py
"""
Slot inventory generation.
3 floors, each with 10 CAR + 15 BIKE + 5 TRUCK slots (90 in total).
Slot numbers run sequentially across the whole facility, floor by floor.
"""

from parking_app.models import ParkingSlot, VehicleType

FLOORS = 3

# Order matters: it fixes slot numbering within a floor
SLOTS_PER_FLOOR = (
    (VehicleType.CAR, "C", 10),
    (VehicleType.BIKE, "B", 15),
    (VehicleType.TRUCK, "T", 5),
)


def generate_parking_slots() -> list[ParkingSlot]:
    slots = []
    number = 1
    for floor in range(1, FLOORS + 1):
        for vehicle_type, code, count in SLOTS_PER_FLOOR:
            for index in range(1, count + 1):
                slots.append(ParkingSlot(
                    id=f"{floor}-{code}-{index}",
                    number=number,
                    vehicle_type=vehicle_type,
                    floor=floor,
                ))
                number += 1
    return slots
