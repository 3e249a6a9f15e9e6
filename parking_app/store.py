# parking_app/store.py
"""
In-memory storage for vehicles and slots.
State lives for the life of the process and is lost on restart.
The service only touches state through ParkingStore, so a durable store can
replace this one without changing allocation or fee logic.
"""

from typing import Optional

from fastapi import Request

from parking_app.models import ParkingSlot, Vehicle


class ParkingStore:
    def __init__(self, slots: list[ParkingSlot]):
        self._active: list[Vehicle] = []
        self._history: list[Vehicle] = []
        self._slots: list[ParkingSlot] = list(slots)
        self._slots_by_id = {slot.id: slot for slot in self._slots}

    # ── Vehicles ──────────────────────────────────────────────────────────
    def add_vehicle(self, vehicle: Vehicle):
        """Append to both the active set and history."""
        self._active.append(vehicle)
        self._history.append(vehicle)

    def remove_active(self, vehicle_id: str):
        self._active = [v for v in self._active if v.id != vehicle_id]

    def get_active(self, vehicle_id: str) -> Optional[Vehicle]:
        return next((v for v in self._active if v.id == vehicle_id), None)

    def get_history(self, vehicle_id: str) -> Optional[Vehicle]:
        return next((v for v in self._history if v.id == vehicle_id), None)

    def active_vehicles(self) -> list[Vehicle]:
        return list(self._active)

    def history(self) -> list[Vehicle]:
        return list(self._history)

    # ── Slots ─────────────────────────────────────────────────────────────
    def get_slot(self, slot_id: str) -> Optional[ParkingSlot]:
        return self._slots_by_id.get(slot_id)

    def slots(self) -> list[ParkingSlot]:
        return list(self._slots)


def get_parking_service(request: Request):
    """FastAPI dependency — returns the service instance owned by the running app."""
    return request.app.state.parking_service
