# parking_app/schemas/stats.py
from pydantic import BaseModel


class SlotCount(BaseModel):
    total: int
    occupied: int


class OccupancyOut(BaseModel):
    total_slots: int
    occupied_slots: int
    available_slots: int
    occupancy_percent: float
    by_floor: dict[int, SlotCount]
    by_type: dict[str, SlotCount]
    active_vehicles: int
    checked_out_vehicles: int
    total_billed: int
    total_collected: int
    currency: str
