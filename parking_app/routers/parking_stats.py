# parking_app/routers/parking_stats.py
"""Occupancy and billing summary."""

from fastapi import APIRouter, Depends
from parking_app.config import settings
from parking_app.schemas.stats import OccupancyOut
from parking_app.services.parking_service import ParkingAllocationService
from parking_app.store import get_parking_service

router = APIRouter()


@router.get("/stats/occupancy", response_model=OccupancyOut, summary="Occupancy by floor and vehicle type")
def get_occupancy(service: ParkingAllocationService = Depends(get_parking_service)):
    """
    Returns:
    - Slot totals and occupancy percentage
    - Per-floor and per-type occupied/total counts
    - Fees billed at checkout and the part already paid
    """
    return OccupancyOut(**service.get_occupancy(), currency=settings.CURRENCY)
