# parking_app/routers/health.py
"""System health check endpoint."""

from fastapi import APIRouter, Depends
from datetime import datetime, timezone
from parking_app.services.parking_service import ParkingAllocationService
from parking_app.store import get_parking_service

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(service: ParkingAllocationService = Depends(get_parking_service)):
    slots = service.get_all_slots()
    occupied = sum(1 for s in slots if s.is_occupied)
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "backend": "ok",
        "slots": {"total": len(slots), "occupied": occupied, "available": len(slots) - occupied},
    }
