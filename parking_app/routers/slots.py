# parking_app/routers/slots.py
"""Slot inventory — read-only views."""

from fastapi import APIRouter, Depends
from typing import Optional
from parking_app.models import VehicleType
from parking_app.schemas.parking_slot import ParkingSlotOut
from parking_app.services.parking_service import ParkingAllocationService
from parking_app.store import get_parking_service

router = APIRouter()


@router.get("/slots", response_model=list[ParkingSlotOut], summary="All slots — filterable by floor and type")
def list_slots(
    floor: Optional[int] = None,
    vehicle_type: Optional[VehicleType] = None,
    service: ParkingAllocationService = Depends(get_parking_service),
):
    slots = service.get_all_slots()
    if floor is not None:
        slots = [s for s in slots if s.floor == floor]
    if vehicle_type:
        slots = [s for s in slots if s.vehicle_type == vehicle_type]
    return [ParkingSlotOut.model_validate(s) for s in slots]


@router.get("/slots/available/{vehicle_type}", response_model=list[ParkingSlotOut],
            summary="Free slots for a vehicle type")
def list_available_slots(vehicle_type: VehicleType,
                         service: ParkingAllocationService = Depends(get_parking_service)):
    return [ParkingSlotOut.model_validate(s) for s in service.get_available_slots(vehicle_type)]
