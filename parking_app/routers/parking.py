# parking_app/routers/parking.py
"""Park and checkout. Rejections map to 404 (unknown vehicle/slot) or 409 (state conflict)."""

from fastapi import APIRouter, Depends, HTTPException
from parking_app.config import settings
from parking_app.schemas.parking import CheckoutOut, ParkOut, ParkRequest
from parking_app.schemas.parking_slot import ParkingSlotOut
from parking_app.schemas.vehicle import VehicleOut
from parking_app.services.parking_service import CheckoutOutcome, ParkingAllocationService, ParkOutcome
from parking_app.store import get_parking_service

router = APIRouter()

PARK_ERRORS = {
    ParkOutcome.VEHICLE_NOT_FOUND: (404, "Vehicle not found or already checked out"),
    ParkOutcome.SLOT_NOT_FOUND:    (404, "Slot not found"),
    ParkOutcome.SLOT_OCCUPIED:     (409, "Slot is already occupied"),
    ParkOutcome.CLASS_MISMATCH:    (409, "Slot does not accept this vehicle type"),
}

CHECKOUT_ERRORS = {
    CheckoutOutcome.VEHICLE_NOT_FOUND: (404, "Vehicle not found or already checked out"),
    CheckoutOutcome.NOT_PARKED:        (409, "Vehicle has not been parked"),
    CheckoutOutcome.SLOT_NOT_FOUND:    (409, "Vehicle's slot no longer exists"),
}


@router.post("/parking/park", response_model=ParkOut, summary="Park a registered vehicle in a slot")
def park_vehicle(body: ParkRequest, service: ParkingAllocationService = Depends(get_parking_service)):
    result = service.park_vehicle(body.vehicle_id, body.slot_id)
    if not result:
        status_code, detail = PARK_ERRORS[result.outcome]
        raise HTTPException(status_code=status_code, detail=detail)
    return ParkOut(
        status=result.outcome.value,
        vehicle=VehicleOut.model_validate(result.vehicle),
        slot=ParkingSlotOut.model_validate(result.slot),
        previous_slot_id=result.previous_slot_id,
    )


@router.post("/parking/checkout/{vehicle_id}", response_model=CheckoutOut, summary="Check out and compute the fee")
def checkout_vehicle(vehicle_id: str, service: ParkingAllocationService = Depends(get_parking_service)):
    result = service.checkout_vehicle(vehicle_id)
    if not result:
        status_code, detail = CHECKOUT_ERRORS[result.outcome]
        raise HTTPException(status_code=status_code, detail=detail)
    return CheckoutOut(
        status=result.outcome.value,
        fee=result.fee,
        currency=settings.CURRENCY,
        vehicle=VehicleOut.model_validate(result.vehicle),
    )
