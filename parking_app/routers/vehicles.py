# parking_app/routers/vehicles.py
"""Vehicle registration, lookup, registry, fee estimate and payment."""

from fastapi import APIRouter, Depends, HTTPException, status
from parking_app.config import settings
from parking_app.exceptions import (
    DuplicateActiveVehicle,
    InvalidPaymentMode,
    PaymentAlreadyRecorded,
    PaymentNotDue,
    VehicleNotFound,
)
from parking_app.schemas.payment import PaymentCreate
from parking_app.schemas.vehicle import FeeEstimateOut, VehicleCreate, VehicleLookupOut, VehicleOut
from parking_app.services.parking_service import ParkingAllocationService
from parking_app.store import get_parking_service

router = APIRouter()


@router.post("/vehicles", response_model=VehicleOut, status_code=status.HTTP_201_CREATED,
             summary="Register a vehicle")
def register_vehicle(body: VehicleCreate, service: ParkingAllocationService = Depends(get_parking_service)):
    try:
        vehicle = service.register_vehicle(body.plate_number, body.owner_name, body.vehicle_type)
    except DuplicateActiveVehicle as e:
        raise HTTPException(status_code=409, detail=str(e))
    return VehicleOut.model_validate(vehicle)


@router.get("/vehicles", response_model=list[VehicleOut], summary="Currently active vehicles")
def list_active_vehicles(parked_only: bool = False,
                         service: ParkingAllocationService = Depends(get_parking_service)):
    """Vehicles not yet checked out. With parked_only, only those holding a slot."""
    vehicles = service.get_parked_vehicles() if parked_only else service.get_currently_parked_vehicles()
    return [VehicleOut.model_validate(v) for v in vehicles]


@router.get("/vehicles/history", response_model=list[VehicleOut], summary="Vehicle registry")
def list_vehicle_history(service: ParkingAllocationService = Depends(get_parking_service)):
    """Every registration. Checked-out vehicles first (latest exit first), then active ones."""
    return [VehicleOut.model_validate(v) for v in service.get_registry()]


@router.get("/vehicles/lookup/{plate}", response_model=VehicleLookupOut, summary="Look up a plate number")
def lookup_vehicle(plate: str, service: ParkingAllocationService = Depends(get_parking_service)):
    vehicle = service.find_vehicle_by_plate_number(plate)
    if not vehicle:
        return VehicleLookupOut(plate_number=plate, found=False)
    return VehicleLookupOut(
        plate_number=plate,
        found=True,
        active=not vehicle.is_checked_out,
        vehicle=VehicleOut.model_validate(vehicle),
    )


@router.get("/vehicles/{vehicle_id}/fee", response_model=FeeEstimateOut, summary="Fee if checked out now")
def estimate_fee(vehicle_id: str, service: ParkingAllocationService = Depends(get_parking_service)):
    vehicle = service.get_active_vehicle(vehicle_id)
    if vehicle and not vehicle.slot_id:
        raise HTTPException(status_code=409, detail="Vehicle has not been parked")
    fee = service.estimate_fee(vehicle_id)
    if fee is None:
        raise HTTPException(status_code=404, detail="Vehicle not found or already checked out")
    return FeeEstimateOut(vehicle_id=vehicle_id, fee=fee, currency=settings.CURRENCY)


@router.post("/vehicles/{vehicle_id}/payment", response_model=VehicleOut, summary="Complete payment")
def record_payment(vehicle_id: str, body: PaymentCreate,
                   service: ParkingAllocationService = Depends(get_parking_service)):
    """Simulated payment: records the mode for a checked-out vehicle. No money moves."""
    try:
        vehicle = service.record_payment(vehicle_id, body.payment_mode)
    except VehicleNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (PaymentNotDue, PaymentAlreadyRecorded) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except InvalidPaymentMode as e:
        raise HTTPException(status_code=422, detail=str(e))
    return VehicleOut.model_validate(vehicle)
