# parking_app/services/parking_service.py
"""
Parking allocation: registration, slot assignment, checkout and payment.

How it works:
  - register_vehicle adds the vehicle to the active set and to history
  - park_vehicle assigns a free slot of the vehicle's class
  - checkout_vehicle computes the fee, stamps the history record, frees the
    slot and drops the vehicle from the active set
  - record_payment stores how a checked-out vehicle's fee was paid

Park and checkout never raise for rejected requests. They return a result
object whose outcome names the reason; the result is falsy on failure and
a failed checkout reports a fee of 0.
"""

import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from parking_app.exceptions import (
    DuplicateActiveVehicle,
    InvalidPaymentMode,
    PaymentAlreadyRecorded,
    PaymentNotDue,
    VehicleNotFound,
)
from parking_app.models import ParkingSlot, PaymentMode, Vehicle, VehicleType
from parking_app.services.fee_service import calculate_parking_fee
from parking_app.services.slot_service import generate_parking_slots
from parking_app.store import ParkingStore
from parking_app.utils.logger import get_logger

logger = get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ParkOutcome(str, Enum):
    PARKED = "parked"
    VEHICLE_NOT_FOUND = "vehicle_not_found"
    SLOT_NOT_FOUND = "slot_not_found"
    SLOT_OCCUPIED = "slot_occupied"
    CLASS_MISMATCH = "class_mismatch"


class CheckoutOutcome(str, Enum):
    CHECKED_OUT = "checked_out"
    VEHICLE_NOT_FOUND = "vehicle_not_found"
    NOT_PARKED = "not_parked"
    SLOT_NOT_FOUND = "slot_not_found"


@dataclass
class ParkResult:
    outcome: ParkOutcome
    vehicle: Optional[Vehicle] = None
    slot: Optional[ParkingSlot] = None
    previous_slot_id: Optional[str] = None   # set when a parked vehicle was moved

    @property
    def ok(self) -> bool:
        return self.outcome is ParkOutcome.PARKED

    def __bool__(self):
        return self.ok


@dataclass
class CheckoutResult:
    outcome: CheckoutOutcome
    fee: int = 0
    vehicle: Optional[Vehicle] = None

    @property
    def ok(self) -> bool:
        return self.outcome is CheckoutOutcome.CHECKED_OUT

    def __bool__(self):
        return self.ok


class ParkingAllocationService:
    """
    Owns the active vehicles, the vehicle history and the slot inventory.
    Build one per application and hand it to whoever needs it.
    """

    def __init__(self, store: Optional[ParkingStore] = None, clock: Callable[[], datetime] = utc_now):
        self._store = store if store is not None else ParkingStore(generate_parking_slots())
        self._clock = clock
        # Guards every read-check-write sequence; handlers run in a thread pool
        self._lock = threading.RLock()

    # ── Registration ──────────────────────────────────────────────────────
    def _find_active_by_plate(self, plate_number: str) -> Optional[Vehicle]:
        plate = plate_number.lower()
        return next((v for v in self._store.active_vehicles() if v.plate_number.lower() == plate), None)

    def register_vehicle(self, plate_number: str, owner_name: str, vehicle_type: VehicleType) -> Vehicle:
        with self._lock:
            if self._find_active_by_plate(plate_number):
                logger.warning(f"[REGISTER] Rejected duplicate plate {plate_number}")
                raise DuplicateActiveVehicle(plate_number)

            vehicle = Vehicle(
                id=uuid.uuid4().hex,
                plate_number=plate_number,
                owner_name=owner_name,
                vehicle_type=VehicleType(vehicle_type),
                entry_time=self._clock(),
            )
            self._store.add_vehicle(vehicle)

        logger.info(f"[REGISTER] Plate={vehicle.plate_number} | Type={vehicle.vehicle_type.value} | Id={vehicle.id}")
        return vehicle

    # ── Slots ─────────────────────────────────────────────────────────────
    def get_available_slots(self, vehicle_type: VehicleType) -> list[ParkingSlot]:
        vehicle_type = VehicleType(vehicle_type)
        with self._lock:
            return [s for s in self._store.slots() if s.vehicle_type == vehicle_type and not s.is_occupied]

    def park_vehicle(self, vehicle_id: str, slot_id: str) -> ParkResult:
        with self._lock:
            vehicle = self._store.get_active(vehicle_id)
            if not vehicle:
                return self._reject_park(ParkOutcome.VEHICLE_NOT_FOUND, vehicle_id, slot_id)

            slot = self._store.get_slot(slot_id)
            if not slot:
                return self._reject_park(ParkOutcome.SLOT_NOT_FOUND, vehicle_id, slot_id, vehicle=vehicle)
            if slot.is_occupied:
                return self._reject_park(ParkOutcome.SLOT_OCCUPIED, vehicle_id, slot_id, vehicle=vehicle, slot=slot)
            if slot.vehicle_type != vehicle.vehicle_type:
                return self._reject_park(ParkOutcome.CLASS_MISMATCH, vehicle_id, slot_id, vehicle=vehicle, slot=slot)

            # Moving a parked vehicle releases the slot it held
            previous_slot_id = vehicle.slot_id
            if previous_slot_id:
                previous = self._store.get_slot(previous_slot_id)
                if previous:
                    previous.is_occupied = False

            slot.is_occupied = True
            vehicle.slot_id = slot.id

        if previous_slot_id:
            logger.info(f"[PARK] Plate={vehicle.plate_number} moved {previous_slot_id} → {slot.id}")
        else:
            logger.info(f"[PARK] Plate={vehicle.plate_number} → slot {slot.id} (#{slot.number}, floor {slot.floor})")
        return ParkResult(ParkOutcome.PARKED, vehicle=vehicle, slot=slot, previous_slot_id=previous_slot_id)

    def _reject_park(self, outcome, vehicle_id, slot_id, vehicle=None, slot=None) -> ParkResult:
        logger.warning(f"[PARK] Rejected vehicle={vehicle_id} slot={slot_id}: {outcome.value}")
        return ParkResult(outcome, vehicle=vehicle, slot=slot)

    # ── Checkout ──────────────────────────────────────────────────────────
    def checkout_vehicle(self, vehicle_id: str) -> CheckoutResult:
        with self._lock:
            vehicle = self._store.get_active(vehicle_id)
            if not vehicle:
                return self._reject_checkout(CheckoutOutcome.VEHICLE_NOT_FOUND, vehicle_id)
            if not vehicle.slot_id:
                return self._reject_checkout(CheckoutOutcome.NOT_PARKED, vehicle_id, vehicle)

            slot = self._store.get_slot(vehicle.slot_id)
            if not slot:
                return self._reject_checkout(CheckoutOutcome.SLOT_NOT_FOUND, vehicle_id, vehicle)

            exit_time = self._clock()
            fee = calculate_parking_fee(vehicle.entry_time, exit_time, vehicle.vehicle_type)

            record = self._store.get_history(vehicle_id)
            if record:
                record.exit_time = exit_time
                record.payment_amount = fee

            slot.is_occupied = False
            self._store.remove_active(vehicle_id)

        duration_min = int((exit_time - vehicle.entry_time).total_seconds() // 60)
        logger.info(f"[CHECKOUT] Plate={vehicle.plate_number} | Slot={slot.id} | {duration_min} min | Fee={fee}")
        return CheckoutResult(CheckoutOutcome.CHECKED_OUT, fee=fee, vehicle=record or vehicle)

    def _reject_checkout(self, outcome, vehicle_id, vehicle=None) -> CheckoutResult:
        logger.warning(f"[CHECKOUT] Rejected vehicle={vehicle_id}: {outcome.value}")
        return CheckoutResult(outcome, vehicle=vehicle)

    def estimate_fee(self, vehicle_id: str) -> Optional[int]:
        """Fee the vehicle would pay if it checked out now. None if checkout would be rejected."""
        with self._lock:
            vehicle = self._store.get_active(vehicle_id)
            if not vehicle or not vehicle.slot_id:
                return None
            return calculate_parking_fee(vehicle.entry_time, self._clock(), vehicle.vehicle_type)

    # ── Payment ───────────────────────────────────────────────────────────
    def record_payment(self, vehicle_id: str, payment_mode: PaymentMode) -> Vehicle:
        """Payments are simulated: the mode is stored and logged, nothing is charged."""
        payment_mode = PaymentMode(payment_mode)
        if payment_mode is PaymentMode.PENDING:
            raise InvalidPaymentMode(payment_mode.value)

        with self._lock:
            vehicle = self._store.get_history(vehicle_id)
            if not vehicle:
                raise VehicleNotFound(vehicle_id)
            if not vehicle.is_checked_out:
                raise PaymentNotDue(vehicle_id)
            if vehicle.payment_mode not in (None, PaymentMode.PENDING):
                raise PaymentAlreadyRecorded(vehicle_id, vehicle.payment_mode.value)
            vehicle.payment_mode = payment_mode

        logger.info(f"[PAYMENT] Plate={vehicle.plate_number} | Amount={vehicle.payment_amount} | Mode={payment_mode.value}")
        return vehicle

    # ── Lookup ────────────────────────────────────────────────────────────
    def find_vehicle_by_plate_number(self, plate_number: str) -> Optional[Vehicle]:
        """Active vehicle first; otherwise the most recent visit in history."""
        with self._lock:
            active = self._find_active_by_plate(plate_number)
            if active:
                return active

            plate = plate_number.lower()
            visits = [v for v in self._store.history() if v.plate_number.lower() == plate]
            if not visits:
                return None
            return max(visits, key=lambda v: v.entry_time)

    # ── Read accessors ────────────────────────────────────────────────────
    def get_all_slots(self) -> list[ParkingSlot]:
        with self._lock:
            return self._store.slots()

    def get_all_vehicles(self) -> list[Vehicle]:
        with self._lock:
            return self._store.history()

    def get_active_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        with self._lock:
            return self._store.get_active(vehicle_id)

    def get_currently_parked_vehicles(self) -> list[Vehicle]:
        with self._lock:
            return self._store.active_vehicles()

    def get_parked_vehicles(self) -> list[Vehicle]:
        with self._lock:
            return [v for v in self._store.active_vehicles() if v.slot_id]

    def get_registry(self) -> list[Vehicle]:
        """History with checked-out vehicles first (latest exit first), then active ones (latest entry first)."""
        history = self.get_all_vehicles()
        checked_out = sorted((v for v in history if v.exit_time), key=lambda v: v.exit_time, reverse=True)
        active = sorted((v for v in history if not v.exit_time), key=lambda v: v.entry_time, reverse=True)
        return checked_out + active

    def get_occupancy(self) -> dict:
        with self._lock:
            slots = self._store.slots()
            history = self._store.history()
            active_count = len(self._store.active_vehicles())

        by_floor: dict[int, dict] = {}
        by_type: dict[str, dict] = {t.value: {"total": 0, "occupied": 0} for t in VehicleType}
        for slot in slots:
            floor = by_floor.setdefault(slot.floor, {"total": 0, "occupied": 0})
            floor["total"] += 1
            by_type[slot.vehicle_type.value]["total"] += 1
            if slot.is_occupied:
                floor["occupied"] += 1
                by_type[slot.vehicle_type.value]["occupied"] += 1

        total = len(slots)
        occupied = sum(1 for s in slots if s.is_occupied)
        billed = [v for v in history if v.payment_amount is not None]
        return {
            "total_slots": total,
            "occupied_slots": occupied,
            "available_slots": total - occupied,
            "occupancy_percent": round(occupied / total * 100, 1) if total else 0,
            "by_floor": by_floor,
            "by_type": by_type,
            "active_vehicles": active_count,
            "checked_out_vehicles": len(billed),
            "total_billed": sum(v.payment_amount for v in billed),
            "total_collected": sum(
                v.payment_amount for v in billed if v.payment_mode not in (None, PaymentMode.PENDING)
            ),
        }
