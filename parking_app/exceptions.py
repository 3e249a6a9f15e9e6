# parking_app/exceptions.py
"""
Domain errors raised by the parking service.
Routers map them to HTTP status codes; nothing here is fatal to the process.
"""


class ParkingError(Exception):
    """Base class for all rejected parking operations."""


class DuplicateActiveVehicle(ParkingError):
    def __init__(self, plate_number: str):
        self.plate_number = plate_number
        super().__init__(f"A vehicle with plate number {plate_number} is already registered")


class VehicleNotFound(ParkingError):
    def __init__(self, vehicle_id: str):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle '{vehicle_id}' not found")


class PaymentNotDue(ParkingError):
    def __init__(self, vehicle_id: str):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle '{vehicle_id}' has not been checked out yet")


class PaymentAlreadyRecorded(ParkingError):
    def __init__(self, vehicle_id: str, payment_mode: str):
        self.vehicle_id = vehicle_id
        self.payment_mode = payment_mode
        super().__init__(f"Payment for vehicle '{vehicle_id}' already recorded ({payment_mode})")


class InvalidPaymentMode(ParkingError):
    def __init__(self, payment_mode: str):
        self.payment_mode = payment_mode
        super().__init__(f"'{payment_mode}' is not a valid payment mode for completing a payment")
