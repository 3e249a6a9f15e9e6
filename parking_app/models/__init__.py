# Parking App — Domain Models

from parking_app.models.vehicle import Vehicle, VehicleType, PaymentMode   # noqa
from parking_app.models.parking_slot import ParkingSlot                    # noqa
