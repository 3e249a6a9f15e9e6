# tests/test_fee_service.py
"""Unit tests for the parking fee formula."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import datetime, timedelta, timezone
from parking_app.models import VehicleType
from parking_app.services.fee_service import RATES, billable_hours, calculate_parking_fee

T = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


class TestFeeFormula:
    def test_car_two_and_a_half_hours(self):
        assert calculate_parking_fee(T, T + timedelta(minutes=150), VehicleType.CAR) == 110

    def test_bike_45_minutes(self):
        assert calculate_parking_fee(T, T + timedelta(minutes=45), VehicleType.BIKE) == 30

    def test_truck_three_hours(self):
        assert calculate_parking_fee(T, T + timedelta(hours=3), VehicleType.TRUCK) == 80 + 2 * 50

    @pytest.mark.parametrize("vehicle_type", list(VehicleType))
    @pytest.mark.parametrize("minutes", [0, 1, 30, 60])
    def test_first_hour_is_base_rate(self, vehicle_type, minutes):
        fee = calculate_parking_fee(T, T + timedelta(minutes=minutes), vehicle_type)
        assert fee == RATES[vehicle_type].base_rate

    @pytest.mark.parametrize("vehicle_type", list(VehicleType))
    @pytest.mark.parametrize("minutes", [61, 90, 120])
    def test_second_hour_adds_one_hourly_rate(self, vehicle_type, minutes):
        rate = RATES[vehicle_type]
        fee = calculate_parking_fee(T, T + timedelta(minutes=minutes), vehicle_type)
        assert fee == rate.base_rate + rate.hourly_rate

    def test_partial_second_counts_as_started_hour(self):
        assert billable_hours(T, T + timedelta(hours=1, seconds=1)) == 2

    def test_fee_never_decreases_with_time(self):
        fees = [calculate_parking_fee(T, T + timedelta(minutes=m), VehicleType.CAR) for m in range(0, 600, 7)]
        assert fees == sorted(fees)

    def test_exit_before_entry_charges_base_rate(self):
        assert billable_hours(T, T - timedelta(minutes=5)) == 0
        assert calculate_parking_fee(T, T - timedelta(minutes=5), VehicleType.CAR) == 50

    def test_accepts_plain_string_type(self):
        assert calculate_parking_fee(T, T + timedelta(minutes=10), "TRUCK") == 80
