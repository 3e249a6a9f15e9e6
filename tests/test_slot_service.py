# tests/test_slot_service.py
"""Unit tests for slot inventory generation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from collections import Counter
from parking_app.models import VehicleType
from parking_app.services.slot_service import generate_parking_slots


class TestSlotInventory:
    def test_ninety_slots_over_three_floors(self):
        slots = generate_parking_slots()
        assert len(slots) == 90
        assert {s.floor for s in slots} == {1, 2, 3}

    def test_per_floor_counts(self):
        counts = Counter((s.floor, s.vehicle_type) for s in generate_parking_slots())
        for floor in (1, 2, 3):
            assert counts[(floor, VehicleType.CAR)] == 10
            assert counts[(floor, VehicleType.BIKE)] == 15
            assert counts[(floor, VehicleType.TRUCK)] == 5

    def test_ids_and_numbers(self):
        slots = generate_parking_slots()
        assert [s.number for s in slots] == list(range(1, 91))
        assert len({s.id for s in slots}) == 90
        assert slots[0].id == "1-C-1"
        assert slots[10].id == "1-B-1"
        assert slots[25].id == "1-T-1"
        assert slots[30].id == "2-C-1"
        assert slots[-1].id == "3-T-5"

    def test_all_slots_start_free(self):
        assert not any(s.is_occupied for s in generate_parking_slots())
