# scripts/test/simulate_session.py
"""Drive one register → park → checkout → pay cycle against a running backend."""

import argparse
import sys
import requests

BACKEND_URL = "http://127.0.0.1:8080/api/v1"


def _check(resp, step):
    if resp.status_code >= 400:
        print(f"❌ {step} → HTTP {resp.status_code}: {resp.json()}")
        sys.exit(1)
    return resp.json()


def simulate(base_url, plate, owner, vehicle_type, payment_mode):
    vehicle = _check(requests.post(f"{base_url}/vehicles", json={
        "plate_number": plate, "owner_name": owner, "vehicle_type": vehicle_type,
    }, timeout=10), "register")
    print(f"✅ Registered {plate} → id={vehicle['id']}")

    free = _check(requests.get(f"{base_url}/slots/available/{vehicle_type}", timeout=10), "available slots")
    if not free:
        print(f"❌ No free {vehicle_type} slots")
        sys.exit(1)
    slot_id = free[0]["id"]

    _check(requests.post(f"{base_url}/parking/park", json={
        "vehicle_id": vehicle["id"], "slot_id": slot_id,
    }, timeout=10), "park")
    print(f"✅ Parked in slot {slot_id} ({len(free) - 1} {vehicle_type} slots left)")

    checkout = _check(requests.post(f"{base_url}/parking/checkout/{vehicle['id']}", timeout=10), "checkout")
    print(f"✅ Checked out — fee {checkout['fee']} {checkout['currency']}")

    payment = {"payment_mode": payment_mode}
    if payment_mode == "card":
        payment["card"] = {"card_number": "4111111111111111", "card_name": owner,
                           "expiry_date": "12/30", "cvv": "123"}
    paid = _check(requests.post(f"{base_url}/vehicles/{vehicle['id']}/payment", json=payment, timeout=10), "payment")
    print(f"✅ Payment recorded: {paid['payment_mode']}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Simulate a parking session for testing")
    parser.add_argument("--url", default=BACKEND_URL)
    parser.add_argument("--plate", default="MH12AB1234")
    parser.add_argument("--owner", default="Test Driver")
    parser.add_argument("--type", dest="vehicle_type", default="CAR", choices=["CAR", "BIKE", "TRUCK"])
    parser.add_argument("--pay", default="cash", choices=["cash", "card", "upi"])
    args = parser.parse_args()

    simulate(args.url, args.plate, args.owner, args.vehicle_type, args.pay)
