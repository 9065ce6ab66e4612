#!/usr/bin/env python3
"""
Seed script: creates gadgets via the API (no direct DB) and rents some of them out.
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --gadgets 100 --rent-ratio 0.3
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:8000"

GADGETS = [
    ("Cordless drill", "tool"),
    ("Camera DSLR", "camera"),
    ("GoPro Hero", "camera"),
    ("Projector 1080p", "av"),
    ("Bluetooth speaker", "audio"),
    ("Drone 4K", "camera"),
    ("Laptop 14\"", "computer"),
    ("Nintendo Switch", "console"),
    ("VR headset", "console"),
    ("Ring light", "av"),
    ("Tripod", "camera"),
    ("Electric scooter", "mobility"),
    ("Power bank 20000mAh", "accessory"),
    ("Streaming mic", "audio"),
]

DESCRIPTIONS = [
    "Lightly used, comes with charger.",
    "Includes carrying case.",
    "Great for weekend trips.",
    "Battery lasts a full day.",
    "Pick-up only.",
]

OWNERS = ["alice", "bob", "carol", "dave", "erin"]
RENTERS = ["frank", "grace", "heidi", "ivan", "judy"]


def random_gadget() -> dict:
    name, kind = random.choice(GADGETS)
    return {
        "name": name,
        "type": kind,
        "description": random.choice(DESCRIPTIONS),
        "pricePerDay": random.choice([2, 5, 7.5, 10, 15, 25, 40]),
        "owner": random.choice(OWNERS),
    }


def main():
    ap = argparse.ArgumentParser(description="Seed gadgets via API")
    ap.add_argument("--gadgets", type=int, default=30, help="Number of gadgets to create")
    ap.add_argument("--rent-ratio", type=float, default=0.25, help="Share of created gadgets to rent out")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created = []
    rented = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Creating {args.gadgets} gadgets...")
        for i in range(args.gadgets):
            try:
                r = client.post("/gadgets", json=random_gadget())
                if r.status_code == 200:
                    created.append(r.json()["id"])
                else:
                    errors.append(f"Create #{i + 1}: {r.status_code} {r.text[:80]}")
            except httpx.HTTPError as e:
                errors.append(f"Create #{i + 1}: {e}")
            if (i + 1) % 10 == 0:
                print(f"  ... {i + 1} gadgets")

        to_rent = random.sample(created, int(len(created) * args.rent_ratio))
        print(f"Renting {len(to_rent)} gadgets...")
        for gadget_id in to_rent:
            try:
                r = client.post(f"/gadgets/{gadget_id}/rent", json={"renter": random.choice(RENTERS)})
                if r.status_code == 200:
                    rented += 1
                else:
                    errors.append(f"Rent {gadget_id}: {r.status_code} {r.text[:80]}")
            except httpx.HTTPError as e:
                errors.append(f"Rent {gadget_id}: {e}")

    print(f"\nDone. Gadgets created: {len(created)}, rented: {rented}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
