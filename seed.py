"""
Seed script -- populates the database with sample rides for reviewers.

Run with:
    python seed.py [count]

Creates the ``Rides`` table if needed and inserts *count* rides
(default 10) around Singapore, each going through the same validation
as ``POST /rides``.
"""

import asyncio
import random
import sys

from src.domain.validation import validate_ride
from src.infrastructure.database import async_session_factory, create_tables, engine
from src.infrastructure.repositories import RideRepository

CENTER_LAT, CENTER_LONG = 1.3521, 103.8198

RIDERS = ["Ruiyang Zhang", "Mary Magic", "Kafka Tamura", "Priya Patel", "Colin Lee"]
DRIVERS = ["Ryon", "Howard", "Xi", "Paul Ryon", "Aarav"]
VEHICLES = ["Voiture", "Volks Wagen", "Toyota Prius", "Honda Jazz", "Tesla Model 3"]


def sample_payload(rng: random.Random) -> dict:
    return {
        "start_lat": round(CENTER_LAT + rng.uniform(-0.1, 0.1), 6),
        "start_long": round(CENTER_LONG + rng.uniform(-0.1, 0.1), 6),
        "end_lat": round(CENTER_LAT + rng.uniform(-0.1, 0.1), 6),
        "end_long": round(CENTER_LONG + rng.uniform(-0.1, 0.1), 6),
        "rider_name": rng.choice(RIDERS),
        "driver_name": rng.choice(DRIVERS),
        "driver_vehicle": rng.choice(VEHICLES),
    }


async def seed(count: int) -> None:
    await create_tables()
    rng = random.Random(42)

    async with async_session_factory() as session:
        repo = RideRepository(session)
        ids = []
        for _ in range(count):
            ids.append(await repo.insert(validate_ride(sample_payload(rng))))
        await session.commit()

    await engine.dispose()
    print(f"Inserted {len(ids)} rides (ids {ids[0]}..{ids[-1]})" if ids else "Nothing to insert")


if __name__ == "__main__":
    n = int(sys.argv[1]) if len(sys.argv) > 1 else 10
    asyncio.run(seed(n))
