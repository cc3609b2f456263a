from __future__ import annotations

from decimal import Decimal

from app.domain.entities.service_catalog import Service

# Display order. Durations are the single-story, no-guards baseline.
SERVICES: tuple[Service, ...] = (
    Service(
        id="pressure-driveway",
        name="Pressure Wash: Driveway",
        base_price=Decimal("249"),
        desc="Clean your concrete driveway, front patio, walkway, and curb.",
        duration_minutes=60,
    ),
    Service(
        id="pressure-patio",
        name="Pressure Wash: Back Patio",
        base_price=Decimal("99"),
        desc="Clean the concrete patio behind your home.",
        duration_minutes=60,
    ),
    Service(
        id="roof",
        name="Roof Clean",
        base_price=Decimal("899"),
        desc="Soft wash your roof to remove black organic streaks.",
        duration_minutes=120,
    ),
    Service(
        id="house",
        name="House Wash",
        base_price=Decimal("599"),
        desc="Get rid of dust, cobwebs, mold, and mildew on exterior walls.",
        duration_minutes=120,
    ),
    Service(
        id="gutter",
        name="Gutter Clean",
        base_price=Decimal("249"),
        desc="Unclog your gutters and downspouts to prevent flooding.",
        duration_minutes=120,
    ),
    Service(
        id="windows",
        name="Window + Screen Clean",
        base_price=Decimal("449"),
        desc="Remove dirt, dust, and fingerprints from exterior windows/screens.",
        duration_minutes=180,
    ),
)
