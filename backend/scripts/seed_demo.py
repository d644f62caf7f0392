"""Seed demo provider types and providers.

Usage (from repository root):
    python backend/scripts/seed_demo.py

Usage (from backend directory):
    python scripts/seed_demo.py
    # or
    python -m scripts.seed_demo
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sqlalchemy import delete, select

# Make `app` imports work whether the script is run from repo root or backend/.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from app.db.session import SessionLocal
from app.models.provider import Provider
from app.models.provider_type import ProviderType
from app.schemas.provider import ProviderCreate
from app.schemas.provider_type import ProviderTypeCreate
from app.services.provider_types import create_provider_type
from app.services.providers import create_provider


DEMO_TYPES: list[dict[str, object]] = [
    {
        "name": "hotel",
        "label": "Hotel",
        "attribute_schema": {
            "stars": {"kind": "number", "required": True, "min": 1, "max": 5},
            "rooms": {"kind": "number", "min": 1},
            "amenities": {"kind": "array", "item_kind": "string"},
            "breakfast_included": {"kind": "boolean"},
        },
    },
    {
        "name": "audiovisual",
        "label": "Audiovisual provider",
        "attribute_schema": {
            "equipment": {"kind": "array", "item_kind": "string", "required": True},
            "technicians": {"kind": "number", "min": 0},
        },
    },
    {
        "name": "catering",
        "label": "Caterer",
        "attribute_schema": {
            "cuisine": {"kind": "string", "required": True},
            "max_guests": {"kind": "number", "min": 1},
            "vegan_options": {"kind": "boolean"},
        },
    },
]

DEMO_PROVIDERS: list[tuple[str, dict[str, object]]] = [
    (
        "hotel",
        {
            "name": "Grand Hotel Lumiere",
            "email": "booking@grand-lumiere.fr",
            "phone": "+33 4 72 00 00 01",
            "address": "12 Quai Saint-Antoine, Lyon",
            "attributes": {
                "stars": 5,
                "rooms": 120,
                "amenities": ["wifi", "parking", "spa"],
                "breakfast_included": True,
            },
        },
    ),
    (
        "hotel",
        {
            "name": "Hotel du Parc",
            "email": "contact@hotelduparc.fr",
            "address": "3 Rue du Parc, Annecy",
            "attributes": {"stars": 3, "rooms": 42, "amenities": ["wifi"], "breakfast_included": False},
        },
    ),
    (
        "audiovisual",
        {
            "name": "Stage & Sound",
            "email": "hello@stagesound.fr",
            "phone": "+33 1 40 00 00 02",
            "attributes": {"equipment": ["projector", "microphones", "led wall"], "technicians": 6},
        },
    ),
    (
        "catering",
        {
            "name": "Maison Gourmet",
            "email": "events@maisongourmet.fr",
            "address": "88 Avenue Jean Jaures, Paris",
            "attributes": {"cuisine": "French bistro", "max_guests": 300, "vegan_options": True},
            "status": "inactive",
        },
    ),
]


def reset_demo_data(db) -> None:
    """Remove providers and types created by a previous seed."""

    names = [str(spec["name"]) for spec in DEMO_TYPES]
    type_ids = list(db.scalars(select(ProviderType.id).where(ProviderType.name.in_(names))).all())
    if type_ids:
        db.execute(delete(Provider).where(Provider.provider_type_id.in_(type_ids)))
        db.execute(delete(ProviderType).where(ProviderType.id.in_(type_ids)))
    db.commit()


def parse_args() -> argparse.Namespace:
    """Parse script CLI arguments."""

    parser = argparse.ArgumentParser(description="Seed demo provider types and providers.")
    parser.add_argument(
        "--no-reset",
        action="store_true",
        help="Do not delete previously seeded demo records before seeding.",
    )
    return parser.parse_args()


def main() -> None:
    """Seed demo data and print a short summary."""

    args = parse_args()

    with SessionLocal() as db:
        if not args.no_reset:
            reset_demo_data(db)

        type_ids: dict[str, int] = {}
        for spec in DEMO_TYPES:
            existing = db.scalar(select(ProviderType).where(ProviderType.name == spec["name"]))
            if existing is not None:
                type_ids[existing.name] = existing.id
                continue
            created = create_provider_type(db, ProviderTypeCreate.model_validate(spec))
            type_ids[created.name] = created.id

        providers_created = 0
        for type_name, payload in DEMO_PROVIDERS:
            create_provider(
                db,
                ProviderCreate.model_validate({**payload, "provider_type_id": type_ids[type_name]}),
            )
            providers_created += 1

    print("Seed complete")
    print(f"provider_types={len(type_ids)}")
    print(f"providers_created={providers_created}")
    print()
    print("Inspect:")
    print("  GET /provider-types")
    print("  GET /providers?search=wifi")
    print('  GET /providers?attributes={"stars":{"min":4}}')


if __name__ == "__main__":
    main()
