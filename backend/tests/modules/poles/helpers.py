"""Row and model factories shared by the pole tests."""

from datetime import datetime, timezone

from modules.poles.models import Pole, PoleStatus


def create_mock_pole_data(
    pole_id: str = "pole-123",
    owner_id: str = "owner-123",
    **overrides,
) -> dict:
    """Helper to create a ``poles`` row as the database returns it."""
    now = datetime.now(timezone.utc).isoformat()
    row = {
        "id": pole_id,
        "owner_id": owner_id,
        "length_cm": 420,
        "weight_lbs": 155,
        "brand": "Essx",
        "condition_rating": 4,
        "status": "available",
        "municipality": "Bergen",
        "postal_code": "5003",
        "flex_rating": "15.5",
        "production_year": 2019,
        "image_urls": None,
        "internal_notes": "Small scratch near the plug",
        "serial_number": "ESSX-0001",
        "price_weekly": 200.0,
        "price_sale": None,
        "created_at": now,
        "updated_at": now,
    }
    row.update(overrides)
    return row


def create_pole(
    pole_id: str = "pole-123",
    owner_id: str = "owner-123",
    **overrides,
) -> Pole:
    now = datetime.now(timezone.utc)
    values = dict(
        id=pole_id,
        owner_id=owner_id,
        length_cm=420,
        weight_lbs=155,
        brand="Essx",
        condition_rating=4,
        status=PoleStatus.AVAILABLE,
        municipality="Bergen",
        postal_code="5003",
        internal_notes="Small scratch near the plug",
        created_at=now,
        updated_at=now,
    )
    values.update(overrides)
    return Pole(**values)


def valid_fields(**overrides) -> dict:
    """A listing body that passes every bound."""
    fields = {
        "length_cm": 420,
        "weight_lbs": 155,
        "brand": "Essx",
        "condition_rating": 4,
        "postal_code": "5003",
    }
    fields.update(overrides)
    return fields
