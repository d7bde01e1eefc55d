"""Pole lookups shared by the inquiry tests."""

from typing import Optional
from unittest.mock import AsyncMock, MagicMock

from modules.poles.exceptions import PoleNotFoundError
from modules.poles.models import OwnerSummary, PoleDetail

from tests.modules.poles.helpers import create_pole

OWNER = OwnerSummary(name="Eier", email="eier@example.com")


def pole_detail(owner: Optional[OwnerSummary] = OWNER, **overrides) -> PoleDetail:
    pole = create_pole(pole_id="pole-123", **overrides)
    return PoleDetail(**pole.model_dump(), owner=owner)


def pole_service(detail: Optional[PoleDetail] = None) -> MagicMock:
    """Pole service whose ``get_by_id`` returns ``detail``, or 404s when it is None."""
    service = MagicMock()
    if detail is None:
        service.get_by_id = AsyncMock(side_effect=PoleNotFoundError("pole-123"))
    else:
        service.get_by_id = AsyncMock(return_value=detail)
    return service
