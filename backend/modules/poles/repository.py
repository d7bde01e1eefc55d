"""
Pole repository for database access.

Encapsulates all Supabase queries and data mapping for the ``poles`` table,
plus the owner profile lookup used by the listing detail view.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .filters import apply_order, apply_predicates, build_predicates
from .models import (
    OwnerSummary,
    Pole,
    PoleOrder,
    PoleStatus,
    SearchFilters,
)


POLES_TABLE = "poles"
PROFILES_TABLE = "user_profiles"
OWNER_PUBLIC_COLUMNS = "name, email, club_name"


class PoleRepository(BaseRepository[Pole]):
    """
    Repository for pole listings.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    def search(
        self,
        filters: SearchFilters,
        order: PoleOrder = PoleOrder.LENGTH_ASC,
    ) -> list[Pole]:
        """
        Find listings matching a filter.

        Args:
            filters: Sparse filter, one predicate per present field.
            order: Result ordering.

        Returns:
            Matching poles, possibly empty.
        """
        query = self._db.table(POLES_TABLE).select("*")
        query = apply_predicates(query, build_predicates(filters))
        result = apply_order(query, order).execute()
        return [self._map_to_pole(row) for row in result.data or []]

    def list_by_owner(
        self,
        owner_id: str,
        order: PoleOrder = PoleOrder.NEWEST_FIRST,
    ) -> list[Pole]:
        """List every listing owned by a user, any status."""
        query = self._db.table(POLES_TABLE).select("*").eq("owner_id", owner_id)
        result = apply_order(query, order).execute()
        return [self._map_to_pole(row) for row in result.data or []]

    def get_by_id(self, pole_id: str) -> Optional[Pole]:
        """Get a listing by ID, or None if it does not exist."""
        result = self._db.table(POLES_TABLE).select("*").eq("id", pole_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_pole(row)

    def get_owner_summary(self, owner_id: str) -> Optional[OwnerSummary]:
        """Public profile fields of a listing owner, or None without a profile."""
        result = (
            self._db.table(PROFILES_TABLE)
            .select(OWNER_PUBLIC_COLUMNS)
            .eq("user_id", owner_id)
            .execute()
        )
        row = self._first(result.data)
        if row is None:
            return None
        return OwnerSummary(
            name=row.get("name"),
            email=row.get("email"),
            club_name=row.get("club_name"),
        )

    def create(self, data: dict[str, Any]) -> Pole:
        """
        Insert a listing.

        Args:
            data: Column values including ``owner_id``.

        Returns:
            The persisted listing with generated ID and timestamps.
        """
        result = self._db.table(POLES_TABLE).insert(data).execute()
        return self._map_to_pole(result.data[0])

    def update(self, pole_id: str, data: dict[str, Any]) -> Optional[Pole]:
        """
        Overwrite a listing's writable columns.

        ``owner_id`` is stripped from ``data`` so ownership can never move.

        Returns:
            The updated listing, or None if the row vanished meanwhile.
        """
        payload = {k: v for k, v in data.items() if k not in ("id", "owner_id", "created_at")}
        payload["updated_at"] = self._now()
        result = self._db.table(POLES_TABLE).update(payload).eq("id", pole_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_pole(row)

    def delete(self, pole_id: str) -> bool:
        """
        Delete a listing.

        Returns:
            True if deletion was executed.

        Note: Pole requests referencing the listing are left untouched.
        """
        self._db.table(POLES_TABLE).delete().eq("id", pole_id).execute()
        return True

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_pole(self, data: dict[str, Any]) -> Pole:
        """Map database row to Pole model. Falsy optionals become None."""
        return Pole(
            id=str(data["id"]),
            owner_id=str(data["owner_id"]),
            length_cm=data["length_cm"],
            weight_lbs=data["weight_lbs"],
            brand=data["brand"],
            condition_rating=data["condition_rating"],
            status=PoleStatus(data["status"]),
            municipality=data.get("municipality") or "",
            postal_code=data.get("postal_code") or "",
            flex_rating=data.get("flex_rating") or None,
            production_year=data.get("production_year") or None,
            image_urls=data.get("image_urls") or None,
            internal_notes=data.get("internal_notes") or None,
            serial_number=data.get("serial_number") or None,
            price_weekly=data.get("price_weekly") or None,
            price_sale=data.get("price_sale") or None,
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
