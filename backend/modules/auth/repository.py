"""
Repository for email/password accounts in ``local_users``.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import LocalUser


LOCAL_USERS_TABLE = "local_users"


class LocalUserRepository(BaseRepository[LocalUser]):
    """Lookup and insert of local accounts. Emails are stored lower-cased."""

    def get_by_email(self, email: str) -> Optional[LocalUser]:
        result = (
            self._db.table(LOCAL_USERS_TABLE)
            .select("*")
            .eq("email", email.lower())
            .execute()
        )
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_local_user(row)

    def create(self, user_id: str, email: str, name: str, password_hash: str) -> LocalUser:
        result = self._db.table(LOCAL_USERS_TABLE).insert({
            "id": user_id,
            "email": email.lower(),
            "name": name,
            "password_hash": password_hash,
        }).execute()
        return self._map_to_local_user(result.data[0])

    def _map_to_local_user(self, data: dict[str, Any]) -> LocalUser:
        """Map database row to LocalUser model."""
        return LocalUser(
            id=str(data["id"]),
            email=data["email"],
            name=data.get("name") or "",
            password_hash=data["password_hash"],
            email_verified=bool(data.get("email_verified", False)),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
