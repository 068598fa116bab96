"""
Supabase implementation of HunterRepository.

Hunters live in the ``users`` table. The table stores xp but no level or
rank: Hunter models derive both from xp on read. XP and stat increments go
through PostgreSQL functions so each is a single UPDATE statement.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import HunterNotFoundError
from domain.models import Hunter, LeaderboardEntry
from domain.progression import StatDelta
from infrastructure.db.errors import persistence_errors

logger = logging.getLogger(__name__)

USERS_TABLE = "users"
LEADERBOARD_COLUMNS = "id, first_name, last_name, profile_image_url, xp"


def _first_row(data: Any) -> Optional[Dict[str, Any]]:
    """RPCs may return a single row or a one-element list."""
    if isinstance(data, list):
        return data[0] if data else None
    return data or None


class SupabaseHunterRepository:
    """
    Supabase implementation of HunterRepository protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def get(self, user_id: str) -> Optional[Hunter]:
        with persistence_errors("get hunter"):
            result = (
                self._client.table(USERS_TABLE)
                .select("*")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        if not result.data:
            return None
        return Hunter.model_validate(result.data[0])

    def upsert(
        self,
        user_id: str,
        *,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        profile_image_url: Optional[str] = None,
    ) -> Hunter:
        """
        Insert or refresh identity columns only.

        Progression columns are omitted so new rows take the table defaults
        and existing rows keep their values.
        """
        data: Dict[str, Any] = {
            "id": user_id,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        identity = {
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "profile_image_url": profile_image_url,
        }
        data.update({k: v for k, v in identity.items() if v is not None})

        with persistence_errors("upsert hunter"):
            result = (
                self._client.table(USERS_TABLE)
                .upsert(data, on_conflict="id")
                .execute()
            )
        if not result.data:
            raise HunterNotFoundError(user_id)
        return Hunter.model_validate(result.data[0])

    def update_profile(self, user_id: str, fields: Dict[str, Any]) -> Hunter:
        data = dict(fields)
        data["updated_at"] = datetime.now(timezone.utc).isoformat()

        with persistence_errors("update profile"):
            result = (
                self._client.table(USERS_TABLE)
                .update(data)
                .eq("id", user_id)
                .execute()
            )
        if not result.data:
            raise HunterNotFoundError(user_id)
        return Hunter.model_validate(result.data[0])

    def add_xp(self, user_id: str, gain: int) -> Hunter:
        with persistence_errors("increment xp"):
            result = self._client.rpc(
                "increment_hunter_xp",
                {"p_user_id": user_id, "p_gain": gain},
            ).execute()

        row = _first_row(result.data)
        if row is None:
            raise HunterNotFoundError(user_id)
        return Hunter.model_validate(row)

    def add_stats(self, user_id: str, delta: StatDelta) -> Hunter:
        with persistence_errors("increment stats"):
            result = self._client.rpc(
                "increment_hunter_stats",
                {
                    "p_user_id": user_id,
                    "p_strength": delta.strength,
                    "p_endurance": delta.endurance,
                    "p_wisdom": delta.wisdom,
                    "p_discipline": delta.discipline,
                },
            ).execute()

        row = _first_row(result.data)
        if row is None:
            raise HunterNotFoundError(user_id)
        return Hunter.model_validate(row)

    def leaderboard(self, limit: int = 50) -> List[LeaderboardEntry]:
        with persistence_errors("load leaderboard"):
            result = (
                self._client.table(USERS_TABLE)
                .select(LEADERBOARD_COLUMNS)
                .order("xp", desc=True)
                .limit(limit)
                .execute()
            )
        return [LeaderboardEntry.model_validate(row) for row in result.data or []]
