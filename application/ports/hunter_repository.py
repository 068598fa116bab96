"""
Hunter Repository Interface (Port).

This module defines the abstract interface for the hunter profile store.
Level and rank are not persisted: implementations store xp and return
Hunter models, which derive level and rank from xp.
"""
from typing import Protocol, Optional, List, Dict, Any

from domain.models import Hunter, LeaderboardEntry
from domain.progression import StatDelta


class HunterRepository(Protocol):
    """
    Abstract interface for hunter profile persistence.

    XP and stat changes are increments applied by the store in a single
    statement, so concurrent awards never overwrite each other.
    """

    def get(self, user_id: str) -> Optional[Hunter]:
        """
        Get a hunter by user ID.

        Args:
            user_id: Auth provider user ID

        Returns:
            Hunter or None if no profile exists

        Raises:
            PersistenceError: If the store is unreachable
        """
        ...

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
        Create the hunter if missing, otherwise refresh identity fields.

        New hunters start at xp=0 with every stat at 10. Progression fields
        of an existing hunter are never touched.
        """
        ...

    def update_profile(self, user_id: str, fields: Dict[str, Any]) -> Hunter:
        """
        Apply a partial profile update.

        Args:
            user_id: User ID
            fields: Column -> value; never contains xp or stats

        Returns:
            Updated Hunter

        Raises:
            HunterNotFoundError: If no profile exists
        """
        ...

    def add_xp(self, user_id: str, gain: int) -> Hunter:
        """
        Atomically increase a hunter's xp.

        Args:
            user_id: User ID
            gain: XP to add (>= 0, validated by the caller)

        Returns:
            Hunter after the increment

        Raises:
            HunterNotFoundError: If no profile exists
        """
        ...

    def add_stats(self, user_id: str, delta: StatDelta) -> Hunter:
        """
        Atomically add stat increments.

        Returns:
            Hunter after the increment

        Raises:
            HunterNotFoundError: If no profile exists
        """
        ...

    def leaderboard(self, limit: int = 50) -> List[LeaderboardEntry]:
        """Top hunters by xp, descending."""
        ...
