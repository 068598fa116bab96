"""
Quest Repository Interface (Port).

This module defines the abstract interface for quest persistence. Both
writes that touch more than one row are single store operations:

- replace_batch(): drop a cadence's quests and insert the new batch
- complete_and_award(): flip ``completed`` and add the quest's XP
"""
from datetime import datetime
from typing import List, NamedTuple, Optional, Protocol

from domain.models import Hunter, Quest, QuestProposal, QuestType


class QuestAward(NamedTuple):
    """Outcome of a completion that performed the pending -> completed transition."""

    quest: Quest
    hunter: Hunter
    previous_xp: int


class QuestRepository(Protocol):
    """
    Abstract interface for quest persistence.
    """

    def list(self, user_id: str, quest_type: Optional[QuestType] = None) -> List[Quest]:
        """
        Get a hunter's quests, newest first, optionally filtered by cadence.
        """
        ...

    def replace_batch(
        self,
        user_id: str,
        quest_type: QuestType,
        proposals: List[QuestProposal],
    ) -> List[Quest]:
        """
        Replace every quest of one cadence with ``proposals``, preserving order.

        The delete and the insert commit together. If the call fails the
        previous batch is still in place.

        Returns:
            The newly persisted quests

        Raises:
            PersistenceError: If the store fails
        """
        ...

    def complete_and_award(
        self,
        quest_id: int,
        *,
        user_id: str,
        completed_at: datetime,
    ) -> Optional[QuestAward]:
        """
        Complete a pending quest and add its reward to the owner's XP.

        Implemented as one transaction whose first step is a conditional
        update (``SET completed = true WHERE id = ? AND user_id = ? AND
        completed = false``), so of several concurrent calls exactly one
        observes the transition and the reward is added by that call only.
        If the award fails the quest stays pending.

        Args:
            quest_id: Quest ID
            user_id: Owner; other hunters' quests never match
            completed_at: Timestamp stored together with the flag

        Returns:
            QuestAward if this call performed the transition, None if the
            quest is unknown, owned by someone else or already completed

        Raises:
            PersistenceError: If the store fails; nothing is applied
        """
        ...
