"""
Supabase implementation of QuestRepository.

Both writes go through PostgreSQL functions so that each commits as one
transaction:

- ``replace_quests`` deletes a cadence and inserts the new batch
- ``complete_quest_and_award`` performs the conditional
  ``completed = false -> true`` update and adds the reward to the owner's XP

An empty ``quest`` in the completion result means no row matched, so the
quest was unknown, someone else's or already completed.
"""
import logging
from datetime import datetime
from typing import List, Optional

from supabase import Client

from application.exceptions import PersistenceError
from application.ports.quest_repository import QuestAward
from domain.models import Hunter, Quest, QuestProposal, QuestType
from infrastructure.db.errors import persistence_errors

logger = logging.getLogger(__name__)

QUESTS_TABLE = "quests"


class SupabaseQuestRepository:
    """
    Supabase implementation of QuestRepository protocol.
    """

    def __init__(self, client: Client):
        """
        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def list(self, user_id: str, quest_type: Optional[QuestType] = None) -> List[Quest]:
        with persistence_errors("list quests"):
            query = self._client.table(QUESTS_TABLE).select("*").eq("user_id", user_id)
            if quest_type is not None:
                query = query.eq("type", quest_type.value)
            result = query.order("created_at", desc=True).execute()
        return [Quest.model_validate(row) for row in result.data or []]

    def replace_batch(
        self,
        user_id: str,
        quest_type: QuestType,
        proposals: List[QuestProposal],
    ) -> List[Quest]:
        rows = [
            {
                "title": p.title,
                "description": p.description,
                "xp_reward": p.xp_reward,
            }
            for p in proposals
        ]
        with persistence_errors("replace quests"):
            result = self._client.rpc(
                "replace_quests",
                {"p_user_id": user_id, "p_type": quest_type.value, "p_quests": rows},
            ).execute()
        return [Quest.model_validate(row) for row in result.data or []]

    def complete_and_award(
        self,
        quest_id: int,
        *,
        user_id: str,
        completed_at: datetime,
    ) -> Optional[QuestAward]:
        with persistence_errors("complete quest"):
            result = self._client.rpc(
                "complete_quest_and_award",
                {
                    "p_quest_id": quest_id,
                    "p_user_id": user_id,
                    "p_completed_at": completed_at.isoformat(),
                },
            ).execute()

        data = result.data
        if isinstance(data, list):
            data = data[0] if data else None
        if not data:
            raise PersistenceError("complete_quest_and_award returned no data")
        if not data.get("quest"):
            return None

        return QuestAward(
            quest=Quest.model_validate(data["quest"]),
            hunter=Hunter.model_validate(data["hunter"]),
            previous_xp=int(data["previous_xp"]),
        )
