"""
Quest Proposer Interface (Port).

Produces quest proposals for a hunter. Implementations never fail: they
recover internally and always return at least one proposal.
"""
from typing import Protocol, List

from domain.models import Hunter, QuestProposal, QuestType


class QuestProposer(Protocol):
    """
    Abstract interface for quest generation.
    """

    async def generate(
        self,
        hunter: Hunter,
        quest_type: QuestType,
        count: int,
    ) -> List[QuestProposal]:
        """
        Propose up to ``count`` quests of one cadence.

        Returns:
            Non-empty list of proposals tagged with ``quest_type``
        """
        ...
