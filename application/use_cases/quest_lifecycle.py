"""
Quest Lifecycle Use Case.

Owns quest creation, replacement and one-time completion.

State machine per quest:

    Pending --complete()--> Completed   (terminal)

- regenerate(): replaces every quest of one cadence with a fresh batch in a
  single store write. Special quests are never touched.
- complete(): a compare-and-set on the ``completed`` flag and the XP award,
  committed together by the store. Only the call that performs the
  transition awards XP, so repeated or concurrent completions award the
  reward exactly once, and a failed award leaves the quest pending.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from application.exceptions import HunterNotFoundError, QuestNotCompletableError
from application.ports import HunterRepository, QuestProposer, QuestRepository
from domain.models import Hunter, Quest, QuestType
from domain.progression import apply_xp_gain, level_from_xp

logger = logging.getLogger(__name__)


@dataclass
class QuestCompletionResult:
    """Result of a successful quest completion."""

    quest: Quest
    hunter: Hunter
    xp_awarded: int
    leveled_up: bool = False


class QuestLifecycleManager:
    """
    Use case for generating, listing and completing quests.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> manager = QuestLifecycleManager(quest_repo, hunter_repo, quest_proposer)
        >>> quests = await manager.regenerate("user-123", QuestType.DAILY, 3)
        >>> result = manager.complete("user-123", quests[0].id)
    """

    def __init__(
        self,
        quest_repo: QuestRepository,
        hunter_repo: HunterRepository,
        quest_proposer: QuestProposer,
    ) -> None:
        """
        Args:
            quest_repo: Repository for quest persistence
            hunter_repo: Repository for hunter profiles (read before generation)
            quest_proposer: Source of quest proposals (never fails)
        """
        self._quest_repo = quest_repo
        self._hunter_repo = hunter_repo
        self._quest_proposer = quest_proposer

    def list(self, user_id: str, quest_type: Optional[QuestType] = None) -> List[Quest]:
        """List a hunter's quests, optionally for one cadence."""
        return self._quest_repo.list(user_id, quest_type)

    async def regenerate(
        self,
        user_id: str,
        quest_type: QuestType,
        count: int,
    ) -> List[Quest]:
        """
        Replace every quest of ``quest_type`` with a newly generated batch.

        Proposals are obtained first. The old batch is then swapped for the
        new one in one store write, so a failure leaves the old batch intact.

        Args:
            user_id: Hunter ID
            quest_type: DAILY or WEEKLY
            count: Number of quests to request

        Returns:
            The newly persisted quests (at least one)

        Raises:
            HunterNotFoundError: If the hunter has no profile
            ValueError: If quest_type is not a generated cadence
            PersistenceError: If the store fails
        """
        if not quest_type.is_generated:
            raise ValueError(f"Quests of type '{quest_type.value}' cannot be regenerated")

        hunter = self._hunter_repo.get(user_id)
        if hunter is None:
            raise HunterNotFoundError(user_id)

        proposals = await self._quest_proposer.generate(hunter, quest_type, count)

        quests = self._quest_repo.replace_batch(user_id, quest_type, proposals)

        logger.info(
            "Regenerated %s quests for user %s: %d new",
            quest_type.value, user_id, len(quests),
        )
        return quests

    def complete(
        self,
        user_id: str,
        quest_id: int,
        now: Optional[datetime] = None,
    ) -> QuestCompletionResult:
        """
        Complete a pending quest and award its XP.

        Args:
            user_id: Hunter completing the quest; only their quests match
            quest_id: Quest ID
            now: Completion timestamp (defaults to UTC now)

        Returns:
            QuestCompletionResult with the completed quest and updated hunter

        Raises:
            QuestNotCompletableError: Unknown quest, another hunter's quest,
                or already completed. No XP is awarded.
            PersistenceError: If the store fails. The quest stays pending
                and the call can be repeated.
        """
        now = now or datetime.now(timezone.utc)

        award = self._quest_repo.complete_and_award(
            quest_id,
            user_id=user_id,
            completed_at=now,
        )
        if award is None:
            logger.info("Quest %s not completable for user %s", quest_id, user_id)
            raise QuestNotCompletableError(quest_id)

        quest, hunter = award.quest, award.hunter
        progression = apply_xp_gain(award.previous_xp, quest.xp_reward)
        leveled_up = progression.level > level_from_xp(award.previous_xp)
        logger.info(
            "Quest %s completed by user %s: +%d XP (level %d)",
            quest.id, quest.user_id, quest.xp_reward, hunter.level,
        )
        return QuestCompletionResult(
            quest=quest,
            hunter=hunter,
            xp_awarded=quest.xp_reward,
            leveled_up=leveled_up,
        )
