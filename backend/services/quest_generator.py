"""
Quest generation backed by an external text-generation provider.

The provider is untrusted: its output is parsed defensively and every
candidate is validated on its own. Whenever nothing usable comes back
(provider error, timeout, malformed JSON, schema violation or an empty
list) the batch is replaced by a single deterministic fallback quest, so
callers always receive at least one quest and never see generation errors.
"""

import json
import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from application.ports import TextGenerator
from backend.services.prompts import QUEST_SYSTEM_PROMPT, build_quest_prompt
from domain.models import Hunter, QuestProposal, QuestType
from shared.ai_context import AIRequestContext

logger = logging.getLogger(__name__)

FALLBACK_QUEST_TITLE = "System Directive Fallback"
FALLBACK_QUEST_DESCRIPTION = (
    "Log any workout session to complete this objective. AI quest generation failed."
)
FALLBACK_QUEST_XP = 50

DEFAULT_QUEST_MODEL = "llama3-70b-8192"
QUEST_TEMPERATURE = 1.1
QUEST_MAX_TOKENS = 1024


class QuestParseError(Exception):
    """The provider response is not a JSON object with a "quests" array."""

    pass


def fallback_quest(quest_type: QuestType) -> QuestProposal:
    """The deterministic quest substituted when generation yields nothing."""
    return QuestProposal(
        title=FALLBACK_QUEST_TITLE,
        description=FALLBACK_QUEST_DESCRIPTION,
        xp_reward=FALLBACK_QUEST_XP,
        type=quest_type,
    )


def _strip_code_fence(raw: str) -> str:
    text = raw.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
    return text.strip()


def _parse_xp_reward(value: Any) -> Optional[int]:
    """
    Parse an XP reward as an integer.

    Accepts ints, integral floats and numeric strings. Booleans and
    fractional values are rejected.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_quest_candidates(raw: str) -> List[dict]:
    """
    Extract the raw candidate list from a provider response.

    Args:
        raw: Provider response text

    Returns:
        The "quests" array (possibly empty)

    Raises:
        QuestParseError: If the text is empty, not JSON, or lacks a "quests" array
    """
    text = _strip_code_fence(raw or "")
    if not text:
        raise QuestParseError("Empty response from provider")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise QuestParseError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise QuestParseError("Response is not a JSON object")

    quests = data.get("quests")
    if not isinstance(quests, list):
        raise QuestParseError('Response has no "quests" array')

    return quests


def validate_candidate(candidate: Any, quest_type: QuestType) -> Optional[QuestProposal]:
    """
    Validate a single candidate record.

    A candidate is usable when it has a non-empty title, a non-empty
    description and an XP reward that parses as a non-negative integer.
    Both ``xpReward`` and ``xp_reward`` keys are accepted.

    Returns:
        QuestProposal tagged with ``quest_type``, or None if invalid
    """
    if not isinstance(candidate, dict):
        return None

    title = candidate.get("title")
    description = candidate.get("description")
    if not isinstance(title, str) or not isinstance(description, str):
        return None

    raw_reward = candidate.get("xpReward", candidate.get("xp_reward"))
    xp_reward = _parse_xp_reward(raw_reward)
    if xp_reward is None:
        return None

    try:
        return QuestProposal(
            title=title,
            description=description,
            xp_reward=xp_reward,
            type=quest_type,
        )
    except ValidationError:
        return None


class QuestGenerator:
    """
    Generates quest proposals for a hunter with validate-or-substitute semantics.
    """

    def __init__(
        self,
        text_generator: TextGenerator,
        model: str = DEFAULT_QUEST_MODEL,
        environment: str = "production",
    ):
        """
        Args:
            text_generator: Provider used for completions
            model: Provider model name
            environment: Deployment environment, attached to request context
        """
        self._text_generator = text_generator
        self._model = model
        self._environment = environment

    async def generate(
        self,
        hunter: Hunter,
        quest_type: QuestType,
        count: int,
    ) -> List[QuestProposal]:
        """
        Request ``count`` quests of one cadence for a hunter.

        Invalid candidates are discarded individually. Candidates beyond
        ``count`` are dropped.

        Args:
            hunter: Hunter the quests are for
            quest_type: DAILY or WEEKLY
            count: Number of quests requested (>= 1)

        Returns:
            Non-empty list of proposals, each with ``type == quest_type``

        Raises:
            ValueError: If quest_type is not a generated cadence or count < 1
        """
        if not quest_type.is_generated:
            raise ValueError(f"Quests of type '{quest_type.value}' are not generated")
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")

        try:
            raw = await self._request(hunter, quest_type, count)
            candidates = parse_quest_candidates(raw)
        except Exception as e:
            logger.warning(
                "Quest generation failed for user %s (%s): %s; using fallback",
                hunter.id, quest_type.value, e,
            )
            return [fallback_quest(quest_type)]

        proposals: List[QuestProposal] = []
        for index, candidate in enumerate(candidates):
            proposal = validate_candidate(candidate, quest_type)
            if proposal is None:
                logger.warning(
                    "Discarding invalid %s quest candidate #%d for user %s",
                    quest_type.value, index, hunter.id,
                )
                continue
            proposals.append(proposal)

        if not proposals:
            logger.warning(
                "No usable %s quests for user %s (%d candidates); using fallback",
                quest_type.value, hunter.id, len(candidates),
            )
            return [fallback_quest(quest_type)]

        return proposals[:count]

    async def _request(self, hunter: Hunter, quest_type: QuestType, count: int) -> str:
        context = AIRequestContext(
            user_id=hunter.id,
            feature_name="quest_generation",
            environment=self._environment,
            extra={"quest_type": quest_type.value},
        )
        return await self._text_generator.complete(
            [
                {"role": "system", "content": QUEST_SYSTEM_PROMPT},
                {"role": "user", "content": build_quest_prompt(hunter, quest_type, count)},
            ],
            model=self._model,
            temperature=QUEST_TEMPERATURE,
            max_tokens=QUEST_MAX_TOKENS,
            json_output=True,
            context=context,
        )
