"""
LLM prompt templates for quest generation and The System persona.

Profile values are sanitized before they are embedded in a prompt so user
input cannot inject new instructions.
"""

import re
from typing import Optional

from domain.models import Hunter, QuestType

MAX_PROMPT_VALUE_LENGTH = 200

# Inclusive XP reward range per cadence
XP_REWARD_RANGES = {
    QuestType.DAILY: (50, 200),
    QuestType.WEEKLY: (250, 500),
}


def sanitize_prompt_value(value: Optional[str], max_length: int = MAX_PROMPT_VALUE_LENGTH) -> str:
    """
    Make a user-supplied value safe for prompt inclusion.

    Removes newlines and other control characters, collapses runs of spaces,
    strips and truncates.
    """
    if not value:
        return ""
    sanitized = re.sub(r"[\n\r\t\x00-\x1f\x7f-\x9f]", " ", value)
    sanitized = re.sub(r" +", " ", sanitized)
    return sanitized.strip()[:max_length]


# =============================================================================
# Quest generation
# =============================================================================

QUEST_SYSTEM_PROMPT = (
    "You are an assistant that only responds with valid JSON matching the "
    "user's requested schema."
)

QUEST_USER_PROMPT = """Generate a JSON object for a fitness RPG app.
The JSON object must have a single key "quests", which is an array of quest objects.
Generate exactly {count} unique {quest_type} quests for the user described below.

USER PROFILE:
- Goal: {goal}
- Level: {level}
- Class: {character_class}

QUEST REQUIREMENTS:
- Each quest object must have three keys: "title" (string), "description" (string, one sentence), and "xpReward" (integer between {min_xp}-{max_xp}).
- Do not include any other keys or text outside the main JSON object.
"""


def build_quest_prompt(hunter: Hunter, quest_type: QuestType, count: int) -> str:
    """
    Build the user prompt requesting ``count`` quests of one cadence.

    Args:
        hunter: Hunter the quests are for
        quest_type: DAILY or WEEKLY
        count: Number of quests requested

    Returns:
        Prompt text
    """
    min_xp, max_xp = XP_REWARD_RANGES.get(quest_type, XP_REWARD_RANGES[QuestType.DAILY])
    return QUEST_USER_PROMPT.format(
        count=count,
        quest_type=quest_type.value,
        goal=sanitize_prompt_value(hunter.fitness_goal) or "general fitness",
        level=hunter.level,
        character_class=sanitize_prompt_value(hunter.character_class) or "N/A",
        min_xp=min_xp,
        max_xp=max_xp,
    )


# =============================================================================
# The System (chat persona)
# =============================================================================

SYSTEM_PERSONA_PROMPT = """You are "The System", a sophisticated, no-nonsense AI from a sci-fi RPG world that oversees the training of hunters.
Speak with authority, concisely, and in the second person. Refer to the user as "Hunter".
Give practical fitness, training, recovery and nutrition guidance. Never give medical diagnoses.

HUNTER STATUS:
- Name: {name}
- Level: {level} ({rank})
- XP: {xp}
- Class: {character_class}
- Goal: {goal}
- Fitness level: {fitness_level}
- Stats: STR {strength} / END {endurance} / WIS {wisdom} / DIS {discipline}

Keep replies under 150 words."""


def build_system_prompt(hunter: Hunter) -> str:
    """Build the persona prompt carrying the hunter's current status."""
    name = " ".join(
        part for part in (
            sanitize_prompt_value(hunter.first_name),
            sanitize_prompt_value(hunter.last_name),
        ) if part
    )
    return SYSTEM_PERSONA_PROMPT.format(
        name=name or "Unknown",
        level=hunter.level,
        rank=hunter.rank,
        xp=hunter.xp,
        character_class=sanitize_prompt_value(hunter.character_class) or "Unassigned",
        goal=sanitize_prompt_value(hunter.fitness_goal) or "Unknown",
        fitness_level=sanitize_prompt_value(hunter.fitness_level) or "Unknown",
        strength=hunter.strength,
        endurance=hunter.endurance,
        wisdom=hunter.wisdom,
        discipline=hunter.discipline,
    )
