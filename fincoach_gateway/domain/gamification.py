"""Level/XP progression - maps a cumulative experience counter to a level"""

import math
from types import MappingProxyType
from fincoach_gateway.domain.models import ExperienceAward, XPProgress
from fincoach_gateway.domain.exceptions import InvalidInputError

XP_PER_LEVEL_STEP = 100

XP_REWARDS = MappingProxyType(
    {
        "add_expense": 5,
        "complete_challenge": 50,
        "reach_savings_goal": 100,
        "complete_learning_module": 25,
        "maintain_streak": 10,
        "optimize_budget": 30,
        "emergency_fund_contribution": 20,
    }
)


def _require_non_negative(experience: int) -> None:
    if experience < 0:
        raise InvalidInputError("Experience cannot be negative")


def calculate_level(experience: int) -> int:
    """
    Level for a cumulative XP total.

    Level L needs L * 100 XP to clear, so 100 XP reaches level 2,
    300 reaches level 3, 600 reaches level 4 and so on. Level L starts at
    (L - 1) * L * 50 XP, so the level is solved directly with an integer
    square root rather than by walking the levels.

    Raises:
        InvalidInputError: experience is negative
    """
    _require_non_negative(experience)

    # Largest L with (L - 1) * L <= experience / 50
    pairs = int(experience // (XP_PER_LEVEL_STEP // 2))
    level = (1 + math.isqrt(4 * pairs + 1)) // 2

    while xp_to_reach_level(level + 1) <= experience:
        level += 1
    while level > 1 and xp_to_reach_level(level) > experience:
        level -= 1

    return level


def xp_to_reach_level(level: int) -> int:
    """Cumulative XP at which a level starts (triangular number * 100)"""
    return (level - 1) * level * (XP_PER_LEVEL_STEP // 2)


def get_xp_progress(experience: int) -> XPProgress:
    """XP earned within the current level and the size of that level"""
    level = calculate_level(experience)
    start = xp_to_reach_level(level)
    end = xp_to_reach_level(level + 1)

    return XPProgress(current=experience - start, required=end - start)


def experience_for_action(action: str) -> int:
    """XP granted for a user action; unknown actions earn nothing"""
    return XP_REWARDS.get(action, 0)


def award_experience(experience: int, action: str) -> ExperienceAward:
    """Apply an action's XP to a running total. XP is never decremented."""
    level_before = calculate_level(experience)
    points = experience_for_action(action)
    new_experience = experience + points
    level_after = calculate_level(new_experience)

    return ExperienceAward(
        action=action,
        points=points,
        experience=new_experience,
        level=level_after,
        leveled_up=level_after > level_before,
    )
