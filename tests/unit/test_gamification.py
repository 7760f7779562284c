"""Unit tests for level/XP progression"""

import pytest
from fincoach_gateway.domain.gamification import (
    calculate_level,
    get_xp_progress,
    xp_to_reach_level,
    experience_for_action,
    award_experience,
)
from fincoach_gateway.domain.exceptions import InvalidInputError


@pytest.mark.parametrize(
    "experience, level",
    [(0, 1), (99, 1), (100, 2), (299, 2), (300, 3), (599, 3), (600, 4), (1000, 5)],
)
def test_calculate_level_thresholds(experience, level):
    """Level L takes L * 100 XP to clear"""
    assert calculate_level(experience) == level


def test_calculate_level_rejects_negative_experience():
    with pytest.raises(InvalidInputError):
        calculate_level(-1)


def test_xp_progress_start_of_game():
    progress = get_xp_progress(0)
    assert (progress.current, progress.required) == (0, 100)


def test_xp_progress_mid_level():
    """150 XP: level 2 spans 100..300"""
    progress = get_xp_progress(150)
    assert progress.current == 50
    assert progress.required == 200
    assert progress.percent == 25


def _iterative_level(experience):
    """Walk the levels one at a time; reference for the closed form"""
    level = 1
    while xp_to_reach_level(level + 1) <= experience:
        level += 1
    return level


def test_closed_form_matches_iterative_levels():
    """Triangular thresholds agree with the iterative level schedule"""
    for experience in range(0, 5051):
        level = calculate_level(experience)
        assert level == _iterative_level(experience)
        assert xp_to_reach_level(level) <= experience < xp_to_reach_level(level + 1)

        progress = get_xp_progress(experience)
        assert 0 <= progress.current < progress.required
        assert progress.required == level * 100


def test_level_is_non_decreasing():
    levels = [calculate_level(xp) for xp in range(0, 3000)]
    assert all(a <= b for a, b in zip(levels, levels[1:]))


def test_experience_for_action():
    assert experience_for_action("add_expense") == 5
    assert experience_for_action("reach_savings_goal") == 100
    assert experience_for_action("unknown_action") == 0


def test_award_experience_levels_up():
    result = award_experience(95, "add_expense")

    assert result.points == 5
    assert result.experience == 100
    assert result.level == 2
    assert result.leveled_up is True


def test_award_experience_unknown_action_changes_nothing():
    result = award_experience(40, "dance")

    assert result.points == 0
    assert result.experience == 40
    assert result.level == 1
    assert result.leveled_up is False


@pytest.mark.parametrize("level", [10, 99, 1000, 44721])
def test_closed_form_exact_at_level_boundaries(level):
    """One XP short of a level stays below it; the threshold itself reaches it"""
    threshold = xp_to_reach_level(level)

    assert calculate_level(threshold - 1) == level - 1
    assert calculate_level(threshold) == level
    assert calculate_level(threshold) == _iterative_level(threshold)


@pytest.mark.parametrize("experience", [10**12, 10**18, 2**63 - 1, 10**30])
def test_calculate_level_huge_experience(experience):
    """Astronomical XP totals resolve without walking every level"""
    level = calculate_level(experience)

    assert xp_to_reach_level(level) <= experience < xp_to_reach_level(level + 1)
    assert get_xp_progress(experience).required == level * 100
