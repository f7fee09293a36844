"""
Groups flat skill declaration rows into per-user teach/learn profiles.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from synapse.constants import SkillType
from synapse.logging import get_logger

from .types import UserSkillProfile

logger = get_logger("matching.aggregator")

_DISPLAY_FIELDS = ("full_name", "username", "avatar_url", "bio")


def _append_unique(skills: list[str], skill: str) -> None:
    if skill not in skills:
        skills.append(skill)


def _add_skill(profile: UserSkillProfile, row: Mapping[str, Any]) -> None:
    skill_type = row.get("type")
    if skill_type == SkillType.TEACH.value:
        _append_unique(profile.teach, row["skill"])
    elif skill_type == SkillType.LEARN.value:
        _append_unique(profile.learn, row["skill"])
    else:
        # Unknown direction
        logger.debug(
            "skill_row_ignored",
            user_id=profile.user_id,
            skill=row.get("skill"),
            skill_type=skill_type,
        )


def build_profile(user_id: int, rows: Iterable[Mapping[str, Any]]) -> UserSkillProfile:
    """Build the profile of a single user from their ``{skill, type}`` rows."""
    profile = UserSkillProfile(user_id=user_id)
    for row in rows:
        _add_skill(profile, row)
    return profile


def build_profiles(rows: Iterable[Mapping[str, Any]]) -> dict[int, UserSkillProfile]:
    """
    Group ``{user_id, skill, type, ...display fields}`` rows by user.

    The returned dict keeps users in first-appearance order, which is the
    order candidates are scored and therefore the tie-break order of the
    ranked output. Display fields come from the first row seen for a user.
    """
    profiles: dict[int, UserSkillProfile] = {}
    for row in rows:
        user_id = row["user_id"]
        profile = profiles.get(user_id)
        if profile is None:
            profile = UserSkillProfile(
                user_id=user_id,
                **{name: row.get(name) for name in _DISPLAY_FIELDS},
            )
            profiles[user_id] = profile
        _add_skill(profile, row)
    return profiles


__all__ = ["build_profile", "build_profiles"]
