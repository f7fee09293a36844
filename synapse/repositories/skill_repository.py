"""Skill declaration repository."""

from collections.abc import Iterable
from typing import Any

from synapse.constants import SkillType
from synapse.logging import get_logger
from synapse.matching.normalizer import normalize_skills
from synapse.models import Profile, SynapseSkill, User

from .base import BaseRepository, translate_db_errors

logger = get_logger("repository.skill")


class SkillRepository(BaseRepository[SynapseSkill]):
    """Repository for SynapseSkill operations."""

    model = SynapseSkill

    @translate_db_errors("list_skills")
    def list_skills(self, user_id: int) -> list[dict[str, Any]]:
        """Return ``[{skill, type}]`` for one user in declaration order."""
        rows = (
            self.session.query(SynapseSkill.skill, SynapseSkill.type)
            .filter(SynapseSkill.user_id == user_id)
            .order_by(SynapseSkill.id)
            .all()
        )
        return [{"skill": skill, "type": skill_type} for skill, skill_type in rows]

    @translate_db_errors("list_all_others_with_skills")
    def list_all_others_with_skills(self, exclude_user_id: int) -> list[dict[str, Any]]:
        """
        Return one row per skill declaration of every other profiled user.

        Rows are ``{user_id, full_name, username, avatar_url, bio, skill,
        type}`` ordered by declaration id, so users appear in a stable order.
        """
        rows = (
            self.session.query(
                User.id,
                Profile.full_name,
                Profile.username,
                Profile.avatar_url,
                Profile.bio,
                SynapseSkill.skill,
                SynapseSkill.type,
            )
            .join(Profile, Profile.user_id == User.id)
            .join(SynapseSkill, SynapseSkill.user_id == User.id)
            .filter(User.id != exclude_user_id)
            .order_by(SynapseSkill.id)
            .all()
        )
        return [
            {
                "user_id": user_id,
                "full_name": full_name,
                "username": username,
                "avatar_url": avatar_url,
                "bio": bio,
                "skill": skill,
                "type": skill_type,
            }
            for user_id, full_name, username, avatar_url, bio, skill, skill_type in rows
        ]

    def _new_row(self, user_id: int, skill: str, skill_type: SkillType) -> SynapseSkill:
        return SynapseSkill(user_id=user_id, skill=skill, type=skill_type.value)

    @translate_db_errors("replace_skills")
    def replace_skills(
        self,
        user_id: int,
        teach: Iterable[Any] | None,
        learn: Iterable[Any] | None,
    ) -> int:
        """
        Replace the user's whole skill set with the submitted lists.

        Deletes every existing declaration, then inserts the normalized
        teach and learn skills. Runs inside the caller's session so the
        delete and the inserts commit or roll back together.

        Returns:
            Number of declarations inserted.
        """
        deleted = (
            self.session.query(SynapseSkill)
            .filter(SynapseSkill.user_id == user_id)
            .delete(synchronize_session=False)
        )

        inserted = 0
        for skill_type, raw_skills in ((SkillType.TEACH, teach), (SkillType.LEARN, learn)):
            for skill in normalize_skills(raw_skills):
                self.session.add(self._new_row(user_id, skill, skill_type))
                inserted += 1

        self.session.flush()
        logger.info("skills_replaced", user_id=user_id, deleted=deleted, inserted=inserted)
        return inserted
