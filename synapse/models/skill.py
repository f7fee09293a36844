"""
Skill declaration SQLAlchemy model.
"""

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base

if TYPE_CHECKING:
    from .user import User


class SynapseSkill(Base):
    """
    One (user, skill, direction) declaration.

    ``skill`` is always stored normalized (trimmed, lower-cased); ``type`` is
    TEACH or LEARN. A user's full set is replaced as a whole on onboarding,
    never patched row by row.
    """

    __tablename__ = "synapse_skills"
    __table_args__ = (
        UniqueConstraint("user_id", "skill", "type", name="uq_synapse_skills_user_skill_type"),
        Index("ix_synapse_skills_skill_type", "skill", "type"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    skill: Mapped[str] = mapped_column(String(255))
    type: Mapped[str] = mapped_column(String(16))
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="skills")
