"""
Transient value types produced by the matching engine.

All of them are computed per request relative to one querying user and
serialize to plain dicts via ``to_dict()``.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class UserSkillProfile:
    """
    Teach/learn skills of one user, plus card display fields.

    Skills are unique within each list and kept in declaration order.
    """

    user_id: int
    teach: list[str] = field(default_factory=list)
    learn: list[str] = field(default_factory=list)
    full_name: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    bio: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.teach and not self.learn


@dataclass
class SkillOverlap:
    """
    Bidirectional overlap between a candidate C and the query user Q.

    teach: skills C can teach that Q wants to learn.
    learn: skills C wants to learn that Q can teach.
    """

    teach: list[str] = field(default_factory=list)
    learn: list[str] = field(default_factory=list)

    @property
    def is_reciprocal(self) -> bool:
        return bool(self.teach) and bool(self.learn)

    @property
    def is_empty(self) -> bool:
        return not self.teach and not self.learn


@dataclass
class MatchCandidate:
    user_id: int
    full_name: str | None
    username: str | None
    avatar_url: str | None
    bio: str | None
    teach: list[str]
    learn: list[str]
    teach_overlap: list[str]
    learn_overlap: list[str]
    score: int
    badges: list[str] = field(default_factory=list)
    reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "full_name": self.full_name,
            "username": self.username,
            "avatar_url": self.avatar_url,
            "bio": self.bio,
            "teach": list(self.teach),
            "learn": list(self.learn),
            "teach_overlap": list(self.teach_overlap),
            "learn_overlap": list(self.learn_overlap),
            "score": self.score,
            "badges": list(self.badges),
            "reasons": list(self.reasons),
        }


@dataclass
class FeedItem:
    id: int
    type: str
    title: str | None
    subtitle: str | None
    image_url: str | None
    description: str | None
    score: int
    reasons: list[str] = field(default_factory=list)
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "subtitle": self.subtitle,
            "image_url": self.image_url,
            "description": self.description,
            "score": self.score,
            "reasons": list(self.reasons),
            "details": dict(self.details),
        }


__all__ = ["UserSkillProfile", "SkillOverlap", "MatchCandidate", "FeedItem"]
