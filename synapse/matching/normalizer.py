"""
Skill text canonicalization.

Every TEACH/LEARN skill is normalized once, when it is written. Project
``skills_needed`` and article ``tags`` deliberately do not go through here;
see ``skill_equals_ignore_case``.
"""

from collections.abc import Iterable
from typing import Any


def normalize(raw: Any) -> str:
    """
    Trim surrounding whitespace and lower-case a skill.

    Total and idempotent: ``None`` becomes ``""`` and any other value is
    converted with ``str()`` first.
    """
    if raw is None:
        return ""
    return str(raw).strip().lower()


def normalize_skills(raw_skills: Iterable[Any] | None) -> list[str]:
    """
    Normalize a submitted skill list for storage.

    Skills that normalize to an empty string are dropped. Duplicates are
    collapsed, keeping first-seen order.
    """
    if not raw_skills:
        return []

    seen: dict[str, None] = {}
    for raw in raw_skills:
        skill = normalize(raw)
        if skill and skill not in seen:
            seen[skill] = None
    return list(seen)


def skill_equals_ignore_case(left: str, right: str) -> bool:
    """
    Read-time comparison used for project skills and article tags.

    Only case is folded (no trimming): those values are stored as typed and
    never canonicalized, so a padded tag does not match.
    """
    return left.lower() == right.lower()


__all__ = ["normalize", "normalize_skills", "skill_equals_ignore_case"]
