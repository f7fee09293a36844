"""
Explore feed composition.

Builds three independently scored branches and merges them:

- people: amplified reciprocal scale (see ``matcher.amplified_match_score``)
- open projects: ``skills_needed`` entries the query user can teach
- articles: ``tags`` the query user wants to learn

Project skills and article tags are compared with a read-time
case-insensitive equality, not the write-time normalizer. The two matching
semantics differ on purpose and must not be unified.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from synapse.constants import (
    ARTICLE_BASE_SCORE,
    ARTICLE_PER_TAG,
    PROJECT_BASE_SCORE,
    PROJECT_PER_SKILL,
    PROJECT_STATUS_OPEN,
    PROJECT_SUBTITLE,
    UNKNOWN_AUTHOR,
    FeedItemType,
)

from .matcher import amplified_match_score, compute_overlap
from .normalizer import skill_equals_ignore_case
from .ranker import merge_feed
from .types import FeedItem, SkillOverlap, UserSkillProfile


def _people_reason(overlap: SkillOverlap) -> str:
    if overlap.is_reciprocal:
        return (
            f"Perfect Match: Can teach you {len(overlap.teach)} skills "
            f"and needs your help with {len(overlap.learn)}."
        )
    if overlap.teach:
        return f"Mentor: Can teach you {', '.join(overlap.teach)}."
    return f"Student: Needs your help with {', '.join(overlap.learn)}."


def case_insensitive_overlap(values: Iterable[str], wanted: Iterable[str]) -> list[str]:
    """
    Entries of ``values`` equal to any of ``wanted`` ignoring case.

    Entries keep their stored spelling; duplicates in ``values`` each count.
    """
    wanted = list(wanted)
    return [
        value
        for value in values
        if isinstance(value, str) and any(skill_equals_ignore_case(w, value) for w in wanted)
    ]


def compose_people(
    query: UserSkillProfile, candidates: Iterable[UserSkillProfile]
) -> list[FeedItem]:
    items = []
    for candidate in candidates:
        if candidate.user_id == query.user_id:
            continue
        overlap = compute_overlap(query, candidate)
        score = amplified_match_score(overlap)
        if score <= 0:
            continue
        items.append(
            FeedItem(
                id=candidate.user_id,
                type=FeedItemType.USER.value,
                title=candidate.full_name,
                subtitle=candidate.username,
                image_url=candidate.avatar_url,
                description=candidate.bio,
                score=score,
                reasons=[_people_reason(overlap)],
                details={
                    "match_skills": [*overlap.teach, *overlap.learn],
                    "teach": list(candidate.teach),
                    "learn": list(candidate.learn),
                },
            )
        )
    return items


def compose_projects(
    query: UserSkillProfile, projects: Iterable[Mapping[str, Any]]
) -> list[FeedItem]:
    """
    Open projects needing skills the query user teaches.

    Rows without a ``status`` are treated as open.
    """
    items = []
    for project in projects:
        if project.get("status", PROJECT_STATUS_OPEN) != PROJECT_STATUS_OPEN:
            continue
        skills_needed = list(project.get("skills_needed") or [])
        overlap = case_insensitive_overlap(skills_needed, query.teach)
        if not overlap:
            continue
        items.append(
            FeedItem(
                id=project["id"],
                type=FeedItemType.PROJECT.value,
                title=project.get("title"),
                subtitle=PROJECT_SUBTITLE,
                image_url=project.get("image_url"),
                description=project.get("description"),
                score=PROJECT_BASE_SCORE + PROJECT_PER_SKILL * len(overlap),
                reasons=[f"Needs your superpowers in {', '.join(overlap)}"],
                details={"skills_needed": skills_needed},
            )
        )
    return items


def compose_articles(
    query: UserSkillProfile, articles: Iterable[Mapping[str, Any]]
) -> list[FeedItem]:
    """Articles tagged with skills the query user wants to learn."""
    items = []
    for article in articles:
        tags = list(article.get("tags") or [])
        overlap = case_insensitive_overlap(tags, query.learn)
        if not overlap:
            continue
        author = article.get("author_name") or UNKNOWN_AUTHOR
        items.append(
            FeedItem(
                id=article["id"],
                type=FeedItemType.ARTICLE.value,
                title=article.get("title"),
                subtitle=f"By {author}",
                image_url=article.get("featured_image"),
                description=article.get("excerpt"),
                score=ARTICLE_BASE_SCORE + ARTICLE_PER_TAG * len(overlap),
                reasons=[f"Learn about {', '.join(overlap)}"],
                details={"tags": tags},
            )
        )
    return items


def compose_feed(
    query: UserSkillProfile,
    candidates: Iterable[UserSkillProfile],
    projects: Iterable[Mapping[str, Any]],
    articles: Iterable[Mapping[str, Any]],
) -> list[FeedItem]:
    """Build all three branches and merge them into one ranked feed."""
    return merge_feed(
        compose_people(query, candidates),
        compose_projects(query, projects),
        compose_articles(query, articles),
    )


__all__ = [
    "case_insensitive_overlap",
    "compose_people",
    "compose_projects",
    "compose_articles",
    "compose_feed",
]
