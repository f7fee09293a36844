"""
Reciprocal skill matching between one query user and a set of candidates.

Two scoring scales exist for the same overlap computation and are kept
separate on purpose:

- ``standard_match_score``: the /matches scale.
- ``amplified_match_score``: the people branch of the explore feed.
"""

from collections.abc import Iterable

from synapse.constants import (
    AMPLIFIED_ONE_WAY_BASE,
    AMPLIFIED_ONE_WAY_PER_SKILL,
    AMPLIFIED_RECIPROCAL_BASE,
    AMPLIFIED_RECIPROCAL_PER_SKILL,
    BADGE_MENTOR,
    BADGE_PERFECT_MATCH,
    BADGE_STUDENT,
    STANDARD_MENTOR_BASE,
    STANDARD_MENTOR_PER_SKILL,
    STANDARD_RECIPROCAL_BASE,
    STANDARD_RECIPROCAL_PER_SKILL,
    STANDARD_STUDENT_BASE,
    STANDARD_STUDENT_PER_SKILL,
)

from .ranker import rank
from .types import MatchCandidate, SkillOverlap, UserSkillProfile


def compute_overlap(query: UserSkillProfile, candidate: UserSkillProfile) -> SkillOverlap:
    """
    Intersect the candidate's skills with the query user's.

    Overlap lists follow the candidate's declaration order.
    """
    wanted = set(query.learn)
    offered = set(query.teach)
    return SkillOverlap(
        teach=[skill for skill in candidate.teach if skill in wanted],
        learn=[skill for skill in candidate.learn if skill in offered],
    )


def standard_match_score(overlap: SkillOverlap) -> int:
    """
    Score on the /matches scale.

    Reciprocal: 50 + 5 per overlapping skill (both directions).
    Mentor only: 20 + 3 per skill. Student only: 10 + 2 per skill.
    """
    if overlap.is_reciprocal:
        return STANDARD_RECIPROCAL_BASE + STANDARD_RECIPROCAL_PER_SKILL * (
            len(overlap.teach) + len(overlap.learn)
        )
    if overlap.teach:
        return STANDARD_MENTOR_BASE + STANDARD_MENTOR_PER_SKILL * len(overlap.teach)
    if overlap.learn:
        return STANDARD_STUDENT_BASE + STANDARD_STUDENT_PER_SKILL * len(overlap.learn)
    return 0


def amplified_match_score(overlap: SkillOverlap) -> int:
    """
    Score on the explore-feed scale.

    Reciprocal: 100 + 10 per overlapping skill. One-way (mentor or
    student): 50 + 5 per skill.
    """
    if overlap.is_reciprocal:
        return AMPLIFIED_RECIPROCAL_BASE + AMPLIFIED_RECIPROCAL_PER_SKILL * (
            len(overlap.teach) + len(overlap.learn)
        )
    if overlap.teach:
        return AMPLIFIED_ONE_WAY_BASE + AMPLIFIED_ONE_WAY_PER_SKILL * len(overlap.teach)
    if overlap.learn:
        return AMPLIFIED_ONE_WAY_BASE + AMPLIFIED_ONE_WAY_PER_SKILL * len(overlap.learn)
    return 0


def describe_match(overlap: SkillOverlap) -> tuple[list[str], list[str]]:
    """Return (badges, reasons) for a /matches candidate."""
    if overlap.is_reciprocal:
        return [BADGE_PERFECT_MATCH], [
            f"Can teach you {', '.join(overlap.teach)} "
            f"and wants to learn {', '.join(overlap.learn)}"
        ]
    if overlap.teach:
        return [BADGE_MENTOR], [f"Can teach you {', '.join(overlap.teach)}"]
    if overlap.learn:
        return [BADGE_STUDENT], [f"Wants to learn {', '.join(overlap.learn)} from you"]
    return [], []


def score_candidate(query: UserSkillProfile, candidate: UserSkillProfile) -> MatchCandidate:
    overlap = compute_overlap(query, candidate)
    badges, reasons = describe_match(overlap)
    return MatchCandidate(
        user_id=candidate.user_id,
        full_name=candidate.full_name,
        username=candidate.username,
        avatar_url=candidate.avatar_url,
        bio=candidate.bio,
        teach=list(candidate.teach),
        learn=list(candidate.learn),
        teach_overlap=overlap.teach,
        learn_overlap=overlap.learn,
        score=standard_match_score(overlap),
        badges=badges,
        reasons=reasons,
    )


def match_candidates(
    query: UserSkillProfile, candidates: Iterable[UserSkillProfile]
) -> list[MatchCandidate]:
    """
    Score every candidate against the query user and rank the result.

    The query user is skipped even if present among the candidates; zero
    scores are dropped.
    """
    scored = [
        score_candidate(query, candidate)
        for candidate in candidates
        if candidate.user_id != query.user_id
    ]
    return rank(scored)


__all__ = [
    "compute_overlap",
    "standard_match_score",
    "amplified_match_score",
    "describe_match",
    "score_candidate",
    "match_candidates",
]
