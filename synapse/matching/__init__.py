# Skill matching and explore feed ranking

from .aggregator import build_profile, build_profiles
from .feed import compose_articles, compose_feed, compose_people, compose_projects
from .matcher import (
    amplified_match_score,
    compute_overlap,
    match_candidates,
    standard_match_score,
)
from .normalizer import normalize, normalize_skills, skill_equals_ignore_case
from .ranker import merge_feed, rank
from .types import FeedItem, MatchCandidate, SkillOverlap, UserSkillProfile

__all__ = [
    "normalize",
    "normalize_skills",
    "skill_equals_ignore_case",
    "build_profile",
    "build_profiles",
    "compute_overlap",
    "standard_match_score",
    "amplified_match_score",
    "match_candidates",
    "compose_people",
    "compose_projects",
    "compose_articles",
    "compose_feed",
    "rank",
    "merge_feed",
    "UserSkillProfile",
    "SkillOverlap",
    "MatchCandidate",
    "FeedItem",
]
