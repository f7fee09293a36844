"""
Application constants for Synapse.

Contains skill directions, badge labels and the scoring weights of the two
match scales and the project/article feed branches.
"""

from enum import Enum


class SkillType(str, Enum):
    """Direction of a skill declaration."""
    TEACH = "TEACH"
    LEARN = "LEARN"


class FeedItemType(str, Enum):
    """Kind of entry in the explore feed."""
    USER = "user"
    PROJECT = "project"
    ARTICLE = "article"


PROJECT_STATUS_OPEN = "open"

# =============================================================================
# Badges
# =============================================================================

BADGE_PERFECT_MATCH = "Perfect Match"
BADGE_MENTOR = "Mentor"
BADGE_STUDENT = "Student"

# =============================================================================
# Standard match scale (/matches)
# =============================================================================

STANDARD_RECIPROCAL_BASE = 50
STANDARD_RECIPROCAL_PER_SKILL = 5
STANDARD_MENTOR_BASE = 20
STANDARD_MENTOR_PER_SKILL = 3
STANDARD_STUDENT_BASE = 10
STANDARD_STUDENT_PER_SKILL = 2

# =============================================================================
# Amplified match scale (/explore people)
# =============================================================================

AMPLIFIED_RECIPROCAL_BASE = 100
AMPLIFIED_RECIPROCAL_PER_SKILL = 10
AMPLIFIED_ONE_WAY_BASE = 50
AMPLIFIED_ONE_WAY_PER_SKILL = 5

# =============================================================================
# Explore feed: projects and articles
# =============================================================================

PROJECT_BASE_SCORE = 70
PROJECT_PER_SKILL = 10
PROJECT_SUBTITLE = "Project Opportunity"

ARTICLE_BASE_SCORE = 30
ARTICLE_PER_TAG = 5
UNKNOWN_AUTHOR = "Unknown"
