"""
Repository pattern implementations for data access.

Repositories provide a clean abstraction over database operations and
return plain dict rows to the matching engine.

Usage:
    from synapse.repositories import SkillRepository
    from synapse.db import db

    with db.session() as session:
        repo = SkillRepository(session)
        rows = repo.list_all_others_with_skills(user_id)
"""

from .article_repository import ArticleRepository
from .base import BaseRepository, coerce_string_list, translate_db_errors
from .profile_repository import EDITABLE_PROFILE_FIELDS, ProfileRepository
from .project_repository import ProjectRepository
from .skill_repository import SkillRepository

__all__ = [
    "BaseRepository",
    "SkillRepository",
    "ProjectRepository",
    "ArticleRepository",
    "ProfileRepository",
    "EDITABLE_PROFILE_FIELDS",
    "coerce_string_list",
    "translate_db_errors",
]
