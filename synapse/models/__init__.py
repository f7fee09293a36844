"""
SQLAlchemy models for Synapse.

Single source of truth for all database models. Used by the service layer
and the backend.

Usage:
    from synapse.models import User, Profile, SynapseSkill
"""

from .article import Article
from .base import Base
from .profile import Profile
from .project import Project
from .skill import SynapseSkill
from .user import User

__all__ = [
    # Base
    "Base",
    # People
    "User",
    "Profile",
    "SynapseSkill",
    # Content
    "Project",
    "Article",
]
