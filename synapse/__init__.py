"""
Synapse Core Library.

Skill-based matching and unified discovery ranking for the collaboration
network: per-user teach/learn skill declarations become bidirectional
matches between people, and a mixed feed of people, open projects and
articles.

Usage:
    # Database
    from synapse.db import db
    from synapse.models import User, Profile, SynapseSkill

    # Service
    from synapse.services import SynapseService

    # Config
    from synapse.config import get_settings, Settings

    # Logging
    from synapse.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"
