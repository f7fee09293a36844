"""
Pytest fixtures for Synapse tests.

Uses a file-backed SQLite database per test so the explore fan-out can read
from several worker threads at once.
"""

import pytest

from synapse.constants import SkillType
from synapse.db import db
from synapse.models import Article, Profile, Project, SynapseSkill, User


@pytest.fixture(scope="function")
def test_db(tmp_path):
    """Initialize the global db object against a fresh SQLite file."""
    db.reset()
    db.initialize(f"sqlite:///{tmp_path / 'synapse_test.db'}")
    db.create_all_tables()
    yield db
    db.drop_all_tables()
    db.reset()


@pytest.fixture
def test_session(test_db):
    """Get a session on the test database."""
    session = test_db.get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def create_member(session, name, teach=(), learn=(), bio=None, with_profile=True):
    """Helper to create a user, their profile and their skill declarations."""
    user = User(email=f"{name.lower()}@test.com")
    session.add(user)
    session.flush()

    if with_profile:
        session.add(
            Profile(
                user_id=user.id,
                full_name=f"User {name}",
                username=name.lower(),
                avatar_url=f"https://img.test/{name.lower()}.png",
                bio=bio,
            )
        )
    for skill in teach:
        session.add(SynapseSkill(user_id=user.id, skill=skill, type=SkillType.TEACH.value))
    for skill in learn:
        session.add(SynapseSkill(user_id=user.id, skill=skill, type=SkillType.LEARN.value))
    session.flush()
    return user.id


@pytest.fixture
def make_member(test_session):
    """Factory fixture wrapping create_member around the test session."""
    def _make(name, **kwargs):
        user_id = create_member(test_session, name, **kwargs)
        test_session.commit()
        return user_id

    return _make


@pytest.fixture
def five_members(test_session):
    """
    The canonical matchmaking scenario.

    A teaches python / learns react, B is A's mirror image, C only teaches
    react, D only learns python and E teaches java.
    """
    members = {
        "A": create_member(test_session, "A", teach=["python"], learn=["react"], bio="I am A"),
        "B": create_member(test_session, "B", teach=["react"], learn=["python"]),
        "C": create_member(test_session, "C", teach=["react"]),
        "D": create_member(test_session, "D", learn=["python"]),
        "E": create_member(test_session, "E", teach=["java"]),
    }
    test_session.commit()
    return members


@pytest.fixture
def explore_content(test_session, five_members):
    """Open and closed projects plus articles with mixed-case tags."""
    owner = five_members["E"]
    test_session.add_all(
        [
            Project(
                owner_id=owner,
                title="Data pipeline",
                description="Needs Python help",
                status="open",
                skills_needed=["Python", "SQL"],
            ),
            Project(
                owner_id=owner,
                title="Archived tool",
                description="Closed already",
                status="closed",
                skills_needed=["python"],
            ),
            Project(
                owner_id=owner,
                title="Mobile app",
                description="Kotlin only",
                status="open",
                skills_needed=["Kotlin"],
            ),
            Article(
                author_id=five_members["B"],
                title="React hooks",
                excerpt="Intro to hooks",
                featured_image="https://img.test/hooks.png",
                tags=["REACT", "frontend"],
            ),
            Article(
                author_id=None,
                title="Anonymous React notes",
                excerpt="Unsigned",
                tags=["react"],
            ),
            Article(
                author_id=five_members["C"],
                title="Java streams",
                excerpt="Streams",
                tags=["java"],
            ),
        ]
    )
    test_session.commit()
    return five_members


@pytest.fixture
def sample_profile_rows():
    """Flat candidate rows as returned by SkillRepository.list_all_others_with_skills."""
    def row(user_id, skill, skill_type, name):
        return {
            "user_id": user_id,
            "full_name": f"User {name}",
            "username": name.lower(),
            "avatar_url": None,
            "bio": None,
            "skill": skill,
            "type": skill_type,
        }

    return [
        row(2, "react", "TEACH", "B"),
        row(2, "python", "LEARN", "B"),
        row(3, "react", "TEACH", "C"),
        row(4, "python", "LEARN", "D"),
        row(5, "java", "TEACH", "E"),
    ]
