"""
Tests for explore feed composition.
"""

from synapse.matching.feed import (
    case_insensitive_overlap,
    compose_articles,
    compose_feed,
    compose_people,
    compose_projects,
)
from synapse.matching.types import UserSkillProfile

QUERY = UserSkillProfile(user_id=1, teach=["python"], learn=["react"])


def _candidate(user_id, name, teach=(), learn=()):
    return UserSkillProfile(
        user_id=user_id,
        teach=list(teach),
        learn=list(learn),
        full_name=f"User {name}",
        username=name.lower(),
        avatar_url=f"https://img.test/{name.lower()}.png",
        bio=None,
    )


def _project(id, skills, title="Project"):
    return {"id": id, "title": title, "description": "desc", "skills_needed": skills}


def _article(id, tags, author_name=None, title="Article"):
    return {
        "id": id,
        "title": title,
        "excerpt": "excerpt",
        "featured_image": None,
        "author_name": author_name,
        "tags": tags,
    }


class TestCaseInsensitiveOverlap:
    """Tests for read-time skill comparison."""

    def test_keeps_stored_spelling(self):
        assert case_insensitive_overlap(["Python", "SQL"], {"python"}) == ["Python"]

    def test_duplicates_each_count(self):
        assert case_insensitive_overlap(["react", "React"], {"react"}) == ["react", "React"]

    def test_no_trimming(self):
        assert case_insensitive_overlap([" python"], {"python"}) == []

    def test_ignores_non_strings(self):
        assert case_insensitive_overlap([None, 3, "python"], {"python"}) == ["python"]


class TestComposePeople:
    """Tests for the people branch."""

    def test_amplified_scores_and_reasons(self):
        items = compose_people(
            QUERY,
            [
                _candidate(2, "B", teach=["react"], learn=["python"]),
                _candidate(3, "C", teach=["react"]),
                _candidate(4, "D", learn=["python"]),
            ],
        )

        assert [(i.id, i.score) for i in items] == [(2, 120), (3, 55), (4, 55)]
        assert items[0].reasons == [
            "Perfect Match: Can teach you 1 skills and needs your help with 1."
        ]
        assert items[1].reasons == ["Mentor: Can teach you react."]
        assert items[2].reasons == ["Student: Needs your help with python."]

    def test_card_fields(self):
        item = compose_people(QUERY, [_candidate(2, "B", teach=["react"], learn=["python"])])[0]

        assert item.type == "user"
        assert item.title == "User B"
        assert item.subtitle == "b"
        assert item.image_url == "https://img.test/b.png"
        assert item.details == {
            "match_skills": ["react", "python"],
            "teach": ["react"],
            "learn": ["python"],
        }

    def test_skips_query_user_and_no_overlap(self):
        items = compose_people(
            QUERY,
            [
                _candidate(1, "A", teach=["react"], learn=["python"]),
                _candidate(5, "E", teach=["java"]),
            ],
        )
        assert items == []


class TestComposeProjects:
    """Tests for the projects branch."""

    def test_matches_skills_query_user_teaches(self):
        items = compose_projects(QUERY, [_project(7, ["Python", "SQL"], title="Data pipeline")])

        assert len(items) == 1
        item = items[0]
        assert item.type == "project"
        assert item.title == "Data pipeline"
        assert item.subtitle == "Project Opportunity"
        assert item.score == 80
        assert item.reasons == ["Needs your superpowers in Python"]
        assert item.details == {"skills_needed": ["Python", "SQL"]}

    def test_repeated_entries_raise_score(self):
        item = compose_projects(QUERY, [_project(7, ["python", "PYTHON"])])[0]
        assert item.score == 90

    def test_learn_skills_do_not_match_projects(self):
        assert compose_projects(QUERY, [_project(7, ["react"])]) == []

    def test_closed_projects_are_skipped(self):
        closed = {**_project(7, ["python"]), "status": "closed"}
        open_ = {**_project(8, ["python"]), "status": "open"}

        items = compose_projects(QUERY, [closed, open_])

        assert [item.id for item in items] == [8]

    def test_rows_without_status_count_as_open(self):
        assert [item.id for item in compose_projects(QUERY, [_project(7, ["python"])])] == [7]

    def test_missing_skills_list(self):
        assert compose_projects(QUERY, [_project(7, None)]) == []


class TestComposeArticles:
    """Tests for the articles branch."""

    def test_matches_tags_query_user_wants(self):
        item = compose_articles(QUERY, [_article(3, ["REACT", "frontend"], "User B")])[0]

        assert item.type == "article"
        assert item.subtitle == "By User B"
        assert item.score == 35
        assert item.reasons == ["Learn about REACT"]
        assert item.details == {"tags": ["REACT", "frontend"]}

    def test_unknown_author(self):
        item = compose_articles(QUERY, [_article(3, ["react"])])[0]
        assert item.subtitle == "By Unknown"

    def test_teach_skills_do_not_match_articles(self):
        assert compose_articles(QUERY, [_article(3, ["python"])]) == []


class TestComposeFeed:
    """Tests for the merged feed."""

    def test_merged_order(self):
        feed = compose_feed(
            QUERY,
            [
                _candidate(2, "B", teach=["react"], learn=["python"]),
                _candidate(3, "C", teach=["react"]),
            ],
            [_project(10, ["Python"])],
            [_article(20, ["react"])],
        )

        assert [(i.type, i.id, i.score) for i in feed] == [
            ("user", 2, 120),
            ("project", 10, 80),
            ("user", 3, 55),
            ("article", 20, 35),
        ]

    def test_equal_scores_people_before_projects_before_articles(self):
        # One-way mentor over six skills, one project skill and ten tag hits all score 80
        wanted = ["a", "b", "c", "d", "e", "go"]
        query = UserSkillProfile(user_id=1, teach=["python"], learn=wanted)
        feed = compose_feed(
            query,
            [_candidate(2, "B", teach=wanted)],
            [_project(10, ["python"])],
            [_article(20, ["go"] * 10)],
        )

        assert [i.type for i in feed] == ["user", "project", "article"]
        assert [i.score for i in feed] == [80, 80, 80]
