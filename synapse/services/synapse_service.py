"""
Synapse matching service.

Entry point for the matching engine. Every operation reads a fresh snapshot
through the repositories, computes in memory and returns plain dicts; no
state is kept between calls.

Usage:
    from synapse.services import SynapseService

    service = SynapseService()
    profile = service.compute_profile(user_id)
    matches = service.compute_matches(user_id)
    feed = await service.compute_explore_feed(user_id)
"""

import asyncio
import time
from collections.abc import Callable, Iterable
from contextlib import AbstractContextManager
from typing import Any, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from synapse.constants import SkillType
from synapse.db import db
from synapse.exceptions import ComputationCancelled, RepositoryError
from synapse.logging import LogContext, get_logger, log_timing
from synapse.matching import build_profile, build_profiles, compose_feed, match_candidates
from synapse.matching.types import UserSkillProfile
from synapse.repositories import (
    ArticleRepository,
    ProfileRepository,
    ProjectRepository,
    SkillRepository,
)

logger = get_logger("services.synapse")

R = TypeVar("R")
SessionFactory = Callable[[], AbstractContextManager[Session]]

EXPLORE_OPERATION = "compute_explore_feed"


class SynapseService:
    """
    Matching and discovery operations for one application.

    Args:
        session_factory: Callable returning a transactional session scope.
            Defaults to ``db.session`` (commit on success, rollback on error).
    """

    def __init__(self, session_factory: SessionFactory | None = None):
        self._session_factory = session_factory or db.session

    # =========================================================================
    # Session helpers
    # =========================================================================

    def _run(self, operation: str, work: Callable[[Session], R]) -> R:
        """Run ``work`` in one session scope, reporting failures as RepositoryError."""
        try:
            with self._session_factory() as session:
                return work(session)
        except RepositoryError:
            raise
        except SQLAlchemyError as e:
            logger.error("session_failed", operation=operation, error=str(e))
            raise RepositoryError(operation) from e

    def _load_query_profile(self, user_id: int) -> UserSkillProfile:
        return self._run(
            "list_skills",
            lambda session: build_profile(user_id, SkillRepository(session).list_skills(user_id)),
        )

    # =========================================================================
    # Onboarding
    # =========================================================================

    def submit_onboarding(
        self,
        user_id: int,
        teach_skills: Iterable[Any] | None,
        learn_skills: Iterable[Any] | None,
        bio: str | None = None,
        role: str | None = None,
        education: str | None = None,
        linkedin_url: str | None = None,
    ) -> dict[str, Any]:
        """
        Save onboarding answers and replace the user's skill set.

        Profile updates, the skill delete and the skill inserts share one
        transaction: on any failure nothing is written and the previous
        skill set stays in place.
        """
        profile_fields = {
            name: value
            for name, value in (
                ("bio", bio),
                ("role", role),
                ("education", education),
                ("linkedin_url", linkedin_url),
            )
            if value is not None
        }

        def work(session: Session) -> int:
            if profile_fields:
                ProfileRepository(session).update_fields(user_id, **profile_fields)
            return SkillRepository(session).replace_skills(user_id, teach_skills, learn_skills)

        with LogContext(user_id=user_id):
            inserted = self._run("submit_onboarding", work)
            logger.info(
                "onboarding_saved",
                skills=inserted,
                profile_fields=sorted(profile_fields),
            )
        return {"success": True, "message": "Synapse profile updated"}

    # =========================================================================
    # Profile
    # =========================================================================

    def compute_profile(self, user_id: int) -> dict[str, Any]:
        """Return ``{bio, teach, learn}`` for the user, skills in declaration order."""

        def work(session: Session) -> tuple[list[dict[str, Any]], str]:
            skills = SkillRepository(session).list_skills(user_id)
            bio = ProfileRepository(session).get_bio(user_id)
            return skills, bio

        rows, bio = self._run("compute_profile", work)
        return {
            "bio": bio,
            "teach": [row["skill"] for row in rows if row["type"] == SkillType.TEACH.value],
            "learn": [row["skill"] for row in rows if row["type"] == SkillType.LEARN.value],
        }

    # =========================================================================
    # Matches
    # =========================================================================

    @log_timing("compute_matches")
    def compute_matches(self, user_id: int) -> list[dict[str, Any]]:
        """
        Rank every other profiled user against the query user.

        Returns MatchCandidate dicts sorted by descending score; candidates
        with no overlap are excluded and the user never matches themself.
        """

        def work(session: Session) -> tuple[UserSkillProfile, list[dict[str, Any]]]:
            repo = SkillRepository(session)
            query = build_profile(user_id, repo.list_skills(user_id))
            return query, repo.list_all_others_with_skills(user_id)

        with LogContext(user_id=user_id):
            query, candidate_rows = self._run("compute_matches", work)
            candidates = build_profiles(candidate_rows)
            matches = match_candidates(query, candidates.values())
            logger.info("matches_computed", candidates=len(candidates), matches=len(matches))
        return [match.to_dict() for match in matches]

    # =========================================================================
    # Explore feed
    # =========================================================================

    async def compute_explore_feed(
        self, user_id: int, cancel_event: asyncio.Event | None = None
    ) -> list[dict[str, Any]]:
        """
        Compose the ranked explore feed of people, open projects and articles.

        The three source datasets are fetched concurrently, each in its own
        session on a worker thread. If any fetch fails the whole call raises
        RepositoryError. Setting ``cancel_event`` (or cancelling the awaiting
        task) abandons outstanding fetches; composition never starts once
        cancellation has been observed.

        Returns:
            FeedItem dicts sorted by descending score. Empty when the user
            has declared no skills, without touching candidate data.
        """
        with LogContext(user_id=user_id, operation=EXPLORE_OPERATION):
            start = time.perf_counter()
            _raise_if_cancelled(cancel_event, stage="start")

            query = await asyncio.to_thread(self._load_query_profile, user_id)
            if query.is_empty:
                logger.info("explore_skipped", reason="no_skills")
                return []

            candidate_rows, projects, articles = await self._fetch_explore_sources(
                user_id, cancel_event
            )
            _raise_if_cancelled(cancel_event, stage="compose")

            feed = compose_feed(query, build_profiles(candidate_rows).values(), projects, articles)
            logger.info(
                "explore_feed_composed",
                items=len(feed),
                duration_seconds=round(time.perf_counter() - start, 3),
            )
        return [item.to_dict() for item in feed]

    async def _fetch_explore_sources(
        self, user_id: int, cancel_event: asyncio.Event | None
    ) -> tuple[list[dict[str, Any]], list[dict[str, Any]], list[dict[str, Any]]]:
        fetches: dict[str, Callable[[Session], list[dict[str, Any]]]] = {
            "list_all_others_with_skills": (
                lambda session: SkillRepository(session).list_all_others_with_skills(user_id)
            ),
            "list_open_projects": lambda session: ProjectRepository(session).list_open_projects(),
            "list_all_with_author": (
                lambda session: ArticleRepository(session).list_all_with_author()
            ),
        }
        tasks = [
            asyncio.create_task(asyncio.to_thread(self._run, operation, work), name=operation)
            for operation, work in fetches.items()
        ]
        cancel_waiter = (
            asyncio.create_task(cancel_event.wait()) if cancel_event is not None else None
        )
        watched = set(tasks) if cancel_waiter is None else {*tasks, cancel_waiter}

        try:
            pending = set(watched)
            while not all(task.done() for task in tasks):
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                if cancel_waiter is not None and cancel_waiter in done:
                    logger.info("explore_cancelled", stage="fetch")
                    raise ComputationCancelled(EXPLORE_OPERATION)
                for task in done:
                    error = task.exception()
                    if error is None:
                        continue
                    logger.error("explore_fetch_failed", fetch=task.get_name(), error=str(error))
                    if isinstance(error, RepositoryError):
                        raise error
                    raise RepositoryError(task.get_name()) from error
            return tasks[0].result(), tasks[1].result(), tasks[2].result()
        finally:
            for task in watched:
                if not task.done():
                    task.cancel()
                elif not task.cancelled():
                    # Mark sibling failures as retrieved
                    task.exception()


def _raise_if_cancelled(cancel_event: asyncio.Event | None, stage: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        logger.info("explore_cancelled", stage=stage)
        raise ComputationCancelled(EXPLORE_OPERATION)


__all__ = ["SynapseService"]
