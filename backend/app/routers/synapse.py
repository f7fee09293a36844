"""
Synapse endpoints: onboarding, skill profile, matches and explore feed.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from synapse.exceptions import ComputationCancelled, RepositoryError
from synapse.logging import get_logger
from synapse.services import SynapseService

from ..dependencies import get_current_user_id, get_synapse_service
from ..schemas import (
    FeedItemResponse,
    MatchCandidateResponse,
    OnboardingRequest,
    OnboardingResponse,
    SynapseProfileResponse,
)

logger = get_logger("synapse")

router = APIRouter(prefix="/synapse", tags=["synapse"])


def _failure(detail: str, error: RepositoryError) -> HTTPException:
    # Generic message only; the failing repository operation stays in the logs
    logger.error("synapse_request_failed", detail=detail, operation=error.operation)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.post("/onboarding", response_model=OnboardingResponse)
def submit_onboarding(
    payload: OnboardingRequest,
    user_id: int = Depends(get_current_user_id),
    service: SynapseService = Depends(get_synapse_service),
):
    """Replace the current user's teach/learn skills and update profile fields."""
    try:
        return service.submit_onboarding(
            user_id,
            teach_skills=payload.teach_skills,
            learn_skills=payload.learn_skills,
            bio=payload.bio,
            role=payload.role,
            education=payload.education,
            linkedin_url=payload.linkedin_url,
        )
    except RepositoryError as e:
        raise _failure("Failed to update profile", e) from e


@router.get("/profile", response_model=SynapseProfileResponse)
def get_profile(
    user_id: int = Depends(get_current_user_id),
    service: SynapseService = Depends(get_synapse_service),
):
    """Return the current user's bio and declared skills."""
    try:
        return service.compute_profile(user_id)
    except RepositoryError as e:
        raise _failure("Failed to fetch profile", e) from e


@router.get("/matches", response_model=list[MatchCandidateResponse])
def get_matches(
    user_id: int = Depends(get_current_user_id),
    service: SynapseService = Depends(get_synapse_service),
):
    """Return people ranked by reciprocal skill overlap."""
    try:
        return service.compute_matches(user_id)
    except RepositoryError as e:
        raise _failure("Matchmaking failed", e) from e


@router.get("/explore", response_model=list[FeedItemResponse])
async def get_explore_feed(
    user_id: int = Depends(get_current_user_id),
    service: SynapseService = Depends(get_synapse_service),
):
    """
    Return the unified feed of people, open projects and articles.

    No cancel event is passed: a dropped connection cancels the request
    task, which cancels the outstanding fetches. A ComputationCancelled
    raised anyway is answered with 503.
    """
    try:
        return await service.compute_explore_feed(user_id)
    except ComputationCancelled as e:
        logger.warning("explore_cancelled", operation=e.operation)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Explore cancelled"
        ) from e
    except RepositoryError as e:
        raise _failure("Explore failed", e) from e
