"""
Shared FastAPI dependencies.

Authentication happens upstream: the auth layer stores the caller's id on
``request.state.user_id``. Tests and embedding applications override
``get_current_user_id`` through ``app.dependency_overrides``.
"""

from fastapi import HTTPException, Request, status

from synapse.services import SynapseService


def get_current_user_id(request: Request) -> int:
    """Resolve the authenticated user id placed on the request by the auth layer."""
    user_id = getattr(request.state, "user_id", None)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return int(user_id)


def get_synapse_service() -> SynapseService:
    """Service bound to the application's database manager."""
    return SynapseService()


__all__ = ["get_current_user_id", "get_synapse_service"]
