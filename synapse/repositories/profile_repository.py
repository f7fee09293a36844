"""Member profile repository."""

from datetime import datetime, timezone

from synapse.models import Profile

from .base import BaseRepository, translate_db_errors

# Fields onboarding may overwrite
EDITABLE_PROFILE_FIELDS = ("bio", "role", "education", "linkedin_url")


class ProfileRepository(BaseRepository[Profile]):
    """Repository for Profile operations."""

    model = Profile

    def get_by_user_id(self, user_id: int) -> Profile | None:
        """Get profile by user ID."""
        return self.session.query(Profile).filter(Profile.user_id == user_id).first()

    @translate_db_errors("get_bio")
    def get_bio(self, user_id: int) -> str:
        """Return the user's bio, or an empty string when unset."""
        profile = self.get_by_user_id(user_id)
        return (profile.bio if profile else None) or ""

    @translate_db_errors("update_profile_fields")
    def update_fields(self, user_id: int, **fields: str | None) -> Profile:
        """
        Create or update a user's profile.
        Only updates fields that are provided (not None).
        """
        unknown = set(fields) - set(EDITABLE_PROFILE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown profile fields: {', '.join(sorted(unknown))}")

        profile = self.get_by_user_id(user_id)
        if profile is None:
            profile = Profile(user_id=user_id)
            self.session.add(profile)

        for name, value in fields.items():
            if value is not None:
                setattr(profile, name, value)
        profile.updated_at = datetime.now(timezone.utc)

        self.session.flush()
        return profile
