"""
Pydantic schemas for request and response validation.
"""

from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class OnboardingRequest(BaseModel):
    """Onboarding submission. Accepts snake_case or the web client's camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    teach_skills: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("teach_skills", "teachSkills"),
    )
    learn_skills: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("learn_skills", "learnSkills"),
    )
    bio: str | None = None
    role: str | None = Field(default=None, max_length=255)
    education: str | None = Field(default=None, max_length=255)
    linkedin_url: str | None = Field(default=None, max_length=512)


class OnboardingResponse(BaseModel):
    success: bool
    message: str


class SynapseProfileResponse(BaseModel):
    bio: str = ""
    teach: list[str] = Field(default_factory=list)
    learn: list[str] = Field(default_factory=list)


class MatchCandidateResponse(BaseModel):
    user_id: int
    full_name: str | None = None
    username: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    teach: list[str] = Field(default_factory=list)
    learn: list[str] = Field(default_factory=list)
    teach_overlap: list[str] = Field(default_factory=list)
    learn_overlap: list[str] = Field(default_factory=list)
    score: int
    badges: list[str] = Field(default_factory=list)
    reasons: list[str] = Field(default_factory=list)


class FeedItemResponse(BaseModel):
    id: int
    type: Literal["user", "project", "article"]
    title: str | None = None
    subtitle: str | None = None
    image_url: str | None = None
    description: str | None = None
    score: int
    reasons: list[str] = Field(default_factory=list)
    details: dict[str, Any] = Field(default_factory=dict)
