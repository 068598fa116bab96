"""
Profile Schemas.

PATCH /api/profile accepts three shapes:
- avatar only: {"profile_image_url": "<http(s) URL>"}
- class only: {"character_class": "<name>"}
- full profile: first_name required, other fields optional
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, model_validator

from application.use_cases import ProfileUpdate


class ProfileUpdateRequest(BaseModel):
    """Request body for PATCH /api/profile."""

    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    profile_image_url: Optional[HttpUrl] = None
    age: Optional[int] = Field(default=None, ge=13, le=120)
    gender: Optional[str] = Field(default=None, max_length=50)
    height: Optional[int] = Field(default=None, ge=50, le=300, description="cm")
    weight: Optional[float] = Field(default=None, ge=20, le=500, description="kg")
    body_fat_percentage: Optional[float] = Field(default=None, ge=1, le=70)
    fitness_level: Optional[str] = Field(default=None, max_length=50)
    fitness_goal: Optional[str] = Field(default=None, max_length=200)
    character_class: Optional[str] = Field(default=None, min_length=1, max_length=50)
    onboarding_completed: Optional[bool] = None

    @model_validator(mode="after")
    def check_shape(self) -> "ProfileUpdateRequest":
        provided = self.model_fields_set
        if provided == {"profile_image_url"}:
            if self.profile_image_url is None:
                raise ValueError("profile_image_url must be a valid URL")
            return self
        if provided == {"character_class"}:
            if not (self.character_class or "").strip():
                raise ValueError("character_class must not be empty")
            return self
        if "character_class" in provided:
            raise ValueError("character_class must be updated on its own")
        if not (self.first_name or "").strip():
            raise ValueError("first_name is a required field")
        return self

    def to_update(self) -> ProfileUpdate:
        data = self.model_dump(exclude_unset=True)
        if data.get("profile_image_url") is not None:
            data["profile_image_url"] = str(data["profile_image_url"])
        for key in ("first_name", "last_name", "character_class"):
            if isinstance(data.get(key), str):
                data[key] = data[key].strip()
        return ProfileUpdate(**data)
