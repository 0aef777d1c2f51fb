from pydantic import BaseModel, Field
from typing import Optional, List
from uuid import UUID

from domain.schemas.recipe_schemas import RecipeCard


class ProfileUpdateRequest(BaseModel):
    full_name: str = Field(..., max_length=200)
    hobbies: Optional[str] = ""
    profile_pic: Optional[str] = None


class ProfileResponse(BaseModel):
    id: UUID
    full_name: Optional[str] = None
    hobbies: Optional[str] = None
    profile_pic: Optional[str] = None

    model_config = {"from_attributes": True}


class UserPageResponse(BaseModel):
    """Public user page: profile plus the user's recipe feed (newest first)."""

    profile: ProfileResponse
    recipes: List[RecipeCard]
