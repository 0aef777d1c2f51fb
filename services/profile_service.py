from typing import Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from domain.models import Profile
from domain.schemas.profile_schemas import (
    ProfileResponse,
    ProfileUpdateRequest,
    UserPageResponse,
)
from repositories import ProfileRepository
from services.recipe_query_service import RecipeQueryService
from app.exceptions import (
    BackendWriteError,
    NotFoundError,
    ServiceValidationError,
    UnauthorizedError,
)

logger = logging.getLogger("recipeshare.profile")


class ProfileService:
    """Business logic for public profiles"""

    @staticmethod
    def get_profile(db: Session, user_id: UUID) -> Profile:
        profile = ProfileRepository(db).get_by_id(user_id)
        if not profile:
            logger.warning(f"profile_not_found user_id={user_id}")
            raise NotFoundError("User not found")
        logger.info(f"profile_fetched user_id={user_id}")
        return profile

    @staticmethod
    def upsert_own_profile(
        db: Session, user_id: Optional[UUID], data: ProfileUpdateRequest
    ) -> Profile:
        """Create or update the acting user's own profile."""
        if user_id is None:
            raise UnauthorizedError("Please log in to edit your profile")
        full_name = (data.full_name or "").strip()
        if not full_name:
            raise ServiceValidationError(
                "Full name is required", details={"field": "full_name"}
            )

        try:
            profile = ProfileRepository(db).upsert(
                user_id,
                full_name=full_name,
                hobbies=data.hobbies or "",
                profile_pic=data.profile_pic,
            )
            db.commit()
            db.refresh(profile)
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception(f"profile_save_failed user_id={user_id}")
            raise BackendWriteError(f"Failed to save profile. {e}") from e

        logger.info(f"profile_upserted user_id={user_id}")
        return profile

    @staticmethod
    def user_page(db: Session, user_id: UUID) -> UserPageResponse:
        """Public profile plus every recipe of the user, newest first."""
        profile = ProfileService.get_profile(db, user_id)
        recipes = RecipeQueryService.owner_recipes(db, user_id)
        return UserPageResponse(
            profile=ProfileResponse.model_validate(profile), recipes=recipes
        )
