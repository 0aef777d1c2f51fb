"""Profile routes - public profile lookup and editing one's own profile"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from uuid import UUID
import logging

from api.dependencies import AuthContext, get_auth_context, get_db
from api.responses import APIResponse, success_response
from domain.schemas.profile_schemas import ProfileResponse, ProfileUpdateRequest
from services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["Profiles"])
logger = logging.getLogger("recipeshare.api.profiles")


@router.put("/me", response_model=APIResponse[ProfileResponse])
def save_my_profile(
    profile_data: ProfileUpdateRequest,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    profile = ProfileService.upsert_own_profile(db, auth.user_id, profile_data)
    return success_response(
        data=ProfileResponse.model_validate(profile),
        message="Profile saved successfully!",
    )


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(user_id: UUID, db: Session = Depends(get_db)):
    return ProfileService.get_profile(db, user_id)
