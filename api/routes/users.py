"""Public user pages"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from uuid import UUID

from api.dependencies import get_db
from domain.criteria import ByOwner
from domain.schemas.profile_schemas import UserPageResponse
from domain.schemas.recipe_schemas import RecipePage
from services.profile_service import ProfileService
from services.recipe_query_service import RecipeQueryService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/{user_id}", response_model=UserPageResponse)
def get_user_page(user_id: UUID, db: Session = Depends(get_db)):
    return ProfileService.user_page(db, user_id)


@router.get("/{user_id}/recipes", response_model=RecipePage)
def get_user_recipes(
    user_id: UUID,
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
):
    return RecipeQueryService.fetch_recipe_view(db, ByOwner(user_id, offset))
