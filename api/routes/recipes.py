"""
Recipe routes - listings, detail view, search and the add/edit/delete flows.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from api.dependencies import AuthContext, get_auth_context, get_db
from api.responses import APIResponse, success_response
from app.config import settings
from app.exceptions import UnauthorizedError
from domain.criteria import ById, Recent
from domain.editors import RecipeDraft
from domain.schemas.recipe_schemas import (
    CategoryPage,
    RecipeCard,
    RecipeDraftResponse,
    RecipePage,
    RecipeSubmit,
    RecipeView,
    SearchHit,
)
from services.recipe_query_service import RecipeQueryService
from services.recipe_service import RecipeService

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("recipeshare.api.recipes")


@router.get("/latest", response_model=List[RecipeCard])
def latest_recipes(
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    db: Session = Depends(get_db),
):
    """Most recent recipes site-wide with owner names."""
    return RecipeQueryService.fetch_recipe_view(
        db, Recent(limit or settings.latest_limit)
    )


@router.get("/search", response_model=List[SearchHit])
def search_recipes(
    q: str = Query(default="", description="Text searched in title and description"),
    db: Session = Depends(get_db),
):
    return RecipeQueryService.search(db, q)


@router.get("/mine", response_model=RecipePage)
def my_recipes(
    offset: int = Query(default=0, ge=0, description="Number of recipes already loaded"),
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    """
    The acting user's recipes, one page at a time.

    Pass the number of recipes loaded so far as ``offset``; ``has_more`` is
    false once a page comes back shorter than the page size.
    """
    if not auth.is_authenticated:
        raise UnauthorizedError("Please log in to see your recipes")
    return RecipeQueryService.owner_page(db, auth.user_id, offset)


@router.get("/category/{slug}", response_model=CategoryPage)
def recipes_by_category(slug: str, db: Session = Depends(get_db)):
    """Latest, reserved (featured/popular/seasonal) or custom category page."""
    return RecipeQueryService.category_page(db, slug)


@router.get("/{recipe_id}", response_model=RecipeView)
def get_recipe(recipe_id: UUID, db: Session = Depends(get_db)):
    """Recipe with ingredients, numbered instructions, tags and owner name."""
    return RecipeQueryService.fetch_recipe_view(db, ById(recipe_id))


@router.get("/{recipe_id}/draft", response_model=RecipeDraftResponse)
def get_recipe_draft(
    recipe_id: UUID,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    """Edit-form prefill for the owner."""
    RecipeService.get_owned_recipe(db, recipe_id, auth.user_id)
    view = RecipeQueryService.get_recipe_view(db, recipe_id)
    return RecipeDraft.from_view(view).to_response(recipe_id)


@router.post(
    "",
    response_model=APIResponse[RecipeView],
    status_code=status.HTTP_201_CREATED,
)
def create_recipe(
    payload: RecipeSubmit,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    draft = RecipeDraft.from_submit(payload)
    recipe = RecipeService.create_recipe(db, draft, auth.user_id)
    view = RecipeQueryService.get_recipe_view(db, recipe.id)
    return success_response(data=view, message="Recipe added successfully!")


@router.put("/{recipe_id}", response_model=APIResponse[RecipeView])
def update_recipe(
    recipe_id: UUID,
    payload: RecipeSubmit,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    draft = RecipeDraft.from_submit(payload)
    RecipeService.update_recipe(db, recipe_id, draft, auth.user_id)
    view = RecipeQueryService.get_recipe_view(db, recipe_id)
    return success_response(data=view, message="Recipe updated successfully!")


@router.delete("/{recipe_id}", response_model=APIResponse[dict])
def delete_recipe(
    recipe_id: UUID,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    RecipeService.delete_recipe(db, recipe_id, auth.user_id)
    return success_response(data={"id": str(recipe_id)}, message="Recipe deleted")
