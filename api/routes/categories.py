"""Category routes - home sections, category universe and tag autocomplete"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from api.dependencies import get_db
from domain.schemas.recipe_schemas import CategorySuggestions, HomeSections
from services.recipe_query_service import RecipeQueryService

router = APIRouter(tags=["Categories"])


@router.get("/home", response_model=HomeSections)
def home(db: Session = Depends(get_db)):
    """Latest recipes plus the featured, popular and seasonal carousels."""
    return RecipeQueryService.home_sections(db)


@router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db)):
    return RecipeQueryService.list_category_names(db)


@router.get("/categories/suggestions", response_model=CategorySuggestions)
def suggest_categories(
    q: str = Query(default="", description="Partial tag input"),
    selected: List[str] = Query(default=[], description="Tags already on the recipe"),
    db: Session = Depends(get_db),
):
    return RecipeQueryService.suggest_categories(db, q, selected)
