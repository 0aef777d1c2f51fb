"""Pydantic schemas for recipe submissions and denormalized recipe view models."""

from pydantic import BaseModel, Field
from typing import List, Optional
from uuid import UUID
from datetime import datetime


class IngredientRow(BaseModel):
    """Ingredient row as edited in the recipe form."""

    name: str = ""
    quantity: str = ""

    model_config = {"from_attributes": True}


class InstructionRow(BaseModel):
    """Instruction row as edited in the recipe form (unnumbered)."""

    description: str = ""


class InstructionStep(BaseModel):
    """Persisted, numbered instruction."""

    step_number: int = Field(..., ge=1)
    description: str

    model_config = {"from_attributes": True}


class RecipeSubmit(BaseModel):
    """Create/edit payload of the recipe form."""

    title: str = Field(..., max_length=200)
    description: str = ""
    image_url: Optional[str] = None
    ingredients: List[IngredientRow] = Field(default_factory=list)
    instructions: List[InstructionRow] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


class RecipeDraftResponse(BaseModel):
    """Edit-form prefill: list editors always carry at least one row."""

    recipe_id: UUID
    title: str
    description: str
    image_url: Optional[str] = None
    ingredients: List[IngredientRow]
    instructions: List[InstructionRow]
    tags: List[str]


class RecipeView(BaseModel):
    """A recipe with its children and resolved owner name."""

    id: UUID
    user_id: UUID
    title: str
    description: str = ""
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    owner_name: str = "Unknown"
    ingredients: List[IngredientRow] = Field(default_factory=list)
    instructions: List[InstructionStep] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


class RecipeCard(BaseModel):
    """Summary of a recipe as shown in listings and carousels."""

    id: UUID
    user_id: UUID
    title: str
    description: str = ""
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    username: str = "Unknown"
    categories: List[str] = Field(default_factory=list)


class SearchHit(RecipeCard):
    """Search result; matched_on lists every field the query was found in."""

    matched_on: List[str] = Field(default_factory=list)


class RecipePage(BaseModel):
    """One offset-ranged page of an owner's recipes."""

    items: List[RecipeCard]
    offset: int
    next_offset: int
    page_size: int
    has_more: bool


class HomeSections(BaseModel):
    latest: List[RecipeCard]
    featured: List[RecipeCard]
    popular: List[RecipeCard]
    seasonal: List[RecipeCard]


class CategoryPage(BaseModel):
    slug: str
    heading: str
    recipes: List[RecipeCard]


class CategorySuggestions(BaseModel):
    query: str
    suggestions: List[str]
