"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.recipe_repository import (
    RecipeRepository,
    IngredientRepository,
    InstructionRepository,
)
from repositories.category_repository import (
    CategoryRepository,
    RecipeCategoryRepository,
)
from repositories.vote_repository import VoteRepository
from repositories.profile_repository import ProfileRepository, SubscriberRepository

__all__ = [
    "BaseRepository",
    "RecipeRepository",
    "IngredientRepository",
    "InstructionRepository",
    "CategoryRepository",
    "RecipeCategoryRepository",
    "VoteRepository",
    "ProfileRepository",
    "SubscriberRepository",
]
