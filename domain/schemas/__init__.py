"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.recipe_schemas import (
    IngredientRow,
    InstructionRow,
    InstructionStep,
    RecipeSubmit,
    RecipeDraftResponse,
    RecipeView,
    RecipeCard,
    SearchHit,
    RecipePage,
    HomeSections,
    CategoryPage,
    CategorySuggestions,
)
from domain.schemas.vote_schemas import (
    VoteRequest,
    VoteCountsResponse,
    VoteStateResponse,
)
from domain.schemas.profile_schemas import (
    ProfileUpdateRequest,
    ProfileResponse,
    UserPageResponse,
)
from domain.schemas.newsletter_schemas import SubscribeRequest, SubscriberResponse

__all__ = [
    # Recipe schemas
    "IngredientRow",
    "InstructionRow",
    "InstructionStep",
    "RecipeSubmit",
    "RecipeDraftResponse",
    "RecipeView",
    "RecipeCard",
    "SearchHit",
    "RecipePage",
    "HomeSections",
    "CategoryPage",
    "CategorySuggestions",
    # Vote schemas
    "VoteRequest",
    "VoteCountsResponse",
    "VoteStateResponse",
    # Profile schemas
    "ProfileUpdateRequest",
    "ProfileResponse",
    "UserPageResponse",
    # Newsletter schemas
    "SubscribeRequest",
    "SubscriberResponse",
]
