"""
Services package - Business logic layer.
"""

from services.recipe_service import RecipeService
from services.recipe_query_service import RecipeQueryService
from services.vote_service import VoteService
from services.profile_service import ProfileService
from services.newsletter_service import NewsletterService
from services.upload_service import UploadService

__all__ = [
    "RecipeService",
    "RecipeQueryService",
    "VoteService",
    "ProfileService",
    "NewsletterService",
    "UploadService",
]
