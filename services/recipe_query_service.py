"""
Recipe aggregation queries.

Fetch recipe rows and join-fetch what the pages display: children, category
names and owner display names. Owner names are resolved in one batch for the
distinct owner ids and fall back to "Unknown".
"""

from typing import Dict, Iterable, List, Optional, Sequence, Union
from uuid import UUID
import logging
import re

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.exceptions import NotFoundError
from domain.classifier import classify, partition, RESERVED_BUCKETS
from domain.criteria import ById, ByCategory, ByOwner, Recent, RecipeCriterion
from domain.editors import TagEditor
from domain.models import Recipe
from domain.schemas.recipe_schemas import (
    CategoryPage,
    CategorySuggestions,
    HomeSections,
    IngredientRow,
    InstructionStep,
    RecipeCard,
    RecipePage,
    RecipeView,
    SearchHit,
)
from repositories import (
    RecipeRepository,
    IngredientRepository,
    InstructionRepository,
    CategoryRepository,
    RecipeCategoryRepository,
    ProfileRepository,
)

logger = logging.getLogger("recipeshare.recipe_query")

UNKNOWN_OWNER = "Unknown"

# Characters that would corrupt a backend pattern match
_UNSAFE_SEARCH_CHARS = re.compile(r"[%_,()*\\'\"]")

_HEADINGS = {
    "latest": "Latest Recipes",
    "popular": "Popular Recipes",
    "featured": "Featured Recipes",
    "seasonal": "Seasonal Recipes",
}


def sanitize_search_query(query: Optional[str]) -> str:
    cleaned = _UNSAFE_SEARCH_CHARS.sub("", query or "")
    return " ".join(cleaned.split())


def decode_category_slug(slug: str) -> str:
    """URL slug to category name: dashes become spaces"""
    return (slug or "").replace("-", " ").strip().lower()


def category_heading(name: str) -> str:
    if name in _HEADINGS:
        return _HEADINGS[name]
    return f"{name[:1].upper()}{name[1:]} Recipes"


class RecipeQueryService:
    """Read-side aggregation of recipes into view models"""

    @staticmethod
    def fetch_recipe_view(
        db: Session, criterion: RecipeCriterion
    ) -> Union[RecipeView, RecipePage, List[RecipeCard]]:
        """Dispatch a selection criterion to the matching query."""
        if isinstance(criterion, ById):
            return RecipeQueryService.get_recipe_view(db, criterion.recipe_id)
        if isinstance(criterion, ByOwner):
            return RecipeQueryService.owner_page(db, criterion.owner_id, criterion.offset)
        if isinstance(criterion, Recent):
            return RecipeQueryService.recent(db, criterion.limit)
        if isinstance(criterion, ByCategory):
            return RecipeQueryService.by_category(db, criterion.name, criterion.limit)
        raise TypeError(f"Unsupported recipe criterion: {criterion!r}")

    @staticmethod
    def get_recipe_view(db: Session, recipe_id: UUID) -> RecipeView:
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if not recipe:
            logger.warning(f"recipe_not_found recipe_id={recipe_id}")
            raise NotFoundError(f"Recipe {recipe_id} not found")

        ingredients = IngredientRepository(db).list_for_recipe(recipe_id)
        instructions = InstructionRepository(db).list_for_recipe(recipe_id)
        tags = RecipeCategoryRepository(db).names_for_recipe(recipe_id)
        owner_names = RecipeQueryService.resolve_owner_names(db, [recipe.user_id])

        return RecipeView(
            id=recipe.id,
            user_id=recipe.user_id,
            title=recipe.title,
            description=recipe.description or "",
            image_url=recipe.image_url,
            created_at=recipe.created_at,
            owner_name=owner_names.get(recipe.user_id, UNKNOWN_OWNER),
            ingredients=[IngredientRow.model_validate(i) for i in ingredients],
            instructions=[InstructionStep.model_validate(i) for i in instructions],
            tags=tags,
        )

    @staticmethod
    def owner_page(db: Session, owner_id: UUID, offset: int = 0) -> RecipePage:
        """One page of an owner's recipes; a short page means no more pages."""
        page_size = settings.owner_page_size
        offset = max(0, offset)
        recipes = RecipeRepository(db).list_by_owner(
            owner_id, offset=offset, limit=page_size
        )
        items = RecipeQueryService.to_cards(db, recipes)
        return RecipePage(
            items=items,
            offset=offset,
            next_offset=offset + len(items),
            page_size=page_size,
            has_more=len(items) == page_size,
        )

    @staticmethod
    def owner_recipes(db: Session, owner_id: UUID) -> List[RecipeCard]:
        recipes = RecipeRepository(db).list_by_owner(owner_id)
        return RecipeQueryService.to_cards(db, recipes)

    @staticmethod
    def recent(db: Session, limit: int) -> List[RecipeCard]:
        recipes = RecipeRepository(db).list_recent(limit)
        return RecipeQueryService.to_cards(db, recipes)

    @staticmethod
    def by_category(
        db: Session,
        name: str,
        limit: Optional[int] = None,
        candidate_limit: Optional[int] = None,
    ) -> List[RecipeCard]:
        """
        Recent recipes tagged ``name``.

        With ``limit`` (home carousels) the candidates are the few most recent
        recipes and the result is capped; without it the full filtered set
        of the bounded candidate pool is returned.
        """
        if candidate_limit is None:
            candidate_limit = (
                settings.carousel_candidate_limit
                if limit is not None
                else settings.category_candidate_limit
            )
        candidates = RecipeQueryService.recent(db, candidate_limit)
        matches = classify(candidates, name)
        return matches[:limit] if limit is not None else matches

    @staticmethod
    def home_sections(db: Session) -> HomeSections:
        size = settings.carousel_size
        candidates = RecipeQueryService.recent(db, settings.carousel_candidate_limit)
        buckets = partition(candidates, RESERVED_BUCKETS)
        return HomeSections(
            latest=candidates[:size],
            featured=buckets["featured"][:size],
            popular=buckets["popular"][:size],
            seasonal=buckets["seasonal"][:size],
        )

    @staticmethod
    def category_page(db: Session, slug: str) -> CategoryPage:
        name = decode_category_slug(slug)
        if name == "latest":
            recipes = RecipeQueryService.recent(db, settings.category_candidate_limit)
        else:
            recipes = RecipeQueryService.by_category(db, name)
        return CategoryPage(slug=slug, heading=category_heading(name), recipes=recipes)

    @staticmethod
    def search(db: Session, query: Optional[str]) -> List[SearchHit]:
        """
        Case-insensitive substring search over title and description of the
        most recent recipes.

        Category and owner-name matches are reported in ``matched_on`` for
        the accepted rows only; they neither add nor remove results.
        """
        needle = sanitize_search_query(query).lower()
        if not needle:
            return []

        candidates = RecipeRepository(db).list_recent(settings.search_candidate_limit)
        matches = [
            r
            for r in candidates
            if needle in (r.title or "").lower()
            or needle in (r.description or "").lower()
        ]

        hits = []
        for card in RecipeQueryService.to_cards(db, matches):
            matched_on = []
            if needle in card.title.lower():
                matched_on.append("title")
            if needle in card.description.lower():
                matched_on.append("description")
            if any(needle in c.lower() for c in card.categories):
                matched_on.append("category")
            if needle in card.username.lower():
                matched_on.append("owner")
            hits.append(SearchHit(**card.model_dump(), matched_on=matched_on))

        logger.info(f"recipe_search query={needle!r} hits={len(hits)}")
        return hits

    @staticmethod
    def list_category_names(db: Session) -> List[str]:
        return CategoryRepository(db).list_names()

    @staticmethod
    def suggest_categories(
        db: Session, query: str, selected: Sequence[str] = ()
    ) -> CategorySuggestions:
        editor = TagEditor(selected)
        universe = RecipeQueryService.list_category_names(db)
        suggestions = list(
            editor.suggest(query, universe, limit=settings.suggestion_limit)
        )
        return CategorySuggestions(query=query, suggestions=suggestions)

    @staticmethod
    def resolve_owner_names(db: Session, user_ids: Iterable[UUID]) -> Dict[UUID, str]:
        """Display names of the distinct owners; lookup failures degrade to "Unknown"."""
        ids = set(user_ids)
        try:
            names = ProfileRepository(db).display_names(ids)
        except SQLAlchemyError as e:
            logger.warning(f"owner_names_unavailable count={len(ids)} error={e}")
            names = {}
        return {user_id: names.get(user_id, UNKNOWN_OWNER) for user_id in ids}

    @staticmethod
    def to_cards(db: Session, recipes: Sequence[Recipe]) -> List[RecipeCard]:
        if not recipes:
            return []
        owner_names = RecipeQueryService.resolve_owner_names(
            db, (r.user_id for r in recipes)
        )
        categories = RecipeCategoryRepository(db).names_for_recipes(
            r.id for r in recipes
        )
        return [
            RecipeCard(
                id=r.id,
                user_id=r.user_id,
                title=r.title,
                description=r.description or "",
                image_url=r.image_url,
                created_at=r.created_at,
                username=owner_names.get(r.user_id, UNKNOWN_OWNER),
                categories=categories.get(r.id, []),
            )
            for r in recipes
        ]
