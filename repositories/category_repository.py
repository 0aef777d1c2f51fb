"""
Category Repository - Data access layer for categories and recipe assignments
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Category, RecipeCategory


class CategoryRepository(BaseRepository[Category]):
    """Repository for the global category labels"""

    def __init__(self, db: Session):
        super().__init__(db, Category)

    def get_by_name(self, name: str) -> Optional[Category]:
        """Get category by normalized (trimmed, lower-cased) name"""
        normalized_name = name.strip().lower()
        return self.db.query(Category).filter(Category.name == normalized_name).first()

    def get_or_create(self, name: str) -> Category:
        """Look up a category by normalized name, creating it when absent"""
        normalized_name = name.strip().lower()
        category = self.get_by_name(normalized_name)
        if category:
            return category
        return self.add(Category(name=normalized_name))

    def list_names(self) -> List[str]:
        return [
            name for (name,) in self.db.query(Category.name).order_by(Category.name)
        ]


class RecipeCategoryRepository(BaseRepository[RecipeCategory]):
    """Repository for the recipe/category join rows"""

    def __init__(self, db: Session):
        super().__init__(db, RecipeCategory)

    def is_assigned(self, recipe_id: UUID, category_id: UUID) -> bool:
        return self.db.get(RecipeCategory, (recipe_id, category_id)) is not None

    def ensure(self, recipe_id: UUID, category_id: UUID) -> bool:
        """Insert the assignment unless it already exists; returns True when inserted"""
        if self.is_assigned(recipe_id, category_id):
            return False
        self.add(RecipeCategory(recipe_id=recipe_id, category_id=category_id))
        return True

    def delete_for_recipe(self, recipe_id: UUID) -> int:
        count = (
            self.db.query(RecipeCategory)
            .filter(RecipeCategory.recipe_id == recipe_id)
            .delete(synchronize_session="fetch")
        )
        self.db.flush()
        return count

    def names_for_recipe(self, recipe_id: UUID) -> List[str]:
        return self.names_for_recipes([recipe_id]).get(recipe_id, [])

    def names_for_recipes(self, recipe_ids: Iterable[UUID]) -> Dict[UUID, List[str]]:
        """Category names per recipe id, fetched in one query"""
        ids = list(set(recipe_ids))
        if not ids:
            return {}
        rows = (
            self.db.query(RecipeCategory.recipe_id, Category.name)
            .join(Category, Category.id == RecipeCategory.category_id)
            .filter(RecipeCategory.recipe_id.in_(ids))
            .order_by(Category.name)
            .all()
        )
        names: Dict[UUID, List[str]] = defaultdict(list)
        for recipe_id, name in rows:
            names[recipe_id].append(name)
        return dict(names)
