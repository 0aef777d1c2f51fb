"""Category classifier: buckets recipes by their joined category names."""

from typing import Callable, Dict, Iterable, List, Sequence, TypeVar

from domain.enums import ReservedCategory

T = TypeVar("T")

RESERVED_BUCKETS = tuple(c.value for c in ReservedCategory)


def _categories_of(recipe) -> Iterable[str]:
    return getattr(recipe, "categories", None) or ()


def classify(
    recipes: Iterable[T],
    bucket_name: str,
    categories_of: Callable[[T], Iterable[str]] = _categories_of,
) -> List[T]:
    """Recipes having ``bucket_name`` among their categories (case-insensitive), input order kept."""
    bucket = bucket_name.lower()
    return [
        recipe
        for recipe in recipes
        if any((name or "").lower() == bucket for name in categories_of(recipe))
    ]


def partition(
    recipes: Iterable[T],
    bucket_names: Sequence[str] = RESERVED_BUCKETS,
    categories_of: Callable[[T], Iterable[str]] = _categories_of,
) -> Dict[str, List[T]]:
    buckets: Dict[str, List[T]] = {name: [] for name in bucket_names}
    lowered = {name.lower(): name for name in bucket_names}
    for recipe in recipes:
        names = {(n or "").lower() for n in categories_of(recipe)}
        for key, name in lowered.items():
            if key in names:
                buckets[name].append(recipe)
    return buckets
