"""Selection criteria understood by the recipe aggregation query."""

from dataclasses import dataclass
from typing import Optional, Union
from uuid import UUID


@dataclass(frozen=True)
class ById:
    recipe_id: UUID


@dataclass(frozen=True)
class ByOwner:
    """Offset-ranged page of one owner's recipes, newest first."""

    owner_id: UUID
    offset: int = 0


@dataclass(frozen=True)
class Recent:
    limit: int


@dataclass(frozen=True)
class ByCategory:
    """Recent recipes tagged ``name``; ``limit`` caps carousel results."""

    name: str
    limit: Optional[int] = None


RecipeCriterion = Union[ById, ByOwner, Recent, ByCategory]
