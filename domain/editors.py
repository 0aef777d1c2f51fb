"""
Recipe form editors.

TagEditor keeps the ordered set of category tags of one recipe, and the row
list editors keep the ingredient and instruction rows. RecipeDraft combines
them into the state of one add/edit form and normalizes it into the rows
that get persisted.
"""

from contextlib import contextmanager
from itertools import islice
from typing import Generic, Iterable, Iterator, List, Optional, Type, TypeVar
from uuid import UUID

from pydantic import BaseModel

from app.exceptions import ConflictError, ServiceValidationError
from domain.schemas.recipe_schemas import (
    IngredientRow,
    InstructionRow,
    InstructionStep,
    RecipeDraftResponse,
    RecipeSubmit,
    RecipeView,
)

SUGGESTION_LIMIT = 8

RowT = TypeVar("RowT", bound=BaseModel)


class TagEditor:
    """Ordered set of unique, trimmed, lower-cased tags."""

    def __init__(self, tags: Optional[Iterable[str]] = None):
        self._tags: List[str] = []
        for tag in tags or ():
            self.add_from_input(tag)

    @property
    def tags(self) -> List[str]:
        return list(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tags))

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and tag.strip().lower() in self._tags

    def add_from_input(self, raw: str) -> bool:
        """Add the normalized form of ``raw``; returns False when nothing was added."""
        tag = (raw or "").strip().lower()
        if not tag or tag in self._tags:
            return False
        self._tags.append(tag)
        return True

    def add_suggestion(self, name: str) -> bool:
        return self.add_from_input(name)

    def remove(self, index: int) -> Optional[str]:
        if 0 <= index < len(self._tags):
            return self._tags.pop(index)
        return None

    def backspace_remove_last(self, current_input: str = "") -> Optional[str]:
        """Deletion gesture on the tag input; only acts while the input is empty."""
        if current_input or not self._tags:
            return None
        return self._tags.pop()

    def suggest(
        self, partial: str, universe: Iterable[str], limit: int = SUGGESTION_LIMIT
    ) -> Iterator[str]:
        """Lazily yield known category names containing ``partial``, skipping selected ones."""
        if not partial:
            return
        needle = partial.lower()
        candidates = (
            name
            for name in universe
            if needle in name.lower() and name.lower() not in self._tags
        )
        yield from islice(candidates, limit)


class RowListEditor(Generic[RowT]):
    """
    Ordered list of structured rows with add/remove/edit-in-place.

    The editor always holds at least one row: removing the sole remaining
    row is refused, and building it from no rows yields one blank row.
    """

    row_type: Type[RowT]
    required_field: str

    def __init__(self, rows: Optional[Iterable[RowT]] = None):
        self._rows: List[RowT] = [row.model_copy() for row in rows or ()]
        if not self._rows:
            self.append_blank()

    @property
    def rows(self) -> List[RowT]:
        return [row.model_copy() for row in self._rows]

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def can_remove(self) -> bool:
        return len(self._rows) > 1

    def append_blank(self) -> None:
        self._rows.append(self.row_type())

    def update_field(self, index: int, field: str, value: str) -> bool:
        if not 0 <= index < len(self._rows):
            return False
        if field not in self.row_type.model_fields:
            return False
        self._rows[index] = self._rows[index].model_copy(update={field: value})
        return True

    def remove_at(self, index: int) -> bool:
        if not self.can_remove or not 0 <= index < len(self._rows):
            return False
        del self._rows[index]
        return True

    def filled_rows(self) -> List[RowT]:
        """Rows whose required field is non-blank, in current order."""
        return [
            row
            for row in self._rows
            if str(getattr(row, self.required_field) or "").strip()
        ]


class IngredientListEditor(RowListEditor[IngredientRow]):
    row_type = IngredientRow
    required_field = "name"

    def submission_rows(self) -> List[IngredientRow]:
        return [
            IngredientRow(name=row.name.strip(), quantity=(row.quantity or "").strip())
            for row in self.filled_rows()
        ]


class InstructionListEditor(RowListEditor[InstructionRow]):
    row_type = InstructionRow
    required_field = "description"

    def submission_rows(self) -> List[InstructionStep]:
        """Kept rows renumbered 1..K by their current order."""
        return [
            InstructionStep(step_number=number, description=row.description.strip())
            for number, row in enumerate(self.filled_rows(), start=1)
        ]


class RecipeDraft:
    """State of one add/edit recipe form."""

    def __init__(
        self,
        title: str = "",
        description: str = "",
        image_url: Optional[str] = None,
        tags: Optional[Iterable[str]] = None,
        ingredients: Optional[Iterable[IngredientRow]] = None,
        instructions: Optional[Iterable[InstructionRow]] = None,
    ):
        self.title = title
        self.description = description
        self.image_url = image_url
        self.tags = TagEditor(tags)
        self.ingredients = IngredientListEditor(ingredients)
        self.instructions = InstructionListEditor(instructions)
        self._submitting = False

    @classmethod
    def from_submit(cls, payload: RecipeSubmit) -> "RecipeDraft":
        return cls(
            title=payload.title,
            description=payload.description,
            image_url=payload.image_url,
            tags=payload.tags,
            ingredients=payload.ingredients,
            instructions=payload.instructions,
        )

    @classmethod
    def from_view(cls, view: RecipeView) -> "RecipeDraft":
        """Prefill the edit form from a stored recipe."""
        return cls(
            title=view.title,
            description=view.description,
            image_url=view.image_url,
            tags=view.tags,
            ingredients=view.ingredients,
            instructions=[
                InstructionRow(description=step.description)
                for step in view.instructions
            ],
        )

    @property
    def submitting(self) -> bool:
        return self._submitting

    @contextmanager
    def begin_submit(self):
        """
        Busy-flag guard: one in-flight submission per draft instance.

        The flag lives on this object only. Each API request builds its own
        draft, so concurrent requests never share it.
        """
        if self._submitting:
            raise ConflictError(
                "A submission is already in progress", code="SUBMISSION_IN_PROGRESS"
            )
        self._submitting = True
        try:
            yield self
        finally:
            self._submitting = False

    def validate(self) -> None:
        if not (self.title or "").strip():
            raise ServiceValidationError(
                "Title is required", details={"field": "title"}
            )

    def to_response(self, recipe_id: UUID) -> RecipeDraftResponse:
        return RecipeDraftResponse(
            recipe_id=recipe_id,
            title=self.title,
            description=self.description,
            image_url=self.image_url,
            ingredients=self.ingredients.rows,
            instructions=self.instructions.rows,
            tags=self.tags.tags,
        )
