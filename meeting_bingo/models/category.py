"""Category models — themed, fixed pools of buzzwords."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from meeting_bingo.models.card import CamelModel


class Category(BaseModel):
    """A statically defined buzzword pack."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    icon: str = ""
    words: tuple[str, ...] = Field(default_factory=tuple)


class CategorySummary(CamelModel):
    """Category data shown on the selection screen (no word pool)."""

    id: str
    name: str
    description: str = ""
    icon: str = ""
    word_count: int = 0

    @classmethod
    def from_category(cls, category: Category) -> CategorySummary:
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            icon=category.icon,
            word_count=len(category.words),
        )
