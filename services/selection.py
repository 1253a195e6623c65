from __future__ import annotations

from dataclasses import dataclass

from schemas.product import Category
from services.catalog import normalize_category


@dataclass(frozen=True)
class CategorySelection:
    category: Category | None = None

    def choose(self, category: Category | str) -> "CategorySelection":
        selected = normalize_category(category)
        if selected is None:
            raise ValueError("Use reset() to clear the category selection")
        return CategorySelection(category=selected)

    def reset(self) -> "CategorySelection":
        return CategorySelection()

    @property
    def is_selected(self) -> bool:
        return self.category is not None
