"""Domain models for grocery inventory items."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import StrEnum

DEFAULT_STOCK = 10


class Category(StrEnum):
    """Closed set of grocery categories, in display order."""

    FRUIT = "Fruit"
    VEGETABLE = "Vegetable"
    MEAT = "Meat"
    CHEESE = "Cheese"
    BREAD = "Bread"

    @property
    def rank(self) -> int:
        """Position of the category in declaration order."""
        return list(Category).index(self)


@dataclass(frozen=True)
class GroceryDraft:
    """Mutable fields of a grocery item, before the store assigns identity."""

    name: str
    category: Category
    price: Decimal
    cost_to_produce: Decimal
    stock: int = DEFAULT_STOCK


@dataclass(frozen=True)
class GroceryItem:
    """A grocery item persisted in the store."""

    id: int
    name: str
    category: Category
    price: Decimal
    cost_to_produce: Decimal
    stock: int
    created_utc: datetime

    @property
    def profit(self) -> Decimal:
        """Per-unit profit."""
        return self.price - self.cost_to_produce

    def to_draft(self) -> GroceryDraft:
        return GroceryDraft(
            name=self.name,
            category=self.category,
            price=self.price,
            cost_to_produce=self.cost_to_produce,
            stock=self.stock,
        )
