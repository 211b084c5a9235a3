"""Services for managing grocery inventory items."""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Protocol

from grocery_inventory.domain.errors import FieldViolation, GroceryValidationError
from grocery_inventory.domain.groceries import Category, GroceryDraft, GroceryItem

NAME_MAX_LENGTH = 100

_logger = logging.getLogger(__name__)


class GroceryRepository(Protocol):
    """Persistence interface for grocery items."""

    def list_items(self) -> list[GroceryItem]:
        """Return every stored item."""

    def get_item(self, item_id: int) -> GroceryItem | None:
        """Return an item by id, if present."""

    def create_item(self, draft: GroceryDraft) -> GroceryItem:
        """Insert an item and return it with its assigned id."""

    def update_item(self, item_id: int, draft: GroceryDraft) -> GroceryItem | None:
        """Replace the mutable fields of an item, if present."""

    def delete_item(self, item_id: int) -> bool:
        """Delete an item and report whether it existed."""

    def item_exists(self, item_id: int) -> bool:
        """Return true when an item with the id is stored."""

    def count_items(self) -> int:
        """Return the number of stored items."""


def validate_grocery_fields(
    name: str,
    category: object,
    price: Decimal,
    cost_to_produce: Decimal,
    stock: int,
) -> list[FieldViolation]:
    """Return field-level violations; an empty list means the fields are valid."""
    violations: list[FieldViolation] = []
    if not 1 <= len(name) <= NAME_MAX_LENGTH:
        violations.append(
            FieldViolation(
                "name", f"Name must be between 1 and {NAME_MAX_LENGTH} characters"
            )
        )
    if not isinstance(category, Category):
        violations.append(FieldViolation("category", "Unknown category"))
    if price <= 0:
        violations.append(FieldViolation("price", "Price must be greater than 0"))
    if cost_to_produce <= 0:
        violations.append(
            FieldViolation("costToProduce", "Cost to produce must be greater than 0")
        )
    if stock < 0:
        violations.append(FieldViolation("stock", "Stock cannot be negative"))
    return violations


def ensure_valid(draft: GroceryDraft) -> GroceryDraft:
    """Raise GroceryValidationError when the draft breaks an item invariant."""
    violations = validate_grocery_fields(
        name=draft.name,
        category=draft.category,
        price=draft.price,
        cost_to_produce=draft.cost_to_produce,
        stock=draft.stock,
    )
    if violations:
        raise GroceryValidationError(violations)
    return draft


@dataclass
class GroceryService:
    """Application service for the grocery item lifecycle."""

    repository: GroceryRepository

    def get_all(self) -> list[GroceryItem]:
        """Return all items ordered by category then name."""
        return sorted(
            self.repository.list_items(),
            key=lambda item: (item.category.rank, item.name),
        )

    def get_by_id(self, item_id: int) -> GroceryItem | None:
        return self.repository.get_item(item_id)

    def create(self, draft: GroceryDraft) -> GroceryItem:
        """Validate and persist a new item."""
        created = self.repository.create_item(ensure_valid(draft))
        _logger.info("Grocery created: id=%s name=%s", created.id, created.name)
        return created

    def update(self, item_id: int, draft: GroceryDraft) -> GroceryItem | None:
        """Replace all mutable fields of an item; None when it does not exist."""
        updated = self.repository.update_item(item_id, ensure_valid(draft))
        if updated is None:
            _logger.info("Grocery update skipped, not found: id=%s", item_id)
            return None
        _logger.info("Grocery updated: id=%s", item_id)
        return updated

    def delete(self, item_id: int) -> bool:
        deleted = self.repository.delete_item(item_id)
        if deleted:
            _logger.info("Grocery deleted: id=%s", item_id)
        return deleted

    def exists(self, item_id: int) -> bool:
        return self.repository.item_exists(item_id)

    def count(self) -> int:
        return self.repository.count_items()

    def adjust_stock(self, item_id: int, delta: int) -> GroceryItem | None:
        """Shift stock by delta, clamping at zero; None when the item is missing."""
        current = self.repository.get_item(item_id)
        if current is None:
            return None
        new_stock = max(0, current.stock + delta)
        draft = ensure_valid(replace(current.to_draft(), stock=new_stock))
        updated = self.repository.update_item(item_id, draft)
        if updated is not None:
            _logger.info(
                "Grocery stock adjusted: id=%s delta=%s stock=%s",
                item_id,
                delta,
                updated.stock,
            )
        return updated

    def seed(self, drafts: list[GroceryDraft]) -> list[GroceryItem]:
        """Insert a batch of drafts one by one."""
        return [self.repository.create_item(ensure_valid(draft)) for draft in drafts]
