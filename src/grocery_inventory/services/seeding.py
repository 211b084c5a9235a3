"""Loading of the bundled grocery dataset into an empty store."""

import json
import logging
from decimal import Decimal
from importlib import resources

from grocery_inventory.domain.groceries import DEFAULT_STOCK, Category, GroceryDraft
from grocery_inventory.services.groceries import GroceryService

SEED_RESOURCE = "seed_groceries.json"

_logger = logging.getLogger(__name__)


def load_seed_drafts(raw: str | None = None) -> list[GroceryDraft]:
    """Parse the seed dataset, skipping entries with an unknown category."""
    if raw is None:
        raw = (
            resources.files("grocery_inventory.data")
            .joinpath(SEED_RESOURCE)
            .read_text(encoding="utf-8")
        )
    entries = json.loads(raw, parse_float=Decimal)
    drafts: list[GroceryDraft] = []
    for entry in entries:
        category_raw = entry.get("category")
        try:
            category = Category(category_raw)
        except ValueError:
            _logger.warning(
                "Skipping seed item with unknown category: name=%s category=%s",
                entry.get("name"),
                category_raw,
            )
            continue
        drafts.append(
            GroceryDraft(
                name=str(entry["name"]),
                category=category,
                price=Decimal(str(entry["price"])),
                cost_to_produce=Decimal(str(entry["costToProduce"])),
                stock=int(entry.get("stock", DEFAULT_STOCK)),
            )
        )
    return drafts


def seed_if_empty(service: GroceryService, drafts: list[GroceryDraft]) -> int:
    """Insert drafts when the store holds no items; return the inserted count."""
    if service.count() > 0:
        return 0
    created = service.seed(drafts)
    _logger.info("Seeded grocery store: rows=%s", len(created))
    return len(created)
