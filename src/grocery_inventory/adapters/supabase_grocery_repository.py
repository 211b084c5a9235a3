"""Supabase implementation for grocery item storage."""

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal

from supabase import Client

from grocery_inventory.domain.groceries import (
    DEFAULT_STOCK,
    Category,
    GroceryDraft,
    GroceryItem,
)
from grocery_inventory.services.groceries import GroceryRepository

GROCERY_COLUMNS = "id, name, category, price, cost_to_produce, stock, created_utc"


@dataclass
class SupabaseGroceryRepository(GroceryRepository):
    """Supabase-backed repository for grocery items."""

    client: Client
    table_name: str = "grocery_items"

    def list_items(self) -> list[GroceryItem]:
        """Return every stored item."""
        response = (
            self.client.table(self.table_name)
            .select(GROCERY_COLUMNS)
            .order("name", desc=False)
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def get_item(self, item_id: int) -> GroceryItem | None:
        """Return an item by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select(GROCERY_COLUMNS)
            .eq("id", item_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def create_item(self, draft: GroceryDraft) -> GroceryItem:
        """Insert an item; the table assigns the id."""
        payload = {
            **_draft_payload(draft),
            "created_utc": datetime.now(tz=UTC).isoformat(),
        }
        response = self.client.table(self.table_name).insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create grocery item")
        return _parse_item(response.data[0])

    def update_item(self, item_id: int, draft: GroceryDraft) -> GroceryItem | None:
        """Replace mutable fields; created_utc is never sent."""
        response = (
            self.client.table(self.table_name)
            .update(_draft_payload(draft))
            .eq("id", item_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def delete_item(self, item_id: int) -> bool:
        """Delete an item and report whether a row was removed."""
        response = (
            self.client.table(self.table_name).delete().eq("id", item_id).execute()
        )
        return bool(response.data)

    def item_exists(self, item_id: int) -> bool:
        """Return true when a row with the id exists."""
        response = (
            self.client.table(self.table_name)
            .select("id")
            .eq("id", item_id)
            .limit(1)
            .execute()
        )
        return bool(response.data)

    def count_items(self) -> int:
        """Return the number of stored rows."""
        response = (
            self.client.table(self.table_name)
            .select("id", count="exact", head=True)
            .execute()
        )
        return int(response.count or 0)


def _draft_payload(draft: GroceryDraft) -> dict[str, object]:
    return {
        "name": draft.name,
        "category": draft.category.value,
        "price": str(draft.price),
        "cost_to_produce": str(draft.cost_to_produce),
        "stock": draft.stock,
    }


def _parse_item(row: dict[str, object]) -> GroceryItem:
    """Parse a grocery row into a domain model."""
    created_utc = datetime.fromisoformat(str(row["created_utc"]))
    return GroceryItem(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        category=Category(row["category"]),
        price=Decimal(str(row["price"])),
        cost_to_produce=Decimal(str(row["cost_to_produce"])),
        stock=int(row.get("stock", DEFAULT_STOCK)),
        created_utc=created_utc,
    )
