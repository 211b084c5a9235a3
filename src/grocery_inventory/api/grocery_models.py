"""Pydantic models for grocery and report payloads."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from grocery_inventory.domain.groceries import DEFAULT_STOCK, Category, GroceryDraft

Money = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class GroceryItemRequest(CamelModel):
    """Create or update payload for a grocery item."""

    name: str = Field(min_length=1, max_length=100)
    category: Category
    price: Decimal = Field(gt=0)
    cost_to_produce: Decimal = Field(gt=0)
    stock: int = Field(default=DEFAULT_STOCK, ge=0)

    def to_draft(self) -> GroceryDraft:
        return GroceryDraft(
            name=self.name,
            category=self.category,
            price=self.price,
            cost_to_produce=self.cost_to_produce,
            stock=self.stock,
        )


class StockAdjustmentRequest(CamelModel):
    """Relative stock change; negative values remove stock."""

    delta: int


class GroceryItemResponse(CamelModel):
    """Grocery item as returned by the API."""

    id: int
    name: str
    category: Category
    price: Money
    cost_to_produce: Money
    stock: int
    created_utc: datetime


class FieldViolationResponse(CamelModel):
    field: str
    message: str


class KeyMetricsResponse(CamelModel):
    total_profit_potential: Money
    average_profit_per_item: Money
    total_items_in_stock: int
    total_categories: int
    has_data: bool


class CategoryProfitResponse(CamelModel):
    category: Category
    item_count: int
    total_stock: int
    average_profit: Money
    total_potential_profit: Money


class TopProfitResponse(CamelModel):
    name: str
    category: Category
    profit: Money
    margin: Money


class StockStatusResponse(CamelModel):
    status: str
    item_count: int
    total_stock: int
    total_value: Money


class PriceRangeResponse(CamelModel):
    label: str
    item_count: int
    average_cost: Money
    average_profit: Money
    average_margin: Money


class InventoryReportResponse(CamelModel):
    """The five report tables as JSON."""

    key_metrics: KeyMetricsResponse
    profit_by_category: list[CategoryProfitResponse]
    top_profitable_items: list[TopProfitResponse]
    stock_analysis: list[StockStatusResponse]
    price_ranges: list[PriceRangeResponse]
