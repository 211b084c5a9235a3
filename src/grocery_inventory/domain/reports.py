"""Domain models for inventory reports."""

from dataclasses import dataclass
from decimal import Decimal

from grocery_inventory.domain.groceries import Category


@dataclass(frozen=True)
class KeyMetrics:
    """Headline figures across the whole inventory."""

    total_profit_potential: Decimal
    average_profit_per_item: Decimal
    total_items_in_stock: int
    total_categories: int
    has_data: bool


@dataclass(frozen=True)
class CategoryProfitRow:
    """Profit figures for one category."""

    category: Category
    item_count: int
    total_stock: int
    average_profit: Decimal
    total_potential_profit: Decimal


@dataclass(frozen=True)
class TopProfitRow:
    """A single entry in the most profitable items table."""

    name: str
    category: Category
    profit: Decimal
    margin: Decimal


@dataclass(frozen=True)
class StockStatusRow:
    """Aggregates for one stock level bucket."""

    status: str
    item_count: int
    total_stock: int
    total_value: Decimal


@dataclass(frozen=True)
class PriceRangeRow:
    """Aggregates for one price band."""

    label: str
    item_count: int
    average_cost: Decimal
    average_profit: Decimal
    average_margin: Decimal


@dataclass(frozen=True)
class InventoryReport:
    """The five summary tables of an inventory report."""

    key_metrics: KeyMetrics
    profit_by_category: list[CategoryProfitRow]
    top_profitable_items: list[TopProfitRow]
    stock_analysis: list[StockStatusRow]
    price_ranges: list[PriceRangeRow]


@dataclass(frozen=True)
class ReportFile:
    """An encoded report ready for download."""

    filename: str
    content: bytes
    media_type: str
