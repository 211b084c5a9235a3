"""Report aggregation over the grocery inventory."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol

from grocery_inventory.domain.errors import ReportGenerationError
from grocery_inventory.domain.groceries import Category, GroceryItem
from grocery_inventory.domain.reports import (
    CategoryProfitRow,
    InventoryReport,
    KeyMetrics,
    PriceRangeRow,
    ReportFile,
    StockStatusRow,
    TopProfitRow,
)

TOP_ITEMS_LIMIT = 10
LOW_STOCK_MAX = 5
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_ZERO = Decimal("0")
_PRICE_RANGES: list[tuple[str, Decimal, Decimal | None]] = [
    ("$0-$1", Decimal("0"), Decimal("1")),
    ("$1-$3", Decimal("1"), Decimal("3")),
    ("$3-$5", Decimal("3"), Decimal("5")),
    ("$5-$10", Decimal("5"), Decimal("10")),
    ("$10+", Decimal("10"), None),
]

_logger = logging.getLogger(__name__)


class ReportWriter(Protocol):
    """Encodes an aggregated report into a downloadable document."""

    def render(self, report: InventoryReport) -> bytes:
        """Return the encoded document."""


def build_report(
    items: Sequence[GroceryItem], top_limit: int = TOP_ITEMS_LIMIT
) -> InventoryReport:
    """Aggregate items into the five report tables."""
    return InventoryReport(
        key_metrics=key_metrics(items),
        profit_by_category=profit_by_category(items),
        top_profitable_items=top_profitable_items(items, top_limit),
        stock_analysis=stock_analysis(items),
        price_ranges=price_ranges(items),
    )


def key_metrics(items: Sequence[GroceryItem]) -> KeyMetrics:
    return KeyMetrics(
        total_profit_potential=_sum(items, lambda item: item.profit * item.stock),
        average_profit_per_item=_mean(items, lambda item: item.profit),
        total_items_in_stock=sum(item.stock for item in items),
        total_categories=len({item.category for item in items}),
        has_data=bool(items),
    )


def profit_by_category(items: Sequence[GroceryItem]) -> list[CategoryProfitRow]:
    """Group items by category, most profitable category first."""
    groups: dict[Category, list[GroceryItem]] = {}
    for item in items:
        groups.setdefault(item.category, []).append(item)
    rows = [
        CategoryProfitRow(
            category=category,
            item_count=len(members),
            total_stock=sum(item.stock for item in members),
            average_profit=_mean(members, lambda item: item.profit),
            total_potential_profit=_sum(
                members, lambda item: item.profit * item.stock
            ),
        )
        for category, members in groups.items()
    ]
    return sorted(rows, key=lambda row: row.total_potential_profit, reverse=True)


def top_profitable_items(
    items: Sequence[GroceryItem], limit: int = TOP_ITEMS_LIMIT
) -> list[TopProfitRow]:
    """Return the items with the highest per-unit profit."""
    ranked = sorted(items, key=lambda item: item.profit, reverse=True)
    return [
        TopProfitRow(
            name=item.name,
            category=item.category,
            profit=item.profit,
            margin=item.profit / item.price,
        )
        for item in ranked[:limit]
    ]


def stock_analysis(items: Sequence[GroceryItem]) -> list[StockStatusRow]:
    """Split items into high, low and out-of-stock buckets; all are emitted."""
    buckets = [
        ("High Stock (>5)", [item for item in items if item.stock > LOW_STOCK_MAX]),
        (
            "Low Stock (1-5)",
            [item for item in items if 1 <= item.stock <= LOW_STOCK_MAX],
        ),
        ("Out of Stock (0)", [item for item in items if item.stock == 0]),
    ]
    return [
        StockStatusRow(
            status=status,
            item_count=len(members),
            total_stock=sum(item.stock for item in members),
            total_value=_sum(members, lambda item: item.price * item.stock),
        )
        for status, members in buckets
    ]


def price_ranges(items: Sequence[GroceryItem]) -> list[PriceRangeRow]:
    """Band items by price; empty bands are omitted."""
    rows = []
    for label, low, high in _PRICE_RANGES:
        members = [
            item
            for item in items
            if item.price >= low and (high is None or item.price < high)
        ]
        if not members:
            continue
        rows.append(
            PriceRangeRow(
                label=label,
                item_count=len(members),
                average_cost=_mean(members, lambda item: item.cost_to_produce),
                average_profit=_mean(members, lambda item: item.profit),
                average_margin=_mean(members, lambda item: item.profit / item.price),
            )
        )
    return rows


@dataclass
class ReportService:
    """Builds inventory reports and encodes them for export."""

    writer: ReportWriter
    top_limit: int = TOP_ITEMS_LIMIT

    def summarize(self, items: Sequence[GroceryItem]) -> InventoryReport:
        """Aggregate items without encoding."""
        try:
            return build_report(items, self.top_limit)
        except Exception as exc:
            _logger.exception("Report aggregation failed", extra={"items": len(items)})
            raise ReportGenerationError(f"Failed to aggregate report: {exc}") from exc

    def export(
        self, items: Sequence[GroceryItem], generated_at: datetime
    ) -> ReportFile:
        """Aggregate items and encode them as a spreadsheet."""
        report = self.summarize(items)
        try:
            content = self.writer.render(report)
        except Exception as exc:
            _logger.exception("Report encoding failed")
            raise ReportGenerationError(f"Failed to encode report: {exc}") from exc
        _logger.info("Report generated: items=%s bytes=%s", len(items), len(content))
        return ReportFile(
            filename=f"GroceryReport_{generated_at:%Y%m%d_%H%M%S}.xlsx",
            content=content,
            media_type=XLSX_MEDIA_TYPE,
        )


def _sum(
    items: Sequence[GroceryItem], value: Callable[[GroceryItem], Decimal]
) -> Decimal:
    return sum((value(item) for item in items), _ZERO)


def _mean(
    items: Sequence[GroceryItem], value: Callable[[GroceryItem], Decimal]
) -> Decimal:
    if not items:
        return _ZERO
    return _sum(items, value) / len(items)
