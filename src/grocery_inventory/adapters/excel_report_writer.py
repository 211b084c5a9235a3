"""openpyxl workbook encoder for inventory reports."""

from dataclasses import dataclass
from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from grocery_inventory.domain.reports import InventoryReport, KeyMetrics
from grocery_inventory.services.reports import ReportWriter

CURRENCY_FORMAT = "$#,##0.00"
PERCENT_FORMAT = "0.0%"

LIGHT_GREEN = "90EE90"
LIGHT_BLUE = "ADD8E6"
LIGHT_YELLOW = "FFFFE0"
LIGHT_CYAN = "E0FFFF"
LIGHT_CORAL = "F08080"
LIGHT_PINK = "FFB6C1"

_STOCK_ROW_COLORS = [LIGHT_GREEN, LIGHT_YELLOW, LIGHT_PINK]


@dataclass
class ExcelReportWriter(ReportWriter):
    """Writes the five report tables as sheets of an xlsx workbook."""

    def render(self, report: InventoryReport) -> bytes:
        workbook = Workbook()
        metrics_sheet = workbook.active
        metrics_sheet.title = "Key Metrics"
        _write_key_metrics(metrics_sheet, report.key_metrics)

        category_sheet = workbook.create_sheet("Profit by Category")
        _write_table(
            category_sheet,
            ["Category", "Items", "Total Stock", "Avg Profit", "Total Potential"],
            [
                [
                    row.category.value,
                    row.item_count,
                    row.total_stock,
                    row.average_profit,
                    row.total_potential_profit,
                ]
                for row in report.profit_by_category
            ],
            header_color=LIGHT_BLUE,
            formats={4: CURRENCY_FORMAT, 5: CURRENCY_FORMAT},
        )

        top_sheet = workbook.create_sheet("Top Profitable Items")
        _write_table(
            top_sheet,
            ["Item", "Category", "Profit", "Margin %"],
            [
                [row.name, row.category.value, row.profit, row.margin]
                for row in report.top_profitable_items
            ],
            header_color=LIGHT_GREEN,
            formats={3: CURRENCY_FORMAT, 4: PERCENT_FORMAT},
        )

        stock_sheet = workbook.create_sheet("Stock Analysis")
        _write_table(
            stock_sheet,
            ["Status", "Items", "Total Stock", "Value"],
            [
                [row.status, row.item_count, row.total_stock, row.total_value]
                for row in report.stock_analysis
            ],
            header_color=LIGHT_CORAL,
            formats={4: CURRENCY_FORMAT},
            row_colors=_STOCK_ROW_COLORS,
        )

        price_sheet = workbook.create_sheet("Price Range Analysis")
        _write_table(
            price_sheet,
            ["Price Range", "Items", "Avg Cost", "Avg Profit", "Profit Margin"],
            [
                [
                    row.label,
                    row.item_count,
                    row.average_cost,
                    row.average_profit,
                    row.average_margin,
                ]
                for row in report.price_ranges
            ],
            header_color=LIGHT_YELLOW,
            formats={3: CURRENCY_FORMAT, 4: CURRENCY_FORMAT, 5: PERCENT_FORMAT},
        )

        buffer = BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()


def _write_key_metrics(sheet: Worksheet, metrics: KeyMetrics) -> None:
    title = sheet.cell(row=1, column=1, value="Grocery Reports - Key Metrics Summary")
    title.font = Font(size=16, bold=True)

    average: object = metrics.average_profit_per_item if metrics.has_data else "No data"
    entries = [
        ("Total Profit Potential:", metrics.total_profit_potential, CURRENCY_FORMAT),
        ("Average Profit per Item:", average, CURRENCY_FORMAT),
        ("Total Items in Stock:", metrics.total_items_in_stock, None),
        ("Product Categories:", metrics.total_categories, None),
    ]
    colors = [LIGHT_GREEN, LIGHT_BLUE, LIGHT_YELLOW, LIGHT_CYAN]
    for offset, ((label, value, number_format), color) in enumerate(
        zip(entries, colors, strict=True)
    ):
        row = 3 + offset
        sheet.cell(row=row, column=1, value=label).font = Font(bold=True)
        cell = sheet.cell(row=row, column=2, value=value)
        if number_format and not isinstance(value, str):
            cell.number_format = number_format
        cell.fill = _solid(color)

    note = sheet.cell(
        row=8,
        column=1,
        value=(
            "Note: These values are calculated from the detailed data "
            "in the other sheets."
        ),
    )
    note.font = Font(italic=True)
    sheet.merge_cells(start_row=8, start_column=1, end_row=8, end_column=2)
    _fit_columns(sheet)


def _write_table(  # noqa: PLR0913
    sheet: Worksheet,
    headers: list[str],
    rows: list[list[object]],
    *,
    header_color: str,
    formats: dict[int, str],
    row_colors: list[str] | None = None,
) -> None:
    sheet.append(headers)
    for cell in sheet[1]:
        cell.font = Font(bold=True)
        cell.fill = _solid(header_color)

    for index, values in enumerate(rows):
        sheet.append(values)
        row_number = index + 2
        for column, number_format in formats.items():
            sheet.cell(row=row_number, column=column).number_format = number_format
        if row_colors and index < len(row_colors):
            for column in range(1, len(headers) + 1):
                sheet.cell(row=row_number, column=column).fill = _solid(
                    row_colors[index]
                )
    _fit_columns(sheet)


def _solid(color: str) -> PatternFill:
    return PatternFill(fill_type="solid", start_color=color, end_color=color)


def _fit_columns(sheet: Worksheet) -> None:
    """Approximate auto-fit: widen each column to its longest value."""
    widths: dict[int, int] = {}
    for row in sheet.iter_rows():
        for cell in row:
            if cell.value is None or cell.coordinate in sheet.merged_cells:
                continue
            length = len(str(cell.value))
            widths[cell.column] = max(widths.get(cell.column, 0), length)
    for column, width in widths.items():
        sheet.column_dimensions[get_column_letter(column)].width = width + 2
