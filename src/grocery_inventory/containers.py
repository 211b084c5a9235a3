"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from grocery_inventory.adapters.excel_report_writer import ExcelReportWriter
from grocery_inventory.adapters.supabase_grocery_repository import (
    SupabaseGroceryRepository,
)
from grocery_inventory.config import Settings
from grocery_inventory.services.groceries import GroceryService
from grocery_inventory.services.reports import ReportService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    grocery_service: GroceryService
    report_service: ReportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    grocery_repository = SupabaseGroceryRepository(
        supabase_client, table_name=resolved_settings.groceries_table
    )
    return AppContainer(
        settings=resolved_settings,
        grocery_service=GroceryService(grocery_repository),
        report_service=ReportService(
            writer=ExcelReportWriter(),
            top_limit=resolved_settings.report_top_items,
        ),
    )
