"""Tests for container wiring and settings."""

import pytest
from pydantic import ValidationError

from grocery_inventory.adapters.supabase_grocery_repository import (
    SupabaseGroceryRepository,
)
from grocery_inventory.config import Settings
from grocery_inventory.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    repository = container.grocery_service.repository
    assert isinstance(repository, SupabaseGroceryRepository)
    assert repository.table_name == "grocery_items"
    assert container.report_service.top_limit == 10


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "eyJhbGciOiJIUzI1NiJ9.e30.c2ln")
    monkeypatch.setenv("GROCERIES_TABLE", "inventory")
    monkeypatch.setenv("SEED_ON_STARTUP", "false")

    settings = Settings()

    assert settings.supabase_url == "https://env.supabase.co"
    assert settings.groceries_table == "inventory"
    assert settings.seed_on_startup is False
    assert settings.report_top_items == 10


@pytest.mark.parametrize("limit", [0, -1])
def test_settings_reject_non_positive_top_items(limit: int) -> None:
    with pytest.raises(ValidationError):
        Settings(
            supabase_url="https://example.supabase.co",
            supabase_service_key="eyJhbGciOiJIUzI1NiJ9.e30.c2ln",
            report_top_items=limit,
        )
