"""ASGI entrypoint for the grocery inventory API."""

from grocery_inventory.api.app import create_app
from grocery_inventory.containers import build_container

app = create_app(build_container())
