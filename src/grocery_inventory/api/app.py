"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from grocery_inventory.api.groceries import router as groceries_router
from grocery_inventory.api.grocery_models import FieldViolationResponse
from grocery_inventory.api.reports import router as reports_router
from grocery_inventory.app_logging import configure_logging
from grocery_inventory.containers import AppContainer
from grocery_inventory.domain.errors import GroceryValidationError
from grocery_inventory.services.seeding import load_seed_drafts, seed_if_empty


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        if state_container.settings.seed_on_startup:
            try:
                seed_if_empty(state_container.grocery_service, load_seed_drafts())
            except Exception:
                logger.exception("Failed to seed grocery store")
        yield

    app = FastAPI(title="Grocery Inventory", lifespan=lifespan)
    app.state.container = container

    app.include_router(groceries_router)
    app.include_router(reports_router)

    @app.exception_handler(GroceryValidationError)
    async def validation_error_handler(
        request: Request, exc: GroceryValidationError
    ) -> JSONResponse:
        """Report field violations as a client error."""
        logger.info("Rejected grocery payload: %s", exc)
        violations = [
            FieldViolationResponse.model_validate(violation).model_dump()
            for violation in exc.violations
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": violations},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
