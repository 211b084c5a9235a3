"""Grocery item CRUD endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, Response, status

from grocery_inventory.api.grocery_models import (
    GroceryItemRequest,
    GroceryItemResponse,
    StockAdjustmentRequest,
)

if TYPE_CHECKING:
    from grocery_inventory.containers import AppContainer

router = APIRouter(prefix="/groceries", tags=["groceries"])


@router.get("", response_model=list[GroceryItemResponse])
async def list_groceries(request: Request) -> list[GroceryItemResponse]:
    """Return all groceries ordered by category then name."""
    container: AppContainer = request.app.state.container
    return [
        GroceryItemResponse.model_validate(item)
        for item in container.grocery_service.get_all()
    ]


@router.get("/{item_id}", response_model=GroceryItemResponse)
async def get_grocery(item_id: int, request: Request) -> GroceryItemResponse:
    """Return a single grocery item."""
    container: AppContainer = request.app.state.container
    item = container.grocery_service.get_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return GroceryItemResponse.model_validate(item)


@router.post(
    "",
    response_model=GroceryItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_grocery(
    payload: GroceryItemRequest, request: Request, response: Response
) -> GroceryItemResponse:
    """Create a grocery item."""
    container: AppContainer = request.app.state.container
    created = container.grocery_service.create(payload.to_draft())
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return GroceryItemResponse.model_validate(created)


@router.put("/{item_id}", response_model=GroceryItemResponse)
async def update_grocery(
    item_id: int, payload: GroceryItemRequest, request: Request
) -> GroceryItemResponse:
    """Replace a grocery item's fields."""
    container: AppContainer = request.app.state.container
    updated = container.grocery_service.update(item_id, payload.to_draft())
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return GroceryItemResponse.model_validate(updated)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_grocery(item_id: int, request: Request) -> Response:
    """Delete a grocery item."""
    container: AppContainer = request.app.state.container
    if not container.grocery_service.delete(item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{item_id}/stock", response_model=GroceryItemResponse)
async def adjust_stock(
    item_id: int, payload: StockAdjustmentRequest, request: Request
) -> GroceryItemResponse:
    """Shift an item's stock; stock never drops below zero."""
    container: AppContainer = request.app.state.container
    adjusted = container.grocery_service.adjust_stock(item_id, payload.delta)
    if adjusted is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return GroceryItemResponse.model_validate(adjusted)
