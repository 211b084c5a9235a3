"""Inventory report endpoints."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, Response, status

from grocery_inventory.api.grocery_models import InventoryReportResponse
from grocery_inventory.domain.errors import ReportGenerationError

if TYPE_CHECKING:
    from grocery_inventory.containers import AppContainer

router = APIRouter(prefix="/reports", tags=["reports"])

_logger = logging.getLogger(__name__)


@router.get("/summary", response_model=InventoryReportResponse)
async def report_summary(request: Request) -> InventoryReportResponse:
    """Return the report tables as JSON."""
    container: AppContainer = request.app.state.container
    items = container.grocery_service.get_all()
    try:
        report = container.report_service.summarize(items)
    except ReportGenerationError as exc:
        raise _generation_failed(container, exc) from exc
    return InventoryReportResponse.model_validate(report)


@router.get("/export")
async def export_report(request: Request) -> Response:
    """Download the inventory report as an xlsx workbook."""
    container: AppContainer = request.app.state.container
    items = container.grocery_service.get_all()
    try:
        report_file = container.report_service.export(
            items, generated_at=datetime.now(tz=UTC)
        )
    except ReportGenerationError as exc:
        raise _generation_failed(container, exc) from exc
    return Response(
        content=report_file.content,
        media_type=report_file.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{report_file.filename}"'
        },
    )


def _generation_failed(
    container: AppContainer, exc: ReportGenerationError
) -> HTTPException:
    """Build the error response, with debug detail in the local environment."""
    _logger.warning("Report request failed: %s", exc)
    detail = "Error generating report"
    if container.settings.environment == "local":
        detail = f"{detail} (debug: {exc})"
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
    )
