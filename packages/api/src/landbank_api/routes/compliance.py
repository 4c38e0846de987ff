# This project was developed with assistance from AI tools.
"""Compliance queue, exceptions, and reporting endpoints.

``GET /api/compliance`` serves the portal's due-now queue (default) and the
data-quality exceptions list (``type=exceptions``). Both are read-only and
edge-cacheable.
"""

import logging
from datetime import UTC, date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from fastapi.responses import JSONResponse
from landbank_db import get_db
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..schemas.compliance import (
    ComplianceDigest,
    DueNowResponse,
    ExceptionsResponse,
    MilestonePreview,
    PortfolioStats,
    PropertyComplianceDetail,
)
from ..schemas.error import ComplianceFailure
from ..services.compliance.exceptions import get_exceptions
from ..services.compliance.queue import get_due_now_queue
from ..services.compliance.reporting import (
    get_compliance_digest,
    get_portfolio_stats,
    get_property_compliance,
    milestones_with_status,
)
from ..services.compliance.rules import get_program_rules

logger = logging.getLogger(__name__)

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def current_time() -> datetime:
    """Evaluation instant for a request. Overridden in tests."""
    return datetime.now(UTC)


def _edge_headers(response: Response) -> None:
    response.headers.update(CORS_HEADERS)
    response.headers["Cache-Control"] = settings.cache_control


@router.options("", include_in_schema=False)
async def compliance_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


@router.get(
    "",
    response_model=DueNowResponse | ExceptionsResponse,
    responses={500: {"model": ComplianceFailure}},
)
async def get_compliance(
    response: Response,
    type_: str = Query(default="due-now", alias="type", description="due-now (default) or exceptions"),
    program: str | None = Query(default=None, description="Program label filter (due-now only)"),
    due_only: str | None = Query(
        default=None, alias="dueOnly", description="Only properties due now when exactly \"true\""
    ),
    session: AsyncSession = Depends(get_db),
    now: datetime = Depends(current_time),
):
    """Due-now queue sorted most overdue first, or data-quality exceptions.

    Unrecognized ``type`` values fall back to the due-now queue.
    Only ``dueOnly=true`` filters the queue; any other value is ignored.
    """
    today = now.astimezone(UTC).date()
    try:
        if type_ == "exceptions":
            exceptions = await get_exceptions(session, today)
            body = ExceptionsResponse(count=len(exceptions), computed_at=now, exceptions=exceptions)
        else:
            batch = await get_due_now_queue(
                session, today, program=program, due_only=due_only == "true"
            )
            body = DueNowResponse(count=len(batch.results), computed_at=now, queue=batch.results)
    except Exception as exc:
        logger.exception("GET /api/compliance?type=%s failed", type_)
        return JSONResponse(
            status_code=500,
            content=ComplianceFailure(message=str(exc)).model_dump(),
            headers=CORS_HEADERS,
        )

    _edge_headers(response)
    return body


@router.get("/stats", response_model=PortfolioStats)
async def compliance_stats(
    response: Response,
    session: AsyncSession = Depends(get_db),
    now: datetime = Depends(current_time),
) -> PortfolioStats:
    """Dashboard counts by program and persisted enforcement level."""
    stats = await get_portfolio_stats(session, now)
    _edge_headers(response)
    return stats


@router.get("/digest", response_model=ComplianceDigest)
async def compliance_digest(
    session: AsyncSession = Depends(get_db),
    now: datetime = Depends(current_time),
) -> ComplianceDigest:
    """Daily staff digest of properties needing action."""
    return await get_compliance_digest(session, now)


@router.get("/milestones", response_model=MilestonePreview)
async def preview_milestones(
    program: str = Query(..., description="Program label or rule key"),
    date_sold: date | None = Query(default=None, alias="dateSold"),
    now: datetime = Depends(current_time),
) -> MilestonePreview:
    """Milestone schedule for an arbitrary program and sale date."""
    rules = get_program_rules(program)
    return MilestonePreview(
        program_type=program,
        program_label=rules.label if rules else None,
        date_sold=date_sold,
        milestones=milestones_with_status(program, date_sold, now.astimezone(UTC).date()),
    )


@router.get("/properties/{property_id}", response_model=PropertyComplianceDetail)
async def property_compliance(
    property_id: int,
    session: AsyncSession = Depends(get_db),
    now: datetime = Depends(current_time),
) -> PropertyComplianceDetail:
    """Timing verdict and milestone schedule for one property."""
    detail = await get_property_compliance(session, property_id, now)
    if detail is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return detail
