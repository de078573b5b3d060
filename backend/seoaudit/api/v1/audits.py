"""
Audit API Endpoint

Runs the single-page SEO audit engine against a snapshot produced by the
rendering collaborator and returns the report.
"""

import logging
from typing import Any

from fastapi import APIRouter

from seoaudit.core.deps import AuditEngine, ServiceAuth
from seoaudit.schemas.common import ErrorResponse
from seoaudit.schemas.report import AuditReportResponse, AuditSummaryResponse
from seoaudit.schemas.snapshot import AuditRequest
from seoaudit.services.report_generator import generate_report, generate_summary

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/audits",
    tags=["Audits"],
    dependencies=[ServiceAuth],
    responses={
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post(
    "",
    response_model=AuditReportResponse,
    response_model_exclude_unset=True,
    summary="Audit a rendered page",
    description="""
    Score a page snapshot across metadata, headings, images, links,
    structured data and mobile readiness, and classify its issues.

    Engine failures are reported in the body with `status: "failed"` and an
    `error` message; they never produce an HTTP error.
    """,
)
async def create_audit(request: AuditRequest, engine: AuditEngine) -> dict[str, Any]:
    """Run an audit and return the full report."""
    audit = engine.run(request.snapshot.to_snapshot(), request.url)
    if not audit.succeeded:
        logger.warning(f"Audit of {request.url} failed: {audit.error}")
    return generate_report(audit, engine.thresholds)


@router.post(
    "/summary",
    response_model=AuditSummaryResponse,
    response_model_exclude_unset=True,
    summary="Audit a rendered page (summary only)",
)
async def create_audit_summary(request: AuditRequest, engine: AuditEngine) -> dict[str, Any]:
    """Run an audit and return only the summary and issue counts."""
    audit = engine.run(request.snapshot.to_snapshot(), request.url)
    if not audit.succeeded:
        logger.warning(f"Audit of {request.url} failed: {audit.error}")
    return generate_summary(audit, engine.thresholds)
