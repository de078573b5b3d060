"""
Audit report schemas.
"""
from typing import Any

from seoaudit.schemas.common import CamelSchema


class ReportSummary(CamelSchema):
    url: str
    timestamp: str
    overall_score: int | None
    duration: float
    status: str


class ReportScores(CamelSchema):
    metadata: int
    headings: int
    images: int
    links: int
    structured_data: int
    performance: int
    mobile: int
    overall: int


class IssueResponse(CamelSchema):
    type: str
    message: str


class IssueDetails(CamelSchema):
    critical: list[IssueResponse]
    warnings: list[IssueResponse]
    suggestions: list[IssueResponse]


class IssueCounts(CamelSchema):
    critical: int
    warnings: int
    suggestions: int


class ReportIssues(IssueCounts):
    details: IssueDetails


class AuditReportResponse(CamelSchema):
    """Full audit report, or the failure shape with status and error."""

    summary: ReportSummary
    scores: ReportScores | None = None
    issues: ReportIssues | None = None
    details: dict[str, Any] | None = None
    status: str | None = None
    error: str | None = None


class AuditSummaryResponse(CamelSchema):
    """Summary and issue counts only."""

    summary: ReportSummary
    issues: IssueCounts | None = None
    status: str | None = None
    error: str | None = None
