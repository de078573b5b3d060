"""
Pydantic schemas for the SEO audit API.
"""
from seoaudit.schemas.common import (
    BaseSchema,
    CamelSchema,
    HealthResponse,
    ErrorResponse,
)
from seoaudit.schemas.snapshot import (
    AuditRequest,
    SnapshotPayload,
)
from seoaudit.schemas.report import (
    AuditReportResponse,
    AuditSummaryResponse,
)

__all__ = [
    "BaseSchema",
    "CamelSchema",
    "HealthResponse",
    "ErrorResponse",
    "AuditRequest",
    "SnapshotPayload",
    "AuditReportResponse",
    "AuditSummaryResponse",
]
