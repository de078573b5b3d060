"""
SEO page audit engine and service.
"""
from seoaudit.services import (
    Audit,
    AuditThresholds,
    PageSnapshot,
    SEOAuditEngine,
    audit_page,
    create_snapshot,
    generate_report,
)

__version__ = "0.1.0"

__all__ = [
    "Audit",
    "AuditThresholds",
    "PageSnapshot",
    "SEOAuditEngine",
    "audit_page",
    "create_snapshot",
    "generate_report",
]
