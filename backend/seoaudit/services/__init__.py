"""
Audit engine services.
"""
from seoaudit.services.audit_engine import Audit, SEOAuditEngine, audit_page
from seoaudit.services.report_generator import generate_report, generate_summary
from seoaudit.services.snapshot import PageSnapshot, create_snapshot
from seoaudit.services.thresholds import AuditThresholds, DEFAULT_THRESHOLDS

__all__ = [
    "Audit",
    "SEOAuditEngine",
    "audit_page",
    "generate_report",
    "generate_summary",
    "PageSnapshot",
    "create_snapshot",
    "AuditThresholds",
    "DEFAULT_THRESHOLDS",
]
