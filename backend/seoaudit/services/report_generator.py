"""
Report generator.

Renders a completed Audit into the external, JSON-serializable report shape.
Kept separate from the engine so one Audit can be reported in several shapes
without recomputation.
"""

from typing import Any

from seoaudit.services.audit_engine import Audit, STATUS_FAILED
from seoaudit.services.scoring import score_status
from seoaudit.services.thresholds import AuditThresholds, DEFAULT_THRESHOLDS


def _summary(audit: Audit, thresholds: AuditThresholds) -> dict[str, Any]:
    if not audit.succeeded:
        overall, status = None, STATUS_FAILED
    else:
        overall = audit.scores.overall
        status = score_status(overall, thresholds)

    return {
        "url": audit.url,
        "timestamp": audit.timestamp,
        "overallScore": overall,
        "duration": audit.duration,
        "status": status,
    }


def _failure_report(audit: Audit, thresholds: AuditThresholds) -> dict[str, Any]:
    return {
        "summary": _summary(audit, thresholds),
        "status": STATUS_FAILED,
        "error": audit.error,
    }


def generate_report(audit: Audit, thresholds: AuditThresholds = DEFAULT_THRESHOLDS) -> dict[str, Any]:
    """Build the full report: summary, scores, issues and raw sub-reports."""
    if not audit.succeeded:
        return _failure_report(audit, thresholds)

    return {
        "summary": _summary(audit, thresholds),
        "scores": audit.scores.to_dict(),
        "issues": {
            **audit.issues.counts(),
            "details": audit.issues.to_dict(),
        },
        "details": audit.reports.to_dict(),
    }


def generate_summary(audit: Audit, thresholds: AuditThresholds = DEFAULT_THRESHOLDS) -> dict[str, Any]:
    """Short form: summary block plus issue counts."""
    if not audit.succeeded:
        return _failure_report(audit, thresholds)

    return {
        "summary": _summary(audit, thresholds),
        "issues": audit.issues.counts(),
    }
