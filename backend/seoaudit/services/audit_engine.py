"""
SEO Audit Engine - single-page audit pipeline.

Stages:
1. Category analyzers (metadata, headings, images, links, structured data,
   performance, mobile, content)
2. Score calculation
3. Issue classification

Each stage takes the previous stage's immutable output and returns a new
value. The engine never raises out of `run`; failures degrade the audit to
the "failed" status.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from seoaudit.services.analyzers import SubReports, run_analyzers
from seoaudit.services.issues import IssueSet, classify_issues
from seoaudit.services.scoring import ScoreSet, calculate_scores
from seoaudit.services.snapshot import PageSnapshot
from seoaudit.services.thresholds import AuditThresholds, DEFAULT_THRESHOLDS

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "success"
STATUS_FAILED = "failed"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Audit:
    url: str
    timestamp: str
    status: str = STATUS_SUCCESS
    reports: SubReports | None = None
    scores: ScoreSet | None = None
    issues: IssueSet = field(default_factory=IssueSet)
    duration: float = 0.0
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == STATUS_SUCCESS


class SEOAuditEngine:
    """Single-page SEO audit engine."""

    def __init__(
        self,
        thresholds: AuditThresholds = DEFAULT_THRESHOLDS,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.thresholds = thresholds
        self.clock = clock

    def run(self, snapshot: PageSnapshot, url: str, timestamp: str | None = None) -> Audit:
        """Audit one page snapshot."""
        started = self.clock()
        timestamp = timestamp or utc_timestamp()
        logger.info(f"Running SEO audit on {url}")

        try:
            reports = run_analyzers(snapshot, url, self.thresholds)
            scores = calculate_scores(reports, self.thresholds)
            issues = classify_issues(reports, self.thresholds)
        except Exception as e:
            logger.exception(f"SEO audit failed for {url}")
            return Audit(
                url=url,
                timestamp=timestamp,
                status=STATUS_FAILED,
                duration=self._elapsed(started),
                error=str(e) or e.__class__.__name__,
            )

        counts = issues.counts()
        logger.info(
            f"Audit complete for {url}: score {scores.overall}, "
            f"{counts['critical']} critical, {counts['warnings']} warnings, "
            f"{counts['suggestions']} suggestions"
        )
        return Audit(
            url=url,
            timestamp=timestamp,
            reports=reports,
            scores=scores,
            issues=issues,
            duration=self._elapsed(started),
        )

    def _elapsed(self, started: float) -> float:
        return round(self.clock() - started, 3)


def audit_page(
    snapshot: PageSnapshot,
    url: str,
    thresholds: AuditThresholds = DEFAULT_THRESHOLDS,
    timestamp: str | None = None,
) -> Audit:
    """Convenience wrapper running a default-configured engine."""
    return SEOAuditEngine(thresholds).run(snapshot, url, timestamp=timestamp)
