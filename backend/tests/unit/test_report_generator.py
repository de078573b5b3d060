"""
Unit tests for report generation.
"""
import json

from seoaudit.services.audit_engine import Audit, STATUS_FAILED
from seoaudit.services.report_generator import generate_report, generate_summary


class TestGenerateReport:
    """Test the full report shape."""

    def test_top_level_shape(self, engine, perfect_snapshot, page_url, fixed_timestamp):
        report = generate_report(engine.run(perfect_snapshot, page_url, timestamp=fixed_timestamp))

        assert set(report) == {"summary", "scores", "issues", "details"}
        assert set(report["summary"]) == {"url", "timestamp", "overallScore", "duration", "status"}
        assert set(report["issues"]) == {"critical", "warnings", "suggestions", "details"}
        assert set(report["details"]) == {
            "metadata", "headings", "images", "links",
            "structuredData", "performance", "mobile", "content",
        }

    def test_perfect_summary(self, engine, perfect_snapshot, page_url, fixed_timestamp):
        report = generate_report(engine.run(perfect_snapshot, page_url, timestamp=fixed_timestamp))

        assert report["summary"]["url"] == page_url
        assert report["summary"]["timestamp"] == fixed_timestamp
        assert report["summary"]["overallScore"] == 100
        assert report["summary"]["status"] == "excellent"
        assert report["issues"]["critical"] == 0

    def test_poor_page_report(self, engine, poor_snapshot, fixed_timestamp):
        """Test the poor page scenario as a report."""
        report = generate_report(engine.run(poor_snapshot, "https://example.com/", timestamp=fixed_timestamp))

        assert report["summary"]["status"] == "poor"
        assert report["scores"]["images"] == 0
        assert report["scores"]["links"] == 70
        assert report["issues"]["critical"] == 3
        assert report["issues"]["warnings"] == 2
        assert report["issues"]["details"]["warnings"][1] == {
            "type": "dead_links",
            "message": '3 dead links found (href="#" or empty)',
        }
        assert len(report["details"]["links"]["deadLinks"]) == 3
        assert report["details"]["images"]["withoutAlt"] == 10

    def test_status_follows_score(self, engine, perfect_snapshot_data, page_url):
        """Test the summary status is derived from the overall score."""
        from seoaudit.services.snapshot import create_snapshot

        perfect_snapshot_data["json_ld_blocks"] = []
        perfect_snapshot_data["metadata"]["canonical"] = None
        perfect_snapshot_data["metadata"]["og_image"] = None
        report = generate_report(engine.run(create_snapshot(perfect_snapshot_data), page_url))

        # 100 - 10 (structured data) - 7.5 (metadata 70 * 0.25)
        assert report["summary"]["overallScore"] == 83
        assert report["summary"]["status"] == "excellent"

    def test_json_serializable(self, engine, perfect_snapshot, page_url):
        report = generate_report(engine.run(perfect_snapshot, page_url))

        assert json.loads(json.dumps(report)) == report

    def test_deterministic_except_duration(self, engine, poor_snapshot, fixed_timestamp):
        """Test two runs on identical input differ only in duration."""
        reports = []
        for _ in range(2):
            report = generate_report(engine.run(poor_snapshot, "https://example.com/", timestamp=fixed_timestamp))
            report["summary"].pop("duration")
            reports.append(json.dumps(report))

        assert reports[0] == reports[1]


class TestFailureReport:
    """Test the failure shape."""

    def test_failed_audit(self):
        audit = Audit(
            url="https://example.com/",
            timestamp="2026-01-01T00:00:00.000Z",
            status=STATUS_FAILED,
            duration=0.002,
            error="boom",
        )
        report = generate_report(audit)

        assert report["status"] == "failed"
        assert report["error"] == "boom"
        assert report["summary"]["status"] == "failed"
        assert report["summary"]["overallScore"] is None
        assert "scores" not in report
        assert "details" not in report


class TestGenerateSummary:

    def test_summary_only(self, engine, poor_snapshot, fixed_timestamp):
        summary = generate_summary(engine.run(poor_snapshot, "https://example.com/", timestamp=fixed_timestamp))

        assert set(summary) == {"summary", "issues"}
        assert summary["issues"] == {"critical": 3, "warnings": 2, "suggestions": 4}
