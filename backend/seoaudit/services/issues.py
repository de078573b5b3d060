"""
Issue classifier.

Evaluates a fixed, ordered rule set against the sub-reports and sorts the
findings into three severity tiers. Rules read the sub-reports only, never the
scores, so weighting changes never change classification.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from seoaudit.services.analyzers import SubReports
from seoaudit.services.exceptions import InvalidSeverityError
from seoaudit.services.thresholds import AuditThresholds, DEFAULT_THRESHOLDS


class IssueSeverity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class Issue:
    type: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "message": self.message}


@dataclass(frozen=True)
class IssueRule:
    severity: IssueSeverity
    type: str
    applies: Callable[[SubReports, AuditThresholds], bool]
    message: Callable[[SubReports, AuditThresholds], str]


@dataclass(frozen=True)
class IssueSet:
    critical: tuple[Issue, ...] = ()
    warnings: tuple[Issue, ...] = ()
    suggestions: tuple[Issue, ...] = ()

    def for_severity(self, severity: IssueSeverity | str) -> tuple[Issue, ...]:
        try:
            severity = IssueSeverity(severity)
        except ValueError:
            raise InvalidSeverityError(str(severity)) from None
        return {
            IssueSeverity.CRITICAL: self.critical,
            IssueSeverity.WARNING: self.warnings,
            IssueSeverity.SUGGESTION: self.suggestions,
        }[severity]

    @property
    def types(self) -> list[str]:
        return [issue.type for issue in self.critical + self.warnings + self.suggestions]

    def counts(self) -> dict[str, int]:
        return {
            "critical": len(self.critical),
            "warnings": len(self.warnings),
            "suggestions": len(self.suggestions),
        }

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {
            "critical": [issue.to_dict() for issue in self.critical],
            "warnings": [issue.to_dict() for issue in self.warnings],
            "suggestions": [issue.to_dict() for issue in self.suggestions],
        }


# Evaluation order is part of the output contract
ISSUE_RULES: tuple[IssueRule, ...] = (
    # Critical
    IssueRule(
        IssueSeverity.CRITICAL, "missing_title",
        lambda r, t: not r.metadata.title,
        lambda r, t: "Missing page title",
    ),
    IssueRule(
        IssueSeverity.CRITICAL, "missing_description",
        lambda r, t: not r.metadata.description,
        lambda r, t: "Missing meta description",
    ),
    IssueRule(
        IssueSeverity.CRITICAL, "missing_h1",
        lambda r, t: len(r.headings.h1) == 0,
        lambda r, t: "Missing H1 heading",
    ),
    IssueRule(
        IssueSeverity.CRITICAL, "multiple_h1",
        lambda r, t: len(r.headings.h1) > 1,
        lambda r, t: f"Multiple H1 headings found ({len(r.headings.h1)})",
    ),
    # Warnings
    IssueRule(
        IssueSeverity.WARNING, "title_too_long",
        lambda r, t: r.metadata.title_length > t.title_max_length,
        lambda r, t: (
            f"Title is too long ({r.metadata.title_length} chars, "
            f"recommended: {t.title_min_length}-{t.title_max_length})"
        ),
    ),
    IssueRule(
        IssueSeverity.WARNING, "description_too_long",
        lambda r, t: r.metadata.description_length > t.description_max_length,
        lambda r, t: (
            f"Description is too long ({r.metadata.description_length} chars, "
            f"recommended: {t.description_min_length}-{t.description_max_length})"
        ),
    ),
    IssueRule(
        IssueSeverity.WARNING, "missing_alt_text",
        lambda r, t: r.images.without_alt > 0,
        lambda r, t: f"{r.images.without_alt} images missing alt text",
    ),
    IssueRule(
        IssueSeverity.WARNING, "dead_links",
        lambda r, t: len(r.links.dead_links) > 0,
        lambda r, t: f'{len(r.links.dead_links)} dead links found (href="#" or empty)',
    ),
    # Suggestions
    IssueRule(
        IssueSeverity.SUGGESTION, "missing_og_image",
        lambda r, t: not r.metadata.og_image,
        lambda r, t: "Add Open Graph image for better social sharing",
    ),
    IssueRule(
        IssueSeverity.SUGGESTION, "missing_structured_data",
        lambda r, t: not r.structured_data.found,
        lambda r, t: "Add JSON-LD structured data for rich snippets",
    ),
    IssueRule(
        IssueSeverity.SUGGESTION, "missing_viewport",
        lambda r, t: not r.mobile.has_viewport,
        lambda r, t: "Add viewport meta tag for mobile responsiveness",
    ),
    IssueRule(
        IssueSeverity.SUGGESTION, "missing_canonical",
        lambda r, t: not r.metadata.canonical,
        lambda r, t: "Add canonical URL to prevent duplicate content issues",
    ),
)


def classify_issues(
    reports: SubReports,
    thresholds: AuditThresholds = DEFAULT_THRESHOLDS,
    rules: tuple[IssueRule, ...] = ISSUE_RULES,
) -> IssueSet:
    """Evaluate every rule and group the findings by severity."""
    found: dict[IssueSeverity, list[Issue]] = {severity: [] for severity in IssueSeverity}

    for rule in rules:
        if rule.applies(reports, thresholds):
            found[rule.severity].append(Issue(type=rule.type, message=rule.message(reports, thresholds)))

    return IssueSet(
        critical=tuple(found[IssueSeverity.CRITICAL]),
        warnings=tuple(found[IssueSeverity.WARNING]),
        suggestions=tuple(found[IssueSeverity.SUGGESTION]),
    )
