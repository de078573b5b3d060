"""
Score calculator.

Turns the eight sub-reports into per-category scores (0-100) and one overall
weighted score. Performance and content are reported but never weighted.
"""

import math
from dataclasses import dataclass

from pydantic.alias_generators import to_camel

from seoaudit.services.analyzers import SubReports
from seoaudit.services.exceptions import UnknownCategoryError
from seoaudit.services.thresholds import AuditThresholds, CategoryWeights, DEFAULT_THRESHOLDS


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


@dataclass(frozen=True)
class ScoreSet:
    metadata: int = 0
    headings: int = 0
    images: int = 0
    links: int = 0
    structured_data: int = 0
    performance: int = 0
    mobile: int = 0
    overall: int = 0

    CATEGORIES = (
        "metadata", "headings", "images", "links",
        "structured_data", "performance", "mobile", "overall",
    )

    def for_category(self, category: str) -> int:
        if category not in self.CATEGORIES:
            raise UnknownCategoryError(category)
        return getattr(self, category)

    def to_dict(self) -> dict[str, int]:
        return {to_camel(name): getattr(self, name) for name in self.CATEGORIES}


# =============================================================================
# Category scores
# =============================================================================

def score_metadata(reports: SubReports, thresholds: AuditThresholds = DEFAULT_THRESHOLDS) -> int:
    meta = reports.metadata
    points = thresholds.metadata_points
    score = 0

    if meta.title and thresholds.title_min_length <= meta.title_length <= thresholds.title_max_length:
        score += points.title
    if meta.description and (
        thresholds.description_min_length <= meta.description_length <= thresholds.description_max_length
    ):
        score += points.description
    if meta.og_title:
        score += points.og_title
    if meta.og_description:
        score += points.og_description
    if meta.og_image:
        score += points.og_image
    if meta.canonical:
        score += points.canonical

    return clamp_score(score)


def score_headings(reports: SubReports, thresholds: AuditThresholds = DEFAULT_THRESHOLDS) -> int:
    headings = reports.headings
    points = thresholds.heading_points
    score = 0

    if len(headings.h1) == 1:
        score += points.single_h1
    if headings.h2:
        score += points.has_h2
    if headings.h3:
        score += points.has_h3

    return clamp_score(score)


def score_images(reports: SubReports) -> int:
    images = reports.images
    # No images means nothing to penalize
    if images.total == 0:
        return 100
    return clamp_score(images.with_alt / images.total * 100)


def score_links(reports: SubReports, thresholds: AuditThresholds = DEFAULT_THRESHOLDS) -> int:
    dead = len(reports.links.dead_links)
    penalty = min(dead * thresholds.dead_link_penalty, thresholds.dead_link_penalty_cap)
    return clamp_score(100 - penalty)


def score_structured_data(reports: SubReports) -> int:
    return 100 if reports.structured_data.found else 0


def score_mobile(reports: SubReports, thresholds: AuditThresholds = DEFAULT_THRESHOLDS) -> int:
    mobile = reports.mobile
    points = thresholds.mobile_points
    score = 0

    if mobile.has_viewport:
        score += points.viewport
    if mobile.has_responsive_images:
        score += points.responsive_images
    if mobile.has_touch_icons:
        score += points.touch_icons

    return clamp_score(score)


def calculate_overall(scores: dict[str, int], weights: CategoryWeights | None = None) -> int:
    """Weighted sum of the category scores, rounded to the nearest integer."""
    weights = weights or CategoryWeights()
    total = 0.0
    for category, weight in weights.as_dict().items():
        if category not in scores:
            raise UnknownCategoryError(category)
        total += scores[category] * weight
    return clamp_score(total)


def calculate_scores(
    reports: SubReports,
    thresholds: AuditThresholds = DEFAULT_THRESHOLDS,
) -> ScoreSet:
    """Calculate every category score plus the overall weighted score."""
    category_scores = {
        "metadata": score_metadata(reports, thresholds),
        "headings": score_headings(reports, thresholds),
        "images": score_images(reports),
        "links": score_links(reports, thresholds),
        "structured_data": score_structured_data(reports),
        "mobile": score_mobile(reports, thresholds),
    }

    return ScoreSet(
        **category_scores,
        # Performance timing is reported in details but not scored
        performance=0,
        overall=calculate_overall(category_scores, thresholds.weights),
    )


def score_status(score: int, thresholds: AuditThresholds = DEFAULT_THRESHOLDS) -> str:
    """Map an overall score to its qualitative band."""
    if score >= thresholds.excellent_score:
        return "excellent"
    if score >= thresholds.good_score:
        return "good"
    if score >= thresholds.needs_improvement_score:
        return "needs_improvement"
    return "poor"
