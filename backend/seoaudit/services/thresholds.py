"""
Audit thresholds and category weights.

All magic numbers used by the analyzers, the score calculator and the issue
classifier live here so boundary values can be tested and overridden.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CategoryWeights:
    """Weights of the overall score (must sum to 1.0)."""
    metadata: float = 0.25
    headings: float = 0.15
    images: float = 0.15
    links: float = 0.20
    structured_data: float = 0.10
    mobile: float = 0.15

    def as_dict(self) -> dict[str, float]:
        return {
            "metadata": self.metadata,
            "headings": self.headings,
            "images": self.images,
            "links": self.links,
            "structured_data": self.structured_data,
            "mobile": self.mobile,
        }


@dataclass(frozen=True)
class MetadataPoints:
    title: int = 20
    description: int = 20
    og_title: int = 15
    og_description: int = 15
    og_image: int = 15
    canonical: int = 15


@dataclass(frozen=True)
class HeadingPoints:
    single_h1: int = 50
    has_h2: int = 25
    has_h3: int = 25


@dataclass(frozen=True)
class MobilePoints:
    viewport: int = 50
    responsive_images: int = 25
    touch_icons: int = 25


@dataclass(frozen=True)
class AuditThresholds:
    # Metadata
    title_min_length: int = 30
    title_max_length: int = 60
    description_min_length: int = 120
    description_max_length: int = 160

    # Links
    dead_link_penalty: int = 10
    dead_link_penalty_cap: int = 50
    dead_link_hrefs: frozenset[str] = frozenset({"", "#", "javascript:void(0)"})
    dead_link_text_length: int = 50

    # Headings, images, content
    heading_text_length: int = 100
    missing_alt_sample_size: int = 20
    words_per_minute: int = 200

    # Status bands (lower bound inclusive)
    excellent_score: int = 80
    good_score: int = 60
    needs_improvement_score: int = 40

    weights: CategoryWeights = field(default_factory=CategoryWeights)
    metadata_points: MetadataPoints = field(default_factory=MetadataPoints)
    heading_points: HeadingPoints = field(default_factory=HeadingPoints)
    mobile_points: MobilePoints = field(default_factory=MobilePoints)


DEFAULT_THRESHOLDS = AuditThresholds()
