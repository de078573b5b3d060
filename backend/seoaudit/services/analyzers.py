"""
Category analyzers.

Eight independent, side-effect-free functions, each reducing one slice of a
PageSnapshot into a sub-report:

1. Metadata
2. Headings
3. Images
4. Links
5. Structured Data
6. Performance
7. Mobile
8. Content
"""

import json
import logging
import math
from dataclasses import asdict, dataclass, field
from typing import Any
from urllib.parse import urlsplit

from pydantic.alias_generators import to_camel

from seoaudit.services.exceptions import UnknownCategoryError
from seoaudit.services.snapshot import PageSnapshot
from seoaudit.services.thresholds import AuditThresholds, DEFAULT_THRESHOLDS

logger = logging.getLogger(__name__)

HEADING_LEVELS = (1, 2, 3, 4, 5, 6)


def _jsonable(value: Any) -> Any:
    if isinstance(value, dict):
        return {to_camel(k) if isinstance(k, str) else k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


@dataclass(frozen=True)
class SubReport:
    """Base for analyzer output; serializes with camelCase keys."""

    def to_dict(self) -> dict:
        return _jsonable(asdict(self))


# =============================================================================
# Sub-report types
# =============================================================================

@dataclass(frozen=True)
class MetadataReport(SubReport):
    title: str | None = None
    title_length: int = 0
    description: str | None = None
    description_length: int = 0
    keywords: str | None = None
    robots: str | None = None
    canonical: str | None = None
    og_title: str | None = None
    og_description: str | None = None
    og_image: str | None = None
    og_url: str | None = None
    og_type: str | None = None
    twitter_card: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    twitter_image: str | None = None
    viewport: str | None = None
    lang: str | None = None


@dataclass(frozen=True)
class HeadingEntry:
    text: str
    length: int


@dataclass(frozen=True)
class StructureEntry:
    level: int
    text: str


@dataclass(frozen=True)
class HeadingReport(SubReport):
    h1: tuple[HeadingEntry, ...] = ()
    h2: tuple[HeadingEntry, ...] = ()
    h3: tuple[HeadingEntry, ...] = ()
    h4: tuple[HeadingEntry, ...] = ()
    h5: tuple[HeadingEntry, ...] = ()
    h6: tuple[HeadingEntry, ...] = ()
    structure: tuple[StructureEntry, ...] = ()


@dataclass(frozen=True)
class MissingAltImage:
    src: str
    width: int
    height: int


@dataclass(frozen=True)
class ImageReport(SubReport):
    total: int = 0
    with_alt: int = 0
    without_alt: int = 0
    missing_alt: tuple[MissingAltImage, ...] = ()


@dataclass(frozen=True)
class DeadLink:
    text: str
    href: str


@dataclass(frozen=True)
class LinkReport(SubReport):
    total: int = 0
    internal: int = 0
    external: int = 0
    nofollow: int = 0
    dead_links: tuple[DeadLink, ...] = ()


@dataclass(frozen=True)
class StructuredDataReport(SubReport):
    found: bool = False
    count: int = 0
    types: tuple[Any, ...] = ()


@dataclass(frozen=True)
class PerformanceReport(SubReport):
    dom_content_loaded: float = 0
    load_complete: float = 0
    dom_interactive: float = 0
    resource_count: int = 0


@dataclass(frozen=True)
class MobileReport(SubReport):
    has_viewport: bool = False
    viewport_content: str | None = None
    has_responsive_images: bool = False
    has_touch_icons: bool = False


@dataclass(frozen=True)
class ContentReport(SubReport):
    word_count: int = 0
    character_count: int = 0
    paragraphs: int = 0
    reading_time: int = 0


@dataclass(frozen=True)
class SubReports:
    """All eight sub-reports of one audit."""
    metadata: MetadataReport = field(default_factory=MetadataReport)
    headings: HeadingReport = field(default_factory=HeadingReport)
    images: ImageReport = field(default_factory=ImageReport)
    links: LinkReport = field(default_factory=LinkReport)
    structured_data: StructuredDataReport = field(default_factory=StructuredDataReport)
    performance: PerformanceReport = field(default_factory=PerformanceReport)
    mobile: MobileReport = field(default_factory=MobileReport)
    content: ContentReport = field(default_factory=ContentReport)

    CATEGORIES = (
        "metadata", "headings", "images", "links",
        "structured_data", "performance", "mobile", "content",
    )

    def for_category(self, category: str) -> SubReport:
        if category not in self.CATEGORIES:
            raise UnknownCategoryError(category)
        return getattr(self, category)

    def to_dict(self) -> dict:
        return {to_camel(name): self.for_category(name).to_dict() for name in self.CATEGORIES}


# =============================================================================
# Analyzers
# =============================================================================

def analyze_metadata(snapshot: PageSnapshot) -> MetadataReport:
    meta = snapshot.metadata
    return MetadataReport(
        title=meta.title or None,
        title_length=len(meta.title) if meta.title else 0,
        description=meta.description,
        description_length=len(meta.description) if meta.description else 0,
        keywords=meta.keywords,
        robots=meta.robots,
        canonical=meta.canonical or None,
        og_title=meta.og_title,
        og_description=meta.og_description,
        og_image=meta.og_image,
        og_url=meta.og_url,
        og_type=meta.og_type,
        twitter_card=meta.twitter_card,
        twitter_title=meta.twitter_title,
        twitter_description=meta.twitter_description,
        twitter_image=meta.twitter_image,
        viewport=meta.viewport,
        lang=meta.lang or None,
    )


def analyze_headings(
    snapshot: PageSnapshot,
    thresholds: AuditThresholds = DEFAULT_THRESHOLDS,
) -> HeadingReport:
    by_level: dict[int, list[HeadingEntry]] = {level: [] for level in HEADING_LEVELS}
    structure = []

    for heading in snapshot.headings:
        if heading.level not in by_level:
            raise ValueError(f"Invalid heading level: {heading.level!r}")
        text = heading.text.strip()
        by_level[heading.level].append(HeadingEntry(text=text, length=len(text)))
        structure.append(StructureEntry(
            level=heading.level,
            text=text[:thresholds.heading_text_length],
        ))

    return HeadingReport(
        **{f"h{level}": tuple(entries) for level, entries in by_level.items()},
        structure=tuple(structure),
    )


def analyze_images(
    snapshot: PageSnapshot,
    thresholds: AuditThresholds = DEFAULT_THRESHOLDS,
) -> ImageReport:
    missing = [img for img in snapshot.images if not (img.alt and img.alt.strip())]
    total = len(snapshot.images)

    return ImageReport(
        total=total,
        with_alt=total - len(missing),
        without_alt=len(missing),
        missing_alt=tuple(
            MissingAltImage(src=img.src, width=img.width, height=img.height)
            for img in missing[:thresholds.missing_alt_sample_size]
        ),
    )


def _is_internal(href: str, base_host: str) -> bool:
    """Relative or malformed URLs count as internal."""
    try:
        parts = urlsplit(href)
        if not parts.scheme:
            return True
        return (parts.hostname or "") == base_host
    except ValueError:
        return True


def analyze_links(
    snapshot: PageSnapshot,
    page_url: str,
    thresholds: AuditThresholds = DEFAULT_THRESHOLDS,
) -> LinkReport:
    base_host = urlsplit(page_url).hostname or ""
    internal = 0
    nofollow = 0
    dead_links = []

    for link in snapshot.links:
        if link.href in thresholds.dead_link_hrefs:
            dead_links.append(DeadLink(
                text=link.text.strip()[:thresholds.dead_link_text_length],
                href=link.href,
            ))

        if _is_internal(link.href, base_host):
            internal += 1

        if link.rel and "nofollow" in link.rel.lower().split():
            nofollow += 1

    total = len(snapshot.links)
    return LinkReport(
        total=total,
        internal=internal,
        external=total - internal,
        nofollow=nofollow,
        dead_links=tuple(dead_links),
    )


def _has_type(data: dict[str, Any]) -> bool:
    # Empty lists and objects still declare a type; only scalar blanks do not
    value = data.get("@type")
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def analyze_structured_data(snapshot: PageSnapshot) -> StructuredDataReport:
    types = []
    for index, block in enumerate(snapshot.json_ld_blocks):
        try:
            data = json.loads(block)
        except (TypeError, ValueError):
            logger.debug(f"Skipping unparsable JSON-LD block #{index}")
            continue
        if isinstance(data, dict) and _has_type(data):
            types.append(data["@type"])

    count = len(snapshot.json_ld_blocks)
    return StructuredDataReport(found=count > 0, count=count, types=tuple(types))


def _timing_value(value: float | None) -> float:
    """Finite, non-negative timing value; missing or NaN readings are 0."""
    if value is None or not math.isfinite(value):
        return 0
    return max(value, 0)


def _duration(end: float | None, start: float | None) -> float:
    if end is None or start is None:
        return 0
    return _timing_value(end - start)


def analyze_performance(snapshot: PageSnapshot) -> PerformanceReport:
    timing = snapshot.navigation_timing
    if timing is None:
        return PerformanceReport(resource_count=snapshot.resource_count)

    return PerformanceReport(
        dom_content_loaded=_duration(timing.dom_content_loaded_end, timing.dom_content_loaded_start),
        load_complete=_duration(timing.load_event_end, timing.load_event_start),
        dom_interactive=_timing_value(timing.dom_interactive),
        resource_count=snapshot.resource_count,
    )


def analyze_mobile(snapshot: PageSnapshot) -> MobileReport:
    viewport = snapshot.metadata.viewport
    return MobileReport(
        has_viewport=viewport is not None,
        viewport_content=viewport or None,
        has_responsive_images=any(img.srcset for img in snapshot.images),
        has_touch_icons=snapshot.icon_link_count > 0,
    )


def analyze_content(
    snapshot: PageSnapshot,
    thresholds: AuditThresholds = DEFAULT_THRESHOLDS,
) -> ContentReport:
    text = snapshot.body_text
    words = len(text.split())
    return ContentReport(
        word_count=words,
        character_count=len(text),
        paragraphs=snapshot.paragraph_count,
        reading_time=math.ceil(words / thresholds.words_per_minute),
    )


def run_analyzers(
    snapshot: PageSnapshot,
    page_url: str,
    thresholds: AuditThresholds = DEFAULT_THRESHOLDS,
) -> SubReports:
    """Run all eight analyzers against one snapshot."""
    return SubReports(
        metadata=analyze_metadata(snapshot),
        headings=analyze_headings(snapshot, thresholds),
        images=analyze_images(snapshot, thresholds),
        links=analyze_links(snapshot, page_url, thresholds),
        structured_data=analyze_structured_data(snapshot),
        performance=analyze_performance(snapshot),
        mobile=analyze_mobile(snapshot),
        content=analyze_content(snapshot, thresholds),
    )
