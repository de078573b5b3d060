"""
Page signal snapshot.

The rendering collaborator reads these signals from a settled DOM and hands
them to the audit engine. Every value is element-level data as the browser
reports it; the analyzers reduce it into per-category sub-reports.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MetaSignals:
    title: str | None = None
    description: str | None = None
    keywords: str | None = None
    robots: str | None = None
    canonical: str | None = None

    # Open Graph
    og_title: str | None = None
    og_description: str | None = None
    og_image: str | None = None
    og_url: str | None = None
    og_type: str | None = None

    # Twitter Card
    twitter_card: str | None = None
    twitter_title: str | None = None
    twitter_description: str | None = None
    twitter_image: str | None = None

    viewport: str | None = None
    lang: str | None = None


@dataclass(frozen=True)
class HeadingSignal:
    level: int
    text: str


@dataclass(frozen=True)
class ImageSignal:
    src: str = ""
    alt: str | None = None
    width: int = 0
    height: int = 0
    srcset: str | None = None


@dataclass(frozen=True)
class LinkSignal:
    """An anchor with its resolved href."""
    href: str
    text: str = ""
    rel: str | None = None


@dataclass(frozen=True)
class NavigationTiming:
    dom_content_loaded_start: float | None = 0
    dom_content_loaded_end: float | None = 0
    load_event_start: float | None = 0
    load_event_end: float | None = 0
    dom_interactive: float | None = 0


@dataclass(frozen=True)
class PageSnapshot:
    """Immutable set of page signals for one audit run."""
    metadata: MetaSignals = field(default_factory=MetaSignals)
    headings: tuple[HeadingSignal, ...] = ()
    images: tuple[ImageSignal, ...] = ()
    links: tuple[LinkSignal, ...] = ()
    json_ld_blocks: tuple[str, ...] = ()
    navigation_timing: NavigationTiming | None = None
    resource_count: int = 0
    icon_link_count: int = 0
    body_text: str = ""
    paragraph_count: int = 0


def create_snapshot(data: dict[str, Any]) -> PageSnapshot:
    """
    Build a PageSnapshot from plain dicts (snake_case keys).

    Missing sections fall back to empty values so that a partially extracted
    page still produces a snapshot.
    """
    timing = data.get("navigation_timing")
    return PageSnapshot(
        metadata=MetaSignals(**(data.get("metadata") or {})),
        headings=tuple(HeadingSignal(**h) for h in data.get("headings", [])),
        images=tuple(ImageSignal(**img) for img in data.get("images", [])),
        links=tuple(LinkSignal(**link) for link in data.get("links", [])),
        json_ld_blocks=tuple(data.get("json_ld_blocks", [])),
        navigation_timing=NavigationTiming(**timing) if timing else None,
        resource_count=data.get("resource_count", 0),
        icon_link_count=data.get("icon_link_count", 0),
        body_text=data.get("body_text", ""),
        paragraph_count=data.get("paragraph_count", 0),
    )
