"""
Snapshot payload schemas.

Mirror the JSON a DOM-evaluate script produces for a rendered page and convert
it into the engine's immutable PageSnapshot.
"""
from urllib.parse import urlsplit

from pydantic import Field, field_validator

from seoaudit.schemas.common import CamelSchema
from seoaudit.services.snapshot import (
    HeadingSignal,
    ImageSignal,
    LinkSignal,
    MetaSignals,
    NavigationTiming,
    PageSnapshot,
)


class MetadataPayload(CamelSchema):
    title: str | None = None
    description: str | None = None
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


class HeadingPayload(CamelSchema):
    level: int = Field(..., ge=1, le=6)
    text: str = ""


class ImagePayload(CamelSchema):
    src: str = ""
    alt: str | None = None
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)
    srcset: str | None = None


class LinkPayload(CamelSchema):
    href: str = ""
    text: str = ""
    rel: str | None = None


class NavigationTimingPayload(CamelSchema):
    dom_content_loaded_event_start: float | None = 0
    dom_content_loaded_event_end: float | None = 0
    load_event_start: float | None = 0
    load_event_end: float | None = 0
    dom_interactive: float | None = 0


class SnapshotPayload(CamelSchema):
    """Page signals extracted by the rendering collaborator."""

    metadata: MetadataPayload = Field(default_factory=MetadataPayload)
    headings: list[HeadingPayload] = Field(default_factory=list)
    images: list[ImagePayload] = Field(default_factory=list)
    links: list[LinkPayload] = Field(default_factory=list)
    json_ld_blocks: list[str] = Field(default_factory=list)
    navigation_timing: NavigationTimingPayload | None = None
    resource_count: int = Field(default=0, ge=0)
    icon_link_count: int = Field(default=0, ge=0)
    body_text: str = ""
    paragraph_count: int = Field(default=0, ge=0)

    def to_snapshot(self) -> PageSnapshot:
        timing = self.navigation_timing
        return PageSnapshot(
            metadata=MetaSignals(**self.metadata.model_dump()),
            headings=tuple(HeadingSignal(level=h.level, text=h.text) for h in self.headings),
            images=tuple(ImageSignal(**img.model_dump()) for img in self.images),
            links=tuple(LinkSignal(**link.model_dump()) for link in self.links),
            json_ld_blocks=tuple(self.json_ld_blocks),
            navigation_timing=NavigationTiming(
                dom_content_loaded_start=timing.dom_content_loaded_event_start,
                dom_content_loaded_end=timing.dom_content_loaded_event_end,
                load_event_start=timing.load_event_start,
                load_event_end=timing.load_event_end,
                dom_interactive=timing.dom_interactive,
            ) if timing else None,
            resource_count=self.resource_count,
            icon_link_count=self.icon_link_count,
            body_text=self.body_text,
            paragraph_count=self.paragraph_count,
        )


class AuditRequest(CamelSchema):
    """Request to audit one rendered page."""

    url: str = Field(..., description="Audited page URL", examples=["https://example.com"])
    snapshot: SnapshotPayload = Field(default_factory=SnapshotPayload)

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError("url must be an absolute http(s) URL")
        return value
