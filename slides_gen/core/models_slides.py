"""Typed slide models consumed by the markup generator."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from slides_gen.core.config import PresentationConfig


class BaseSlide(BaseModel):
    """Fields shared by every slide variant."""

    content: str = Field(default="", description="Raw markdown content for this slide")
    metadata: dict[str, Any] | None = Field(default=None, description="Optional slide-level frontmatter")
    index: int | None = Field(default=None, description="0-based position in the presentation")


class TitleSlide(BaseSlide):
    """Opening slide of a presentation."""

    type: Literal["title"] = "title"
    title: str
    subtitle: str | None = None
    author: str | None = None
    date: str | None = None


class ContentSlide(BaseSlide):
    """Standard slide with bullet points or free text."""

    type: Literal["content"] = "content"
    heading: str | None = None
    bullets: list[str] = Field(default_factory=list)
    layout: Literal["default", "two-column", "center"] = "default"


class SectionSlide(BaseSlide):
    """Divider slide between major sections."""

    type: Literal["section"] = "section"
    title: str
    background: str | None = Field(default=None, description="Background color or image")


class CodeSlide(BaseSlide):
    type: Literal["code"] = "code"
    language: str = ""
    code: str
    heading: str | None = None
    highlight: str | None = Field(default=None, description="Lines to highlight, e.g. '2-4,6'")


class DiagramSlide(BaseSlide):
    type: Literal["diagram"] = "diagram"
    engine: Literal["mermaid"] = "mermaid"
    diagram: str
    heading: str | None = None


AnySlide = Annotated[
    Union[TitleSlide, ContentSlide, SectionSlide, CodeSlide, DiagramSlide],
    Field(discriminator="type"),
]


class PresentationMetadata(BaseModel):
    title: str | None = None
    author: str | None = None
    date: str | None = None
    total_slides: int = 0
    estimated_duration: int | None = Field(default=None, description="Minutes")
    tags: list[str] = Field(default_factory=list)


class SlidePlan(BaseModel):
    """Ordered slides plus the configuration they are rendered with."""

    slides: list[AnySlide] = Field(default_factory=list)
    config: PresentationConfig = Field(default_factory=PresentationConfig)
    metadata: PresentationMetadata = Field(default_factory=PresentationMetadata)

    def get_slide_count(self) -> int:
        return len(self.slides)

    def get_slides_summary(self) -> str:
        """Get a one-line-per-slide summary of the plan."""
        if not self.slides:
            return "No slides planned yet."
        summary = []
        for position, slide in enumerate(self.slides, start=1):
            label = getattr(slide, "title", None) or getattr(slide, "heading", None) or "untitled"
            summary.append(f"Slide {position}: {label} ({slide.type})")
        return "\n".join(summary)
