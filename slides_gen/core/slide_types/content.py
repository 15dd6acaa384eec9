"""Content slide generator."""

from __future__ import annotations

from slides_gen.core.models_analysis import SlideType
from slides_gen.core.models_slides import ContentSlide
from slides_gen.core.slide_types.base import SlideMarkupGenerator


class ContentSlideGenerator(SlideMarkupGenerator[ContentSlide]):
    """Heading plus bullets, or heading plus free text when there are no bullets."""

    slide_type = SlideType.CONTENT

    def generate(self, slide: ContentSlide) -> str:
        parts: list[str] = []

        if slide.layout != "default":
            parts.extend([f"<!-- _class: {slide.layout} -->", ""])

        if slide.heading:
            parts.extend([f"## {slide.heading}", ""])

        if slide.bullets:
            parts.extend(f"- {bullet}" for bullet in slide.bullets)
        elif slide.content:
            parts.append(slide.content)

        return "\n".join(parts)
