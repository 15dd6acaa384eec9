"""Diagram slide generator."""

from __future__ import annotations

from slides_gen.core.models_analysis import SlideType
from slides_gen.core.models_slides import DiagramSlide
from slides_gen.core.slide_types.base import SlideMarkupGenerator


class DiagramSlideGenerator(SlideMarkupGenerator[DiagramSlide]):
    """Mermaid diagram with an optional heading."""

    slide_type = SlideType.DIAGRAM

    def generate(self, slide: DiagramSlide) -> str:
        parts: list[str] = []

        if slide.heading:
            parts.extend([f"## {slide.heading}", ""])

        parts.extend([f"```{slide.engine}", slide.diagram, "```"])
        return "\n".join(parts)
