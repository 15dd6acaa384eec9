"""Code slide generator."""

from __future__ import annotations

from slides_gen.core.models_analysis import SlideType
from slides_gen.core.models_slides import CodeSlide
from slides_gen.core.slide_types.base import SlideMarkupGenerator


class CodeSlideGenerator(SlideMarkupGenerator[CodeSlide]):
    slide_type = SlideType.CODE

    def generate(self, slide: CodeSlide) -> str:
        parts: list[str] = []

        if slide.heading:
            parts.extend([f"## {slide.heading}", ""])

        parts.extend([f"```{slide.language}", slide.code, "```"])
        return "\n".join(parts)
