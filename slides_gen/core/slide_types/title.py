"""Title slide generator."""

from __future__ import annotations

from slides_gen.core.models_analysis import SlideType
from slides_gen.core.models_slides import TitleSlide
from slides_gen.core.slide_types.base import SlideMarkupGenerator


class TitleSlideGenerator(SlideMarkupGenerator[TitleSlide]):
    """Centered title with optional subtitle, author and date lines."""

    slide_type = SlideType.TITLE

    def generate(self, slide: TitleSlide) -> str:
        parts = ["<!-- _class: lead -->", "", f"# {slide.title}"]

        if slide.subtitle:
            parts.extend(["", f"## {slide.subtitle}"])
        if slide.author:
            parts.extend(["", slide.author])
        if slide.date:
            parts.extend(["", slide.date])

        return "\n".join(parts)
