"""Section divider slide generator."""

from __future__ import annotations

from slides_gen.core.models_analysis import SlideType
from slides_gen.core.models_slides import SectionSlide
from slides_gen.core.slide_types.base import SlideMarkupGenerator


class SectionSlideGenerator(SlideMarkupGenerator[SectionSlide]):
    slide_type = SlideType.SECTION

    def generate(self, slide: SectionSlide) -> str:
        # Dividers are not paginated
        parts = ["<!-- _paginate: false -->", "<!-- _class: lead -->"]

        if slide.background:
            parts.append(f"<!-- _backgroundColor: {slide.background} -->")

        parts.extend(["", f"# {slide.title}"])
        return "\n".join(parts)
