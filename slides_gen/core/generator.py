"""Marp markdown generator.

Converts slide plans into Marp-compatible markdown.
"""

from __future__ import annotations

from collections.abc import Mapping

from slides_gen.core.config import PresentationConfig
from slides_gen.core.models_analysis import SlideType
from slides_gen.core.models_slides import AnySlide, SlidePlan
from slides_gen.core.slide_types.base import SlideMarkupGenerator
from slides_gen.default_definitions import get_default_slide_generators

SLIDE_JOINER = "\n\n---\n\n"


class MarpGenerator:
    """Generates Marp-compatible markdown from slide plans."""

    def __init__(self, generators: Mapping[SlideType, SlideMarkupGenerator] | None = None):
        if generators is None:
            generators = get_default_slide_generators()

        missing = [slide_type.value for slide_type in SlideType if slide_type not in generators]
        if missing:
            raise ValueError(f"No markup generator registered for slide type(s): {', '.join(missing)}")
        self.generators = dict(generators)

    def generate_frontmatter(self, config: PresentationConfig) -> str:
        """Generate the Marp frontmatter block for a configuration."""
        parts = [
            "---",
            "marp: true",
            f"theme: {config.theme}",
            f"size: {config.aspect_ratio}",
            f"paginate: {'true' if config.page_numbers else 'false'}",
        ]

        if config.footer:
            escaped_footer = config.footer.replace('"', '\\"')
            parts.append(f'footer: "{escaped_footer}"')

        parts.append("---")
        return "\n".join(parts)

    def generate_slide(self, slide: AnySlide) -> str:
        """Generate markdown for a single slide."""
        return self.generators[SlideType(slide.type)].generate(slide)

    def generate(self, plan: SlidePlan) -> str:
        """Generate the complete Marp document for a slide plan."""
        slides_markdown = SLIDE_JOINER.join(self.generate_slide(slide) for slide in plan.slides)
        return "\n".join([self.generate_frontmatter(plan.config), "", slides_markdown])
