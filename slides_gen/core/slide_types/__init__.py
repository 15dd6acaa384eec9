from slides_gen.core.slide_types.base import SlideMarkupGenerator
from slides_gen.core.slide_types.code import CodeSlideGenerator
from slides_gen.core.slide_types.content import ContentSlideGenerator
from slides_gen.core.slide_types.diagram import DiagramSlideGenerator
from slides_gen.core.slide_types.section import SectionSlideGenerator
from slides_gen.core.slide_types.title import TitleSlideGenerator

__all__ = [
    "SlideMarkupGenerator",
    "TitleSlideGenerator",
    "ContentSlideGenerator",
    "SectionSlideGenerator",
    "CodeSlideGenerator",
    "DiagramSlideGenerator",
]
