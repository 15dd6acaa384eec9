from slides_gen.core.models_analysis import SlideType
from slides_gen.core.slide_types import (
    CodeSlideGenerator,
    ContentSlideGenerator,
    DiagramSlideGenerator,
    SectionSlideGenerator,
    SlideMarkupGenerator,
    TitleSlideGenerator,
)

DEFAULT_SLIDE_GENERATORS = [
    TitleSlideGenerator,
    ContentSlideGenerator,
    SectionSlideGenerator,
    CodeSlideGenerator,
    DiagramSlideGenerator,
]


def get_default_slide_generators() -> dict[SlideType, SlideMarkupGenerator]:
    """Get default markup generators.

    A fresh instance of every generator is created on each call so callers
    can replace entries without affecting other generators.

    Returns:
        Dictionary of generator instances keyed by the slide type they render
    """
    generators = [generator_class() for generator_class in DEFAULT_SLIDE_GENERATORS]
    return {generator.slide_type: generator for generator in generators}
