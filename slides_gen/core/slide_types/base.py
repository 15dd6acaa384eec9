"""Base class for per-type slide markup generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from slides_gen.core.models_analysis import SlideType
from slides_gen.core.models_slides import BaseSlide

SlideT = TypeVar("SlideT", bound=BaseSlide)


class SlideMarkupGenerator(ABC, Generic[SlideT]):
    """Turns one typed slide into Marp markdown."""

    slide_type: ClassVar[SlideType]

    @abstractmethod
    def generate(self, slide: SlideT) -> str:
        """Generate Marp markdown for a slide."""
