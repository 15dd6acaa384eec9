"""slides-gen: turn a directory of markdown notes into a Marp slide deck.

Building blocks:

- ContentAnalyzer: segment, classify and summarize markdown sources
- MarpGenerator: render a typed SlidePlan back to Marp markdown
- MarpCompiler: hand generated markdown to the Marp CLI
- DeckBuilder: plan -> markdown file -> rendered outputs
"""

from slides_gen.core.analyzer import ContentAnalyzer
from slides_gen.core.builder import DeckBuilder
from slides_gen.core.classifier import classify
from slides_gen.core.compiler import MarpCompiler
from slides_gen.core.config import OutputFormat, PresentationConfig, load_config
from slides_gen.core.generator import MarpGenerator
from slides_gen.core.models_analysis import ContentAnalysis, Document, SlideType
from slides_gen.core.models_slides import SlidePlan

__all__ = [
    "ContentAnalyzer",
    "MarpGenerator",
    "MarpCompiler",
    "DeckBuilder",
    "classify",
    "load_config",
    "PresentationConfig",
    "OutputFormat",
    "SlidePlan",
    "ContentAnalysis",
    "Document",
    "SlideType",
]
