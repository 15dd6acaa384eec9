"""Progress reporting hooks for the analysis and rendering pipeline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slides_gen.core.models_analysis import ContentAnalysis, Document

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


class PipelineObserver:
    """Receives progress events. The base class ignores all of them."""

    def file_analyzed(self, document: Document) -> None:
        pass

    def directory_analyzed(self, directory: Path, analysis: ContentAnalysis) -> None:
        pass

    def render_started(self, markdown_path: Path, output_path: Path, output_format: str) -> None:
        pass

    def render_finished(self, output_path: Path, output_format: str) -> None:
        pass


class LoggingObserver(PipelineObserver):
    """Report pipeline progress through the standard logging module."""

    def __init__(self, log: logging.Logger | None = None):
        self.logger = log or logger

    def file_analyzed(self, document: Document) -> None:
        self.logger.debug(f"📄 Analyzed {document.path}: {len(document.slides)} slide(s)")

    def directory_analyzed(self, directory: Path, analysis: ContentAnalysis) -> None:
        structure = analysis.suggested_structure
        self.logger.info(
            f"🔍 CONTENT ANALYZED:\n"
            f"   📁 Directory: {directory}\n"
            f"   📑 Files: {len(analysis.files)}\n"
            f"   🎞️ Slides: {analysis.total_slides} (~{structure.estimated_duration} min)\n"
            f"   🧩 Code blocks: {len(analysis.code_blocks)}, diagrams: {len(analysis.diagrams)}\n"
            f"   🏷️ Title slide: {structure.has_title}, sections: {len(structure.sections)}\n"
        )

    def render_started(self, markdown_path: Path, output_path: Path, output_format: str) -> None:
        self.logger.info(f"🖨️ Rendering {markdown_path} -> {output_path} ({output_format})")

    def render_finished(self, output_path: Path, output_format: str) -> None:
        self.logger.info(f"✅ {output_format.upper()} written to {output_path}")
