"""Content analyzer for parsing and summarizing markdown slide sources."""

from __future__ import annotations

import asyncio
import math
import re
from pathlib import Path
from typing import Any

import yaml

from slides_gen.core import classifier, extractors
from slides_gen.core.exceptions import (
    DirectoryReadError,
    FrontmatterError,
    SlidesGenError,
    SourceNotFoundError,
    SourceReadError,
)
from slides_gen.core.markdown import extract_headings, split_into_slides
from slides_gen.core.models_analysis import (
    CodeBlock,
    ContentAnalysis,
    DiagramRequirement,
    Document,
    ParsedSlide,
    Section,
    SlideStructure,
    SlideType,
)
from slides_gen.core.observers import LoggingObserver, PipelineObserver

MARKDOWN_SUFFIX = ".md"
MINUTES_PER_SLIDE = 1.5

FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(?P<yaml>.*?)^---[ \t]*\r?$\n?", re.DOTALL | re.MULTILINE)


def split_frontmatter(text: str, source: str | None = None) -> tuple[dict[str, Any], str, int]:
    """Separate a leading YAML frontmatter block from the markdown body.

    Args:
        text: Full file content.
        source: File name used in error messages.

    Returns:
        Tuple of (frontmatter mapping, body, number of lines consumed by the block).
        Without a frontmatter block the mapping is empty and the body is ``text``.
    """
    match = FRONTMATTER_RE.match(text)
    if match is None:
        return {}, text, 0

    try:
        data = yaml.safe_load(match.group("yaml"))
    except yaml.YAMLError as e:
        raise FrontmatterError(source, str(e)) from e

    if data is None:
        data = {}
    elif not isinstance(data, dict):
        raise FrontmatterError(source, f"expected a mapping, got {type(data).__name__}")

    block = match.group(0)
    consumed = block.count("\n") if block.endswith("\n") else block.count("\n") + 1
    return {str(key): value for key, value in data.items()}, text[match.end():], consumed


class ContentAnalyzer:
    """Analyzes markdown content to extract slides and presentation structure."""

    def __init__(self, observer: PipelineObserver | None = None):
        self.observer = observer if observer is not None else LoggingObserver()

    def parse_markdown(self, content: str, start_line: int = 1) -> list[ParsedSlide]:
        """Split markdown (without frontmatter) into slides with their start lines."""
        slides = []
        current_line = start_line
        for piece in split_into_slides(content):
            slides.append(ParsedSlide(content=piece, line_number=current_line))
            # +1 for the separator line
            current_line += len(piece.split("\n")) + 1
        return slides

    def detect_slide_type(self, content: str) -> SlideType:
        return classifier.classify(content)

    def extract_code_blocks(self, content: str, slide_index: int) -> list[CodeBlock]:
        return extractors.extract_code_blocks(content, slide_index)

    def extract_diagrams(self, content: str, slide_index: int) -> list[DiagramRequirement]:
        return extractors.extract_diagrams(content, slide_index)

    async def analyze_file(self, path: str | Path) -> Document:
        """Read a markdown file and split it into slides.

        Raises:
            SourceNotFoundError: The file does not exist.
            SourceReadError: The file cannot be read or decoded.
            FrontmatterError: The leading YAML block is malformed.
        """
        path = Path(path)
        if not path.exists():
            raise SourceNotFoundError(str(path))

        try:
            raw_content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(str(path), str(e)) from e

        frontmatter, body, consumed = split_frontmatter(raw_content, str(path))
        document = Document(
            path=path,
            raw_content=raw_content,
            frontmatter=frontmatter or None,
            slides=self.parse_markdown(body, start_line=consumed + 1),
        )
        self.observer.file_analyzed(document)
        return document

    async def analyze_directory(self, path: str | Path) -> ContentAnalysis:
        """Analyze every ``.md`` file directly inside a directory.

        Files are read concurrently; results keep file-name order. Any failure
        aborts the whole analysis.

        Raises:
            SourceNotFoundError: The directory does not exist.
            DirectoryReadError: The directory or one of its files cannot be analyzed.
        """
        directory = Path(path)
        if not directory.exists():
            raise SourceNotFoundError(str(directory))

        try:
            markdown_files = await asyncio.to_thread(self._list_markdown_files, directory)
        except OSError as e:
            raise DirectoryReadError(str(directory), str(e)) from e

        try:
            files = await asyncio.gather(*(self.analyze_file(file) for file in markdown_files))
        except SlidesGenError as e:
            raise DirectoryReadError(str(directory), str(e)) from e

        analysis = self._aggregate(list(files))
        self.observer.directory_analyzed(directory, analysis)
        return analysis

    @staticmethod
    def _list_markdown_files(directory: Path) -> list[Path]:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        return [entry.resolve() for entry in entries if entry.is_file() and entry.suffix == MARKDOWN_SUFFIX]

    def _aggregate(self, files: list[Document]) -> ContentAnalysis:
        total_slides = 0
        code_blocks: list[CodeBlock] = []
        diagrams: list[DiagramRequirement] = []
        sections: list[Section] = []
        has_title = False

        for document in files:
            for index, slide in enumerate(document.slides):
                total_slides += 1
                code_blocks.extend(self.extract_code_blocks(slide.content, index))
                diagrams.extend(self.extract_diagrams(slide.content, index))

                slide_type = self.detect_slide_type(slide.content)
                if slide_type == SlideType.TITLE:
                    has_title = True

                # Each section slide opens its own one-slide section
                headings = extract_headings(slide.content)
                if headings and slide_type == SlideType.SECTION:
                    sections.append(Section(title=headings[0], slide_count=1, types=[slide_type]))

        return ContentAnalysis(
            files=files,
            total_slides=total_slides,
            suggested_structure=SlideStructure(
                has_title=has_title,
                sections=sections,
                estimated_duration=math.ceil(total_slides * MINUTES_PER_SLIDE),
            ),
            code_blocks=code_blocks,
            diagrams=diagrams,
        )
