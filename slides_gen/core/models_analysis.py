"""Models produced by content analysis."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class SlideType(str, Enum):
    """Slide types recognized by the classifier and the markup generator."""

    TITLE = "title"
    CONTENT = "content"
    SECTION = "section"
    CODE = "code"
    DIAGRAM = "diagram"


class ParsedSlide(BaseModel):
    """A single slide segmented from a markdown file."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Slide markdown")
    line_number: int = Field(ge=1, description="1-based line in the source file where the slide starts")
    frontmatter: dict[str, Any] | None = Field(default=None, description="Slide-level frontmatter")


class Document(BaseModel):
    """A markdown file split into slides."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Resolved path of the source file")
    raw_content: str = Field(description="Full file text, frontmatter included")
    frontmatter: dict[str, Any] | None = Field(default=None, description="File-level frontmatter, None when empty")
    slides: list[ParsedSlide] = Field(default_factory=list)


class CodeBlock(BaseModel):
    """A fenced code block found on a slide."""

    model_config = ConfigDict(frozen=True)

    slide_index: int = Field(description="Index of the slide within its own file")
    language: str = Field(default="", description="Fence language tag")
    code: str
    line_numbers: bool = True


class DiagramRequirement(BaseModel):
    """A mermaid diagram found on a slide."""

    model_config = ConfigDict(frozen=True)

    slide_index: int = Field(description="Index of the slide within its own file")
    type: Literal["mermaid"] = "mermaid"
    content: str


class Section(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    slide_count: int = 1
    types: list[SlideType] = Field(default_factory=list)


class SlideStructure(BaseModel):
    """Suggested presentation structure."""

    model_config = ConfigDict(frozen=True)

    has_title: bool = False
    sections: list[Section] = Field(default_factory=list)
    estimated_duration: int = Field(default=0, description="Estimated talk length in minutes")


class ContentAnalysis(BaseModel):
    """Result of analyzing a directory of markdown files."""

    model_config = ConfigDict(frozen=True)

    files: list[Document] = Field(default_factory=list)
    total_slides: int = 0
    suggested_structure: SlideStructure = Field(default_factory=SlideStructure)
    code_blocks: list[CodeBlock] = Field(default_factory=list)
    diagrams: list[DiagramRequirement] = Field(default_factory=list)

    def get_summary(self) -> str:
        """Short human-readable summary of the analysis."""
        structure = self.suggested_structure
        lines = [
            f"Files: {len(self.files)}",
            f"Slides: {self.total_slides} (~{structure.estimated_duration} min)",
            f"Title slide: {'yes' if structure.has_title else 'no'}",
            f"Code blocks: {len(self.code_blocks)}",
            f"Diagrams: {len(self.diagrams)}",
        ]
        for section in structure.sections:
            lines.append(f"Section: {section.title}")
        return "\n".join(lines)
