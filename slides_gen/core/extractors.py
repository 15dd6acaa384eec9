"""Code block and diagram extraction from slide markdown."""

from __future__ import annotations

import re

from slides_gen.core.models_analysis import CodeBlock, DiagramRequirement

CODE_BLOCK_RE = re.compile(r"```([\w#+.-]+)?\n([\s\S]*?)```")
MERMAID_BLOCK_RE = re.compile(r"```mermaid[ \t]*\n([\s\S]*?)```", re.IGNORECASE)


def extract_code_blocks(content: str, slide_index: int) -> list[CodeBlock]:
    """Collect every fenced code block on a slide, mermaid blocks excluded.

    Args:
        content: Slide markdown.
        slide_index: Position of the slide within its file.

    Returns:
        Code blocks in document order.
    """
    blocks = []
    for match in CODE_BLOCK_RE.finditer(content):
        language = match.group(1) or ""
        if language.lower() == "mermaid":
            continue
        blocks.append(
            CodeBlock(
                slide_index=slide_index,
                language=language,
                code=match.group(2).strip(),
                line_numbers=True,
            )
        )
    return blocks


def extract_diagrams(content: str, slide_index: int) -> list[DiagramRequirement]:
    """Collect every mermaid diagram on a slide in document order."""
    return [
        DiagramRequirement(slide_index=slide_index, type="mermaid", content=match.group(1).strip())
        for match in MERMAID_BLOCK_RE.finditer(content)
    ]
