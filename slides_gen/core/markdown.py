"""Text utilities for splitting and measuring markdown slide content.

All functions are pure and accept any string, including the empty one.
"""

from __future__ import annotations

import re

SLIDE_SEPARATOR = "\n---\n"

FENCED_BLOCK_RE = re.compile(r"```[\s\S]*?```")
HEADING_RE = re.compile(r"^#{1,6}[ \t]+(.+)$", re.MULTILINE)
DIRECTIVE_RE = re.compile(r"^\s*<!--.*-->\s*$")

_INLINE_CODE_RE = re.compile(r"`[^`]+`")
_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]+\)")
_BOLD_RE = re.compile(r"(\*\*|__)(.*?)\1")
_ITALIC_RE = re.compile(r"(\*|_)(.*?)\1")
_HEADING_MARKER_RE = re.compile(r"^#{1,6}\s+", re.MULTILINE)
_BULLET_MARKER_RE = re.compile(r"^\s*[-*+]\s+", re.MULTILINE)
_NUMBERED_MARKER_RE = re.compile(r"^\s*\d+\.\s+", re.MULTILINE)
_WORD_CHAR_RE = re.compile(r"\w")


def split_into_slides(content: str) -> list[str]:
    """Split markdown into slide pieces on standalone ``---`` lines.

    Without any separator the content is returned untouched as a single
    slide. Otherwise each piece is stripped and empty pieces are dropped.
    Separator lines inside fenced code blocks still split the slide.
    """
    pieces = content.split(SLIDE_SEPARATOR)
    if len(pieces) == 1:
        return [content]
    stripped = (piece.strip() for piece in pieces)
    return [piece for piece in stripped if piece]


def strip_code_blocks(content: str) -> str:
    return FENCED_BLOCK_RE.sub("", content)


def extract_headings(content: str) -> list[str]:
    """Return the text of every ATX heading outside fenced code blocks."""
    return [match.group(1).strip() for match in HEADING_RE.finditer(strip_code_blocks(content))]


def count_words(content: str) -> int:
    """Count prose words, ignoring code and markdown syntax."""
    if not content or not content.strip():
        return 0

    text = strip_code_blocks(content)
    text = _INLINE_CODE_RE.sub("", text)
    text = _LINK_RE.sub(r"\1", text)
    text = _IMAGE_RE.sub("", text)
    text = _BOLD_RE.sub(r"\2", text)
    text = _ITALIC_RE.sub(r"\2", text)
    text = _HEADING_MARKER_RE.sub("", text)
    text = _BULLET_MARKER_RE.sub("", text)
    text = _NUMBERED_MARKER_RE.sub("", text)

    return sum(1 for word in text.split() if _WORD_CHAR_RE.search(word))


def is_directive(line: str) -> bool:
    """True for a line holding nothing but an HTML comment directive."""
    return bool(DIRECTIVE_RE.match(line))


def significant_lines(content: str) -> list[str]:
    """Non-blank lines that are not renderer directives."""
    return [line for line in content.split("\n") if line.strip() and not is_directive(line)]
