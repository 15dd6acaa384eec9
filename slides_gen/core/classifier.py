"""Slide type detection.

A slide is classified by an ordered list of rules. The first rule whose
predicate accepts the slide text decides the type, so unambiguous structural
markers (diagram and code fences) are checked before the heading heuristics,
and the last rule always matches.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import NamedTuple

from slides_gen.core.markdown import count_words, extract_headings, significant_lines
from slides_gen.core.models_analysis import SlideType

SECTION_MAX_WORDS = 15

MERMAID_FENCE_RE = re.compile(r"```mermaid[ \t]*$", re.IGNORECASE | re.MULTILINE)
CODE_FENCE_RE = re.compile(r"```[\w#+.-]*\n")
H1_RE = re.compile(r"^#\s")
H2_RE = re.compile(r"^##\s")
LIST_MARKER_RE = re.compile(r"^\s*(?:[-*+]|\d+\.)\s", re.MULTILINE)


class ClassificationRule(NamedTuple):
    name: str
    predicate: Callable[[str], bool]
    slide_type: SlideType


def has_diagram_fence(content: str) -> bool:
    return bool(MERMAID_FENCE_RE.search(content))


def has_code_fence(content: str) -> bool:
    return bool(CODE_FENCE_RE.search(content))


def looks_like_title(content: str) -> bool:
    """An H1 immediately followed by an H2."""
    if len(extract_headings(content)) < 2:
        return False
    lines = significant_lines(content)
    return len(lines) >= 2 and bool(H1_RE.match(lines[0])) and bool(H2_RE.match(lines[1]))


def looks_like_section(content: str) -> bool:
    """A lone H1 with very little text around it. Directive comments are not counted."""
    if len(extract_headings(content)) != 1:
        return False
    lines = significant_lines(content)
    return bool(lines) and bool(H1_RE.match(lines[0])) and count_words("\n".join(lines)) < SECTION_MAX_WORDS


def has_list(content: str) -> bool:
    return bool(LIST_MARKER_RE.search(content))


def always(content: str) -> bool:
    return True


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("mermaid_fence", has_diagram_fence, SlideType.DIAGRAM),
    ClassificationRule("code_fence", has_code_fence, SlideType.CODE),
    ClassificationRule("h1_then_h2", looks_like_title, SlideType.TITLE),
    ClassificationRule("lone_h1", looks_like_section, SlideType.SECTION),
    ClassificationRule("list", has_list, SlideType.CONTENT),
    ClassificationRule("fallback", always, SlideType.CONTENT),
)


def match_rule(content: str, rules: Sequence[ClassificationRule] = DEFAULT_RULES) -> ClassificationRule | None:
    """Return the first rule accepting ``content``."""
    for rule in rules:
        if rule.predicate(content):
            return rule
    return None


def classify(content: str, rules: Sequence[ClassificationRule] = DEFAULT_RULES) -> SlideType:
    """Detect the type of a slide from its markdown.

    Args:
        content: Slide markdown, without file frontmatter.
        rules: Ordered rules; the defaults end with a catch-all.

    Returns:
        The type of the first matching rule, ``content`` if none matches.
    """
    rule = match_rule(content, rules)
    return rule.slide_type if rule is not None else SlideType.CONTENT
