"""Example: analyze a folder of markdown notes and render a Marp deck.

This example shows how to:
1. Analyze a directory of markdown files
2. Turn the analysis into a typed slide plan
3. Write Marp markdown and render it to HTML

Prerequisites:
- Install the Marp CLI: npm install -g @marp-team/marp-cli
"""

import asyncio
import logging
import sys

from slides_gen import ContentAnalyzer, DeckBuilder, load_config
from slides_gen.core.models_slides import (
    CodeSlide,
    ContentSlide,
    DiagramSlide,
    PresentationMetadata,
    SectionSlide,
    SlidePlan,
    TitleSlide,
)


def plan_from_analysis(analysis, config) -> SlidePlan:
    """Build a simple plan: a title, one divider per section, then code and diagrams."""
    title = "Untitled deck"
    for document in analysis.files:
        if document.frontmatter and document.frontmatter.get("title"):
            title = str(document.frontmatter["title"])
            break

    slides = [TitleSlide(title=title, subtitle=f"{analysis.total_slides} source slides")]
    slides.extend(SectionSlide(title=section.title) for section in analysis.suggested_structure.sections)
    slides.extend(CodeSlide(language=block.language, code=block.code) for block in analysis.code_blocks)
    slides.extend(DiagramSlide(diagram=diagram.content) for diagram in analysis.diagrams)
    slides.append(ContentSlide(heading="Summary", content=analysis.get_summary()))

    return SlidePlan(
        slides=slides,
        config=config,
        metadata=PresentationMetadata(
            title=title,
            total_slides=len(slides),
            estimated_duration=analysis.suggested_structure.estimated_duration,
        ),
    )


async def main(source_dir: str):
    config = load_config()

    analysis = await ContentAnalyzer().analyze_directory(source_dir)
    plan = plan_from_analysis(analysis, config)
    print(plan.get_slides_summary())

    outputs = await DeckBuilder().build(plan)
    for output in outputs:
        print(f"📊 Deck written to {output}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "."))
