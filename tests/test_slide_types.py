"""Tests for the per-type slide markup generators."""

import pytest

from slides_gen.core.classifier import classify
from slides_gen.core.models_analysis import SlideType
from slides_gen.core.models_slides import CodeSlide, ContentSlide, DiagramSlide, SectionSlide, TitleSlide
from slides_gen.core.slide_types import (
    CodeSlideGenerator,
    ContentSlideGenerator,
    DiagramSlideGenerator,
    SectionSlideGenerator,
    TitleSlideGenerator,
)


class TestTitleSlideGenerator:
    """Tests for TitleSlideGenerator."""

    def test_title_only(self):
        markdown = TitleSlideGenerator().generate(TitleSlide(title="Welcome"))
        assert markdown == "<!-- _class: lead -->\n\n# Welcome"

    def test_all_fields(self):
        slide = TitleSlide(title="Welcome", subtitle="To the show", author="Jane Doe", date="2024-01-15")
        markdown = TitleSlideGenerator().generate(slide)

        assert markdown == (
            "<!-- _class: lead -->\n\n# Welcome\n\n## To the show\n\nJane Doe\n\n2024-01-15"
        )

    def test_skips_missing_fields(self):
        markdown = TitleSlideGenerator().generate(TitleSlide(title="T", date="today"))
        assert markdown == "<!-- _class: lead -->\n\n# T\n\ntoday"

    def test_reclassifies_as_title(self):
        markdown = TitleSlideGenerator().generate(TitleSlide(title="T", subtitle="S"))
        assert classify(markdown) == SlideType.TITLE


class TestContentSlideGenerator:
    """Tests for ContentSlideGenerator."""

    def test_heading_and_bullets(self):
        slide = ContentSlide(heading="Key Points", bullets=["First", "Second"])
        markdown = ContentSlideGenerator().generate(slide)

        assert markdown == "## Key Points\n\n- First\n- Second"

    def test_layout_directive(self):
        slide = ContentSlide(heading="Compare", bullets=["A"], layout="two-column")
        markdown = ContentSlideGenerator().generate(slide)

        assert markdown.startswith("<!-- _class: two-column -->\n\n## Compare")

    def test_default_layout_has_no_directive(self):
        markdown = ContentSlideGenerator().generate(ContentSlide(bullets=["A"]))
        assert "_class" not in markdown
        assert markdown == "- A"

    def test_free_text_content(self):
        slide = ContentSlide(heading="Notes", content="Some **free** text.")
        markdown = ContentSlideGenerator().generate(slide)

        assert markdown == "## Notes\n\nSome **free** text."

    def test_bullets_take_precedence_over_content(self):
        slide = ContentSlide(bullets=["Bullet"], content="Ignored text")
        markdown = ContentSlideGenerator().generate(slide)

        assert "Ignored text" not in markdown
        assert "- Bullet" in markdown

    def test_empty_slide(self):
        assert ContentSlideGenerator().generate(ContentSlide()) == ""

    def test_reclassifies_as_content(self):
        markdown = ContentSlideGenerator().generate(ContentSlide(heading="Agenda", bullets=["One", "Two"]))
        assert classify(markdown) == SlideType.CONTENT


class TestSectionSlideGenerator:
    """Tests for SectionSlideGenerator."""

    def test_section(self):
        markdown = SectionSlideGenerator().generate(SectionSlide(title="Part Two"))
        assert markdown == "<!-- _paginate: false -->\n<!-- _class: lead -->\n\n# Part Two"

    def test_background(self):
        markdown = SectionSlideGenerator().generate(SectionSlide(title="Part Two", background="#123456"))
        assert "<!-- _backgroundColor: #123456 -->\n\n# Part Two" in markdown

    def test_reclassifies_as_section(self):
        markdown = SectionSlideGenerator().generate(SectionSlide(title="Part Two", background="navy"))
        assert classify(markdown) == SlideType.SECTION

    def test_long_title_with_background_reclassifies_as_section(self):
        title = "Results from the second quarter of this year so far"
        markdown = SectionSlideGenerator().generate(SectionSlide(title=title, background="#123456"))

        assert classify(markdown) == SlideType.SECTION
        assert classify(f"# {title}") == SlideType.SECTION


class TestCodeSlideGenerator:
    """Tests for CodeSlideGenerator."""

    def test_code_with_heading(self):
        slide = CodeSlide(language="python", code="def f():\n    return 1", heading="Example")
        markdown = CodeSlideGenerator().generate(slide)

        assert markdown == "## Example\n\n```python\ndef f():\n    return 1\n```"

    def test_code_without_heading(self):
        markdown = CodeSlideGenerator().generate(CodeSlide(language="js", code="let x = 1;"))
        assert markdown == "```js\nlet x = 1;\n```"

    def test_reclassifies_as_code(self):
        markdown = CodeSlideGenerator().generate(CodeSlide(language="js", code="let x = 1;"))
        assert classify(markdown) == SlideType.CODE


class TestDiagramSlideGenerator:
    """Tests for DiagramSlideGenerator."""

    def test_diagram(self):
        slide = DiagramSlide(diagram="graph TD\n  A --> B", heading="Flow")
        markdown = DiagramSlideGenerator().generate(slide)

        assert markdown == "## Flow\n\n```mermaid\ngraph TD\n  A --> B\n```"

    def test_reclassifies_as_diagram(self):
        markdown = DiagramSlideGenerator().generate(DiagramSlide(diagram="graph LR\n  X --> Y"))
        assert classify(markdown) == SlideType.DIAGRAM


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
