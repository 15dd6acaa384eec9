"""Build rendered decks from slide plans."""

from __future__ import annotations

from pathlib import Path

from slides_gen.core.compiler import MarpCompiler, ensure_supported_format
from slides_gen.core.generator import MarpGenerator
from slides_gen.core.models_slides import SlidePlan
from slides_gen.core.observers import LoggingObserver, PipelineObserver


class DeckBuilder:
    """Writes a plan as Marp markdown and renders it to every configured format."""

    def __init__(
        self,
        generator: MarpGenerator | None = None,
        compiler: MarpCompiler | None = None,
        observer: PipelineObserver | None = None,
    ):
        self.observer = observer if observer is not None else LoggingObserver()
        self.generator = generator or MarpGenerator()
        self.compiler = compiler or MarpCompiler(observer=self.observer)

    def write_markdown(self, plan: SlidePlan, path: str | Path) -> Path:
        """Generate markdown for ``plan`` and write it to ``path``."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.generator.generate(plan))
        return path

    async def build(self, plan: SlidePlan, basename: str = "slides") -> list[Path]:
        """Render ``plan`` into ``config.output_dir``.

        Every requested format is validated before anything is written, so an
        unsupported format never produces partial output.

        Returns:
            Paths of the rendered files, in the order of ``config.formats``.
        """
        formats = [ensure_supported_format(output_format) for output_format in plan.config.formats]

        output_dir = Path(plan.config.output_dir)
        markdown_path = self.write_markdown(plan, output_dir / f"{basename}.md")

        outputs = []
        for output_format in formats:
            output_path = output_dir / f"{basename}.{output_format.value}"
            outputs.append(await self.compiler.compile(markdown_path, output_path, output_format, plan.config))
        return outputs
