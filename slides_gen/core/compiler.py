"""Marp CLI wrapper.

Compiles generated markdown files to HTML or PDF by running the external
``marp`` executable.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from slides_gen.core.config import OutputFormat, PresentationConfig
from slides_gen.core.exceptions import RenderError, SourceNotFoundError, UnsupportedFormatError
from slides_gen.core.observers import LoggingObserver, PipelineObserver

DEFAULT_MARP_COMMAND = ("marp",)
SUPPORTED_FORMATS = (OutputFormat.HTML, OutputFormat.PDF)


def ensure_supported_format(output_format: str | OutputFormat) -> OutputFormat:
    """Validate an output format before any rendering work starts.

    Raises:
        UnsupportedFormatError: For ``pptx`` and unknown formats.
    """
    try:
        resolved = OutputFormat(output_format)
    except ValueError as e:
        raise UnsupportedFormatError(str(output_format)) from e
    if resolved not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(resolved.value)
    return resolved


class MarpCompiler:
    """Wrapper for Marp CLI to compile markdown to various formats."""

    def __init__(self, command: Sequence[str] = DEFAULT_MARP_COMMAND, observer: PipelineObserver | None = None):
        self.command = list(command)
        self.observer = observer if observer is not None else LoggingObserver()

    async def compile_to_html(self, markdown_path: str | Path, output_path: str | Path) -> Path:
        """Compile markdown to an HTML deck."""
        return await self._run(Path(markdown_path), Path(output_path), OutputFormat.HTML)

    async def compile_to_pdf(self, markdown_path: str | Path, output_path: str | Path) -> Path:
        """Compile markdown to a PDF deck. Marp needs Chrome or Edge for this."""
        return await self._run(Path(markdown_path), Path(output_path), OutputFormat.PDF, extra_args=["--pdf"])

    async def compile(
        self,
        markdown_path: str | Path,
        output_path: str | Path,
        output_format: str | OutputFormat,
        config: PresentationConfig | None = None,
    ) -> Path:
        """Compile markdown to the requested format.

        Args:
            markdown_path: Path to the input markdown file.
            output_path: Path for the output file.
            output_format: html or pdf; pptx is rejected.
            config: Presentation configuration (currently unused by Marp CLI flags).

        Returns:
            Path to the generated file.
        """
        resolved = ensure_supported_format(output_format)
        if resolved is OutputFormat.PDF:
            return await self.compile_to_pdf(markdown_path, output_path)
        return await self.compile_to_html(markdown_path, output_path)

    async def _run(
        self,
        markdown_path: Path,
        output_path: Path,
        output_format: OutputFormat,
        extra_args: Sequence[str] = (),
    ) -> Path:
        if not markdown_path.exists():
            raise SourceNotFoundError(str(markdown_path))

        output_path.parent.mkdir(parents=True, exist_ok=True)

        args = [
            *self.command,
            str(markdown_path),
            "--html",
            *extra_args,
            "--output",
            str(output_path),
            "--allow-local-files",
        ]
        self.observer.render_started(markdown_path, output_path, output_format.value)

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise RenderError(str(markdown_path), None, f"Marp CLI executable not found: {self.command[0]}") from e

        _, stderr = await process.communicate()
        if process.returncode != 0:
            diagnostic = stderr.decode("utf-8", errors="replace").strip() if stderr else ""
            raise RenderError(str(markdown_path), process.returncode, diagnostic)

        self.observer.render_finished(output_path, output_format.value)
        return output_path
