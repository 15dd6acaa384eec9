"""Errors raised by the analysis, generation and rendering pipeline."""

from __future__ import annotations


class SlidesGenError(Exception):
    pass


class SourceNotFoundError(SlidesGenError, FileNotFoundError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Input path not found: {path}")
        self.path = path


class SourceReadError(SlidesGenError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


class FrontmatterError(SlidesGenError):
    def __init__(self, path: str | None, reason: str) -> None:
        super().__init__(f"Invalid frontmatter in {path or '<string>'}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryReadError(SlidesGenError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to analyze directory {path}: {reason}")
        self.path = path
        self.reason = reason


class UnsupportedFormatError(SlidesGenError, ValueError):
    def __init__(self, output_format: str) -> None:
        super().__init__(f"Output format '{output_format}' is not supported")
        self.output_format = output_format


class RenderError(SlidesGenError):
    def __init__(self, markdown_path: str, exit_code: int | None, diagnostic: str = "") -> None:
        message = f"Marp compilation of {markdown_path} failed"
        if exit_code is not None:
            message += f" with exit code {exit_code}"
        if diagnostic:
            message += f": {diagnostic}"
        super().__init__(message)
        self.markdown_path = markdown_path
        self.exit_code = exit_code
        self.diagnostic = diagnostic
