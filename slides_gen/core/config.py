"""Presentation configuration.

Configuration is read from an optional YAML file and then overridden by
``SLIDES_*`` environment variables:

    - SLIDES_THEME: Marp theme name (default: default)
    - SLIDES_ASPECT_RATIO: 16:9 or 4:3 (default: 16:9)
    - SLIDES_PAGE_NUMBERS: true/false (default: true)
    - SLIDES_FOOTER: footer text for every slide
    - SLIDES_OUTPUT_DIR: directory for generated files (default: ./output)
    - SLIDES_FORMATS: comma-separated output formats (default: html)
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OutputFormat(str, Enum):
    HTML = "html"
    PDF = "pdf"
    PPTX = "pptx"


ENV_OVERRIDES = {
    "SLIDES_THEME": "theme",
    "SLIDES_ASPECT_RATIO": "aspect_ratio",
    "SLIDES_PAGE_NUMBERS": "page_numbers",
    "SLIDES_FOOTER": "footer",
    "SLIDES_OUTPUT_DIR": "output_dir",
    "SLIDES_FORMATS": "formats",
}


class PresentationConfig(BaseModel):
    """Presentation-wide settings consumed by the markup generator and builder."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    theme: str = Field(default="default", description="Marp theme name (default, gaia, uncover, ...)")
    aspect_ratio: Literal["16:9", "4:3"] = Field(default="16:9", description="Slide size")
    page_numbers: bool = Field(default=True, description="Show page numbers on slides")
    footer: str | None = Field(default=None, description="Footer text for every slide")
    output_dir: Path = Field(default=Path("./output"), description="Directory for generated files")
    formats: list[OutputFormat] = Field(default_factory=lambda: [OutputFormat.HTML])


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value is None or value == "":
            continue
        if field_name == "formats":
            overrides[field_name] = [item.strip() for item in value.split(",") if item.strip()]
        else:
            overrides[field_name] = value
    return overrides


def load_config(path: str | Path | None = None) -> PresentationConfig:
    """Load presentation settings from YAML and the environment.

    Args:
        path: Optional YAML file. Keys may be snake_case or camelCase.

    Returns:
        Validated, immutable configuration.
    """
    data: dict[str, Any] = {}
    if path is not None:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
        if loaded:
            if not isinstance(loaded, dict):
                raise ValueError(f"Config file {path} must contain a mapping")
            data.update(loaded)

    for field_name, value in _env_overrides().items():
        data.pop(to_camel(field_name), None)
        data[field_name] = value
    return PresentationConfig.model_validate(data)
