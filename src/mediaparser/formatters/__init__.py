"""Output formatters for media-parser."""

from __future__ import annotations

import sys
from enum import Enum

from mediaparser.models import DetailedAnalysis, MediaInfo

from .json import format_json, to_dict, to_jsonable
from .text import format_detailed_text, format_problem, format_problems, format_text
from .yaml import format_yaml


class OutputFormat(str, Enum):
    """Report output formats."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def parse(cls, value: str | None) -> OutputFormat:
        """Parse a format name; unknown names fall back to text with a notice."""
        if not value:
            return cls.TEXT
        try:
            return cls(value.lower())
        except ValueError:
            print(f"Unknown output format: {value}, using text", file=sys.stderr)
            return cls.TEXT


def render(
    result: MediaInfo | DetailedAnalysis,
    output_format: OutputFormat = OutputFormat.TEXT,
    verbose: bool = False,
    show_problems: bool = True,
) -> str:
    """Render an analysis result in the requested format."""
    if output_format == OutputFormat.JSON:
        return format_json(result)
    if output_format == OutputFormat.YAML:
        return format_yaml(result)
    if isinstance(result, DetailedAnalysis):
        return format_detailed_text(result, verbose=verbose, show_problems=show_problems)
    return format_text(result, verbose=verbose)


__all__ = [
    "OutputFormat",
    "render",
    "format_text",
    "format_detailed_text",
    "format_problem",
    "format_problems",
    "format_json",
    "format_yaml",
    "to_dict",
    "to_jsonable",
]
