"""JSON output formatter."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from mediaparser.models import DetailedAnalysis, Problem


def to_dict(obj: BaseModel) -> dict[str, Any]:
    """Convert a model to a JSON-compatible dictionary.

    Problems, alone or inside a detailed analysis, omit their empty
    optional fields.
    """
    if isinstance(obj, (Problem, DetailedAnalysis)):
        return obj.to_dict()
    return obj.model_dump(mode="json")


def to_jsonable(obj: BaseModel | Sequence[BaseModel]) -> Any:
    """Convert a model or a list of models to plain data."""
    if isinstance(obj, BaseModel):
        return to_dict(obj)
    return [to_dict(item) for item in obj]


def format_json(obj: BaseModel | Sequence[BaseModel], indent: int = 2) -> str:
    """Format a model, or a list of models, as a JSON string.

    Args:
        obj: MediaInfo, DetailedAnalysis, a list of problems, ...
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return json.dumps(to_jsonable(obj), indent=indent, ensure_ascii=False, default=str)
