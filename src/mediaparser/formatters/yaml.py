"""YAML output formatter."""

from __future__ import annotations

from collections.abc import Sequence

import yaml
from pydantic import BaseModel

from .json import to_jsonable


def format_yaml(obj: BaseModel | Sequence[BaseModel]) -> str:
    """Format a model, or a list of models, as YAML.

    Uses the same field set as the JSON formatter; keys keep model order.
    """
    return yaml.safe_dump(
        to_jsonable(obj),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
