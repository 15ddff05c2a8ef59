"""Problem (diagnostic finding) models."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator


class Severity(str, Enum):
    """How much operator attention a problem needs.

    Members are declared in ascending order of attention; ``rank`` exposes
    that order for sorting and grouping.
    """

    INFO = "INFO"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        return list(Severity).index(self)


class Category(str, Enum):
    """Area of the media a problem belongs to."""

    CODEC = "CODEC"
    CONTAINER = "CONTAINER"
    BITRATE = "BITRATE"
    FRAMERATE = "FRAMERATE"
    RESOLUTION = "RESOLUTION"
    AUDIO = "AUDIO"
    TIMESTAMP = "TIMESTAMP"
    KEYFRAME = "KEYFRAME"
    PACKET_LOSS = "PACKET_LOSS"
    COMPATIBILITY = "COMPATIBILITY"


class Problem(BaseModel):
    """A single diagnostic finding.

    Attributes:
        severity: Attention level
        category: Affected area
        code: Stable identifier of the problem kind (e.g. BITRATE_SPIKE)
        message: One-line human readable summary
        details: Optional elaboration, usually with computed values
        suggestion: Optional remediation hint
        timestamp: Media time in seconds; 0 means the problem is global
        stream_index: Stream the problem was observed on, if known
        metadata: Free-form extra values as (key, value) pairs; a mapping
            is accepted on creation
    """

    model_config = ConfigDict(frozen=True)

    severity: Severity
    category: Category
    code: str
    message: str
    details: str = ""
    suggestion: str = ""
    timestamp: float = 0.0
    stream_index: int | None = None
    metadata: tuple[tuple[str, str], ...] = ()

    @field_validator("metadata", mode="before")
    @classmethod
    def _freeze_metadata(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple((str(k), str(v)) for k, v in value.items())
        return value

    @field_serializer("metadata")
    def _serialize_metadata(self, metadata: tuple[tuple[str, str], ...]) -> dict[str, str]:
        return dict(metadata)

    @property
    def is_global(self) -> bool:
        """Check if the problem applies to the whole file."""
        return not self.timestamp

    def to_dict(self) -> dict[str, Any]:
        """Serialize, omitting optional fields that are empty or zero."""
        return {key: value for key, value in self.model_dump(mode="json").items() if value}
