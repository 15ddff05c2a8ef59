"""Detailed analysis result models."""

from typing import Any

from pydantic import BaseModel, Field

from .media import MediaInfo
from .observations import BitratePoint, FrameInfo, PacketInfo
from .problem import Problem, Severity


class DetailedAnalysis(BaseModel):
    """Media info plus packet/frame level data and detected problems."""

    media_info: MediaInfo
    problems: list[Problem] = Field(default_factory=list)
    packets: list[PacketInfo] = Field(default_factory=list)
    frames: list[FrameInfo] = Field(default_factory=list)
    bitrate_timeline: list[BitratePoint] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(p.severity == Severity.ERROR for p in self.problems)

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump(mode="json", exclude={"problems"})
        data["problems"] = [p.to_dict() for p in self.problems]
        return data


class GOPInfo(BaseModel):
    """One group of pictures, from a keyframe up to the next one."""

    start_time: float
    end_time: float = 0.0
    frame_count: int = 0
    i_frames: int = 0
    p_frames: int = 0
    b_frames: int = 0


class FrameTimelineEntry(BaseModel):
    """A sampled frame on the visualization timeline."""

    time: float
    frame_type: str | None = None
    size: int = 0
    key_frame: bool = False


class FrameVisualization(BaseModel):
    """Frame type distribution and GOP layout of the video frames."""

    total_frames: int = 0
    duration: float = 0.0
    frame_types: dict[str, int] = Field(default_factory=dict)
    gop_structure: list[GOPInfo] = Field(default_factory=list)
    timeline: list[FrameTimelineEntry] = Field(default_factory=list)
