"""Pydantic models for media-parser."""

from .analysis import DetailedAnalysis, FrameTimelineEntry, FrameVisualization, GOPInfo
from .media import AudioInfo, FormatInfo, MediaInfo, StreamInfo, VideoInfo
from .observations import BitratePoint, FrameInfo, PacketInfo
from .problem import Category, Problem, Severity

__all__ = [
    # Problems
    "Problem",
    "Severity",
    "Category",
    # Observations
    "PacketInfo",
    "FrameInfo",
    "BitratePoint",
    # Media
    "MediaInfo",
    "FormatInfo",
    "VideoInfo",
    "AudioInfo",
    "StreamInfo",
    # Analysis
    "DetailedAnalysis",
    "FrameVisualization",
    "GOPInfo",
    "FrameTimelineEntry",
]
