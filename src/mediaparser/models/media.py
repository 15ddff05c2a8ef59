"""Container and stream models for a probed media input."""

from datetime import datetime
from math import gcd

from pydantic import BaseModel, Field


class FormatInfo(BaseModel):
    """Container format information."""

    format_name: str = ""
    format_long_name: str = ""
    duration: float = 0.0
    size: int = 0
    bitrate: int = 0
    probe_score: int = 0
    tags: dict[str, str] = Field(default_factory=dict)

    @property
    def primary_name(self) -> str:
        """Return the first name of a comma separated format list.

        ffprobe reports demuxers that handle several formats as a list,
        e.g. "matroska,webm" or "mov,mp4,m4a,3gp,3g2,mj2".
        """
        return self.format_name.split(",")[0].strip()


class VideoInfo(BaseModel):
    """Technical information of the first video stream."""

    index: int = 0
    codec: str = ""
    codec_long_name: str = ""
    profile: str | None = None
    level: int = 0
    width: int = 0
    height: int = 0
    aspect_ratio: str | None = None
    pixel_format: str | None = None
    frame_rate: str | None = None
    avg_frame_rate: str | None = None
    bitrate: int = 0
    duration: float = 0.0
    frame_count: int = 0
    color_space: str | None = None
    color_primaries: str | None = None
    color_transfer: str | None = None
    has_b_frames: int = 0

    @property
    def resolution(self) -> str | None:
        """Return resolution as WxH string."""
        if self.width and self.height:
            return f"{self.width}x{self.height}"
        return None

    @property
    def computed_aspect_ratio(self) -> str | None:
        """Reduce width:height when ffprobe did not report a display ratio."""
        if not self.width or not self.height:
            return None
        divisor = gcd(self.width, self.height)
        return f"{self.width // divisor}:{self.height // divisor}"


class AudioInfo(BaseModel):
    """Technical information of the first audio stream."""

    index: int = 0
    codec: str = ""
    codec_long_name: str = ""
    profile: str | None = None
    channels: int = 0
    channel_layout: str | None = None
    sample_rate: int = 0
    sample_format: str | None = None
    bitrate: int = 0
    duration: float = 0.0


class StreamInfo(BaseModel):
    """Summary of any stream in the container."""

    index: int
    type: str = ""
    codec: str = ""
    codec_type: str = ""
    tags: dict[str, str] = Field(default_factory=dict)


class MediaInfo(BaseModel):
    """Result of a basic probe.

    Only the first video and first audio stream are broken out; every stream
    is listed in ``streams`` when stream output is requested.
    """

    input: str
    format: FormatInfo | None = None
    video: VideoInfo | None = None
    audio: AudioInfo | None = None
    streams: list[StreamInfo] = Field(default_factory=list)
    analyzed_at: datetime = Field(default_factory=datetime.now)
