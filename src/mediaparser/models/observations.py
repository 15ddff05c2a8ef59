"""Packet, frame and bitrate observation models."""

from pydantic import BaseModel


class PacketInfo(BaseModel):
    """A demuxed media packet as reported by ffprobe.

    Packets keep the probe (transmission) order; they are not sorted by PTS.
    """

    pts: float = 0.0
    dts: float = 0.0
    size: int = 0
    stream_index: int = 0
    codec_type: str | None = None
    duration: float = 0.0
    flags: str | None = None


class FrameInfo(BaseModel):
    """A decoded frame as reported by ffprobe."""

    media_type: str = "video"
    stream_index: int = 0
    key_frame: bool = False
    pts: float = 0.0
    dts: float = 0.0
    duration: float = 0.0
    size: int = 0
    pict_type: str | None = None
    coded_picture_number: int | None = None
    pix_fmt: str | None = None
    width: int | None = None
    height: int | None = None


class BitratePoint(BaseModel):
    """Bitrate measured over one time window."""

    time: float
    bitrate: float
    type: str = "total"  # "video", "audio" or "total"

    @property
    def mbps(self) -> float:
        return self.bitrate / 1_000_000
