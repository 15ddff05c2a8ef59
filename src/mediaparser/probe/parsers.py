"""Conversion of raw ffprobe JSON into media-parser models.

ffprobe reports most numbers as strings and uses "N/A" for missing values;
anything that cannot be converted becomes 0.
"""

from __future__ import annotations

import contextlib
from typing import Any

from mediaparser.models import (
    AudioInfo,
    FormatInfo,
    FrameInfo,
    MediaInfo,
    PacketInfo,
    StreamInfo,
    VideoInfo,
)


def to_float(value: Any) -> float:
    """Parse an ffprobe number, returning 0.0 when unavailable."""
    with contextlib.suppress(ValueError, TypeError):
        return float(value)
    return 0.0


def to_int(value: Any) -> int:
    """Parse an ffprobe integer, returning 0 when unavailable."""
    with contextlib.suppress(ValueError, TypeError):
        return int(value)
    return 0


def _tags(data: dict[str, Any]) -> dict[str, str]:
    return {str(k): str(v) for k, v in (data.get("tags") or {}).items()}


def parse_format(fmt: dict[str, Any]) -> FormatInfo:
    """Parse the ``format`` section."""
    return FormatInfo(
        format_name=fmt.get("format_name", ""),
        format_long_name=fmt.get("format_long_name", ""),
        duration=to_float(fmt.get("duration")),
        size=to_int(fmt.get("size")),
        bitrate=to_int(fmt.get("bit_rate")),
        probe_score=to_int(fmt.get("probe_score")),
        tags=_tags(fmt),
    )


def parse_video_stream(stream: dict[str, Any]) -> VideoInfo:
    """Parse a video entry of the ``streams`` section."""
    return VideoInfo(
        index=to_int(stream.get("index")),
        codec=stream.get("codec_name", ""),
        codec_long_name=stream.get("codec_long_name", ""),
        profile=stream.get("profile"),
        level=to_int(stream.get("level")),
        width=to_int(stream.get("width")),
        height=to_int(stream.get("height")),
        aspect_ratio=stream.get("display_aspect_ratio"),
        pixel_format=stream.get("pix_fmt"),
        frame_rate=stream.get("r_frame_rate"),
        avg_frame_rate=stream.get("avg_frame_rate"),
        bitrate=to_int(stream.get("bit_rate")),
        duration=to_float(stream.get("duration")),
        frame_count=to_int(stream.get("nb_frames")),
        color_space=stream.get("color_space"),
        color_primaries=stream.get("color_primaries"),
        color_transfer=stream.get("color_transfer"),
        has_b_frames=to_int(stream.get("has_b_frames")),
    )


def parse_audio_stream(stream: dict[str, Any]) -> AudioInfo:
    """Parse an audio entry of the ``streams`` section."""
    return AudioInfo(
        index=to_int(stream.get("index")),
        codec=stream.get("codec_name", ""),
        codec_long_name=stream.get("codec_long_name", ""),
        profile=stream.get("profile"),
        channels=to_int(stream.get("channels")),
        channel_layout=stream.get("channel_layout"),
        sample_rate=to_int(stream.get("sample_rate")),
        sample_format=stream.get("sample_fmt"),
        bitrate=to_int(stream.get("bit_rate")),
        duration=to_float(stream.get("duration")),
    )


def parse_stream_summary(stream: dict[str, Any]) -> StreamInfo:
    codec_type = stream.get("codec_type", "")
    return StreamInfo(
        index=to_int(stream.get("index")),
        type=codec_type,
        codec=stream.get("codec_name", ""),
        codec_type=codec_type,
        tags=_tags(stream),
    )


def parse_media_info(
    input_path: str,
    data: dict[str, Any],
    *,
    show_format: bool = True,
    show_video: bool = True,
    show_audio: bool = True,
    show_streams: bool = False,
) -> MediaInfo:
    """Build ``MediaInfo`` from ``-show_format -show_streams`` output.

    Only the first video and first audio stream are broken out.
    """
    info = MediaInfo(input=input_path)

    if show_format and data.get("format"):
        info.format = parse_format(data["format"])

    for stream in data.get("streams") or []:
        codec_type = stream.get("codec_type")
        if codec_type == "video" and show_video and info.video is None:
            info.video = parse_video_stream(stream)
        elif codec_type == "audio" and show_audio and info.audio is None:
            info.audio = parse_audio_stream(stream)

        if show_streams:
            info.streams.append(parse_stream_summary(stream))

    return info


def parse_packets(data: dict[str, Any], limit: int = 0) -> list[PacketInfo]:
    """Parse ``-show_packets`` output.

    Args:
        data: Decoded ffprobe JSON
        limit: Keep at most this many packets (0 keeps all)
    """
    raw_packets = data.get("packets") or []
    if limit > 0:
        raw_packets = raw_packets[:limit]

    return [
        PacketInfo(
            pts=to_float(p.get("pts_time")),
            dts=to_float(p.get("dts_time")),
            size=to_int(p.get("size")),
            stream_index=to_int(p.get("stream_index")),
            codec_type=p.get("codec_type"),
            duration=to_float(p.get("duration_time")),
            flags=p.get("flags"),
        )
        for p in raw_packets
    ]


def parse_frames(data: dict[str, Any], limit: int = 0) -> list[FrameInfo]:
    """Parse ``-show_frames`` output.

    Newer ffprobe builds report ``pkt_dts_time`` instead of ``dts_time``
    and drop ``coded_picture_number``; both spellings are accepted.

    Args:
        data: Decoded ffprobe JSON
        limit: Keep at most this many frames (0 keeps all)
    """
    raw_frames = data.get("frames") or []
    if limit > 0:
        raw_frames = raw_frames[:limit]

    frames = []
    for f in raw_frames:
        pts = f.get("pts_time", f.get("best_effort_timestamp_time"))
        dts = f.get("dts_time", f.get("pkt_dts_time"))
        frames.append(
            FrameInfo(
                media_type=f.get("media_type", ""),
                stream_index=to_int(f.get("stream_index")),
                key_frame=to_int(f.get("key_frame")) == 1,
                pts=to_float(pts),
                dts=to_float(dts),
                duration=to_float(f.get("duration_time", f.get("pkt_duration_time"))),
                size=to_int(f.get("pkt_size")),
                pict_type=f.get("pict_type"),
                coded_picture_number=f.get("coded_picture_number"),
                pix_fmt=f.get("pix_fmt"),
                width=f.get("width"),
                height=f.get("height"),
            )
        )
    return frames
