"""ffprobe access: process invocation and JSON parsing."""

from mediaparser.probe.ffprobe import FFprobe, ProbeError
from mediaparser.probe.parsers import (
    parse_format,
    parse_frames,
    parse_media_info,
    parse_packets,
    to_float,
    to_int,
)

__all__ = [
    "FFprobe",
    "ProbeError",
    "parse_media_info",
    "parse_format",
    "parse_packets",
    "parse_frames",
    "to_float",
    "to_int",
]
