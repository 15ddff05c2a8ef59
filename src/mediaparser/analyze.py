"""Core analysis functions."""

from __future__ import annotations

import os
import sys
import warnings
from collections.abc import Sequence
from dataclasses import dataclass

from mediaparser.config import get_config
from mediaparser.detectors import Detector, generate_bitrate_timeline
from mediaparser.models import DetailedAnalysis, FrameInfo, MediaInfo, PacketInfo, Problem
from mediaparser.probe import FFprobe, ProbeError


@dataclass
class AnalyzerOptions:
    """What to probe and how much of it to keep."""

    timeout: int = 30
    show_video: bool = True
    show_audio: bool = True
    show_format: bool = True
    show_streams: bool = False
    verbose: bool = False
    analyze_packets: bool = False
    analyze_frames: bool = False
    max_packets: int = 10000
    max_frames: int = 5000
    timeline_window: float = 1.0

    @classmethod
    def from_config(cls, **overrides: object) -> AnalyzerOptions:
        """Build options from the global configuration, then apply overrides."""
        config = get_config()
        options = cls(
            timeout=config.probe.timeout_seconds,
            max_packets=config.analysis.max_packets,
            max_frames=config.analysis.max_frames,
            timeline_window=config.analysis.timeline_window,
        )
        for key, value in overrides.items():
            setattr(options, key, value)
        return options


def is_stream_url(input_path: str) -> bool:
    """Check if the input is a URL (http, rtmp, rtsp, ...) rather than a path."""
    return "://" in input_path


def detect_problems(
    media_info: MediaInfo | None = None,
    packets: Sequence[PacketInfo] = (),
    frames: Sequence[FrameInfo] = (),
) -> list[Problem]:
    """Run every applicable analyzer and return problems in a fixed order.

    Packet analyzers run first (bitrate, packet loss), then frame analyzers
    (keyframes, timestamps), then compatibility when a video stream is known.
    """
    detector = Detector()

    if packets:
        detector.detect_bitrate_variations(packets)
        detector.detect_packet_loss(packets)

    if frames:
        detector.detect_keyframe_issues(frames)
        detector.detect_timestamp_issues(frames)

    if media_info is not None and media_info.video is not None:
        video = media_info.video
        container = media_info.format.primary_name if media_info.format else ""
        detector.analyze_compatibility(video.codec, video.profile, video.level, container)

    return list(detector.problems)


class Analyzer:
    """Probe an input with ffprobe and detect problems in it."""

    def __init__(
        self,
        options: AnalyzerOptions | None = None,
        ffprobe: FFprobe | None = None,
    ) -> None:
        self.options = options or AnalyzerOptions.from_config()
        self.ffprobe = ffprobe or FFprobe(
            binary=get_config().probe.ffprobe_path,
            timeout=self.options.timeout,
        )

    def _log(self, message: str) -> None:
        if self.options.verbose:
            print(message, file=sys.stderr)

    def analyze(self, input_path: str) -> MediaInfo:
        """Probe container and stream information.

        Args:
            input_path: Local file path or stream URL

        Returns:
            MediaInfo for the input

        Raises:
            FileNotFoundError: If a local input does not exist
            ProbeError: If ffprobe fails
        """
        if not is_stream_url(input_path) and not os.path.exists(input_path):
            raise FileNotFoundError(f"File not found: {input_path}")

        return self.ffprobe.probe(
            input_path,
            show_format=self.options.show_format,
            show_video=self.options.show_video,
            show_audio=self.options.show_audio,
            show_streams=self.options.show_streams,
        )

    def analyze_with_details(self, input_path: str) -> DetailedAnalysis:
        """Probe the input including packets and frames, and detect problems.

        Packet and frame probing are optional; if either fails the failure
        is reported as a warning and analysis continues without that data.
        """
        media_info = self.analyze(input_path)
        result = DetailedAnalysis(media_info=media_info)

        if self.options.analyze_packets:
            self._log("Analyzing packets...")
            try:
                result.packets = self.ffprobe.probe_packets(
                    input_path, limit=self.options.max_packets
                )
            except ProbeError as e:
                warnings.warn(f"Failed to analyze packets: {e}", stacklevel=2)

        if self.options.analyze_frames:
            self._log("Analyzing frames...")
            try:
                result.frames = self.ffprobe.probe_frames(
                    input_path, limit=self.options.max_frames
                )
            except ProbeError as e:
                warnings.warn(f"Failed to analyze frames: {e}", stacklevel=2)

        if result.packets:
            result.bitrate_timeline = generate_bitrate_timeline(
                result.packets, self.options.timeline_window
            )

        result.problems = detect_problems(media_info, result.packets, result.frames)
        return result


def analyze_file(
    path: str,
    detailed: bool = False,
    **options: object,
) -> MediaInfo | DetailedAnalysis:
    """Analyze a media file or stream URL.

    Args:
        path: Local file path or stream URL
        detailed: Also probe packets and frames and detect problems
        **options: ``AnalyzerOptions`` fields overriding the configuration

    Returns:
        MediaInfo, or DetailedAnalysis when ``detailed`` is set
    """
    if detailed:
        options.setdefault("analyze_packets", True)
        options.setdefault("analyze_frames", True)
    analyzer = Analyzer(AnalyzerOptions.from_config(**options))
    if detailed:
        return analyzer.analyze_with_details(path)
    return analyzer.analyze(path)
