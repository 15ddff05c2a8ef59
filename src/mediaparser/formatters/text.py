"""Plain text report formatter."""

from __future__ import annotations

from mediaparser.models import (
    AudioInfo,
    DetailedAnalysis,
    FormatInfo,
    MediaInfo,
    Problem,
    Severity,
    StreamInfo,
    VideoInfo,
)
from mediaparser.utils import format_bitrate, format_duration, format_size

MAX_TAGS_WIDTH = 50

SEVERITY_LABELS = {
    Severity.ERROR: "🔴 ERRORS:",
    Severity.CRITICAL: "🟠 CRITICAL:",
    Severity.WARNING: "🟡 WARNINGS:",
    Severity.INFO: "🔵 INFO:",
}

# Problem groups are listed most severe first
SEVERITY_HEADINGS = sorted(SEVERITY_LABELS.items(), key=lambda item: item[0].rank, reverse=True)


def _field(label: str, value: object, width: int = 18) -> str:
    return f"  {(label + ':').ljust(width)}{value}"


def _format_container(fmt: FormatInfo, verbose: bool) -> list[str]:
    lines = [_field("Format", fmt.format_name), _field("Long Name", fmt.format_long_name)]
    if fmt.duration > 0:
        lines.append(_field("Duration", format_duration(fmt.duration)))
    if fmt.size > 0:
        lines.append(_field("File Size", format_size(fmt.size)))
    if fmt.bitrate > 0:
        lines.append(_field("Overall Bitrate", format_bitrate(fmt.bitrate)))
    if verbose and fmt.probe_score > 0:
        lines.append(_field("Probe Score", fmt.probe_score))
    return lines


def _format_video(video: VideoInfo, verbose: bool) -> list[str]:
    lines = [
        _field("Stream Index", video.index),
        _field("Codec", f"{video.codec} ({video.codec_long_name})"),
    ]
    if video.profile:
        lines.append(_field("Profile", video.profile))
    lines.append(_field("Resolution", f"{video.width}x{video.height}"))
    aspect = video.aspect_ratio or video.computed_aspect_ratio
    if aspect:
        lines.append(_field("Aspect Ratio", aspect))
    if video.pixel_format:
        lines.append(_field("Pixel Format", video.pixel_format))
    if video.frame_rate:
        lines.append(_field("Frame Rate", f"{video.frame_rate} fps"))
    if video.avg_frame_rate and video.avg_frame_rate != video.frame_rate:
        lines.append(_field("Avg Frame Rate", f"{video.avg_frame_rate} fps"))
    if video.bitrate > 0:
        lines.append(_field("Bitrate", format_bitrate(video.bitrate)))
    if video.duration > 0:
        lines.append(_field("Duration", format_duration(video.duration)))
    if video.frame_count > 0:
        lines.append(_field("Total Frames", video.frame_count))
    if verbose:
        if video.color_space:
            lines.append(_field("Color Space", video.color_space))
        if video.color_primaries:
            lines.append(_field("Color Primaries", video.color_primaries))
        if video.color_transfer:
            lines.append(_field("Color Transfer", video.color_transfer))
        if video.has_b_frames > 0:
            lines.append(_field("Has B-Frames", video.has_b_frames))
    return lines


def _format_audio(audio: AudioInfo) -> list[str]:
    lines = [
        _field("Stream Index", audio.index),
        _field("Codec", f"{audio.codec} ({audio.codec_long_name})"),
    ]
    if audio.profile:
        lines.append(_field("Profile", audio.profile))
    lines.append(_field("Channels", audio.channels))
    if audio.channel_layout:
        lines.append(_field("Channel Layout", audio.channel_layout))
    lines.append(_field("Sample Rate", f"{audio.sample_rate} Hz"))
    if audio.sample_format:
        lines.append(_field("Sample Format", audio.sample_format))
    if audio.bitrate > 0:
        lines.append(_field("Bitrate", format_bitrate(audio.bitrate)))
    if audio.duration > 0:
        lines.append(_field("Duration", format_duration(audio.duration)))
    return lines


def _format_streams(streams: list[StreamInfo]) -> list[str]:
    rows = [("Index", "Type", "Codec", "Tags"), ("-----", "----", "-----", "----")]
    for stream in streams:
        tags = ", ".join(f"{k}={v}" for k, v in stream.tags.items())
        if len(tags) > MAX_TAGS_WIDTH:
            tags = tags[: MAX_TAGS_WIDTH - 3] + "..."
        rows.append((str(stream.index), stream.type, stream.codec, tags))

    widths = [max(len(row[col]) for row in rows) + 2 for col in range(3)]
    return [
        "  " + "".join(cell.ljust(w) for cell, w in zip(row[:3], widths)) + row[3]
        for row in rows
    ]


def format_text(info: MediaInfo, verbose: bool = False) -> str:
    """Format basic media information as a text report."""
    lines = []

    lines.append("=" * 80)
    lines.append("MEDIA ANALYSIS REPORT")
    lines.append(f"Analyzed at: {info.analyzed_at.isoformat(timespec='seconds')}")
    lines.append(f"Input: {info.input}")
    lines.append("=" * 80)

    if info.format:
        lines.append("")
        lines.append("CONTAINER FORMAT:")
        lines.append("-" * 40)
        lines.extend(_format_container(info.format, verbose))

    if info.video:
        lines.append("")
        lines.append("VIDEO STREAM:")
        lines.append("-" * 40)
        lines.extend(_format_video(info.video, verbose))

    if info.audio:
        lines.append("")
        lines.append("AUDIO STREAM:")
        lines.append("-" * 40)
        lines.extend(_format_audio(info.audio))

    if info.streams:
        lines.append("")
        lines.append("ALL STREAMS:")
        lines.append("-" * 40)
        lines.extend(_format_streams(info.streams))

    lines.append("=" * 80)
    return "\n".join(lines)


def format_problem(problem: Problem) -> str:
    """Format a single problem as an indented block."""
    lines = [f"  [{problem.code}] {problem.message}"]
    if problem.details:
        lines.append(f"    Details:       {problem.details}")
    if problem.suggestion:
        lines.append(f"    ✨ Suggestion: {problem.suggestion}")
    if problem.timestamp > 0:
        lines.append(f"    Timestamp:     {problem.timestamp:.2f}s")
    return "\n".join(lines)


def format_problems(problems: list[Problem], verbose: bool = False) -> str:
    """Format problems grouped by severity, most severe first.

    INFO problems are only listed in verbose mode but are always counted in
    the summary line.
    """
    lines = []
    counts = {}

    for severity, heading in SEVERITY_HEADINGS:
        group = [p for p in problems if p.severity == severity]
        counts[severity] = len(group)
        if not group or (severity == Severity.INFO and not verbose):
            continue
        lines.append("")
        lines.append(heading)
        for problem in group:
            lines.append(format_problem(problem))
            lines.append("")

    lines.append("")
    lines.append("-" * 40)
    lines.append(
        f"Summary: {counts[Severity.ERROR]} errors, {counts[Severity.CRITICAL]} critical, "
        f"{counts[Severity.WARNING]} warnings, {counts[Severity.INFO]} info"
    )
    return "\n".join(lines)


def format_detailed_text(
    analysis: DetailedAnalysis,
    verbose: bool = False,
    show_problems: bool = True,
) -> str:
    """Format media information followed by detected problems."""
    lines = [format_text(analysis.media_info, verbose=verbose)]

    if show_problems and analysis.problems:
        lines.append("")
        lines.append("DETECTED PROBLEMS:")
        lines.append("-" * 40)
        lines.append(format_problems(analysis.problems, verbose=verbose))

    return "\n".join(lines)
