"""media-parser - media file and stream analysis.

Probe media with ffprobe, detect bitrate, keyframe, timestamp, packet-loss
and compatibility problems, and render or export the results.

Usage:
    from mediaparser import analyze_file

    # Container and stream information
    info = analyze_file("video.mp4")
    print(info.video.codec, info.video.resolution)

    # Packets, frames and detected problems
    analysis = analyze_file("video.mp4", detailed=True)
    for problem in analysis.problems:
        print(problem.severity.value, problem.code, problem.message)

    # Run the detectors on data you already have
    from mediaparser import Detector
    detector = Detector()
    detector.detect_timestamp_issues(frames)
    problems = detector.problems
"""

from mediaparser._version import __version__
from mediaparser.analyze import Analyzer, AnalyzerOptions, analyze_file, detect_problems
from mediaparser.detectors import (
    Detector,
    analyze_compatibility,
    detect_bitrate_variations,
    detect_keyframe_issues,
    detect_packet_loss,
    detect_timestamp_issues,
    generate_bitrate_timeline,
)
from mediaparser.export import ExportOptions, export_analysis
from mediaparser.formatters import (
    OutputFormat,
    format_detailed_text,
    format_json,
    format_text,
    format_yaml,
    render,
    to_dict,
)
from mediaparser.models import (
    BitratePoint,
    Category,
    DetailedAnalysis,
    FrameInfo,
    MediaInfo,
    PacketInfo,
    Problem,
    Severity,
)
from mediaparser.probe import FFprobe, ProbeError

__all__ = [
    # Version
    "__version__",
    # Main functions
    "analyze_file",
    "detect_problems",
    "Analyzer",
    "AnalyzerOptions",
    # Detection
    "Detector",
    "detect_bitrate_variations",
    "detect_keyframe_issues",
    "detect_timestamp_issues",
    "detect_packet_loss",
    "analyze_compatibility",
    "generate_bitrate_timeline",
    # Models
    "Problem",
    "Severity",
    "Category",
    "PacketInfo",
    "FrameInfo",
    "BitratePoint",
    "MediaInfo",
    "DetailedAnalysis",
    # Probe
    "FFprobe",
    "ProbeError",
    # Formatters
    "OutputFormat",
    "render",
    "format_text",
    "format_detailed_text",
    "format_json",
    "format_yaml",
    "to_dict",
    # Export
    "ExportOptions",
    "export_analysis",
]
