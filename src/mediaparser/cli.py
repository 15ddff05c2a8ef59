"""
Command-line interface for media-parser.

Usage:
  media-parser parse video.mp4                      # Container/stream info
  media-parser parse --show-all video.mp4 -o json   # Everything, as JSON
  media-parser parse --problems video.mp4           # Detect problems too
  media-parser export video.mp4 -d ./analysis       # Export JSON files
  media-parser export stream.m3u8 --export-all      # Export everything
  media-parser status                               # ffprobe availability
"""

from __future__ import annotations

import argparse
import sys

from mediaparser._version import __version__
from mediaparser.analyze import Analyzer, AnalyzerOptions
from mediaparser.config import get_config
from mediaparser.export import ExportOptions, export_analysis
from mediaparser.formatters import OutputFormat, render
from mediaparser.probe import ProbeError
from mediaparser.utils import format_dependency_status


def build_parser() -> argparse.ArgumentParser:
    config = get_config()

    parser = argparse.ArgumentParser(
        prog="media-parser",
        description="Analyze video files and streams with ffprobe and detect common problems.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Supported inputs:
  Local video files (mp4, mkv, avi, mov, ...)
  HTTP/HTTPS streams (HLS, DASH, direct media URLs)
  RTMP/RTSP streams

Examples:
  media-parser parse video.mp4
  media-parser parse https://example.com/stream.m3u8
  media-parser parse --show-all video.mp4 -o json
  media-parser export video.mp4 -d ./debug --export-frames --max-frames 1000
        """,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    common.add_argument(
        "-o",
        "--output",
        default="text",
        help="Output format (text, json, yaml)",
    )
    common.add_argument(
        "--timeout",
        type=int,
        default=config.probe.timeout_seconds,
        help="Analysis timeout in seconds (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    parse_cmd = subparsers.add_parser(
        "parse",
        parents=[common],
        help="Parse and analyze a video file or stream",
    )
    parse_cmd.add_argument("input", help="File path or stream URL")
    parse_cmd.add_argument(
        "--show-video",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show video stream information",
    )
    parse_cmd.add_argument(
        "--show-audio",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show audio stream information",
    )
    parse_cmd.add_argument(
        "--show-format",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Show container format information",
    )
    parse_cmd.add_argument("--show-streams", action="store_true", help="Show all stream details")
    parse_cmd.add_argument("--show-all", action="store_true", help="Show all available information")
    parse_cmd.add_argument(
        "--problems",
        action="store_true",
        help="Analyze packets and frames and report detected problems",
    )

    export_cmd = subparsers.add_parser(
        "export",
        parents=[common],
        help="Export detailed media analysis to JSON files",
        description=(
            "Creates media_info.json, problems.json, packets.json, frames.json, "
            "frame_visualization.json, bitrate_timeline.json and summary.json "
            "in a timestamped subdirectory."
        ),
    )
    export_cmd.add_argument("input", help="File path or stream URL")
    export_cmd.add_argument(
        "-d",
        "--dir",
        default=config.export.directory,
        help="Directory to save analysis files (default: %(default)s)",
    )
    export_cmd.add_argument("--export-packets", action="store_true", help="Export packets")
    export_cmd.add_argument("--export-frames", action="store_true", help="Export frames")
    export_cmd.add_argument(
        "--no-export-problems",
        dest="export_problems",
        action="store_false",
        help="Do not export detected problems",
    )
    export_cmd.add_argument("--export-bitrate", action="store_true", help="Export bitrate timeline")
    export_cmd.add_argument("--export-all", action="store_true", help="Export everything")
    export_cmd.add_argument(
        "--max-packets",
        type=int,
        default=config.analysis.max_packets,
        help="Maximum number of packets to analyze (default: %(default)s)",
    )
    export_cmd.add_argument(
        "--max-frames",
        type=int,
        default=config.analysis.max_frames,
        help="Maximum number of frames to analyze (default: %(default)s)",
    )

    subparsers.add_parser("status", help="Show ffprobe availability")

    return parser


def run_parse(args: argparse.Namespace) -> int:
    """Print media information, and problems when requested."""
    if args.show_all:
        args.show_video = args.show_audio = args.show_format = args.show_streams = True

    if args.verbose:
        print(f"Analyzing: {args.input}", file=sys.stderr)

    options = AnalyzerOptions.from_config(
        timeout=args.timeout,
        show_video=args.show_video,
        show_audio=args.show_audio,
        show_format=args.show_format,
        show_streams=args.show_streams,
        verbose=args.verbose,
        analyze_packets=args.problems,
        analyze_frames=args.problems,
    )
    analyzer = Analyzer(options)

    if args.problems:
        result = analyzer.analyze_with_details(args.input)
        # Problem reports carry the whole analysis; skip raw packet/frame dumps
        result.packets = []
        result.frames = []
    else:
        result = analyzer.analyze(args.input)

    print(render(result, OutputFormat.parse(args.output), verbose=args.verbose))
    return 0


def run_export(args: argparse.Namespace) -> int:
    """Analyze the input and write the export files."""
    if args.export_all:
        export_options = ExportOptions.all()
    else:
        export_options = ExportOptions(
            packets=args.export_packets,
            frames=args.export_frames,
            problems=args.export_problems,
            bitrate=args.export_bitrate,
        )

    if args.verbose:
        print(f"Exporting analysis to: {args.dir}", file=sys.stderr)

    options = AnalyzerOptions.from_config(
        timeout=args.timeout,
        show_streams=True,
        verbose=args.verbose,
        analyze_packets=export_options.packets or export_options.bitrate,
        analyze_frames=export_options.frames,
        max_packets=args.max_packets,
        max_frames=args.max_frames,
    )
    result = Analyzer(options).analyze_with_details(args.input)

    export = export_analysis(result, args.dir, export_options)
    for path in export.files:
        print(f"✓ Exported {path.name} to {path}")

    print()
    print(f"Analysis exported to: {export.directory}")
    print(f"Total files created: {sum(export.summary['files_created'].values())}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for media-parser CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "status":
        print(format_dependency_status())
        return 0

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == "parse":
            return run_parse(args)
        return run_export(args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
    except ProbeError as e:
        print(f"Error: failed to analyze media: {e}", file=sys.stderr)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
