"""Dependency checking utilities."""

import shutil

from mediaparser.config import get_config
from mediaparser.probe import FFprobe, ProbeError


def ffprobe_runs() -> bool:
    """Check that the configured ffprobe is on PATH and ``-version`` succeeds."""
    ffprobe = FFprobe(binary=get_config().probe.ffprobe_path)
    if not ffprobe.is_available():
        return False
    try:
        ffprobe.check_installed()
    except ProbeError:
        return False
    return True


def check_system_dependencies() -> dict[str, bool]:
    """Check availability of system dependencies (binaries).

    Returns:
        Dict mapping tool names to availability status.
    """
    return {
        "ffprobe": ffprobe_runs(),
        "ffmpeg": shutil.which("ffmpeg") is not None,
    }


def format_dependency_status() -> str:
    """Describe dependency status, one tool per line."""
    deps = check_system_dependencies()

    lines = ["media-parser dependency status:", "=" * 40, "", "System binaries:"]
    for name, available in sorted(deps.items()):
        icon = "✓" if available else "✗"
        lines.append(f"  {icon} {name}")

    if not deps["ffprobe"]:
        lines.append("")
        lines.append("⚠️  ffprobe is required. Install FFmpeg (e.g. brew install ffmpeg)")
        lines.append("   or set MEDIAPARSER_FFPROBE_PATH to its location.")
    return "\n".join(lines)
