"""Utility functions for media-parser."""

from .deps import check_system_dependencies, format_dependency_status
from .formatting import format_bitrate, format_duration, format_size

__all__ = [
    # Formatting
    "format_size",
    "format_bitrate",
    "format_duration",
    # Dependency checking
    "check_system_dependencies",
    "format_dependency_status",
]
