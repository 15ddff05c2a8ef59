"""Problem detectors for packet, frame and stream data.

Every analyzer is a pure function returning a list of problems; the
``Detector`` class collects their results in call order.
"""

from .bitrate import (
    DEFAULT_TIMELINE_WINDOW,
    DETECTION_WINDOW,
    detect_bitrate_variations,
    generate_bitrate_timeline,
)
from .compatibility import COMPATIBILITY_RULES, CompatibilityRule, analyze_compatibility
from .detector import Detector
from .keyframes import detect_keyframe_issues
from .packet_loss import detect_packet_loss
from .timestamps import detect_timestamp_issues

__all__ = [
    "Detector",
    # Analyzers
    "detect_bitrate_variations",
    "detect_keyframe_issues",
    "detect_timestamp_issues",
    "detect_packet_loss",
    "analyze_compatibility",
    # Timeline
    "generate_bitrate_timeline",
    "DEFAULT_TIMELINE_WINDOW",
    "DETECTION_WINDOW",
    # Compatibility rule table
    "COMPATIBILITY_RULES",
    "CompatibilityRule",
]
