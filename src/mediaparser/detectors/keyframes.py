"""Keyframe distribution checks."""

from __future__ import annotations

from collections.abc import Sequence

from mediaparser.models import Category, FrameInfo, Problem, Severity

# Streaming players expect a keyframe every few seconds
MAX_MEAN_KEYFRAME_INTERVAL = 10.0


def keyframe_intervals(frames: Sequence[FrameInfo]) -> list[float]:
    """Return PTS deltas between consecutive keyframes."""
    keyframes = [f for f in frames if f.key_frame]
    return [cur.pts - prev.pts for prev, cur in zip(keyframes, keyframes[1:])]


def detect_keyframe_issues(frames: Sequence[FrameInfo]) -> list[Problem]:
    """Check that keyframes exist and are frequent enough for streaming.

    Intervals are not checked for regularity; scene-cut keyframes make
    uneven GOPs normal.
    """
    if not frames:
        return []

    intervals = keyframe_intervals(frames)
    if not intervals:
        return [
            Problem(
                severity=Severity.ERROR,
                category=Category.KEYFRAME,
                code="NO_KEYFRAMES",
                message="No or insufficient keyframes detected",
                suggestion="Check encoder settings for keyframe interval",
            )
        ]

    mean_interval = sum(intervals) / len(intervals)
    if mean_interval > MAX_MEAN_KEYFRAME_INTERVAL:
        return [
            Problem(
                severity=Severity.WARNING,
                category=Category.KEYFRAME,
                code="LARGE_KEYFRAME_INTERVAL",
                message=f"Large keyframe interval: {mean_interval:.2f}s",
                suggestion="For streaming, consider reducing keyframe interval to 2-4 seconds",
            )
        ]
    return []
