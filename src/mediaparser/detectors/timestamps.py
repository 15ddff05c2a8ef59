"""PTS/DTS ordering checks."""

from __future__ import annotations

from collections.abc import Sequence

from mediaparser.models import Category, FrameInfo, Problem, Severity

MAX_PTS_GAP = 1.0


def detect_timestamp_issues(frames: Sequence[FrameInfo]) -> list[Problem]:
    """Check each adjacent pair of frames for timestamp problems.

    All checks run independently, so one pair can yield several problems.
    DTS checks only run when both frames carry a positive DTS.
    """
    problems: list[Problem] = []

    for i in range(1, len(frames)):
        prev, cur = frames[i - 1], frames[i]

        if cur.pts < prev.pts:
            problems.append(
                Problem(
                    severity=Severity.ERROR,
                    category=Category.TIMESTAMP,
                    code="NON_MONOTONIC_PTS",
                    message=f"Non-monotonic PTS at frame {i}",
                    details=f"Current: {cur.pts:.3f}, Previous: {prev.pts:.3f}",
                    suggestion="Check source file or encoding process for timestamp issues",
                    timestamp=cur.pts,
                    stream_index=cur.stream_index,
                )
            )

        gap = cur.pts - prev.pts
        if gap > MAX_PTS_GAP:
            problems.append(
                Problem(
                    severity=Severity.WARNING,
                    category=Category.TIMESTAMP,
                    code="LARGE_PTS_GAP",
                    message=f"Large PTS gap at frame {i}",
                    details=f"Gap: {gap:.3f}s",
                    suggestion="Check for missing frames or timestamp discontinuities",
                    timestamp=cur.pts,
                    stream_index=cur.stream_index,
                )
            )

        if cur.dts > 0 and prev.dts > 0:
            if cur.dts < prev.dts:
                problems.append(
                    Problem(
                        severity=Severity.ERROR,
                        category=Category.TIMESTAMP,
                        code="NON_MONOTONIC_DTS",
                        message=f"Non-monotonic DTS at frame {i}",
                        details=f"Current: {cur.dts:.3f}, Previous: {prev.dts:.3f}",
                        suggestion="DTS must be monotonically increasing",
                        timestamp=cur.pts,
                        stream_index=cur.stream_index,
                    )
                )

            if cur.pts < cur.dts:
                problems.append(
                    Problem(
                        severity=Severity.ERROR,
                        category=Category.TIMESTAMP,
                        code="PTS_BEFORE_DTS",
                        message=f"PTS before DTS at frame {i}",
                        details=f"PTS: {cur.pts:.3f}, DTS: {cur.dts:.3f}",
                        suggestion="PTS must be greater than or equal to DTS",
                        timestamp=cur.pts,
                        stream_index=cur.stream_index,
                    )
                )

    return problems
