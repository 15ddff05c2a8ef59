"""Bitrate variation detection and bitrate timeline generation.

Both work on fixed-width time windows over packet PTS. A window closes when
a packet's PTS exceeds ``window_start + window_size``; the packet that
closes it opens the next window.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

from mediaparser.models import BitratePoint, Category, PacketInfo, Problem, Severity

# Window used by the variation detector; the timeline window is configurable
DETECTION_WINDOW = 1.0
DEFAULT_TIMELINE_WINDOW = 1.0

HIGH_VARIANCE_CV = 0.3
SPIKE_FACTOR = 2.5


def iter_windows(
    packets: Sequence[PacketInfo],
    window_size: float,
    *,
    anchor_to_packet: bool = False,
    include_partial: bool = False,
) -> Iterator[tuple[float, int]]:
    """Yield ``(window_start, total_bytes)`` for each non-empty window.

    Args:
        packets: Packets in probe order
        window_size: Window width in seconds
        anchor_to_packet: Start the next window at the PTS of the packet that
            crossed the boundary instead of advancing by one window width
        include_partial: Also yield the last, still open window
    """
    window_start = 0.0
    window_bytes = 0

    for packet in packets:
        if packet.pts > window_start + window_size:
            if window_bytes > 0:
                yield window_start, window_bytes
            window_start = packet.pts if anchor_to_packet else window_start + window_size
            window_bytes = packet.size
        else:
            window_bytes += packet.size

    if include_partial and window_bytes > 0:
        yield window_start, window_bytes


def window_bitrate(total_bytes: int, window_size: float) -> float:
    """Convert the bytes of one window to bits per second."""
    return total_bytes * 8 / window_size


def detect_bitrate_variations(packets: Sequence[PacketInfo]) -> list[Problem]:
    """Flag unstable bitrate and per-window bitrate spikes.

    Only closed windows are scored. Spike timestamps are approximate: the
    window index times the window width, not the PTS of a packet.
    """
    if len(packets) < 2:
        return []

    bitrates = [
        window_bitrate(total, DETECTION_WINDOW)
        for _, total in iter_windows(packets, DETECTION_WINDOW, anchor_to_packet=True)
    ]
    if not bitrates:
        return []

    mean = sum(bitrates) / len(bitrates)
    if mean <= 0:
        return []
    std_dev = math.sqrt(sum((b - mean) ** 2 for b in bitrates) / len(bitrates))

    problems: list[Problem] = []

    cv = std_dev / mean
    if cv > HIGH_VARIANCE_CV:
        problems.append(
            Problem(
                severity=Severity.WARNING,
                category=Category.BITRATE,
                code="BITRATE_HIGH_VARIANCE",
                message=f"High bitrate variation detected (CV: {cv:.2f})",
                details=(
                    f"Average: {mean / 1_000_000:.2f} Mbps, "
                    f"StdDev: {std_dev / 1_000_000:.2f} Mbps"
                ),
                suggestion=(
                    "Consider using constant bitrate encoding or adjusting rate control settings"
                ),
            )
        )

    for index, bitrate in enumerate(bitrates):
        if bitrate > mean * SPIKE_FACTOR:
            at = index * DETECTION_WINDOW
            problems.append(
                Problem(
                    severity=Severity.WARNING,
                    category=Category.BITRATE,
                    code="BITRATE_SPIKE",
                    message=f"Bitrate spike detected at ~{at:.2f}s",
                    details=(
                        f"Spike: {bitrate / 1_000_000:.2f} Mbps "
                        f"(avg: {mean / 1_000_000:.2f} Mbps)"
                    ),
                    suggestion="Review encoding settings or source content at this timestamp",
                    timestamp=at,
                )
            )

    return problems


def generate_bitrate_timeline(
    packets: Sequence[PacketInfo],
    window_size: float = DEFAULT_TIMELINE_WINDOW,
) -> list[BitratePoint]:
    """Build a bitrate-over-time series for export and plotting.

    Unlike the variation detector, window starts advance by exactly one
    width per boundary crossing and the final partial window is included.

    Args:
        packets: Packets in probe order
        window_size: Window width in seconds

    Returns:
        One point per non-empty window, tagged "total". Empty when there
        are no packets or the window size is not positive.
    """
    if not packets or window_size <= 0:
        return []

    return [
        BitratePoint(time=start, bitrate=window_bitrate(total, window_size), type="total")
        for start, total in iter_windows(packets, window_size, include_partial=True)
    ]
