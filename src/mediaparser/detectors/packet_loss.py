"""Packet loss heuristic."""

from __future__ import annotations

from collections.abc import Sequence

from mediaparser.models import Category, PacketInfo, Problem, Severity

MAX_PACKET_GAP = 0.5


def detect_packet_loss(packets: Sequence[PacketInfo]) -> list[Problem]:
    """Flag PTS jumps between consecutive packets.

    Any jump larger than half a second is reported. This is advisory: a gap
    in timing does not confirm that packets were actually lost.
    """
    problems: list[Problem] = []

    for i in range(1, len(packets)):
        prev, cur = packets[i - 1], packets[i]
        gap = cur.pts - prev.pts
        if gap > MAX_PACKET_GAP:
            problems.append(
                Problem(
                    severity=Severity.WARNING,
                    category=Category.PACKET_LOSS,
                    code="POTENTIAL_PACKET_LOSS",
                    message=f"Potential packet loss detected at {cur.pts:.2f}s",
                    details=f"PTS jump of {gap:.3f}s detected",
                    suggestion="Check network conditions or source integrity",
                    timestamp=cur.pts,
                    stream_index=cur.stream_index,
                )
            )

    return problems
