"""Problem detector that collects the output of every analyzer."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from mediaparser.models import FrameInfo, PacketInfo, Problem

from .bitrate import detect_bitrate_variations
from .compatibility import analyze_compatibility
from .keyframes import detect_keyframe_issues
from .packet_loss import detect_packet_loss
from .timestamps import detect_timestamp_issues


class Detector:
    """Append-only collection of problems for a single analysis run.

    Each ``detect_*`` method runs one independent analyzer and appends its
    problems in the order the analyzer produced them. Methods may be called
    in any order and any subset; the collected order follows the calls.
    Create a new detector for every input.
    """

    def __init__(self) -> None:
        self._problems: list[Problem] = []

    @property
    def problems(self) -> tuple[Problem, ...]:
        """Snapshot of all problems collected so far."""
        return tuple(self._problems)

    def __len__(self) -> int:
        return len(self._problems)

    def add_problems(self, problems: Iterable[Problem]) -> int:
        """Append a batch of problems computed elsewhere.

        Returns:
            Number of problems added
        """
        batch = list(problems)
        self._problems.extend(batch)
        return len(batch)

    def detect_bitrate_variations(self, packets: Sequence[PacketInfo]) -> int:
        return self.add_problems(detect_bitrate_variations(packets))

    def detect_keyframe_issues(self, frames: Sequence[FrameInfo]) -> int:
        return self.add_problems(detect_keyframe_issues(frames))

    def detect_timestamp_issues(self, frames: Sequence[FrameInfo]) -> int:
        return self.add_problems(detect_timestamp_issues(frames))

    def detect_packet_loss(self, packets: Sequence[PacketInfo]) -> int:
        return self.add_problems(detect_packet_loss(packets))

    def analyze_compatibility(
        self,
        codec: str | None,
        profile: str | None,
        level: int | None,
        container: str | None,
    ) -> int:
        return self.add_problems(analyze_compatibility(codec, profile, level, container))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(problems={len(self._problems)})"
