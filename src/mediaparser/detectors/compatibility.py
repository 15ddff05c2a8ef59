"""Playback compatibility rules.

Rules are evaluated in declaration order and independently of each other.
To add a rule, append a ``CompatibilityRule`` to ``COMPATIBILITY_RULES``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from mediaparser.models import Category, Problem, Severity


@dataclass(frozen=True)
class StreamProfile:
    """Normalized codec/container description checked by the rules.

    String fields are lower-cased; ``level`` is encoded as major*10+minor.
    """

    codec: str
    profile: str
    level: int
    container: str

    @classmethod
    def create(
        cls,
        codec: str | None,
        profile: str | None,
        level: int | None,
        container: str | None,
    ) -> StreamProfile:
        return cls(
            codec=(codec or "").lower(),
            profile=(profile or "").lower(),
            level=level or 0,
            container=(container or "").lower(),
        )


@dataclass(frozen=True)
class CompatibilityRule:
    """A condition and the problem it produces."""

    code: str
    severity: Severity
    applies: Callable[[StreamProfile], bool]
    message: Callable[[StreamProfile], str]
    suggestion: str

    def evaluate(self, stream: StreamProfile) -> Problem | None:
        if not self.applies(stream):
            return None
        return Problem(
            severity=self.severity,
            category=Category.COMPATIBILITY,
            code=self.code,
            message=self.message(stream),
            suggestion=self.suggestion,
        )


def format_level(level: int) -> str:
    """Render an encoded level, e.g. 41 -> "4.1"."""
    return f"{level // 10}.{level % 10}"


COMPATIBILITY_RULES: list[CompatibilityRule] = [
    CompatibilityRule(
        code="H264_COMPATIBILITY",
        severity=Severity.WARNING,
        applies=lambda s: s.codec == "h264" and s.profile == "high" and s.level > 41,
        message=lambda s: (
            f"H.264 High Profile Level {format_level(s.level)} may have limited compatibility"
        ),
        suggestion="Consider using Main Profile Level 4.1 or lower for broader compatibility",
    ),
    CompatibilityRule(
        code="HEVC_SUPPORT",
        severity=Severity.INFO,
        applies=lambda s: s.codec in ("hevc", "h265"),
        message=lambda s: "HEVC/H.265 codec requires modern devices for playback",
        suggestion="Ensure target devices support HEVC or consider providing H.264 fallback",
    ),
    CompatibilityRule(
        code="CONTAINER_COMPATIBILITY",
        severity=Severity.INFO,
        applies=lambda s: s.container in ("mkv", "matroska"),
        message=lambda s: "MKV container may have limited browser support",
        suggestion="Consider using MP4 container for web compatibility",
    ),
]


def analyze_compatibility(
    codec: str | None,
    profile: str | None,
    level: int | None,
    container: str | None,
    rules: list[CompatibilityRule] | None = None,
) -> list[Problem]:
    """Evaluate compatibility rules for a video stream in a container.

    Args:
        codec: Codec name, e.g. "h264"
        profile: Codec profile, e.g. "High"
        level: Codec level as major*10+minor, e.g. 41
        container: Container name, e.g. "mp4" or "matroska"
        rules: Rule table to use instead of ``COMPATIBILITY_RULES``

    Returns:
        One problem per matching rule, in rule order.
    """
    stream = StreamProfile.create(codec, profile, level, container)
    problems = []
    for rule in COMPATIBILITY_RULES if rules is None else rules:
        problem = rule.evaluate(stream)
        if problem is not None:
            problems.append(problem)
    return problems
