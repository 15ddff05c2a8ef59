"""FFprobe process wrapper."""

from __future__ import annotations

import json
import shutil
import subprocess
from typing import Any

from mediaparser.models import FrameInfo, MediaInfo, PacketInfo
from mediaparser.probe.parsers import parse_frames, parse_media_info, parse_packets


class ProbeError(Exception):
    """ffprobe could not be run or its output could not be read."""


class FFprobe:
    """Run ffprobe and return its JSON report.

    Every call runs ``ffprobe -v quiet -print_format json`` plus the
    section flags for the requested data, bounded by ``timeout`` seconds.
    """

    def __init__(self, binary: str = "ffprobe", timeout: float = 30) -> None:
        self.binary = binary
        self.timeout = timeout

    def is_available(self) -> bool:
        """Check if the ffprobe binary can be found."""
        return shutil.which(self.binary) is not None

    def check_installed(self) -> None:
        """Raise ProbeError unless ``ffprobe -version`` runs."""
        try:
            subprocess.run(
                [self.binary, "-version"],
                capture_output=True,
                check=True,
                timeout=10,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ProbeError(f"ffprobe not found. Please install FFmpeg: {e}") from e

    def run(self, input_path: str, *sections: str) -> dict[str, Any]:
        """Run ffprobe with the given ``-show_*`` flags.

        Args:
            input_path: File path or stream URL
            sections: ffprobe flags such as "-show_packets"

        Returns:
            Decoded JSON report

        Raises:
            ProbeError: If ffprobe is missing, fails, times out or prints
                something that is not JSON
        """
        cmd = [self.binary, "-v", "quiet", "-print_format", "json", *sections, input_path]
        what = " ".join(s.removeprefix("-show_") for s in sections)
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except OSError as e:
            raise ProbeError(f"failed to run ffprobe: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ProbeError(f"ffprobe {what} timed out after {e.timeout}s") from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip() or f"exit status {result.returncode}"
            raise ProbeError(f"ffprobe {what} failed: {stderr}")

        try:
            data: dict[str, Any] = json.loads(result.stdout or "{}")
        except json.JSONDecodeError as e:
            raise ProbeError(f"failed to parse ffprobe {what} output: {e}") from e
        return data

    def probe(
        self,
        input_path: str,
        *,
        show_format: bool = True,
        show_video: bool = True,
        show_audio: bool = True,
        show_streams: bool = False,
    ) -> MediaInfo:
        """Probe container format and streams."""
        data = self.run(input_path, "-show_format", "-show_streams")
        return parse_media_info(
            input_path,
            data,
            show_format=show_format,
            show_video=show_video,
            show_audio=show_audio,
            show_streams=show_streams,
        )

    def probe_packets(self, input_path: str, limit: int = 0) -> list[PacketInfo]:
        """Probe every packet of the input, keeping at most ``limit``."""
        return parse_packets(self.run(input_path, "-show_packets"), limit=limit)

    def probe_frames(self, input_path: str, limit: int = 0) -> list[FrameInfo]:
        """Decode the input and return frame information, keeping at most ``limit``."""
        return parse_frames(self.run(input_path, "-show_frames"), limit=limit)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(binary={self.binary!r}, timeout={self.timeout})"
