"""Pytest configuration and fixtures."""

import subprocess

import pytest

from mediaparser.config import reset_config
from mediaparser.models import FrameInfo, PacketInfo


def command_exists(cmd: str) -> bool:
    """Check if a command exists in PATH."""
    try:
        subprocess.run(
            [cmd, "-version"],
            capture_output=True,
            timeout=5,
        )
        return True
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return False


@pytest.fixture
def has_ffprobe() -> bool:
    """Check if ffprobe is available."""
    return command_exists("ffprobe")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user config files and MEDIAPARSER_* variables out of tests."""
    import mediaparser.config as config

    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [tmp_path / "no-config.yaml"])
    for key in [
        "FFPROBE_PATH",
        "TIMEOUT",
        "MAX_PACKETS",
        "MAX_FRAMES",
        "TIMELINE_WINDOW",
        "EXPORT_DIR",
    ]:
        monkeypatch.delenv(f"MEDIAPARSER_{key}", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def make_packets():
    """Build packets from (pts, size) pairs."""

    def _make(pairs, stream_index=0):
        return [
            PacketInfo(pts=pts, dts=pts, size=size, stream_index=stream_index)
            for pts, size in pairs
        ]

    return _make


@pytest.fixture
def make_frames():
    """Build video frames from PTS values.

    ``keyframes`` lists the indexes flagged as keyframes; ``dts`` optionally
    gives a DTS per frame.
    """

    def _make(pts_values, keyframes=(), dts=None):
        frames = []
        for i, pts in enumerate(pts_values):
            frames.append(
                FrameInfo(
                    media_type="video",
                    key_frame=i in keyframes,
                    pts=pts,
                    dts=dts[i] if dts is not None else 0.0,
                    pict_type="I" if i in keyframes else "P",
                    size=1000,
                )
            )
        return frames

    return _make
