"""Tests for the command-line interface."""

import json
import subprocess

import pytest

import mediaparser.cli as cli
import mediaparser.config as config
from mediaparser import __version__
from mediaparser.analyze import detect_problems
from mediaparser.detectors import generate_bitrate_timeline
from mediaparser.models import (
    DetailedAnalysis,
    FormatInfo,
    MediaInfo,
    PacketInfo,
    VideoInfo,
)
from mediaparser.probe import ProbeError


class FakeAnalyzer:
    """Analyzer replacement recording the options it was built with."""

    instances = []
    error = None

    def __init__(self, options):
        self.options = options
        FakeAnalyzer.instances.append(self)

    def _media_info(self, input_path):
        if FakeAnalyzer.error is not None:
            raise FakeAnalyzer.error
        return MediaInfo(
            input=input_path,
            format=FormatInfo(format_name="matroska,webm"),
            video=VideoInfo(codec="hevc", width=1920, height=1080),
        )

    def analyze(self, input_path):
        return self._media_info(input_path)

    def analyze_with_details(self, input_path):
        info = self._media_info(input_path)
        packets = [PacketInfo(pts=0.0, size=100), PacketInfo(pts=1.5, size=100)]
        return DetailedAnalysis(
            media_info=info,
            packets=packets,
            bitrate_timeline=generate_bitrate_timeline(packets),
            problems=detect_problems(info, packets),
        )


@pytest.fixture(autouse=True)
def fake_analyzer(monkeypatch):
    FakeAnalyzer.instances = []
    FakeAnalyzer.error = None
    monkeypatch.setattr(cli, "Analyzer", FakeAnalyzer)
    return FakeAnalyzer


def test_no_command(capsys):
    assert cli.main([]) == 1
    assert "usage: media-parser" in capsys.readouterr().out


def test_version(capsys):
    """Test that version is defined, follows semver and is printed."""
    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)

    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_status(capsys, monkeypatch):
    monkeypatch.setattr("shutil.which", lambda name: None)

    assert cli.main(["status"]) == 0

    output = capsys.readouterr().out
    assert "✗ ffprobe" in output
    assert "ffprobe is required" in output


def test_parse_text(capsys):
    assert cli.main(["parse", "clip.mkv"]) == 0

    output = capsys.readouterr().out
    assert "MEDIA ANALYSIS REPORT" in output
    assert "1920x1080" in output


def test_parse_json(capsys, fake_analyzer):
    assert cli.main(["parse", "clip.mkv", "-o", "json", "--no-show-audio"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["video"]["codec"] == "hevc"
    options = fake_analyzer.instances[0].options
    assert options.show_audio is False
    assert options.analyze_packets is False


def test_parse_show_all(fake_analyzer):
    cli.main(["parse", "--show-all", "--no-show-video", "clip.mkv"])

    options = fake_analyzer.instances[0].options
    assert options.show_video is True
    assert options.show_streams is True


def test_parse_problems(capsys, fake_analyzer):
    assert cli.main(["parse", "--problems", "-v", "-o", "json", "clip.mkv"]) == 0

    captured = capsys.readouterr()
    data = json.loads(captured.out)
    assert [p["code"] for p in data["problems"]] == [
        "POTENTIAL_PACKET_LOSS",
        "HEVC_SUPPORT",
        "CONTAINER_COMPATIBILITY",
    ]
    assert data["packets"] == []
    assert "Analyzing: clip.mkv" in captured.err
    assert fake_analyzer.instances[0].options.analyze_frames is True


def test_parse_problems_text(capsys):
    cli.main(["parse", "--problems", "clip.mkv"])

    output = capsys.readouterr().out
    assert "DETECTED PROBLEMS:" in output
    assert "Summary: 0 errors, 0 critical, 1 warnings, 2 info" in output


def test_timeout_option(fake_analyzer):
    cli.main(["parse", "--timeout", "5", "clip.mkv"])
    assert fake_analyzer.instances[0].options.timeout == 5


def test_missing_file_error(capsys, fake_analyzer):
    fake_analyzer.error = FileNotFoundError("File not found: missing.mp4")

    assert cli.main(["parse", "missing.mp4"]) == 1
    assert "Error: File not found: missing.mp4" in capsys.readouterr().err


def test_probe_error(capsys, fake_analyzer):
    fake_analyzer.error = ProbeError("ffprobe format streams failed: Invalid data")

    assert cli.main(["parse", "broken.mp4"]) == 1
    assert "Error: failed to analyze media: " in capsys.readouterr().err


def test_export(tmp_path, capsys, fake_analyzer):
    assert cli.main(["export", "clip.mkv", "-d", str(tmp_path), "--export-bitrate"]) == 0

    output = capsys.readouterr().out
    assert "✓ Exported bitrate_timeline.json" in output
    assert "Total files created: 3" in output

    (export_dir,) = tmp_path.iterdir()
    assert export_dir.name.startswith("analysis_")
    assert (export_dir / "bitrate_timeline.json").exists()

    options = fake_analyzer.instances[0].options
    assert options.analyze_packets is True
    assert options.analyze_frames is False
    assert options.show_streams is True


def test_export_limits(tmp_path, fake_analyzer):
    cli.main(
        [
            "export", "clip.mkv", "-d", str(tmp_path), "--export-all",
            "--max-packets", "20", "--max-frames", "10",
        ]
    )

    options = fake_analyzer.instances[0].options
    assert options.analyze_frames is True
    assert options.max_packets == 20
    assert options.max_frames == 10


def test_export_default_dir_from_config(monkeypatch, tmp_path, fake_analyzer):
    from mediaparser.config import reset_config

    monkeypatch.setenv("MEDIAPARSER_EXPORT_DIR", str(tmp_path / "exports"))
    reset_config()

    assert cli.main(["export", "clip.mkv", "--no-export-problems"]) == 0
    assert (tmp_path / "exports").is_dir()


def test_status_ffprobe_not_runnable(capsys, monkeypatch):
    """Test that an ffprobe on PATH that fails to run is reported missing."""

    def fake_run(cmd, **kwargs):
        raise PermissionError(13, "Permission denied", cmd[0])

    monkeypatch.setattr("shutil.which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(subprocess, "run", fake_run)

    assert cli.main(["status"]) == 0

    output = capsys.readouterr().out
    assert "✗ ffprobe" in output
    assert "✓ ffmpeg" in output


def test_invalid_config_file_does_not_crash(tmp_path, monkeypatch, capsys):
    """Test that a bad config value falls back to defaults before parsing arguments."""
    path = tmp_path / "config.yaml"
    path.write_text("probe:\n  timeout_seconds: null\nexport: []\n")
    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [path])
    config.reset_config()

    with pytest.warns(UserWarning, match="Ignoring config section 'export'"):
        assert cli.main(["parse", "clip.mkv"]) == 0

    assert "MEDIA ANALYSIS REPORT" in capsys.readouterr().out
