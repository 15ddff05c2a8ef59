"""Tests for exporting an analysis to JSON files."""

import json
from datetime import datetime

import pytest

from mediaparser.export import ExportOptions, export_analysis
from mediaparser.models import (
    BitratePoint,
    Category,
    DetailedAnalysis,
    MediaInfo,
    Problem,
    Severity,
)

NOW = datetime(2024, 5, 1, 12, 30, 45)


@pytest.fixture
def analysis(make_packets, make_frames):
    return DetailedAnalysis(
        media_info=MediaInfo(input="clip.mp4"),
        problems=[
            Problem(
                severity=Severity.WARNING,
                category=Category.PACKET_LOSS,
                code="POTENTIAL_PACKET_LOSS",
                message="Potential packet loss detected at 2.00s",
                timestamp=2.0,
            )
        ],
        packets=make_packets([(0.0, 100), (2.0, 100)]),
        frames=make_frames([0.0, 0.5, 1.0], keyframes={0}),
        bitrate_timeline=[BitratePoint(time=0.0, bitrate=800.0)],
    )


def _load(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def test_directory_name(tmp_path, analysis):
    export = export_analysis(analysis, tmp_path / "out", now=NOW)

    assert export.directory == tmp_path / "out" / "analysis_20240501_123045"
    assert export.directory.is_dir()


def test_default_options(tmp_path, analysis):
    """Test that problems are exported by default, raw data is not."""
    export = export_analysis(analysis, tmp_path, now=NOW)

    assert [p.name for p in export.files] == [
        "media_info.json",
        "problems.json",
        "summary.json",
    ]
    problems = _load(export.directory / "problems.json")
    assert problems == [
        {
            "severity": "WARNING",
            "category": "PACKET_LOSS",
            "code": "POTENTIAL_PACKET_LOSS",
            "message": "Potential packet loss detected at 2.00s",
            "timestamp": 2.0,
        }
    ]


def test_export_all(tmp_path, analysis):
    export = export_analysis(analysis, tmp_path, ExportOptions.all(), now=NOW)

    assert sorted(p.name for p in export.files) == [
        "bitrate_timeline.json",
        "frame_visualization.json",
        "frames.json",
        "media_info.json",
        "packets.json",
        "problems.json",
        "summary.json",
    ]
    assert len(_load(export.directory / "packets.json")) == 2
    assert _load(export.directory / "bitrate_timeline.json") == [
        {"time": 0.0, "bitrate": 800.0, "type": "total"}
    ]
    visualization = _load(export.directory / "frame_visualization.json")
    assert visualization["total_frames"] == 3
    assert visualization["frame_types"] == {"I": 1, "P": 2}


def test_empty_sections_are_skipped(tmp_path):
    analysis = DetailedAnalysis(media_info=MediaInfo(input="clip.mp4"))

    export = export_analysis(analysis, tmp_path, ExportOptions.all(), now=NOW)

    assert [p.name for p in export.files] == ["media_info.json", "summary.json"]
    assert not any(
        created
        for name, created in export.summary["files_created"].items()
        if name != "media_info.json"
    )


def test_summary(tmp_path, analysis):
    export = export_analysis(
        analysis, tmp_path, ExportOptions(packets=True, problems=False), now=NOW
    )

    summary = _load(export.directory / "summary.json")
    assert summary == export.summary
    assert summary["analysis_timestamp"] == "20240501_123045"
    assert summary["input_file"] == "clip.mp4"
    assert summary["export_directory"] == str(export.directory)
    assert summary["files_created"]["packets.json"] is True
    assert summary["files_created"]["problems.json"] is False
    assert summary["statistics"] == {
        "problems_found": 1,
        "packets_analyzed": 2,
        "frames_analyzed": 3,
    }


def test_unwritable_directory(tmp_path, analysis):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")

    with pytest.raises(OSError):
        export_analysis(analysis, blocker, now=NOW)
