"""Export a detailed analysis as a directory of JSON files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from mediaparser.formatters import to_jsonable
from mediaparser.models import DetailedAnalysis
from mediaparser.visualization import generate_frame_visualization


@dataclass
class ExportOptions:
    """Which parts of an analysis to write."""

    packets: bool = False
    frames: bool = False
    problems: bool = True
    bitrate: bool = False

    @classmethod
    def all(cls) -> ExportOptions:
        return cls(packets=True, frames=True, problems=True, bitrate=True)


@dataclass
class ExportResult:
    """Where an export went and what it contains."""

    directory: Path
    files: list[Path] = field(default_factory=list)
    summary: dict[str, Any] = field(default_factory=dict)


def write_json(path: Path, data: Any) -> None:
    """Write data as indented UTF-8 JSON."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)
        f.write("\n")


def export_analysis(
    result: DetailedAnalysis,
    directory: str | Path,
    options: ExportOptions | None = None,
    now: datetime | None = None,
) -> ExportResult:
    """Write an analysis into ``<directory>/analysis_<timestamp>/``.

    ``media_info.json`` and ``summary.json`` are always written; the other
    files only when enabled in ``options`` and non-empty.

    Args:
        result: Detailed analysis to export
        directory: Base export directory (created if missing)
        options: Parts to export (defaults to problems only)
        now: Export time, used for the subdirectory name

    Returns:
        ExportResult with the export directory, files and summary

    Raises:
        OSError: If the directory or a file cannot be written
    """
    options = options or ExportOptions()
    timestamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    export_dir = Path(directory) / f"analysis_{timestamp}"
    export_dir.mkdir(parents=True, exist_ok=True)

    export = ExportResult(directory=export_dir)

    def save(name: str, data: Any) -> None:
        path = export_dir / name
        write_json(path, data)
        export.files.append(path)

    save("media_info.json", to_jsonable(result.media_info))

    files_created = {
        "media_info.json": True,
        "problems.json": options.problems and bool(result.problems),
        "packets.json": options.packets and bool(result.packets),
        "frames.json": options.frames and bool(result.frames),
        "frame_visualization.json": options.frames and bool(result.frames),
        "bitrate_timeline.json": options.bitrate and bool(result.bitrate_timeline),
    }

    if files_created["problems.json"]:
        save("problems.json", to_jsonable(result.problems))
    if files_created["packets.json"]:
        save("packets.json", to_jsonable(result.packets))
    if files_created["frames.json"]:
        save("frames.json", to_jsonable(result.frames))
        visualization = generate_frame_visualization(result.frames)
        if visualization is not None:
            save("frame_visualization.json", to_jsonable(visualization))
    if files_created["bitrate_timeline.json"]:
        save("bitrate_timeline.json", to_jsonable(result.bitrate_timeline))

    export.summary = {
        "analysis_timestamp": timestamp,
        "input_file": result.media_info.input,
        "export_directory": str(export_dir),
        "files_created": files_created,
        "statistics": {
            "problems_found": len(result.problems),
            "packets_analyzed": len(result.packets),
            "frames_analyzed": len(result.frames),
        },
    }
    save("summary.json", export.summary)

    return export
