"""Frame type and GOP structure summary for export."""

from __future__ import annotations

from collections.abc import Sequence

from mediaparser.models import FrameInfo, FrameTimelineEntry, FrameVisualization, GOPInfo

MAX_TIMELINE_ENTRIES = 1000


def _count_pict_type(gop: GOPInfo, pict_type: str | None) -> None:
    if pict_type == "I":
        gop.i_frames += 1
    elif pict_type == "P":
        gop.p_frames += 1
    elif pict_type == "B":
        gop.b_frames += 1


def generate_frame_visualization(frames: Sequence[FrameInfo]) -> FrameVisualization | None:
    """Summarize the video frames of an analysis.

    Each GOP starts at a keyframe and runs up to the frame before the next
    keyframe. The timeline samples frames so it holds at most about
    ``MAX_TIMELINE_ENTRIES`` entries.

    Returns:
        None when there are no frames at all; a visualization with only
        ``total_frames`` set when none of them are video frames.
    """
    if not frames:
        return None

    viz = FrameVisualization(total_frames=len(frames))

    video_frames = [f for f in frames if f.media_type.lower() == "video"]
    if not video_frames:
        return viz

    sample_every = max(len(video_frames) // MAX_TIMELINE_ENTRIES, 1)
    gop = GOPInfo(start_time=video_frames[0].pts)

    for i, frame in enumerate(video_frames):
        if frame.key_frame and i > 0:
            gop.end_time = video_frames[i - 1].pts
            viz.gop_structure.append(gop)
            gop = GOPInfo(start_time=frame.pts)

        gop.frame_count += 1
        if frame.pict_type:
            viz.frame_types[frame.pict_type] = viz.frame_types.get(frame.pict_type, 0) + 1
            _count_pict_type(gop, frame.pict_type)

        if i % sample_every == 0:
            viz.timeline.append(
                FrameTimelineEntry(
                    time=frame.pts,
                    frame_type=frame.pict_type,
                    size=frame.size,
                    key_frame=frame.key_frame,
                )
            )

    gop.end_time = video_frames[-1].pts
    viz.gop_structure.append(gop)
    viz.duration = video_frames[-1].pts

    return viz
