"""
Per-frame output projections over the track store.
"""

from collections import namedtuple

import numpy as np


FrameResult = namedtuple("FrameResult", [
    "frame_index",
    "abandoned_count",
    "abandoned_boxes",
    "abandoned_ids",
    "tracked_count",
    "tracked_boxes",
    "tracked_ids",
])


def _box_buffer(tracks, max_num_obj):
    """Fixed (max_num_obj, 4) buffer, zero-filled past the last track."""
    boxes = np.zeros((max_num_obj, 4))
    for i, track in enumerate(tracks[:max_num_obj]):
        boxes[i] = track.bbox
    return boxes


def format_frame(store, max_num_obj, frame_index=0):
    """
    Project the store into the abandoned and all-objects outputs.

    Both projections contain reportable tracks only, ordered by ascending
    track id so the rendering order is stable from frame to frame.

    Args:
        store: TrackStore after classification
        max_num_obj: Length of the box buffers
        frame_index: Index of the frame being reported

    Returns:
        FrameResult
    """
    reportable = [t for t in store.live_tracks() if t.reportable]
    abandoned = [t for t in reportable if t.is_abandoned]

    return FrameResult(
        frame_index=frame_index,
        abandoned_count=len(abandoned),
        abandoned_boxes=_box_buffer(abandoned, max_num_obj),
        abandoned_ids=[t.id for t in abandoned],
        tracked_count=len(reportable),
        tracked_boxes=_box_buffer(reportable, max_num_obj),
        tracked_ids=[t.id for t in reportable],
    )
