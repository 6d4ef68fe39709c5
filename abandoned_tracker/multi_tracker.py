"""
Multi-object tracker that flags abandoned blobs.
"""

import logging

from .config import TrackerConfig
from .classifier import classify_tracks
from .detection import detections_from_arrays, parse_detections
from .evaluator import evaluate_tracks
from .formatter import format_frame
from .matcher import match_detections
from .track_store import CapacityExceeded, TrackStore

logger = logging.getLogger(__name__)


class AbandonedObjectTracker:
    """
    Follows blobs across frames and raises an alarm for the ones that stay still.

    Frames must be fed strictly in capture order, one batch per call.
    """

    def __init__(self, config=None):
        """
        Initialize the tracker.

        Args:
            config: TrackerConfig, defaults to TrackerConfig()
        """
        self.config = config if config is not None else TrackerConfig()
        self.store = TrackStore(self.config.max_num_obj)
        self.frame_index = 0

    def update(self, detections, count=None):
        """
        Process one frame of detections.

        Args:
            detections: Sequence of detections, see parse_detections
            count: Number of valid entries in detections

        Returns:
            FrameResult for this frame
        """
        detections = parse_detections(detections, count)
        self.frame_index += 1

        # Associate everything before touching any track
        assignment = match_detections(self.store.iterate(), detections, self.config)

        priors = {}
        for track_id, det_idx in assignment.matches:
            track = self.store.get(track_id)
            priors[track_id] = track.snapshot()
            track.update(detections[det_idx])

        for track_id in assignment.unmatched_tracks:
            self.store.get(track_id).mark_missed()

        for det_idx in assignment.unmatched_detections:
            try:
                self.store.allocate(detections[det_idx])
            except CapacityExceeded:
                logger.debug("Frame %d: no free slot, dropping detection %r",
                             self.frame_index, detections[det_idx])

        evaluate_tracks(self.store, self.config)
        classify_tracks(self.store, priors, self.config)

        return format_frame(self.store, self.config.max_num_obj, self.frame_index)

    def update_from_arrays(self, areas, centroids, bboxes, count=None):
        """
        Process one frame given parallel blob-analysis arrays.

        Args:
            areas: N areas
            centroids: N x 2 (row, col)
            bboxes: N x 4 [top, left, height, width]
            count: Number of valid leading rows

        Returns:
            FrameResult for this frame
        """
        return self.update(detections_from_arrays(areas, centroids, bboxes, count))

    @property
    def tracks(self):
        """Live tracks, ascending id."""
        return self.store.live_tracks()

    def reset(self):
        """Discard every track and start a new session."""
        self.store = TrackStore(self.config.max_num_obj)
        self.frame_index = 0
        logger.info("Tracker reset")
