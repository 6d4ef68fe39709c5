"""
Track class representing a single blob being tracked across frames.
"""

from enum import Enum

import numpy as np


class TrackState(Enum):
    CANDIDATE = "candidate"    # newly created, not yet vetted
    TRACKED = "tracked"        # passed the persistence check
    ABANDONED = "abandoned"    # stationary for alarm_count frames
    REMOVED = "removed"        # evicted, slot freed


class Track:
    """
    A single track representing one physical object.
    """

    def __init__(self, track_id, slot, detection):
        """
        Initialize a new track from its first detection.

        The first observation counts as a seen frame and as the first
        frame of a stationary run.

        Args:
            track_id: Id issued by the track store
            slot: Arena slot holding this track
            detection: Detection that spawned the track
        """
        self.id = track_id
        self.slot = slot

        # Last known measurement
        self.area = detection.area
        self.centroid = detection.centroid.copy()
        self.bbox = detection.bbox.copy()

        # Track management
        self.frames_seen = 1  # Frames matched to a detection
        self.frames_existed = 1  # Frames since creation
        self.consecutive_misses = 0
        self.stationary_run = 1

        self.state = TrackState.CANDIDATE
        self.reportable = False  # Persistence gate result for the current frame

    def update(self, detection):
        """
        Update track with its matched detection.

        Args:
            detection: Detection assigned to this track this frame
        """
        self.area = detection.area
        self.centroid = detection.centroid.copy()
        self.bbox = detection.bbox.copy()
        self.frames_seen += 1
        self.frames_existed += 1
        self.consecutive_misses = 0

    def mark_missed(self):
        """Mark this track as not detected in current frame. Last measurement is kept."""
        self.frames_existed += 1
        self.consecutive_misses += 1

    @property
    def persistence_ratio(self):
        """Fraction of the track's lifetime in which it was detected."""
        return self.frames_seen / self.frames_existed

    @property
    def is_abandoned(self):
        """True while the abandonment alarm is raised."""
        return self.state is TrackState.ABANDONED

    def snapshot(self):
        """Copy of the measurement fields, taken before an update."""
        return self.area, self.centroid.copy(), self.bbox.copy()

    def __repr__(self):
        return (f"Track(id={self.id}, state={self.state.value}, area={self.area:g}, "
                f"centroid={np.round(self.centroid, 2).tolist()}, seen={self.frames_seen}/"
                f"{self.frames_existed}, misses={self.consecutive_misses}, still={self.stationary_run})")
