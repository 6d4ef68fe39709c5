"""
Fixed-capacity store owning every track of a tracking session.
"""

import logging

from .tracker import Track, TrackState

logger = logging.getLogger(__name__)


class CapacityExceeded(Exception):
    """Raised when every track slot is in use."""


class TrackStore:
    """
    Arena of at most max_num_obj track slots.

    Slots are recycled as soon as a track is freed. Track ids are issued
    in increasing order and never handed out twice, so an id seen by a
    renderer always refers to the same object.
    """

    def __init__(self, max_num_obj):
        self.max_num_obj = int(max_num_obj)
        self._slots = [None] * self.max_num_obj
        self._free_slots = list(range(self.max_num_obj - 1, -1, -1))
        self._by_id = {}
        self._next_id = 1

    def allocate(self, detection):
        """
        Create a CANDIDATE track in a free slot.

        Args:
            detection: Detection the new track starts from

        Returns:
            The new Track

        Raises:
            CapacityExceeded: If no slot is free
        """
        if not self._free_slots:
            raise CapacityExceeded(f"All {self.max_num_obj} track slots are in use")

        slot = self._free_slots.pop()
        track = Track(self._next_id, slot, detection)
        self._next_id += 1

        self._slots[slot] = track
        self._by_id[track.id] = track
        logger.debug("Created track %d in slot %d", track.id, slot)
        return track

    def free(self, track_id):
        """
        Tombstone a track and release its slot.

        Args:
            track_id: Id of a live track

        Returns:
            The removed Track

        Raises:
            KeyError: If no live track has this id
        """
        track = self._by_id.pop(track_id)
        track.state = TrackState.REMOVED
        track.reportable = False

        self._slots[track.slot] = None
        self._free_slots.append(track.slot)
        logger.debug("Removed track %d from slot %d", track_id, track.slot)
        return track

    def get(self, track_id):
        """Live track by id, or None."""
        return self._by_id.get(track_id)

    def iterate(self):
        """Lazily yield live tracks in slot order."""
        for track in self._slots:
            if track is not None:
                yield track

    def live_tracks(self):
        """Live tracks sorted by ascending id."""
        return sorted(self._by_id.values(), key=lambda t: t.id)

    @property
    def free_count(self):
        return len(self._free_slots)

    def clear(self):
        """Drop every track. Ids keep increasing across a clear."""
        for track in list(self._by_id.values()):
            self.free(track.id)

    def __len__(self):
        return len(self._by_id)

    def __contains__(self, track_id):
        return track_id in self._by_id
