"""
Miss eviction and persistence gating.
"""

import logging

logger = logging.getLogger(__name__)


def evaluate_tracks(store, config):
    """
    Evict lost tracks and decide which remaining tracks are reportable.

    A track missed for more than max_consecutive_miss frames in a row is
    removed. Every other track stays in the store, but only tracks detected
    in at least min_persistence_ratio of their frames are reportable, which
    keeps flickering noise blobs out of the output. Reportability is
    recomputed each frame, so a track can regain it.

    Args:
        store: TrackStore, after this frame's matching
        config: TrackerConfig

    Returns:
        List of evicted track ids
    """
    evicted = [t.id for t in store.iterate()
               if t.consecutive_misses > config.max_consecutive_miss]

    for track_id in evicted:
        track = store.free(track_id)
        logger.debug("Evicted track %d after %d consecutive misses",
                     track_id, track.consecutive_misses)

    for track in store.iterate():
        track.reportable = track.persistence_ratio >= config.min_persistence_ratio

    return sorted(evicted)
