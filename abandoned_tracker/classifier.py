"""
Stationarity counting and the abandonment alarm.
"""

import logging

from .tracker import TrackState
from .utils import area_within, centroid_within

logger = logging.getLogger(__name__)


def is_stationary(track, prior, config):
    """
    Check whether a matched track stayed put since the previous frame.

    Args:
        track: Track already updated with this frame's detection
        prior: (area, centroid, bbox) of the track before the update
        config: TrackerConfig

    Returns:
        True if area and centroid changed within tolerance (inclusive)
    """
    prior_area, prior_centroid, prior_bbox = prior
    return (area_within(track.area, prior_area, config.area_change_fraction) and
            centroid_within(track.centroid, prior_centroid, prior_bbox,
                            config.centroid_change_fraction))


def classify_tracks(store, priors, config):
    """
    Advance stationary runs and raise or clear the abandonment alarm.

    Only matched tracks have their stationary run touched; a missed frame
    leaves it as it was, since the object's position is unknown.

    Args:
        store: TrackStore, after eviction and persistence gating
        priors: Dict of track id -> (area, centroid, bbox) before this
            frame's update, for every track matched this frame
        config: TrackerConfig

    Returns:
        (abandoned, cleared): ids newly marked ABANDONED and ids demoted
        back to TRACKED this frame
    """
    abandoned = []
    cleared = []

    for track in store.live_tracks():
        if track.state is TrackState.CANDIDATE and track.reportable:
            track.state = TrackState.TRACKED

        prior = priors.get(track.id)
        if prior is not None:
            if is_stationary(track, prior, config):
                track.stationary_run += 1
            else:
                track.stationary_run = 0
                if track.state is TrackState.ABANDONED:
                    track.state = TrackState.TRACKED
                    cleared.append(track.id)
                    logger.info("Track %d moved, abandonment cleared", track.id)

        if track.state is TrackState.TRACKED and track.stationary_run >= config.alarm_count:
            track.state = TrackState.ABANDONED
            abandoned.append(track.id)
            logger.info("Track %d abandoned after %d still frames", track.id, track.stationary_run)

    return abandoned, cleared
