"""
Data association between live tracks and this frame's detections.
"""

from collections import namedtuple

import numpy as np
from scipy.optimize import linear_sum_assignment

from .utils import area_within, centroid_distance, centroid_within


Assignment = namedtuple("Assignment", ["matches", "unmatched_tracks", "unmatched_detections"])
Assignment.__doc__ = """
Result of matching one frame.

matches: List of (track_id, detection_index) pairs
unmatched_tracks: Track ids with no detection this frame
unmatched_detections: Detection indices that matched no track
"""


def _gate_and_cost(tracks, detections, config):
    """
    Build the match gate and centroid distance matrices.

    Returns:
        gate: bool array (tracks x detections), True where a pair may match
        cost: float array of centroid distances
    """
    gate = np.zeros((len(tracks), len(detections)), dtype=bool)
    cost = np.zeros((len(tracks), len(detections)))

    for i, track in enumerate(tracks):
        for j, det in enumerate(detections):
            cost[i, j] = centroid_distance(track.centroid, det.centroid)
            gate[i, j] = (
                area_within(det.area, track.area, config.area_change_fraction,
                            config.match_gate_scale) and
                centroid_within(det.centroid, track.centroid, track.bbox,
                                config.centroid_change_fraction, config.match_gate_scale)
            )

    return gate, cost


def _greedy(gate, cost):
    """
    Nearest-centroid assignment, one track at a time in row order.
    Ties go to the lowest detection index.
    """
    pairs = []
    used = set()
    for i in range(gate.shape[0]):
        best_j = -1
        best_d = np.inf
        for j in range(gate.shape[1]):
            if j in used or not gate[i, j]:
                continue
            if cost[i, j] < best_d:
                best_d, best_j = cost[i, j], j
        if best_j >= 0:
            pairs.append((i, best_j))
            used.add(best_j)
    return pairs


def _optimal(gate, cost):
    """
    Minimum total distance assignment over gated pairs (Hungarian algorithm).
    """
    # Maximize the number of matches first, then minimize distance
    penalty = cost[gate].max() + 1.0 if gate.any() else 1.0
    big = penalty * (min(gate.shape) + 1)
    cost_matrix = np.where(gate, cost, big)

    row_ind, col_ind = linear_sum_assignment(cost_matrix)
    return [(i, j) for i, j in zip(row_ind, col_ind) if gate[i, j]]


def match_detections(tracks, detections, config):
    """
    Match detections to existing tracks without modifying either.

    Args:
        tracks: Live tracks
        detections: This frame's Detection list
        config: TrackerConfig

    Returns:
        Assignment with matches in ascending track id order
    """
    tracks = sorted(tracks, key=lambda t: t.id)

    if len(tracks) == 0 or len(detections) == 0:
        return Assignment([], [t.id for t in tracks], list(range(len(detections))))

    gate, cost = _gate_and_cost(tracks, detections, config)

    if config.assignment == "optimal":
        pairs = _optimal(gate, cost)
    else:
        pairs = _greedy(gate, cost)

    matches = sorted((tracks[i].id, j) for i, j in pairs)
    matched_tracks = {track_id for track_id, _ in matches}
    matched_dets = {j for _, j in matches}

    unmatched_tracks = [t.id for t in tracks if t.id not in matched_tracks]
    unmatched_dets = [j for j in range(len(detections)) if j not in matched_dets]

    return Assignment(matches, unmatched_tracks, unmatched_dets)
