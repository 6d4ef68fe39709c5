"""
Geometry helpers for blob tracking.

Centroids are (row, col) and bounding boxes are (top, left, height, width),
the layout produced by blob analysis on a segmented frame.
"""

import numpy as np


def bbox_to_xyxy(bbox):
    """
    Convert bbox from [top, left, height, width] to [x1, y1, x2, y2].
    Drawing libraries want corner format (top-left, bottom-right) in
    x/y order, so renderers convert the tracker's boxes with this.
    """
    top, left, h, w = bbox
    return np.array([left, top, left + w, top + h])


def bbox_diagonal(bbox):
    """Length of the bounding box diagonal."""
    return float(np.hypot(bbox[2], bbox[3]))


def centroid_distance(c1, c2):
    """
    Euclidean distance between two (row, col) centroids.
    """
    return float(np.hypot(c1[0] - c2[0], c1[1] - c2[1]))


def area_within(new_area, old_area, fraction, scale=1.0):
    """
    Check whether an area change stays within a percentage of the old area.

    Args:
        new_area: Area measured this frame
        old_area: Reference area
        fraction: Allowed change in percent of old_area
        scale: Multiplier applied to the tolerance

    Returns:
        True if |new - old| <= old * fraction% * scale (inclusive)
    """
    tolerance = old_area * fraction * scale / 100.0
    return abs(new_area - old_area) <= tolerance


def centroid_within(new_centroid, old_centroid, old_bbox, fraction, scale=1.0):
    """
    Check whether a centroid moved less than a percentage of the box size.

    The tolerance is relative to the diagonal of the reference bounding box,
    so large objects are allowed proportionally larger jitter. A degenerate
    box gives a zero tolerance, where only a coincident centroid passes.

    Args:
        new_centroid: (row, col) measured this frame
        old_centroid: Reference (row, col)
        old_bbox: Reference bbox [top, left, height, width]
        fraction: Allowed displacement in percent of the bbox diagonal
        scale: Multiplier applied to the tolerance

    Returns:
        True if the displacement is within tolerance (inclusive)
    """
    tolerance = bbox_diagonal(old_bbox) * fraction * scale / 100.0
    return centroid_distance(new_centroid, old_centroid) <= tolerance
