"""
Per-frame detection input.

Blob analysis runs outside this package; it hands over, once per frame, the
area, centroid and bounding box of every foreground blob plus a count.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


class Detection:
    """
    One blob detected in a single frame.
    """

    __slots__ = ("area", "centroid", "bbox")

    def __init__(self, area, centroid, bbox):
        """
        Args:
            area: Blob area in pixels
            centroid: (row, col) position
            bbox: [top, left, height, width]
        """
        self.area = float(area)
        self.centroid = np.asarray(centroid, dtype=float).reshape(2)
        self.bbox = np.asarray(bbox, dtype=float).reshape(4)

    def is_valid(self):
        """Finite numbers, non-negative area and box size."""
        values = np.concatenate(([self.area], self.centroid, self.bbox))
        if not np.all(np.isfinite(values)):
            return False
        return self.area >= 0 and self.bbox[2] >= 0 and self.bbox[3] >= 0

    def __repr__(self):
        return (f"Detection(area={self.area:g}, centroid=({self.centroid[0]:g}, {self.centroid[1]:g}), "
                f"bbox={self.bbox.tolist()})")


def _to_detection(record):
    if isinstance(record, Detection):
        return record
    if isinstance(record, dict):
        return Detection(record["area"], record["centroid"], record["bbox"])
    area, centroid, bbox = record
    return Detection(area, centroid, bbox)


def parse_detections(detections, count=None):
    """
    Normalize a frame's detection batch.

    Malformed records are skipped with a warning instead of failing the
    frame, so one bad blob never stops the tracker.

    Args:
        detections: Sequence of Detection objects, dicts with 'area',
            'centroid' and 'bbox', or (area, centroid, bbox) tuples
        count: Number of valid leading entries; defaults to all of them

    Returns:
        List of valid Detection objects, in input order
    """
    try:
        detections = list(detections) if detections is not None else []
    except TypeError:
        logger.warning("Detection batch of type %s is not a sequence, treated as empty frame",
                       type(detections).__name__)
        detections = []

    if count is not None:
        try:
            count = int(count)
        except (TypeError, ValueError, OverflowError):
            logger.warning("Unusable detection count %r, using batch size %d", count, len(detections))
            count = None

    if count is None:
        count = len(detections)
    elif count < 0:
        logger.warning("Negative detection count %d treated as 0", count)
        count = 0
    elif count > len(detections):
        logger.warning("Detection count %d exceeds batch size %d, clamping", count, len(detections))
        count = len(detections)

    parsed = []
    for i, record in enumerate(detections[:count]):
        try:
            det = _to_detection(record)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed detection %d: %s", i, e)
            continue

        if not det.is_valid():
            logger.warning("Skipping invalid detection %d: %r", i, det)
            continue

        parsed.append(det)

    return parsed


def detections_from_arrays(areas, centroids, bboxes, count=None):
    """
    Build detections from parallel blob-analysis arrays.

    Args:
        areas: Array of N areas
        centroids: N x 2 array of (row, col)
        bboxes: N x 4 array of [top, left, height, width]
        count: Number of valid leading rows

    Returns:
        List of valid Detection objects
    """
    areas = np.asarray(areas, dtype=float).reshape(-1)
    centroids = np.asarray(centroids, dtype=float).reshape(-1, 2)
    bboxes = np.asarray(bboxes, dtype=float).reshape(-1, 4)

    n = min(len(areas), len(centroids), len(bboxes))
    if n != len(areas) or n != len(centroids) or n != len(bboxes):
        logger.warning("Blob arrays have mismatched lengths (%d, %d, %d), using %d rows",
                       len(areas), len(centroids), len(bboxes), n)

    records = list(zip(areas[:n], centroids[:n], bboxes[:n]))
    return parse_detections(records, count)
