"""
Abandoned Tracker - Blob tracking and abandoned object detection.
"""

from .multi_tracker import AbandonedObjectTracker
from .config import TrackerConfig
from .tracker import Track, TrackState
from .track_store import TrackStore, CapacityExceeded
from .detection import Detection, parse_detections, detections_from_arrays
from .matcher import Assignment, match_detections
from .evaluator import evaluate_tracks
from .classifier import classify_tracks, is_stationary
from .formatter import FrameResult, format_frame
from .utils import bbox_to_xyxy

__all__ = [
    'AbandonedObjectTracker',
    'TrackerConfig',
    'Track',
    'TrackState',
    'TrackStore',
    'CapacityExceeded',
    'Detection',
    'parse_detections',
    'detections_from_arrays',
    'Assignment',
    'match_detections',
    'evaluate_tracks',
    'classify_tracks',
    'is_stationary',
    'FrameResult',
    'format_frame',
    'bbox_to_xyxy',
]
