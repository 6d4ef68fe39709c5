"""
Run configuration for the abandoned object tracker.

All thresholds are fixed for a tracking session. Fraction options are
percentages (13 means 13%), matching how they are usually tuned by hand.
"""

import json
import os
from dataclasses import dataclass, fields


ASSIGNMENT_MODES = ("greedy", "optimal")

# Option names as they appear in existing demo configurations
_CAMEL_CASE_KEYS = {
    "maxNumObj": "max_num_obj",
    "alarmCount": "alarm_count",
    "maxConsecutiveMiss": "max_consecutive_miss",
    "areaChangeFraction": "area_change_fraction",
    "centroidChangeFraction": "centroid_change_fraction",
    "minPersistenceRatio": "min_persistence_ratio",
    "matchGateScale": "match_gate_scale",
}


@dataclass(frozen=True)
class TrackerConfig:
    """
    Thresholds controlling matching, eviction and the abandonment alarm.
    """

    max_num_obj: int = 200
    """Hard cap on simultaneously tracked objects."""

    alarm_count: int = 45
    """Consecutive still frames required to raise the abandonment alarm."""

    max_consecutive_miss: int = 4
    """A track missed for more than this many frames in a row is evicted."""

    area_change_fraction: float = 13.0
    """Percent area change tolerated between frames."""

    centroid_change_fraction: float = 18.0
    """Percent of the bounding-box diagonal the centroid may move."""

    min_persistence_ratio: float = 0.7
    """Minimum frames_seen / frames_existed for a track to be reported."""

    match_gate_scale: float = 2.0
    """
    Multiplier applied to both tolerances when associating detections.
    A value above 1 keeps following an object that moved more than the
    stillness tolerance, so its alarm can be cleared instead of the track
    being replaced.
    """

    assignment: str = "greedy"
    """'greedy' nearest-centroid or 'optimal' minimum-cost assignment."""

    def __post_init__(self):
        if int(self.max_num_obj) != self.max_num_obj or self.max_num_obj < 1:
            raise ValueError(f"max_num_obj must be a positive integer, got {self.max_num_obj!r}")
        if int(self.alarm_count) != self.alarm_count or self.alarm_count < 1:
            raise ValueError(f"alarm_count must be a positive integer, got {self.alarm_count!r}")
        if int(self.max_consecutive_miss) != self.max_consecutive_miss or self.max_consecutive_miss < 0:
            raise ValueError(
                f"max_consecutive_miss must be a non-negative integer, got {self.max_consecutive_miss!r}"
            )
        if self.area_change_fraction < 0:
            raise ValueError(f"area_change_fraction must be >= 0, got {self.area_change_fraction!r}")
        if self.centroid_change_fraction < 0:
            raise ValueError(
                f"centroid_change_fraction must be >= 0, got {self.centroid_change_fraction!r}"
            )
        if not 0.0 <= self.min_persistence_ratio <= 1.0:
            raise ValueError(
                f"min_persistence_ratio must be within [0, 1], got {self.min_persistence_ratio!r}"
            )
        if self.match_gate_scale < 1.0:
            raise ValueError(f"match_gate_scale must be >= 1, got {self.match_gate_scale!r}")
        if self.assignment not in ASSIGNMENT_MODES:
            raise ValueError(
                f"assignment must be one of {ASSIGNMENT_MODES}, got {self.assignment!r}"
            )

    @classmethod
    def from_dict(cls, options):
        """
        Build a config from a mapping.

        Args:
            options: Mapping using either the field names or the camelCase
                option names (maxNumObj, alarmCount, ...)

        Returns:
            TrackerConfig

        Raises:
            ValueError: On unknown option names or invalid values
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in options.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown tracker option: {key}")
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_json(cls, path):
        """Load a config from a JSON file."""
        if not os.path.exists(path):
            raise FileNotFoundError(f"Tracker config not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))
