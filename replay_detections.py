"""
Replay recorded blob detections through the abandoned object tracker.

Input is a JSON-lines file, one frame per line. Each line is either a list
of detections or an object {"detections": [...], "count": N}. A detection is
{"area": A, "centroid": [row, col], "bbox": [top, left, height, width]}.

Usage:
    python3 replay_detections.py detections.jsonl
    python3 replay_detections.py detections.jsonl --config tracker.json --verbose
"""

import argparse
import json
import logging
import sys

from abandoned_tracker import AbandonedObjectTracker, TrackerConfig, bbox_to_xyxy


def read_frames(path):
    """Yield (detections, count) for each non-empty line of a JSON-lines file."""
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                frame = json.loads(line)
            except json.JSONDecodeError as e:
                print(f"WARNING:  line {line_no}: invalid JSON ({e}), treated as empty frame")
                frame = []

            if isinstance(frame, dict):
                yield frame.get("detections", []), frame.get("count")
            elif isinstance(frame, list):
                yield frame, None
            else:
                print(f"WARNING:  line {line_no}: expected a list or object, treated as empty frame")
                yield [], None


def replay(path, config):
    """
    Run every frame of a recording and report alarm changes.

    Returns:
        List of FrameResult, one per frame
    """
    tracker = AbandonedObjectTracker(config)
    results = []
    previous_ids = set()

    for detections, count in read_frames(path):
        result = tracker.update(detections, count)
        results.append(result)

        current_ids = set(result.abandoned_ids)
        for track_id in sorted(current_ids - previous_ids):
            box = result.abandoned_boxes[result.abandoned_ids.index(track_id)]
            x1, y1, x2, y2 = bbox_to_xyxy(box)
            print(f"Frame {result.frame_index}: ABANDONED object #{track_id} "
                  f"at ({x1:.0f}, {y1:.0f})-({x2:.0f}, {y2:.0f})")
        for track_id in sorted(previous_ids - current_ids):
            print(f"Frame {result.frame_index}: object #{track_id} no longer abandoned")
        previous_ids = current_ids

    return results


def main():
    parser = argparse.ArgumentParser(description="Replay blob detections through the abandoned object tracker")
    parser.add_argument("detections", help="JSON-lines file of per-frame detections")
    parser.add_argument("--config", help="JSON file of tracker options")
    parser.add_argument("--verbose", action="store_true", help="Log track lifecycle events")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = TrackerConfig.from_json(args.config) if args.config else TrackerConfig()
        results = replay(args.detections, config)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print("=" * 70)
    print(f"Frames processed: {len(results)}")
    if results:
        peak = max(r.abandoned_count for r in results)
        print(f"Peak abandoned objects: {peak}")
        print(f"Abandoned at end: {results[-1].abandoned_count}")
    print("=" * 70)


if __name__ == "__main__":
    main()
