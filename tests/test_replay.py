import json

from abandoned_tracker import TrackerConfig
from replay_detections import read_frames, replay


def _write_frames(path, frames):
    path.write_text("\n".join(json.dumps(f) for f in frames) + "\n")


BLOB = {"area": 500, "centroid": [100, 100], "bbox": [85, 80, 30, 40]}


def test_read_frames_accepts_lists_objects_and_bad_lines(tmp_path):
    path = tmp_path / "dets.jsonl"
    path.write_text(
        json.dumps([BLOB]) + "\n"
        + "\n"
        + json.dumps({"detections": [BLOB, BLOB], "count": 1}) + "\n"
        + "{not json\n"
        + "5\n"
        + json.dumps([BLOB]) + "\n"
    )

    frames = list(read_frames(str(path)))

    assert frames[0] == ([BLOB], None)
    assert frames[1] == ([BLOB, BLOB], 1)
    assert frames[2] == ([], None)
    assert frames[3] == ([], None)
    assert frames[4] == ([BLOB], None)


def test_replay_reports_alarm_changes(tmp_path, capsys):
    path = tmp_path / "dets.jsonl"
    moved = dict(BLOB, centroid=[100, 115], bbox=[85, 95, 30, 40])
    _write_frames(path, [[BLOB]] * 3 + [[moved]])

    results = replay(str(path), TrackerConfig(alarm_count=3))

    assert [r.abandoned_count for r in results] == [0, 0, 1, 0]
    out = capsys.readouterr().out
    assert "Frame 3: ABANDONED object #1 at (80, 85)-(120, 115)" in out
    assert "Frame 4: object #1 no longer abandoned" in out


def test_replay_continues_past_wrong_shape_line(tmp_path, capsys):
    path = tmp_path / "dets.jsonl"
    path.write_text(json.dumps([BLOB]) + "\n5\n" + json.dumps([BLOB]) + "\n")

    results = replay(str(path), TrackerConfig(alarm_count=3))

    assert len(results) == 3
    assert [r.tracked_count for r in results] == [1, 1, 1]
    assert "line 2: expected a list or object" in capsys.readouterr().out
