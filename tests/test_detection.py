import numpy as np
from numpy.testing import assert_array_equal

from abandoned_tracker import Detection, detections_from_arrays, parse_detections


def test_parse_mixed_records():
    records = [
        {"area": 500, "centroid": (100, 100), "bbox": (85, 80, 30, 40)},
        (200, [10, 20], [5, 15, 10, 10]),
        Detection(50, (1, 2), (0, 0, 3, 4)),
    ]
    dets = parse_detections(records)

    assert len(dets) == 3
    assert dets[0].area == 500.0
    assert_array_equal(dets[0].centroid, [100, 100])
    assert_array_equal(dets[1].bbox, [5, 15, 10, 10])
    assert dets[2] is records[2]


def test_count_limits_batch():
    records = [(10, (0, 0), (0, 0, 1, 1))] * 5
    assert len(parse_detections(records, count=2)) == 2


def test_count_larger_than_batch_is_clamped():
    records = [(10, (0, 0), (0, 0, 1, 1))] * 2
    assert len(parse_detections(records, count=7)) == 2


def test_negative_count_means_empty_frame():
    records = [(10, (0, 0), (0, 0, 1, 1))]
    assert parse_detections(records, count=-1) == []


def test_none_batch_is_empty():
    assert parse_detections(None) == []


def test_malformed_and_invalid_records_are_skipped():
    records = [
        {"area": 500, "centroid": (100, 100)},  # no bbox
        (10, (0, 0, 0), (0, 0, 1, 1)),  # bad centroid shape
        (float("nan"), (0, 0), (0, 0, 1, 1)),
        (-5, (0, 0), (0, 0, 1, 1)),
        (10, (0, 0), (0, 0, -1, 1)),
        (10, (3, 4), (0, 0, 1, 1)),
    ]
    dets = parse_detections(records)

    assert len(dets) == 1
    assert_array_equal(dets[0].centroid, [3, 4])


def test_zero_area_is_valid():
    dets = parse_detections([(0, (5, 5), (5, 5, 0, 0))])
    assert len(dets) == 1


def test_detections_from_arrays():
    areas = np.array([500, 300, 100])
    centroids = np.array([[100, 100], [50, 60], [10, 10]])
    bboxes = np.array([[85, 80, 30, 40], [40, 50, 20, 20], [5, 5, 10, 10]])

    dets = detections_from_arrays(areas, centroids, bboxes, count=2)

    assert len(dets) == 2
    assert dets[1].area == 300
    assert_array_equal(dets[1].centroid, [50, 60])
    assert_array_equal(dets[0].bbox, [85, 80, 30, 40])


def test_detections_from_arrays_mismatched_lengths():
    dets = detections_from_arrays([1, 2, 3], [[0, 0], [1, 1]], [[0, 0, 1, 1]] * 3)
    assert len(dets) == 2


def test_numeric_string_count_is_coerced():
    records = [(10, (0, 0), (0, 0, 1, 1))] * 3
    assert len(parse_detections(records, count="2")) == 2


def test_unusable_count_falls_back_to_batch_size():
    records = [(10, (0, 0), (0, 0, 1, 1))] * 2
    assert len(parse_detections(records, count=float("nan"))) == 2
    assert len(parse_detections(records, count=float("inf"))) == 2
    assert len(parse_detections(records, count="many")) == 2


def test_non_sequence_batch_is_empty_frame():
    assert parse_detections(5) == []
