import pytest

from abandoned_tracker import Detection, TrackerConfig


def make_blob(area=500, centroid=(100, 100), size=(30, 40)):
    """Detection with its bbox centred on the centroid."""
    h, w = size
    row, col = centroid
    return Detection(area, (row, col), (row - h / 2, col - w / 2, h, w))


@pytest.fixture
def blob():
    return make_blob


@pytest.fixture
def config():
    return TrackerConfig(
        max_num_obj=10,
        alarm_count=45,
        max_consecutive_miss=4,
        area_change_fraction=15,
        centroid_change_fraction=20,
        min_persistence_ratio=0.7,
    )
