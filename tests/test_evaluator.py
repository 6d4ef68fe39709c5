from abandoned_tracker import TrackState, TrackStore, evaluate_tracks


def test_miss_boundary(blob, config):
    store = TrackStore(config.max_num_obj)
    track = store.allocate(blob())

    for _ in range(config.max_consecutive_miss):
        track.mark_missed()
    assert evaluate_tracks(store, config) == []
    assert track.id in store

    track.mark_missed()
    assert evaluate_tracks(store, config) == [track.id]
    assert track.id not in store
    assert track.state is TrackState.REMOVED


def test_persistence_gate(blob, config):
    store = TrackStore(config.max_num_obj)
    track = store.allocate(blob())

    evaluate_tracks(store, config)
    assert track.reportable

    # 1 seen out of 2
    track.mark_missed()
    evaluate_tracks(store, config)
    assert not track.reportable
    assert track.id in store

    # 7 seen out of 10 -> exactly 0.7
    for _ in range(6):
        track.update(blob())
    track.mark_missed()
    track.mark_missed()
    assert track.frames_seen == 7
    assert track.frames_existed == 10
    evaluate_tracks(store, config)
    assert track.reportable


def test_evicted_track_leaves_reportable_set(blob, config):
    store = TrackStore(config.max_num_obj)
    keep = store.allocate(blob())
    drop = store.allocate(blob(centroid=(300, 300)))

    for _ in range(config.max_consecutive_miss + 1):
        drop.mark_missed()
        keep.update(blob())
    evaluate_tracks(store, config)

    assert [t.id for t in store.live_tracks()] == [keep.id]
    assert not drop.reportable
