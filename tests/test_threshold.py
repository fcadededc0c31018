import pytest

from actorforces.threshold import AcceleratingTutorialThreshold, Phase, finterp_to


def test_finterp_non_positive_speed_snaps_to_target():
    assert finterp_to(0.2, 1.0, 0.1, 0.0) == 1.0
    assert finterp_to(0.2, 1.0, 0.1, -3.0) == 1.0


def test_finterp_close_values_snap():
    assert finterp_to(1.0 - 1e-6, 1.0, 0.1, 0.5) == 1.0


def test_finterp_large_step_reaches_target():
    assert finterp_to(0.0, 1.0, 2.0, 1.0) == 1.0


def test_finterp_moves_partially_towards_target():
    value = finterp_to(0.0, 1.0, 0.1, 0.5)
    assert 0.0 < value < 1.0
    assert finterp_to(value, 1.0, 0.1, 0.5) > value


def test_defaults_match_source():
    t = AcceleratingTutorialThreshold()
    assert t.threshold == 0.0
    assert t.base_interp_speed == 0.1
    assert t.interp_acceleration == 0.3
    assert t.current_interp_speed == t.base_interp_speed
    assert t.current_phase is Phase.PHASE_0


def test_speed_increases_each_tick():
    t = AcceleratingTutorialThreshold()
    speeds = []
    for _ in range(5):
        t.tick(0.1)
        speeds.append(t.current_interp_speed)
    assert speeds == sorted(speeds)
    assert speeds[0] > t.base_interp_speed


def test_threshold_monotonic_and_bounded():
    t = AcceleratingTutorialThreshold()
    previous = t.threshold
    for _ in range(200):
        t.tick(0.05)
        assert previous <= t.threshold <= 1.0
        previous = t.threshold


def test_phases_progress_to_completion():
    t = AcceleratingTutorialThreshold()
    received = []
    t.add_listener(received.append)
    for _ in range(1000):
        t.tick(0.1)
    assert t.threshold == 1.0
    assert t.current_phase is Phase.PHASE_5
    assert received == [
        Phase.PHASE_1,
        Phase.PHASE_2,
        Phase.PHASE_3,
        Phase.PHASE_4,
        Phase.PHASE_5,
    ]


def test_update_phase_notifies_only_on_change():
    t = AcceleratingTutorialThreshold()
    received = []
    t.add_listener(received.append)
    t.threshold = 0.5
    t.update_phase()
    t.update_phase()
    assert received == [Phase.PHASE_2]
    assert t.previous_phase is Phase.PHASE_2


def test_update_phase_clamps_out_of_range():
    t = AcceleratingTutorialThreshold()
    t.threshold = 3.0
    t.update_phase()
    assert t.current_phase is Phase.PHASE_5
    t.threshold = -1.0
    t.update_phase()
    assert t.current_phase is Phase.PHASE_0


def test_phase_display_name():
    t = AcceleratingTutorialThreshold()
    t.threshold = 0.65
    t.update_phase()
    assert t.current_phase is Phase.PHASE_3
    assert t.current_phase.display_name == "Phase 3"