"""Playback engine tests: interpolation, cursor invariants and scenarios."""

import math

import pytest

from experimenter.config import create_default_config
from robolab.commands import MoveForward, TurnLeft, TurnRight, UnknownCommand
from robolab.playback_engine import PlaybackEngine, PlaybackState, interpolate_pose
from robolab.pose import Pose


def _make_engine(**overrides):
    frames = []
    config = create_default_config(**overrides)
    engine = PlaybackEngine(config, render_callback=lambda data: frames.append(data) or True)
    return engine, frames


def _run(engine, queue, ticks, running=True):
    for _ in range(ticks):
        engine.tick(running, queue)


def test_move_forward_scenario():
    engine, _ = _make_engine()
    queue = [MoveForward(100)]

    _run(engine, queue, 20)
    assert engine.pose == Pose(150.0, 50.0, 0.0)
    assert engine.cursor.command_index == 1
    assert engine.cursor.progress == 0.0

    engine.tick(True, queue)
    assert engine.pose == Pose(150.0, 50.0, 0.0)
    assert engine.state(queue) == PlaybackState.FINISHED


def test_turn_right_scenario():
    engine, _ = _make_engine()
    queue = [TurnRight(90)]

    _run(engine, queue, 20)
    assert engine.pose.heading == 90.0
    assert (engine.pose.x, engine.pose.y) == (50.0, 50.0)


def test_move_then_turn_left_scenario():
    engine, _ = _make_engine(origin_x=0.0, origin_y=0.0)
    queue = [MoveForward(40), TurnLeft(90)]

    _run(engine, queue, 20)
    assert engine.pose == Pose(40.0, 0.0, 0.0)

    _run(engine, queue, 20)
    assert engine.pose == Pose(40.0, 0.0, -90.0)
    assert engine.is_finished(queue)


def test_move_forward_follows_heading():
    engine, _ = _make_engine(origin_x=0.0, origin_y=0.0, origin_heading=90.0)
    _run(engine, [MoveForward(10)], 20)
    assert engine.pose.x == pytest.approx(0.0, abs=1e-9)
    assert engine.pose.y == pytest.approx(10.0)


def test_progress_is_monotonic_until_wrap():
    engine, _ = _make_engine(speed=0.3)
    queue = [MoveForward(10), TurnRight(30), MoveForward(5)]

    previous_index, previous_progress = 0, 0.0
    while not engine.is_finished(queue):
        engine.tick(True, queue)
        cursor = engine.cursor
        assert 0.0 <= cursor.progress <= 1.0
        if cursor.command_index == previous_index:
            assert cursor.progress >= previous_progress
        else:
            assert cursor.command_index == previous_index + 1
            assert cursor.progress == 0.0
        previous_index, previous_progress = cursor.command_index, cursor.progress


def test_no_overshoot_with_uneven_speed():
    engine, _ = _make_engine(speed=0.3)
    start = engine.pose.copy()
    queue = [MoveForward(100)]

    for _ in range(3):
        engine.tick(True, queue)
        assert math.hypot(engine.pose.x - start.x, engine.pose.y - start.y) <= 100.0

    engine.tick(True, queue)
    assert math.hypot(engine.pose.x - start.x, engine.pose.y - start.y) == pytest.approx(100.0)
    assert engine.pose.x == 150.0
    assert engine.cursor.command_index == 1


def test_segment_start_pose_is_snapshot():
    engine, _ = _make_engine()
    queue = [MoveForward(100)]
    _run(engine, queue, 5)
    assert engine.cursor.segment_start_pose == Pose(50.0, 50.0, 0.0)
    assert engine.cursor.segment_start_pose is not engine.pose


def test_pause_is_idempotent():
    engine, _ = _make_engine()
    queue = [MoveForward(100), TurnRight(45)]
    _run(engine, queue, 7)

    pose, cursor = engine.pose.copy(), (engine.cursor.command_index, engine.cursor.progress)
    _run(engine, queue, 10, running=False)
    assert engine.pose == pose
    assert (engine.cursor.command_index, engine.cursor.progress) == cursor


def test_finished_pose_is_frozen():
    engine, _ = _make_engine()
    queue = [TurnLeft(30)]
    _run(engine, queue, 20)
    final = engine.pose.copy()

    _run(engine, queue, 5, running=True)
    _run(engine, queue, 5, running=False)
    assert engine.pose == final


def test_reset_returns_to_origin():
    engine, _ = _make_engine()
    _run(engine, [MoveForward(100), TurnRight(90)], 27)

    engine.reset()
    assert engine.pose == Pose(50.0, 50.0, 0.0)
    assert engine.cursor.command_index == 0
    assert engine.cursor.progress == 0.0
    assert engine.cursor.segment_start_pose == Pose(50.0, 50.0, 0.0)
    assert engine.state([]) == PlaybackState.PENDING


def test_renderer_called_every_tick():
    engine, frames = _make_engine()
    engine.tick(False, [])
    engine.tick(True, [])
    engine.tick(True, [MoveForward(10)])
    assert len(frames) == 3
    assert frames[0]['idle'] is True
    assert frames[2]['idle'] is False
    assert frames[2]['obstacles'] == engine.obstacles


def test_render_data_pose_is_a_snapshot():
    engine, frames = _make_engine()
    queue = [MoveForward(100)]
    engine.tick(True, queue)
    engine.tick(True, queue)
    assert frames[0]['pose'].x == pytest.approx(55.0)
    assert frames[1]['pose'].x == pytest.approx(60.0)


def test_unknown_command_holds_playback():
    engine, _ = _make_engine()
    seen = []
    engine.set_unknown_command_callback(lambda index, command: seen.append(index))
    queue = [UnknownCommand('jump', 3), MoveForward(10)]

    with pytest.warns(RuntimeWarning):
        _run(engine, queue, 3)

    assert engine.pose == Pose(50.0, 50.0, 0.0)
    assert engine.cursor.command_index == 0
    assert engine.cursor.progress == 0.0
    assert seen == [0, 0, 0]


def test_command_callback_reports_final_pose():
    engine, _ = _make_engine()
    completed = []
    engine.set_command_callback(lambda index, command, pose: completed.append((index, pose)))
    _run(engine, [MoveForward(20), TurnRight(90)], 40)
    assert completed == [(0, Pose(70.0, 50.0, 0.0)), (1, Pose(70.0, 50.0, 90.0))]


def test_resize_redraws_immediately():
    engine, frames = _make_engine()
    engine.resize(320, 240)
    assert len(frames) == 1
    assert (frames[0]['width'], frames[0]['height']) == (320, 240)

    engine.resize(-5, 0)
    assert (frames[1]['width'], frames[1]['height']) == (0, 0)


def test_interpolate_pose_clamps_progress():
    start = Pose(0.0, 0.0, 0.0)
    assert interpolate_pose(start, MoveForward(10), 1.5) == Pose(10.0, 0.0, 0.0)
    assert interpolate_pose(start, TurnRight(90), 0.5).heading == 45.0
    assert interpolate_pose(start, UnknownCommand('beep'), 0.5) is None


def test_rounded_position_rounds_half_up():
    assert Pose(10.5, -2.5, 0.0).rounded_position() == (11, -2)
    assert Pose(math.pi, 49.49, 0.0).rounded_position() == (3, 49)


def test_restart_cursor_starts_from_current_pose():
    engine, _ = _make_engine()
    _run(engine, [MoveForward(100)], 5)

    engine.restart_cursor()
    assert engine.cursor.command_index == 0
    assert engine.cursor.progress == 0.0
    assert engine.cursor.segment_start_pose == engine.pose

    start = engine.pose.copy()
    _run(engine, [TurnRight(90)], 20)
    assert engine.pose == Pose(start.x, start.y, 90.0)
    assert engine.pose.x == pytest.approx(75.0)


def test_redraw_uses_host_state_when_given():
    engine, frames = _make_engine()
    engine.tick(False, [])
    engine.resize(400, 300, running=True, queue=[MoveForward(10)])
    assert frames[-1]['running'] is True
    assert frames[-1]['idle'] is False
    assert frames[-1]['queue_length'] == 1
