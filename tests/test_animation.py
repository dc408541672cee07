import pytest

from sprite2d.animation import Animation
from sprite2d.sprite import Frame

MAN_FRAMES = [
    Frame(68, 0, 68, 68),
    Frame(136, 0, 68, 68),
    Frame(204, 0, 68, 68),
    Frame(136, 0, 68, 68),
]


def make():
    return Animation(MAN_FRAMES, frame_duration=0.25)


def test_starts_on_first_frame():
    anim = make()
    assert anim.current() == MAN_FRAMES[0]
    assert anim.frame_count == len(MAN_FRAMES)


def test_short_step_does_not_advance():
    anim = make()
    anim.update(0.125)
    assert anim.current_frame == 0
    assert anim.elapsed_time == 0.125


def test_reaching_duration_advances_and_resets():
    anim = make()
    anim.update(0.25)
    assert anim.current_frame == 1
    assert anim.elapsed_time == 0.0
    assert anim.current() == MAN_FRAMES[1]


def test_small_steps_accumulate():
    anim = make()
    anim.update(0.125)
    anim.update(0.125)
    assert anim.current_frame == 1


def test_large_step_advances_only_one_frame():
    anim = make()
    anim.update(10.0)
    assert anim.current_frame == 1
    assert anim.elapsed_time == 0.0


def test_loops_back_to_start():
    anim = make()
    seen = []
    for _ in range(len(MAN_FRAMES)):
        anim.update(0.25)
        seen.append(anim.current_frame)
    assert seen == [1, 2, 3, 0]
    assert anim.current() == MAN_FRAMES[0]


def test_empty_frames_rejected():
    with pytest.raises(ValueError):
        Animation([])


def test_default_duration():
    anim = Animation(MAN_FRAMES)
    assert anim.frame_duration == pytest.approx(0.1)