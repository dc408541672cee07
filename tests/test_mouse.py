from sprite2d.mouse import Mouse


def test_new_mouse_is_at_origin_with_buttons_up():
    mouse = Mouse()
    assert (mouse.x, mouse.y) == (0, 0)
    assert mouse.is_left_button_down is False
    assert mouse.is_right_button_down is False


def test_new_mouse_at_given_position():
    mouse = Mouse(12, 34)
    assert (mouse.x, mouse.y) == (12, 34)


def test_update_records_position_and_buttons():
    mouse = Mouse()
    mouse.update((100, 200), (True, False, True))
    assert (mouse.x, mouse.y) == (100, 200)
    assert mouse.is_left_button_down is True
    assert mouse.is_right_button_down is True


def test_release_clears_buttons():
    mouse = Mouse()
    mouse.update((1, 1), (True, False, True))
    mouse.update((2, 3), (False, False, False))
    assert (mouse.x, mouse.y) == (2, 3)
    assert mouse.is_left_button_down is False
    assert mouse.is_right_button_down is False


def test_middle_button_is_ignored():
    mouse = Mouse()
    mouse.update((0, 0), (False, True, False))
    assert mouse.is_left_button_down is False
    assert mouse.is_right_button_down is False


def test_short_button_sequence_counts_as_released():
    mouse = Mouse()
    mouse.update((5, 6), (True,))
    assert mouse.is_left_button_down is True
    assert mouse.is_right_button_down is False


def test_negative_positions_are_kept():
    mouse = Mouse()
    mouse.update((-4, -9), ())
    assert (mouse.x, mouse.y) == (-4, -9)