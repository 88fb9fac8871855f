from blockrender.input import Input, Key


class RecordingWindow:
    def __init__(self):
        self.handlers = []
        self.exclusive_calls = []

    def push_handlers(self, *handlers):
        self.handlers.extend(handlers)

    def set_exclusive_mouse(self, exclusive):
        self.exclusive_calls.append(exclusive)


def test_keys_start_released():
    inp = Input()
    assert inp.key_down(Key.W) is False
    assert inp.key_up(Key.W) is True


def test_press_and_release():
    inp = Input()
    inp.on_key_press(Key.A, 0)
    assert inp.key_down(Key.A) is True
    assert inp.key_up(Key.A) is False
    assert inp.key_down(Key.D) is False
    inp.on_key_release(Key.A, 0)
    assert inp.key_down(Key.A) is False


def test_plain_int_symbols_match_keys():
    inp = Input()
    inp.on_key_press(int(Key.SPACE), 0)
    assert inp.key_down(Key.SPACE) is True


def test_key_codes_follow_pyglet():
    inp = Input()
    inp.on_key_press(ord("w"), 0)
    inp.on_key_press(ord(" "), 0)
    assert inp.key_down(Key.W) is True
    assert inp.key_down(Key.SPACE) is True
    assert inp.key_down(Key.S) is False


def test_cursor_accumulates_with_y_downward():
    inp = Input()
    assert inp.cursor_pos() == (0.0, 0.0)
    inp.on_mouse_motion(100, 100, 3, 4)
    inp.on_mouse_motion(100, 100, 2, -1)
    assert inp.cursor_pos() == (5.0, -3.0)


def test_lock_cursor_without_window():
    inp = Input()
    inp.set_lock_cursor(True)
    assert inp.cursor_locked is True
    inp.set_lock_cursor(False)
    assert inp.cursor_locked is False


def test_window_receives_handlers_and_lock_requests():
    window = RecordingWindow()
    inp = Input(window)
    assert window.handlers == [inp]
    inp.set_lock_cursor(True)
    inp.set_lock_cursor(False)
    assert window.exclusive_calls == [True, False]