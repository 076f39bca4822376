from core.desktop.devtools.application.debounce import Debouncer


class ManualClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_value_settles_after_quiet_period():
    clock = ManualClock()
    deb = Debouncer("", delay=0.5, clock=clock)
    deb.push("m")
    clock.now = 0.2
    deb.push("mi")
    clock.now = 0.6
    assert deb.poll() is False
    assert deb.value == ""
    assert deb.pending
    clock.now = 0.8
    assert deb.poll() is True
    assert deb.value == "mi"
    assert not deb.pending


def test_same_value_does_not_report_change():
    clock = ManualClock()
    deb = Debouncer("milk", delay=0.5, clock=clock)
    deb.push("milk")
    clock.now = 1
    assert deb.poll() is False
    assert not deb.pending


def test_flush_and_reset():
    clock = ManualClock()
    deb = Debouncer("", delay=0.5, clock=clock)
    deb.push("x")
    assert deb.flush() is True
    assert deb.value == "x"
    deb.push("y")
    deb.reset("")
    assert deb.value == ""
    assert not deb.pending
    assert deb.flush() is False
