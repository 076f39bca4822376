from core.desktop.devtools.application.notifications import KIND_ERROR, KIND_SUCCESS, NotificationCenter


class ManualClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_notification_expires_after_three_seconds():
    clock = ManualClock()
    center = NotificationCenter(clock=clock)
    center.show("Task created successfully!", KIND_SUCCESS)
    clock.now = 2.9
    assert center.current().message == "Task created successfully!"
    clock.now = 3.0
    assert center.current() is None


def test_new_notification_replaces_previous():
    clock = ManualClock()
    center = NotificationCenter(clock=clock)
    center.show("first", KIND_SUCCESS)
    clock.now = 2.5
    center.show("second", KIND_ERROR)
    clock.now = 4.0
    note = center.current()
    assert note.message == "second"
    assert note.kind == KIND_ERROR


def test_dismiss():
    center = NotificationCenter(clock=ManualClock())
    center.show("bye")
    center.dismiss()
    assert center.current() is None
