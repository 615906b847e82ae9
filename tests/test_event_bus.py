"""Tests for the event bus."""

from portfolio.core.enums.color_scheme_event import ColorSchemeEvent
from portfolio.core.enums.theme_event import ThemeEvent
from portfolio.services.events.event_bus import EventBus


class FakeRoot:
    """Records ``after`` calls instead of running a Tk loop."""

    def __init__(self):
        self.scheduled = []
        self.cancelled = []

    def after(self, ms, callback, *args):
        self.scheduled.append((ms, callback, args))
        return f"after#{len(self.scheduled)}"

    def after_cancel(self, after_id):
        self.cancelled.append(after_id)


def test_publish_dispatches_synchronously():
    bus = EventBus(ThemeEvent)
    received = []
    bus.subscribe(ThemeEvent.THEME_CHANGED, lambda **kw: received.append(kw))

    bus.publish(ThemeEvent.THEME_CHANGED, mode="dark")

    assert received == [{"mode": "dark"}]


def test_listener_errors_are_isolated():
    bus = EventBus(ThemeEvent)
    received = []

    def broken(**_kwargs):
        raise ValueError("bad listener")

    bus.subscribe(ThemeEvent.THEME_CHANGED, broken)
    bus.subscribe(ThemeEvent.THEME_CHANGED, lambda **kw: received.append(kw))

    bus.publish(ThemeEvent.THEME_CHANGED, value=1)

    assert received == [{"value": 1}]


def test_unsubscribe_and_listener_count():
    bus = EventBus(ThemeEvent)

    def callback(**_kwargs):
        pass

    bus.subscribe(ThemeEvent.THEME_CHANGED, callback)
    assert bus.listener_count(ThemeEvent.THEME_CHANGED) == 1

    bus.unsubscribe(ThemeEvent.THEME_CHANGED, callback)
    bus.unsubscribe(ThemeEvent.THEME_CHANGED, callback)
    assert bus.listener_count(ThemeEvent.THEME_CHANGED) == 0


def test_post_waits_for_process_pending():
    bus = EventBus(ColorSchemeEvent)
    received = []
    bus.subscribe(ColorSchemeEvent.PREFERENCE_CHANGED, lambda prefers_dark: received.append(prefers_dark))

    bus.post(ColorSchemeEvent.PREFERENCE_CHANGED, prefers_dark=True)
    assert received == []

    assert bus.process_pending() == 1
    assert received == [True]
    assert bus.process_pending() == 0


def test_root_polling_loop_drains_queue():
    root = FakeRoot()
    bus = EventBus(ColorSchemeEvent, root, poll_interval_ms=25)
    received = []
    bus.subscribe(ColorSchemeEvent.PREFERENCE_CHANGED, lambda prefers_dark: received.append(prefers_dark))

    assert len(root.scheduled) == 1
    ms, callback, _args = root.scheduled[-1]
    assert ms == 25

    bus.post(ColorSchemeEvent.PREFERENCE_CHANGED, prefers_dark=False)
    callback()

    assert received == [False]
    assert len(root.scheduled) == 2


def test_stop_processing_ends_polling():
    root = FakeRoot()
    bus = EventBus(ColorSchemeEvent)
    bus.set_root(root)
    _ms, callback, _args = root.scheduled[-1]

    bus.stop_processing()
    callback()

    assert len(root.scheduled) == 1
    assert root.cancelled == ["after#1"]


def test_resume_processing_restarts_polling():
    root = FakeRoot()
    bus = EventBus(ColorSchemeEvent, root)
    received = []
    bus.subscribe(ColorSchemeEvent.PREFERENCE_CHANGED, lambda prefers_dark: received.append(prefers_dark))

    bus.stop_processing()
    bus.resume_processing()
    bus.resume_processing()

    assert len(root.scheduled) == 2
    assert root.cancelled == ["after#1"]

    bus.post(ColorSchemeEvent.PREFERENCE_CHANGED, prefers_dark=True)
    _ms, callback, _args = root.scheduled[-1]
    callback()

    assert received == [True]


def test_resume_processing_without_root_is_a_no_op():
    bus = EventBus(ColorSchemeEvent)

    bus.resume_processing()
    bus.post(ColorSchemeEvent.PREFERENCE_CHANGED, prefers_dark=True)

    assert bus.process_pending() == 1


def test_clear_drops_listeners_and_queue():
    bus = EventBus(ColorSchemeEvent)
    received = []
    bus.subscribe(ColorSchemeEvent.PREFERENCE_CHANGED, lambda **kw: received.append(kw))
    bus.post(ColorSchemeEvent.PREFERENCE_CHANGED, prefers_dark=True)

    bus.clear()

    assert bus.process_pending() == 0
    assert received == []
