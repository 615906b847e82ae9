"""Tests for the operating-system colour-scheme signals."""

import threading

from portfolio.services.environment import color_scheme
from portfolio.services.environment.color_scheme import (
    ManualColorSchemeSignal,
    SystemColorSchemeSignal,
)


class TestManualColorSchemeSignal:
    def test_reports_initial_value(self):
        assert ManualColorSchemeSignal(prefers_dark=True).prefers_dark() is True

    def test_notifies_on_change_only(self):
        signal = ManualColorSchemeSignal()
        seen = []
        signal.subscribe(lambda prefers_dark: seen.append(prefers_dark))

        signal.set_prefers_dark(False)
        signal.set_prefers_dark(True)
        signal.set_prefers_dark(True)

        assert seen == [True]
        assert signal.prefers_dark() is True

    def test_unsubscribe(self):
        signal = ManualColorSchemeSignal()
        seen = []

        def callback(prefers_dark):
            seen.append(prefers_dark)

        signal.subscribe(callback)
        signal.unsubscribe(callback)
        signal.set_prefers_dark(True)

        assert seen == []
        assert signal.subscriber_count == 0


class TestSystemColorSchemeSignal:
    def test_prefers_dark_queries_darkdetect(self, monkeypatch):
        monkeypatch.setattr(color_scheme.darkdetect, "isDark", lambda: True)
        assert SystemColorSchemeSignal().prefers_dark() is True

        monkeypatch.setattr(color_scheme.darkdetect, "isDark", lambda: None)
        assert SystemColorSchemeSignal().prefers_dark() is False

    def test_prefers_dark_failure_reads_light(self, monkeypatch):
        def broken():
            raise OSError("no desktop session")

        monkeypatch.setattr(color_scheme.darkdetect, "isDark", broken)
        assert SystemColorSchemeSignal().prefers_dark() is False

    def test_notifications_are_queued_until_processed(self):
        signal = SystemColorSchemeSignal()
        seen = []
        signal.subscribe(lambda prefers_dark: seen.append(prefers_dark))

        signal._on_system_change("Dark")
        signal._on_system_change("Light")
        assert seen == []

        assert signal.process_pending() == 2
        assert seen == [True, False]

    def test_watcher_thread_posts_changes(self, monkeypatch):
        monkeypatch.setattr(color_scheme.darkdetect, "listener", lambda callback: callback("Dark"))
        signal = SystemColorSchemeSignal()
        seen = []
        signal.subscribe(lambda prefers_dark: seen.append(prefers_dark))

        signal.start()
        signal._thread.join(timeout=5)
        signal.process_pending()

        assert seen == [True]

    def test_unsupported_platform_is_tolerated(self, monkeypatch):
        def unsupported(callback):
            raise NotImplementedError

        monkeypatch.setattr(color_scheme.darkdetect, "listener", unsupported)
        signal = SystemColorSchemeSignal()

        signal.start()
        signal._thread.join(timeout=5)

        assert signal._thread.is_alive() is False

    def test_stop_drops_subscribers_and_later_changes(self):
        signal = SystemColorSchemeSignal()
        seen = []
        signal.subscribe(lambda prefers_dark: seen.append(prefers_dark))

        signal.stop()
        signal._on_system_change("Dark")
        signal.process_pending()

        assert seen == []
        assert signal.subscriber_count == 0

    def test_restart_after_stop_delivers_changes(self, monkeypatch):
        monkeypatch.setattr(color_scheme.darkdetect, "listener", lambda callback: None)
        signal = SystemColorSchemeSignal()
        signal.start()
        signal._thread.join(timeout=5)

        signal.stop()
        seen = []
        signal.subscribe(lambda prefers_dark: seen.append(prefers_dark))
        signal.start()
        signal._thread.join(timeout=5)
        signal._on_system_change("Dark")
        signal.process_pending()

        assert seen == [True]

    def test_restart_while_watcher_alive_resumes_delivery(self, monkeypatch):
        release = threading.Event()
        monkeypatch.setattr(color_scheme.darkdetect, "listener", lambda callback: release.wait(5))
        signal = SystemColorSchemeSignal()
        seen = []
        try:
            signal.start()
            watcher = signal._thread

            signal.stop()
            signal.subscribe(lambda prefers_dark: seen.append(prefers_dark))
            signal.start()

            assert signal._thread is watcher
            signal._on_system_change("Dark")
            signal.process_pending()
        finally:
            release.set()

        assert seen == [True]
