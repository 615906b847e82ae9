"""Operating system colour-scheme signal ("prefers dark") and its subscriptions."""

import threading
from typing import Any, Callable, Optional, Protocol

import darkdetect

from portfolio.core.enums.color_scheme_event import ColorSchemeEvent
from portfolio.services.events.event_bus import EventBus
from portfolio.utils.logger import get_logger

logger = get_logger(__name__)

ColorSchemeCallback = Callable[..., None]


class ColorSchemeSignal(Protocol):
    """Callbacks are invoked with a ``prefers_dark`` keyword argument."""

    def prefers_dark(self) -> bool: ...

    def subscribe(self, callback: ColorSchemeCallback) -> None: ...

    def unsubscribe(self, callback: ColorSchemeCallback) -> None: ...


class ManualColorSchemeSignal:
    """Signal whose value is set by the caller; notifications are synchronous."""

    def __init__(self, prefers_dark: bool = False):
        self._prefers_dark = prefers_dark
        self._bus: EventBus[ColorSchemeEvent] = EventBus(ColorSchemeEvent)

    def prefers_dark(self) -> bool:
        return self._prefers_dark

    def set_prefers_dark(self, value: bool) -> None:
        if value == self._prefers_dark:
            return
        self._prefers_dark = value
        self._bus.publish(ColorSchemeEvent.PREFERENCE_CHANGED, prefers_dark=value)

    def subscribe(self, callback: ColorSchemeCallback) -> None:
        self._bus.subscribe(ColorSchemeEvent.PREFERENCE_CHANGED, callback)

    def unsubscribe(self, callback: ColorSchemeCallback) -> None:
        self._bus.unsubscribe(ColorSchemeEvent.PREFERENCE_CHANGED, callback)

    @property
    def subscriber_count(self) -> int:
        return self._bus.listener_count(ColorSchemeEvent.PREFERENCE_CHANGED)


class SystemColorSchemeSignal:
    """Colour-scheme signal backed by ``darkdetect``.

    ``darkdetect.listener`` blocks, so it runs on a daemon watcher thread.
    The watcher only posts onto the event bus queue; subscribers are called
    on the Tk main thread once a root is attached, or from
    ``process_pending`` otherwise.
    """

    def __init__(self, root: Optional[Any] = None, poll_interval_ms: int = 50):
        self._bus: EventBus[ColorSchemeEvent] = EventBus(
            ColorSchemeEvent, root, poll_interval_ms=poll_interval_ms
        )
        self._thread: threading.Thread | None = None
        self._stopped = False

    def prefers_dark(self) -> bool:
        try:
            return bool(darkdetect.isDark())
        except Exception as e:
            logger.warning(f"[COLOR_SCHEME] Could not query system colour scheme: {e}")
            return False

    def subscribe(self, callback: ColorSchemeCallback) -> None:
        self._bus.subscribe(ColorSchemeEvent.PREFERENCE_CHANGED, callback)

    def unsubscribe(self, callback: ColorSchemeCallback) -> None:
        self._bus.unsubscribe(ColorSchemeEvent.PREFERENCE_CHANGED, callback)

    @property
    def subscriber_count(self) -> int:
        return self._bus.listener_count(ColorSchemeEvent.PREFERENCE_CHANGED)

    def set_root(self, root: Any) -> None:
        self._bus.set_root(root)

    def process_pending(self) -> int:
        return self._bus.process_pending()

    def start(self) -> None:
        """Start (or resume after ``stop``) watching for colour-scheme changes."""
        self._stopped = False
        self._bus.resume_processing()

        if self._thread is not None and self._thread.is_alive():
            return

        self._thread = threading.Thread(
            target=self._watch, name="color-scheme-watcher", daemon=True
        )
        self._thread.start()
        logger.info("[COLOR_SCHEME] Watching system colour scheme")

    def stop(self) -> None:
        self._stopped = True
        self._bus.stop_processing()
        self._bus.clear()

    def _watch(self) -> None:
        try:
            darkdetect.listener(self._on_system_change)
        except NotImplementedError:
            logger.warning("[COLOR_SCHEME] Colour-scheme notifications unsupported on this platform")
        except Exception as e:
            logger.error(f"[COLOR_SCHEME] Colour-scheme watcher stopped: {e}", exc_info=True)

    def _on_system_change(self, theme: str) -> None:
        if self._stopped:
            return
        prefers_dark = str(theme).lower() == "dark"
        logger.debug(f"[COLOR_SCHEME] System colour scheme changed to {theme}")
        self._bus.post(ColorSchemeEvent.PREFERENCE_CHANGED, prefers_dark=prefers_dark)
