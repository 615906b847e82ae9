"""Event bus using the Observer pattern with queue-based cross-thread dispatch."""

import queue
import threading
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Optional, Type, TypeVar

from portfolio.utils.logger import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


class EventBus(Generic[E]):
    """Observer registry for one event enum.

    ``publish`` dispatches synchronously on the calling thread. ``post`` is
    safe to call from any thread: the event is queued and dispatched on the
    Tk main thread by a ``root.after`` polling loop, or by an explicit
    ``process_pending`` call when no root is attached.
    """

    def __init__(self, event_type: Type[E], root: Optional[Any] = None, poll_interval_ms: int = 50):
        self._event_type = event_type
        self._listeners: Dict[E, List[Callable]] = {event: [] for event in event_type}
        self._event_queue: queue.Queue = queue.Queue()
        self._root = root
        self._poll_interval_ms = poll_interval_ms
        self._processing = False
        self._after_id: Optional[str] = None
        self._lock = threading.Lock()

        if self._root:
            self._start_processing()

    def set_root(self, root: Any) -> None:
        """Set the root window and start processing queued events."""
        logger.debug(f"[EVENT_BUS] set_root called, processing: {self._processing}")
        self._root = root
        self._start_processing()

    def subscribe(self, event: E, callback: Callable) -> None:
        with self._lock:
            if event not in self._listeners:
                self._listeners[event] = []
            self._listeners[event].append(callback)
            logger.debug(
                f"[EVENT_BUS] Subscribed to {event.name}, total listeners: {len(self._listeners[event])}"
            )

    def unsubscribe(self, event: E, callback: Callable) -> None:
        with self._lock:
            if event in self._listeners and callback in self._listeners[event]:
                self._listeners[event].remove(callback)
                logger.debug(f"[EVENT_BUS] Unsubscribed from {event.name}")

    def listener_count(self, event: E) -> int:
        with self._lock:
            return len(self._listeners.get(event, []))

    def publish(self, event: E, **kwargs) -> None:
        """Dispatch an event to all subscribers on the calling thread."""
        self._dispatch_event(event, kwargs)

    def post(self, event: E, **kwargs) -> None:
        """Queue an event for dispatch on the main thread."""
        self._event_queue.put((event, kwargs))
        logger.debug(f"[EVENT_BUS] Event {event.name} queued, queue size: {self._event_queue.qsize()}")

    def process_pending(self) -> int:
        """Dispatch every queued event and return how many were handled."""
        events_processed = 0
        while True:
            try:
                event, kwargs = self._event_queue.get_nowait()
            except queue.Empty:
                break
            self._dispatch_event(event, kwargs)
            events_processed += 1
        return events_processed

    def _start_processing(self) -> None:
        if not self._root:
            logger.warning("[EVENT_BUS] Cannot start processing - no root window")
            return

        if self._processing:
            logger.debug("[EVENT_BUS] Processing already started, skipping")
            return

        logger.info(f"[EVENT_BUS] Starting {self._event_type.__name__} processing loop")
        self._processing = True
        self._process_events()

    def _process_events(self) -> None:
        self._after_id = None
        if not self._root:
            logger.error("[EVENT_BUS] _process_events called without root!")
            return

        try:
            events_processed = self.process_pending()
            if events_processed > 0:
                logger.debug(f"[EVENT_BUS] Processed {events_processed} queued events")
        except Exception as e:
            logger.error(f"[EVENT_BUS] Error processing events: {e}", exc_info=True)
        finally:
            if self._processing:
                self._after_id = self._root.after(self._poll_interval_ms, self._process_events)

    def _dispatch_event(self, event: E, kwargs: Dict[str, Any]) -> None:
        with self._lock:
            listeners = self._listeners.get(event, []).copy()

        if not listeners:
            logger.debug(f"[EVENT_BUS] No listeners registered for {event.name}")
            return

        for i, callback in enumerate(listeners):
            try:
                callback(**kwargs)
            except Exception as e:
                logger.error(
                    f"[EVENT_BUS] Error in {event.name} callback {i + 1}: {e}",
                    exc_info=True,
                )

    def resume_processing(self) -> None:
        """Restart the main-thread polling loop if a root is attached."""
        if self._root:
            self._start_processing()

    def stop_processing(self) -> None:
        """Stop the main-thread polling loop."""
        if self._processing:
            logger.info("[EVENT_BUS] Stopping event processing")
        self._processing = False
        if self._after_id is not None and self._root:
            self._root.after_cancel(self._after_id)
        self._after_id = None

    def clear(self) -> None:
        """Clear all subscriptions and queued events."""
        with self._lock:
            for event in self._event_type:
                self._listeners[event].clear()

        while not self._event_queue.empty():
            try:
                self._event_queue.get_nowait()
            except queue.Empty:
                break

        logger.debug("[EVENT_BUS] Cleared all listeners and queued events")
