from __future__ import annotations

from types import TracebackType
from typing import Protocol

from portfolio.core.enums.resolved_mode import ResolvedMode
from portfolio.core.enums.theme_event import ThemeEvent
from portfolio.core.enums.theme_preference import ThemePreference
from portfolio.core.theme import resolve
from portfolio.services.environment.color_scheme import ColorSchemeSignal
from portfolio.services.events.event_bus import EventBus
from portfolio.services.storage.preference_store import ThemePreferenceStore
from portfolio.utils.logger import get_logger

logger = get_logger(__name__)


class ThemeSurface(Protocol):
    def apply_mode(self, mode: ResolvedMode) -> None: ...


class ThemePreferenceController(EventBus[ThemeEvent]):
    """Owns the System/Light/Dark preference and the mode it resolves to.

    Listeners subscribed to ``ThemeEvent.THEME_CHANGED`` are called with
    ``preference`` and ``mode`` keyword arguments after every transition.
    The environment signal is subscribed once, on ``initialize``, and
    released by ``close`` (or on leaving a ``with`` block).
    """

    def __init__(
        self,
        store: ThemePreferenceStore,
        signal: ColorSchemeSignal,
        surface: ThemeSurface | None = None,
    ):
        super().__init__(ThemeEvent)
        self._store = store
        self._signal = signal
        self._surface = surface
        self._preference: ThemePreference = ThemePreference.SYSTEM
        self._resolved_mode: ResolvedMode | None = None
        self._subscribed = False
        self._initialized = False
        self._closed = False

    @property
    def preference(self) -> ThemePreference:
        return self._preference

    @property
    def resolved_mode(self) -> ResolvedMode | None:
        return self._resolved_mode

    @property
    def is_dark(self) -> bool:
        return self._resolved_mode is ResolvedMode.DARK

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def closed(self) -> bool:
        return self._closed

    def initialize(self) -> ResolvedMode:
        """Load the stored preference, start following the environment and apply the mode."""
        self._preference = self._store.load()

        if not self._subscribed and not self._closed:
            self._signal.subscribe(self._on_environment_change)
            self._subscribed = True

        self._initialized = True
        mode = self._apply(resolve(self._preference, self._signal.prefers_dark()))

        logger.info(
            f"[THEME_CONTROLLER] Initialized with {self._preference.value} -> {mode.value}"
        )
        return mode

    def cycle(self) -> ThemePreference:
        """Advance System -> Light -> Dark -> System, persist and apply."""
        if not self._initialized:
            self.initialize()

        self._preference = self._preference.next()
        self._store.save(self._preference)
        mode = self._apply(resolve(self._preference, self._signal.prefers_dark()))

        logger.info(f"[THEME_CONTROLLER] Theme changed to {self._preference.value} -> {mode.value}")
        return self._preference

    def close(self) -> None:
        """Release the environment subscription and drop all listeners."""
        if self._closed:
            return

        if self._subscribed:
            self._signal.unsubscribe(self._on_environment_change)
            self._subscribed = False

        self._closed = True
        self.clear()
        logger.info("[THEME_CONTROLLER] Closed")

    def __enter__(self) -> ThemePreferenceController:
        if not self._initialized:
            self.initialize()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _on_environment_change(self, prefers_dark: bool) -> None:
        if self._closed:
            return

        if self._preference is not ThemePreference.SYSTEM:
            logger.debug(
                f"[THEME_CONTROLLER] Ignoring system colour-scheme change, pinned to {self._preference.value}"
            )
            return

        mode = self._apply(resolve(ThemePreference.SYSTEM, prefers_dark))
        logger.info(f"[THEME_CONTROLLER] System colour scheme changed -> {mode.value}")

    def _apply(self, mode: ResolvedMode) -> ResolvedMode:
        self._resolved_mode = mode

        if self._surface is not None:
            self._surface.apply_mode(mode)

        self.publish(ThemeEvent.THEME_CHANGED, preference=self._preference, mode=mode)
        return mode
