from __future__ import annotations

import customtkinter as ctk

from portfolio.core.enums.resolved_mode import ResolvedMode
from portfolio.core.enums.theme_event import ThemeEvent
from portfolio.core.enums.theme_preference import ThemePreference
from portfolio.core.theme_controller import ThemePreferenceController
from portfolio.ui.utils import palette
from portfolio.utils.logger import get_logger

logger = get_logger(__name__)

TOGGLE_ICONS = {
    ThemePreference.SYSTEM: "◐",
    ThemePreference.LIGHT: "☀",
    ThemePreference.DARK: "☾",
}


def toggle_icon(preference: ThemePreference) -> tuple[str, str | tuple[str, str]]:
    """Icon glyph and colour shown for a preference."""
    if preference is ThemePreference.DARK:
        return TOGGLE_ICONS[preference], palette.MOON
    if preference is ThemePreference.LIGHT:
        return TOGGLE_ICONS[preference], palette.SUN
    return TOGGLE_ICONS[preference], palette.ACCENT_TEXT


class ThemeToggle(ctk.CTkFrame):
    def __init__(self, master, controller: ThemePreferenceController):
        super().__init__(master, fg_color="transparent")

        self._controller = controller
        self._controller.subscribe(ThemeEvent.THEME_CHANGED, self._on_theme_changed)

        self.button = ctk.CTkButton(
            self,
            text="",
            width=40,
            height=40,
            corner_radius=20,
            font=("Roboto", 18),
            fg_color=palette.BACKGROUND,
            hover_color=palette.ACCENT_SOFT,
            command=self._on_click,
        )
        self.button.grid(row=0, column=0)

        self.caption = ctk.CTkLabel(
            self, text="", font=palette.SMALL_FONT, text_color=palette.TEXT_SUBTLE
        )
        self.caption.grid(row=1, column=0, pady=(2, 0))

        self._render(controller.preference)

    def _on_click(self) -> None:
        preference = self._controller.cycle()
        logger.info(f"[THEME_TOGGLE] Switched preference to {preference.value}")

    def _on_theme_changed(self, preference: ThemePreference, mode: ResolvedMode) -> None:
        self._render(preference)

    def _render(self, preference: ThemePreference) -> None:
        icon, color = toggle_icon(preference)
        self.button.configure(text=icon, text_color=color)
        self.caption.configure(text=preference.label)

    def destroy(self):
        self._controller.unsubscribe(ThemeEvent.THEME_CHANGED, self._on_theme_changed)
        super().destroy()
