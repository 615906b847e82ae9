from __future__ import annotations

from typing import Callable

import customtkinter as ctk

from portfolio.core.enums.animation_direction import AnimationDirection
from portfolio.core.enums.section import Section
from portfolio.core.theme_controller import ThemePreferenceController
from portfolio.models.content import PortfolioContent
from portfolio.ui.components.animated_entry import AnimatedEntry
from portfolio.ui.components.theme_toggle import ThemeToggle
from portfolio.ui.utils import palette

NAV_ICONS = {
    Section.INTRO: "👤",
    Section.PROJECTS: "💼",
    Section.ABOUT: "📄",
}


def nav_label(section: Section, content: PortfolioContent) -> str:
    if section is Section.INTRO:
        return content.owner_first_name
    return section.value.capitalize()


class NavBar(ctk.CTkFrame):
    """Header with the site name, one button per section and the theme toggle."""

    def __init__(
        self,
        master,
        content: PortfolioContent,
        controller: ThemePreferenceController,
        on_select: Callable[[Section], None],
        active: Section = Section.INTRO,
    ):
        super().__init__(master, corner_radius=0, fg_color=palette.SURFACE, border_width=0)

        self._on_select = on_select
        self._buttons: dict[Section, ctk.CTkButton] = {}

        self.grid_columnconfigure(1, weight=1)

        logo = AnimatedEntry(self)
        logo.grid(row=0, column=0, padx=20, pady=12, sticky="w")
        ctk.CTkLabel(
            logo.body,
            text=content.site_name,
            font=("Roboto", 24, "bold"),
            text_color=palette.ACCENT_TEXT,
        ).pack()

        nav = ctk.CTkFrame(self, fg_color="transparent")
        nav.grid(row=0, column=2, padx=(0, 12), pady=12, sticky="e")

        for index, section in enumerate(Section):
            entry = AnimatedEntry(nav, delay=200 + 100 * index, direction=AnimationDirection.DOWN)
            entry.grid(row=0, column=index, padx=4)
            button = ctk.CTkButton(
                entry.body,
                text=f"{NAV_ICONS[section]}  {nav_label(section, content)}",
                font=("Roboto", 13, "bold"),
                width=110,
                height=36,
                command=lambda s=section: self._on_select(s),
            )
            button.pack()
            self._buttons[section] = button

        self.theme_toggle = ThemeToggle(self, controller)
        self.theme_toggle.grid(row=0, column=3, padx=(8, 20), pady=8)

        self.set_active(active)

    def set_active(self, section: Section) -> None:
        for candidate, button in self._buttons.items():
            if candidate is section:
                button.configure(
                    fg_color=palette.ACCENT, hover_color=palette.ACCENT_HOVER, text_color="#ffffff"
                )
            else:
                button.configure(
                    fg_color="transparent",
                    hover_color=palette.ACCENT_SOFT,
                    text_color=palette.TEXT,
                )
