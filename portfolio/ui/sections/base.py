from __future__ import annotations

import customtkinter as ctk

from portfolio.models.content import PortfolioContent
from portfolio.ui.components.animated_entry import AnimatedEntry
from portfolio.ui.utils import palette


class SectionView(ctk.CTkScrollableFrame):
    """Scrollable page hosting one portfolio section."""

    def __init__(self, master, content: PortfolioContent):
        super().__init__(master, fg_color=palette.BACKGROUND, corner_radius=0)
        self.content = content
        self.grid_columnconfigure(0, weight=1)

    def add_title(self, text: str, row: int = 0) -> AnimatedEntry:
        entry = AnimatedEntry(self)
        entry.grid(row=row, column=0, padx=40, pady=(32, 12), sticky="w")
        ctk.CTkLabel(
            entry.body, text=text, font=palette.TITLE_FONT, text_color=palette.ACCENT_TEXT
        ).pack(anchor="w")
        return entry
