from __future__ import annotations

import customtkinter as ctk

from portfolio.core.enums.animation_direction import AnimationDirection
from portfolio.models.content import PortfolioContent
from portfolio.ui.components.animated_entry import AnimatedEntry
from portfolio.ui.components.cards import ProjectCard
from portfolio.ui.sections.base import SectionView
from portfolio.ui.utils import palette

CARD_COLUMNS = 3
CARD_DELAY_MS = 200


def card_entry(index: int) -> tuple[int, AnimationDirection]:
    """Delay and direction of the slide-in for the card at ``index``."""
    direction = AnimationDirection.LEFT if index % 2 == 0 else AnimationDirection.RIGHT
    return CARD_DELAY_MS * index, direction


class ProjectsSection(SectionView):
    def __init__(self, master, content: PortfolioContent):
        super().__init__(master, content)

        self.add_title("Projects")

        intro = AnimatedEntry(self, delay=200)
        intro.grid(row=1, column=0, padx=40, pady=(0, 24), sticky="w")
        ctk.CTkLabel(
            intro.body,
            text=content.projects_intro,
            font=("Roboto", 16),
            text_color=palette.TEXT_MUTED,
            wraplength=760,
            justify="left",
        ).pack(anchor="w")

        grid = ctk.CTkFrame(self, fg_color="transparent")
        grid.grid(row=2, column=0, padx=32, pady=(0, 32), sticky="ew")
        for column in range(CARD_COLUMNS):
            grid.grid_columnconfigure(column, weight=1, uniform="cards")

        for index, project in enumerate(content.projects):
            delay, direction = card_entry(index)
            entry = AnimatedEntry(grid, delay=delay, direction=direction)
            entry.grid(
                row=index // CARD_COLUMNS, column=index % CARD_COLUMNS, padx=8, pady=8, sticky="nsew"
            )
            ProjectCard(entry.body, project).pack(fill="both", expand=True)
