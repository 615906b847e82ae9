from __future__ import annotations

import customtkinter as ctk

from portfolio.models.content import PortfolioContent
from portfolio.ui.components.animated_entry import AnimatedEntry
from portfolio.ui.components.cards import StatCard
from portfolio.ui.components.footer import open_link
from portfolio.ui.sections.base import SectionView
from portfolio.ui.utils import palette


class IntroSection(SectionView):
    def __init__(self, master, content: PortfolioContent):
        super().__init__(master, content)

        self.add_title(content.owner_name)

        hero = ctk.CTkFrame(self, fg_color="transparent")
        hero.grid(row=1, column=0, padx=40, pady=12, sticky="ew")
        hero.grid_columnconfigure(1, weight=1)

        avatar = AnimatedEntry(hero, delay=200)
        avatar.grid(row=0, column=0, rowspan=4, padx=(0, 40), sticky="n")
        ctk.CTkLabel(
            avatar.body,
            text=content.avatar,
            font=("Roboto", 72),
            width=180,
            height=180,
            corner_radius=90,
            fg_color=palette.ACCENT,
        ).pack()

        headline = AnimatedEntry(hero, delay=400)
        headline.grid(row=0, column=1, sticky="w")
        ctk.CTkLabel(
            headline.body,
            text=content.headline,
            font=palette.HEADING_FONT,
            text_color=palette.ACCENT_TEXT,
        ).pack(anchor="w")

        text = AnimatedEntry(hero, delay=600)
        text.grid(row=1, column=1, pady=(12, 0), sticky="w")
        ctk.CTkLabel(
            text.body,
            text=content.intro_text,
            font=palette.BODY_FONT,
            text_color=palette.TEXT,
            wraplength=560,
            justify="left",
        ).pack(anchor="w")

        actions = AnimatedEntry(hero, delay=800)
        actions.grid(row=2, column=1, pady=(20, 0), sticky="w")
        ctk.CTkButton(
            actions.body,
            text="✉  Contact Me",
            height=42,
            fg_color=palette.ACCENT,
            hover_color=palette.ACCENT_HOVER,
        ).pack(side="left", padx=(0, 12))
        ctk.CTkButton(
            actions.body,
            text="📄  Download CV",
            height=42,
            fg_color="transparent",
            border_width=2,
            border_color=palette.ACCENT,
            text_color=palette.ACCENT_TEXT,
            hover_color=palette.ACCENT_SOFT,
        ).pack(side="left")

        socials = AnimatedEntry(hero, delay=1000)
        socials.grid(row=3, column=1, pady=(16, 0), sticky="w")
        for link in content.social_links:
            ctk.CTkButton(
                socials.body,
                text=link.label,
                width=70,
                fg_color="transparent",
                hover_color=palette.ACCENT_SOFT,
                text_color=palette.ACCENT_TEXT,
                command=lambda url=link.url: open_link(url),
            ).pack(side="left", padx=(0, 6))

        stats = AnimatedEntry(self, delay=1200)
        stats.grid(row=2, column=0, padx=40, pady=(40, 24), sticky="ew")
        for column, stat in enumerate(content.stats):
            stats.body.grid_columnconfigure(column, weight=1, uniform="stats")
            StatCard(stats.body, stat).grid(row=0, column=column, padx=8, sticky="ew")
