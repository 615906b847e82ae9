from __future__ import annotations

import customtkinter as ctk

from portfolio.core.enums.animation_direction import AnimationDirection
from portfolio.models.content import PortfolioContent
from portfolio.ui.components.animated_entry import AnimatedEntry
from portfolio.ui.components.cards import TagList
from portfolio.ui.sections.base import SectionView
from portfolio.ui.utils import palette


class AboutSection(SectionView):
    def __init__(self, master, content: PortfolioContent):
        super().__init__(master, content)

        self.add_title("About Me")

        body = ctk.CTkFrame(self, fg_color="transparent")
        body.grid(row=1, column=0, padx=40, pady=(0, 32), sticky="ew")
        body.grid_columnconfigure(0, weight=3)
        body.grid_columnconfigure(1, weight=2)

        story = ctk.CTkFrame(body, fg_color="transparent")
        story.grid(row=0, column=0, padx=(0, 32), sticky="nsew")
        for index, paragraph in enumerate(content.about_paragraphs):
            entry = AnimatedEntry(story, delay=200 * (index + 1))
            entry.pack(fill="x", pady=(0, 16))
            ctk.CTkLabel(
                entry.body,
                text=paragraph,
                font=("Roboto", 16) if index == 0 else palette.BODY_FONT,
                text_color=palette.TEXT if index == 0 else palette.TEXT_MUTED,
                wraplength=560,
                justify="left",
            ).pack(anchor="w")

        timeline = AnimatedEntry(story, delay=600)
        timeline.pack(fill="x", pady=(16, 0))
        self._build_timeline(timeline.body)

        sidebar = ctk.CTkFrame(body, fg_color="transparent")
        sidebar.grid(row=0, column=1, sticky="nsew")

        skills = AnimatedEntry(sidebar, delay=300, direction=AnimationDirection.LEFT)
        skills.pack(fill="x", pady=(0, 24))
        skills_card = self._card(skills.body, "Skills & Expertise")
        for group in content.skills:
            ctk.CTkLabel(
                skills_card,
                text=group.category,
                font=("Roboto", 15, "bold"),
                text_color=palette.ACCENT_TEXT,
            ).pack(anchor="w", padx=20, pady=(12, 4))
            TagList(skills_card, group.items).pack(anchor="w", padx=20)
        ctk.CTkFrame(skills_card, fg_color="transparent", height=12).pack()

        interests = AnimatedEntry(sidebar, delay=500, direction=AnimationDirection.LEFT)
        interests.pack(fill="x")
        interests_card = self._card(interests.body, "Interests & Hobbies")
        for interest in content.interests:
            ctk.CTkLabel(
                interests_card,
                text=f"{interest.icon}  {interest.text}",
                font=palette.BODY_FONT,
                text_color=palette.TEXT,
            ).pack(anchor="w", padx=20, pady=4)
        ctk.CTkFrame(interests_card, fg_color="transparent", height=12).pack()

    def _build_timeline(self, master) -> None:
        ctk.CTkLabel(
            master,
            text="Experience Timeline",
            font=palette.HEADING_FONT,
            text_color=palette.ACCENT_TEXT,
        ).pack(anchor="w", pady=(0, 12))

        for item in self.content.timeline:
            row = ctk.CTkFrame(master, fg_color="transparent")
            row.pack(fill="x", pady=8)
            ctk.CTkLabel(
                row, text="●", font=("Roboto", 16), text_color=palette.ACCENT, width=24
            ).grid(row=0, column=0, rowspan=3, sticky="n", padx=(0, 12))
            ctk.CTkLabel(
                row, text=item.year, font=("Roboto", 12, "bold"), text_color=palette.ACCENT_TEXT
            ).grid(row=0, column=1, sticky="w")
            ctk.CTkLabel(
                row, text=item.title, font=("Roboto", 17), text_color=palette.TEXT
            ).grid(row=1, column=1, sticky="w")
            ctk.CTkLabel(
                row, text=item.company, font=palette.BODY_FONT, text_color=palette.TEXT_MUTED
            ).grid(row=2, column=1, sticky="w")

    @staticmethod
    def _card(master, title: str) -> ctk.CTkFrame:
        card = ctk.CTkFrame(
            master, fg_color=palette.SURFACE, border_color=palette.BORDER, border_width=2
        )
        card.pack(fill="x")
        header = ctk.CTkFrame(card, fg_color=palette.ACCENT, corner_radius=6)
        header.pack(fill="x", padx=2, pady=(2, 0))
        ctk.CTkLabel(
            header, text=title, font=("Roboto", 18, "bold"), text_color="#ffffff"
        ).pack(anchor="w", padx=20, pady=10)
        return card
