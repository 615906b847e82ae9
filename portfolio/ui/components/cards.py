from __future__ import annotations

import customtkinter as ctk

from portfolio.models.content import Project, Stat
from portfolio.ui.utils import palette


class TagList(ctk.CTkFrame):
    """Row of rounded tag chips."""

    def __init__(self, master, tags: list[str]):
        super().__init__(master, fg_color="transparent")
        for column, tag in enumerate(tags):
            ctk.CTkLabel(
                self,
                text=tag,
                font=palette.SMALL_FONT,
                fg_color=palette.ACCENT_SOFT,
                text_color=palette.ACCENT_TEXT,
                corner_radius=10,
                padx=10,
            ).grid(row=0, column=column, padx=(0, 6), pady=2, sticky="w")


class StatCard(ctk.CTkFrame):
    def __init__(self, master, stat: Stat):
        super().__init__(
            master, fg_color=palette.SURFACE, border_color=palette.BORDER, border_width=2
        )
        ctk.CTkLabel(
            self, text=stat.number, font=("Roboto", 34, "bold"), text_color=palette.ACCENT_TEXT
        ).pack(anchor="w", padx=20, pady=(16, 0))
        ctk.CTkLabel(
            self, text=stat.label, font=palette.BODY_FONT, text_color=palette.TEXT_MUTED
        ).pack(anchor="w", padx=20, pady=(4, 16))


class ProjectCard(ctk.CTkFrame):
    def __init__(self, master, project: Project):
        super().__init__(
            master,
            fg_color=palette.SURFACE,
            border_color=palette.BORDER,
            border_width=1,
            corner_radius=12,
        )
        banner = ctk.CTkFrame(self, fg_color=palette.ACCENT, height=140, corner_radius=12)
        banner.pack(fill="x", padx=1, pady=(1, 0))
        banner.pack_propagate(False)
        ctk.CTkLabel(banner, text=project.image, font=("Roboto", 56)).place(
            relx=0.5, rely=0.5, anchor="center"
        )

        ctk.CTkLabel(
            self,
            text=project.title,
            font=("Roboto", 18, "bold"),
            text_color=palette.ACCENT_TEXT,
            anchor="w",
        ).pack(fill="x", padx=18, pady=(14, 4))
        ctk.CTkLabel(
            self,
            text=project.description,
            font=palette.BODY_FONT,
            text_color=palette.TEXT_MUTED,
            wraplength=280,
            justify="left",
            anchor="w",
        ).pack(fill="x", padx=18)
        TagList(self, project.tags).pack(fill="x", padx=18, pady=(10, 16))
