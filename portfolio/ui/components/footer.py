from __future__ import annotations

import datetime as dt
import webbrowser

import customtkinter as ctk

from portfolio.models.content import PortfolioContent
from portfolio.ui.utils import palette


def open_link(url: str) -> None:
    if url and url != "#":
        webbrowser.open(url)


def footer_text(content: PortfolioContent, year: int | None = None) -> str:
    year = year or dt.date.today().year
    return f"© {year} {content.site_name} | {content.footer_text}"


class Footer(ctk.CTkFrame):
    def __init__(self, master, content: PortfolioContent):
        super().__init__(master, corner_radius=0, fg_color=palette.SURFACE)

        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self, text=footer_text(content), font=palette.BODY_FONT, text_color=palette.TEXT_MUTED
        ).grid(row=0, column=0, padx=20, pady=14, sticky="w")

        links = ctk.CTkFrame(self, fg_color="transparent")
        links.grid(row=0, column=1, padx=20, pady=14, sticky="e")
        for column, link in enumerate(content.social_links):
            ctk.CTkButton(
                links,
                text=link.label,
                width=70,
                fg_color="transparent",
                hover_color=palette.ACCENT_SOFT,
                text_color=palette.TEXT_MUTED,
                command=lambda url=link.url: open_link(url),
            ).grid(row=0, column=column, padx=4)
