from __future__ import annotations

from typing import Any

import customtkinter as ctk

from portfolio.core.enums.resolved_mode import ResolvedMode
from portfolio.utils.logger import get_logger

logger = get_logger(__name__)


class CTkThemeSurface:
    """Applies the resolved mode to every customtkinter widget in the process.

    Widget colours are (light, dark) pairs, so switching the appearance mode
    is the only thing the views need.
    """

    def __init__(self, root: Any | None = None):
        self._root = root

    def apply_mode(self, mode: ResolvedMode) -> None:
        ctk.set_appearance_mode(mode.value)

        if self._root is not None:
            self._root.update_idletasks()

        logger.debug(f"[THEME_SURFACE] Applied {mode.value} appearance")
