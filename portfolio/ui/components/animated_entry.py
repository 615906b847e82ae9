from __future__ import annotations

import customtkinter as ctk

from portfolio.core.config import AnimationConfig, get_config
from portfolio.core.enums.animation_direction import AnimationDirection
from portfolio.ui.utils.animation import entry_offsets, padding_for_offset, step_interval


class AnimatedEntry(ctk.CTkFrame):
    """Frame whose ``body`` stays hidden for ``delay`` ms, then slides into place.

    Children must be created inside ``entry.body``.
    """

    def __init__(
        self,
        master,
        delay: int = 0,
        direction: AnimationDirection = AnimationDirection.UP,
        animation: AnimationConfig | None = None,
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)

        animation = animation or get_config().ui.animation
        self._offsets = entry_offsets(direction, animation.distance, animation.steps)
        self._interval = step_interval(animation.duration_ms, animation.steps)

        self.body = ctk.CTkFrame(self, fg_color="transparent")
        self._after_id: str | None = self.after(max(delay, 0), self._show_frame, 0)

    def _show_frame(self, index: int) -> None:
        dx, dy = self._offsets[index]
        self.body.pack(
            fill="both",
            expand=True,
            padx=padding_for_offset(dx),
            pady=padding_for_offset(dy),
        )

        if index + 1 < len(self._offsets):
            self._after_id = self.after(self._interval, self._show_frame, index + 1)
        else:
            self._after_id = None

    def destroy(self):
        if self._after_id is not None:
            self.after_cancel(self._after_id)
            self._after_id = None
        super().destroy()
