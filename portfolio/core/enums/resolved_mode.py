"""Resolved visual mode enum applied to the window."""

from enum import StrEnum


class ResolvedMode(StrEnum):
    """Binary appearance mode actually rendered."""

    DARK = "dark"
    LIGHT = "light"

    @property
    def is_dark(self) -> bool:
        return self is ResolvedMode.DARK
