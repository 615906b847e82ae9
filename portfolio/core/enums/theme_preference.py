"""Theme preference enum for the System/Light/Dark toggle."""

from enum import StrEnum


class ThemePreference(StrEnum):
    """The user's stored theme choice."""

    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def next(self) -> "ThemePreference":
        """Return the preference that follows this one in the toggle cycle."""
        order = list(ThemePreference)
        return order[(order.index(self) + 1) % len(order)]

    @classmethod
    def parse(cls, value: object) -> "ThemePreference | None":
        """Map a raw stored value onto a preference, or None when it isn't one."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None
