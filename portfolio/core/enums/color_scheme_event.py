from enum import Enum, auto


class ColorSchemeEvent(Enum):
    """Operating system colour-scheme notifications."""

    PREFERENCE_CHANGED = auto()
