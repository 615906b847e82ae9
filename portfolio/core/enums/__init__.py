from .animation_direction import AnimationDirection
from .color_scheme_event import ColorSchemeEvent
from .resolved_mode import ResolvedMode
from .section import Section
from .theme_event import ThemeEvent
from .theme_preference import ThemePreference

__all__ = [
    "AnimationDirection",
    "ColorSchemeEvent",
    "ResolvedMode",
    "Section",
    "ThemeEvent",
    "ThemePreference",
]
