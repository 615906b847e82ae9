from portfolio.core.enums.resolved_mode import ResolvedMode
from portfolio.core.enums.theme_preference import ThemePreference


def resolve(preference: ThemePreference, environment_prefers_dark: bool) -> ResolvedMode:
    """Resolve the mode to render for a preference and the OS colour-scheme flag.

    ``SYSTEM`` follows the environment; ``LIGHT`` and ``DARK`` are pinned.
    """
    if preference is ThemePreference.SYSTEM:
        return ResolvedMode.DARK if environment_prefers_dark else ResolvedMode.LIGHT
    if preference is ThemePreference.DARK:
        return ResolvedMode.DARK
    return ResolvedMode.LIGHT
