from portfolio.core.enums.theme_preference import ThemePreference
from portfolio.core.errors import StorageError
from portfolio.services.storage.key_value import KeyValueStorage
from portfolio.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_THEME_KEY = "theme"


class ThemePreferenceStore:
    """Best-effort persistence of the theme preference under a single key."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_THEME_KEY):
        self._storage = storage
        self.key = key

    def load(self) -> ThemePreference:
        """Read the stored preference; anything missing or invalid reads as SYSTEM."""
        try:
            raw = self._storage.get_item(self.key)
        except StorageError as e:
            logger.warning(f"[STORAGE] Could not read theme preference, using system: {e}")
            return ThemePreference.SYSTEM

        if raw is None:
            logger.debug("[STORAGE] No stored theme preference, using system")
            return ThemePreference.SYSTEM

        preference = ThemePreference.parse(raw)
        if preference is None:
            logger.warning(f"[STORAGE] Ignoring invalid theme preference {raw!r}, using system")
            return ThemePreference.SYSTEM

        return preference

    def save(self, preference: ThemePreference) -> bool:
        """Persist the preference. Returns False when the write failed."""
        try:
            self._storage.set_item(self.key, preference.value)
        except StorageError as e:
            logger.warning(f"[STORAGE] Could not persist theme preference {preference.value}: {e}")
            return False

        logger.debug(f"[STORAGE] Persisted theme preference {preference.value}")
        return True
