"""Shared fixtures: isolated home/config, in-memory storage, manual colour-scheme signal."""

import pytest

from portfolio.core.config import reset_config
from portfolio.core.enums.resolved_mode import ResolvedMode
from portfolio.core.errors import StorageError
from portfolio.core.theme_controller import ThemePreferenceController
from portfolio.services.environment.color_scheme import ManualColorSchemeSignal
from portfolio.services.storage.key_value import MemoryKeyValueStorage
from portfolio.services.storage.preference_store import ThemePreferenceStore


class RecordingSurface:
    """Rendering surface that remembers every mode it was asked to apply."""

    def __init__(self):
        self.modes: list[ResolvedMode] = []

    def apply_mode(self, mode: ResolvedMode) -> None:
        self.modes.append(mode)

    @property
    def current(self) -> ResolvedMode | None:
        return self.modes[-1] if self.modes else None


class FailingStorage:
    """Storage whose every access fails, like a disabled storage medium."""

    def __init__(self):
        self.write_attempts = 0

    def get_item(self, key: str) -> str | None:
        raise StorageError("storage unavailable")

    def set_item(self, key: str, value: str) -> None:
        self.write_attempts += 1
        raise StorageError("storage unavailable")


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config lookups and default storage paths inside tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield home
    reset_config()


@pytest.fixture
def storage():
    return MemoryKeyValueStorage()


@pytest.fixture
def signal():
    return ManualColorSchemeSignal(prefers_dark=False)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def make_controller(signal, surface):
    """Build a controller over the given storage (in-memory by default)."""
    created = []

    def factory(kv_storage=None, env_signal=None):
        kv_storage = kv_storage if kv_storage is not None else MemoryKeyValueStorage()
        controller = ThemePreferenceController(
            ThemePreferenceStore(kv_storage), env_signal or signal, surface
        )
        created.append(controller)
        return controller

    yield factory

    for controller in created:
        controller.close()


@pytest.fixture
def failing_storage():
    return FailingStorage()
