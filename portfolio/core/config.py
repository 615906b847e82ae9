"""Application configuration using Pydantic Settings with YAML/JSON file support."""

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from portfolio.utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_DIR_NAME = ".portfolio"


def _default_config_dir() -> Path:
    return Path.home() / CONFIG_DIR_NAME


def _config_file_candidates() -> list[Path]:
    config_dir = _default_config_dir()
    return [
        Path("config.yaml"),
        Path("config.json"),
        config_dir / "config.yaml",
        config_dir / "config.json",
    ]


class StorageConfig(BaseModel):
    """Where user preferences are persisted."""

    storage_dir: Path = Field(
        default_factory=_default_config_dir,
        description="Directory holding the preferences file",
    )
    preferences_file_name: str = Field(
        default="preferences.json",
        description="Preferences file name; .yaml/.yml selects YAML, anything else JSON",
    )
    theme_key: str = Field(default="theme", description="Key of the stored theme preference")

    @field_validator("storage_dir", mode="before")
    @classmethod
    def validate_path(cls, v):
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    @property
    def preferences_file(self) -> Path:
        return self.storage_dir / self.preferences_file_name


class AnimationConfig(BaseModel):
    """Entry animation timing."""

    duration_ms: int = Field(default=700, ge=0, description="Slide-in duration in milliseconds")
    steps: int = Field(default=14, ge=1, description="Number of frames in a slide-in")
    distance: int = Field(default=40, ge=0, description="Start offset of a slide-in in pixels")


class ThemeConfig(BaseModel):
    """Theme-related configuration."""

    color_theme: str = Field(
        default="green", description="customtkinter built-in colour theme (blue, green, dark-blue)"
    )
    follow_system: bool = Field(
        default=True, description="Watch the operating system for colour-scheme changes"
    )


class UIConfig(BaseModel):
    """UI-related configuration."""

    app_title: str = Field(default="Pukan.tech", description="Window title")
    window_geometry: str = Field(default="1100x760", description="Initial window geometry")
    event_poll_interval_ms: int = Field(
        default=50, ge=1, description="Milliseconds between drains of the cross-thread event queue"
    )
    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)


class AppConfig(BaseSettings):
    """Main application configuration.

    Supports YAML and JSON config files. Looks for config.yaml or config.json in:
    1. Current directory
    2. User config directory (~/.portfolio/)
    3. Environment variables (PORTFOLIO_*)

    Example config file:
        storage:
          storage_dir: ~/.portfolio
          theme_key: theme
        ui:
          app_title: Pukan.tech
          animation:
            duration_ms: 500
    """

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    content_file: Path | None = Field(
        default=None, description="Optional YAML/JSON file overriding the portfolio content"
    )

    @classmethod
    def _load_config_file(cls) -> dict | None:
        """Load configuration from the first YAML or JSON file found.

        Returns:
            Dictionary with config values or None if no file found
        """
        for config_file in _config_file_candidates():
            if not config_file.exists():
                continue
            try:
                with open(config_file, encoding="utf-8") as f:
                    if config_file.suffix in (".yaml", ".yml"):
                        data = yaml.safe_load(f)
                    else:
                        data = json.load(f)
            except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
                logger.warning(f"[CONFIG] Skipping unreadable config file {config_file}: {e}")
                continue

            if isinstance(data, dict):
                logger.info(f"[CONFIG] Loaded configuration from {config_file}")
                return data
            logger.warning(f"[CONFIG] Ignoring {config_file}: not a mapping")

        return None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """Customize settings sources to include YAML/JSON file."""
        config_dict = cls._load_config_file()

        def file_settings():
            return config_dict or {}

        return (
            init_settings,
            env_settings,
            file_settings,
            dotenv_settings,
            file_secret_settings,
        )


_config_instance: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the shared configuration instance.

    Returns:
        The application configuration instance
    """
    global _config_instance  # noqa: PLW0603
    if _config_instance is None:
        _config_instance = AppConfig()
    return _config_instance


def set_config(config: AppConfig) -> None:
    """Set the configuration instance (mainly for testing).

    Args:
        config: The configuration instance to set
    """
    global _config_instance  # noqa: PLW0603
    _config_instance = config


def reset_config() -> None:
    """Reset the configuration instance (mainly for testing)."""
    global _config_instance  # noqa: PLW0603
    _config_instance = None
