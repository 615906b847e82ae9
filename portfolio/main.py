from portfolio.utils.common import ensure_gui_available
from portfolio.utils.logger import get_logger

logger = get_logger(__name__)


ensure_gui_available()

import customtkinter as ctk  # noqa: E402

from portfolio.core.config import AppConfig, get_config  # noqa: E402
from portfolio.core.enums.section import Section  # noqa: E402
from portfolio.core.errors import ContentError  # noqa: E402
from portfolio.core.theme_controller import ThemePreferenceController  # noqa: E402
from portfolio.models.content import PortfolioContent, load_content  # noqa: E402
from portfolio.services.environment.color_scheme import SystemColorSchemeSignal  # noqa: E402
from portfolio.services.storage.key_value import FileKeyValueStorage  # noqa: E402
from portfolio.services.storage.preference_store import ThemePreferenceStore  # noqa: E402
from portfolio.ui.components.footer import Footer  # noqa: E402
from portfolio.ui.components.nav_bar import NavBar  # noqa: E402
from portfolio.ui.sections import SECTION_VIEWS, SectionView  # noqa: E402
from portfolio.ui.utils import palette  # noqa: E402
from portfolio.ui.utils.theme_surface import CTkThemeSurface  # noqa: E402


class PortfolioApp(ctk.CTk):
    def __init__(self, config: AppConfig, content: PortfolioContent):
        ctk.set_default_color_theme(config.ui.theme.color_theme)
        super().__init__(fg_color=palette.BACKGROUND)

        self.config_data = config
        self.content = content
        self.active_section = Section.INTRO
        self._section_view: SectionView | None = None
        self._closing = False

        self.title(config.ui.app_title)
        self.geometry(config.ui.window_geometry)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self.color_scheme = SystemColorSchemeSignal(
            self, poll_interval_ms=config.ui.event_poll_interval_ms
        )
        store = ThemePreferenceStore(
            FileKeyValueStorage(config.storage.preferences_file), key=config.storage.theme_key
        )
        self.theme_controller = ThemePreferenceController(
            store, self.color_scheme, CTkThemeSurface(self)
        )
        self.theme_controller.initialize()
        if config.ui.theme.follow_system:
            self.color_scheme.start()

        self.nav_bar = NavBar(
            self, content, self.theme_controller, on_select=self.show_section, active=self.active_section
        )
        self.nav_bar.grid(row=0, column=0, sticky="ew")

        self.content_area = ctk.CTkFrame(self, fg_color="transparent", corner_radius=0)
        self.content_area.grid(row=1, column=0, sticky="nsew")
        self.content_area.grid_columnconfigure(0, weight=1)
        self.content_area.grid_rowconfigure(0, weight=1)

        self.footer = Footer(self, content)
        self.footer.grid(row=2, column=0, sticky="ew")

        self.show_section(self.active_section)
        self.protocol("WM_DELETE_WINDOW", self.close)

        logger.info("[MAIN_APP] Portfolio window ready")

    def show_section(self, section: Section) -> None:
        """Replace the visible section; entry animations replay on every switch."""
        if self._section_view is not None and section is self.active_section:
            return

        if self._section_view is not None:
            self._section_view.destroy()

        self.active_section = section
        self._section_view = SECTION_VIEWS[section](self.content_area, self.content)
        self._section_view.grid(row=0, column=0, sticky="nsew")
        self.nav_bar.set_active(section)
        logger.debug(f"[MAIN_APP] Showing {section.value} section")

    def close(self) -> None:
        if self._closing:
            return
        self._closing = True

        try:
            self.theme_controller.close()
            self.color_scheme.stop()
        finally:
            self.destroy()


def _load_content(config: AppConfig) -> PortfolioContent:
    try:
        return load_content(config.content_file)
    except ContentError as e:
        logger.error(f"[MAIN_APP] {e}; using built-in content")
        return PortfolioContent()


def main() -> None:
    config = get_config()
    app = PortfolioApp(config, _load_content(config))
    try:
        app.mainloop()
    finally:
        app.theme_controller.close()


if __name__ == "__main__":
    main()
