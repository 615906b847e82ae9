from .animated_entry import AnimatedEntry
from .cards import ProjectCard, StatCard, TagList
from .footer import Footer
from .nav_bar import NavBar
from .theme_toggle import ThemeToggle

__all__ = ["AnimatedEntry", "Footer", "NavBar", "ProjectCard", "StatCard", "TagList", "ThemeToggle"]
