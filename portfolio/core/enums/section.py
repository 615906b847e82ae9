from enum import StrEnum


class Section(StrEnum):
    """Portfolio sections reachable from the navigation bar."""

    INTRO = "intro"
    PROJECTS = "projects"
    ABOUT = "about"
