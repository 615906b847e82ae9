from portfolio.core.enums.section import Section

from .about import AboutSection
from .base import SectionView
from .intro import IntroSection
from .projects import ProjectsSection

SECTION_VIEWS: dict[Section, type[SectionView]] = {
    Section.INTRO: IntroSection,
    Section.PROJECTS: ProjectsSection,
    Section.ABOUT: AboutSection,
}

__all__ = ["SECTION_VIEWS", "AboutSection", "IntroSection", "ProjectsSection", "SectionView"]
