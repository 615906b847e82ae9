from .content import (
    Interest,
    PortfolioContent,
    Project,
    SkillGroup,
    SocialLink,
    Stat,
    TimelineEntry,
    load_content,
)

__all__ = [
    "Interest",
    "PortfolioContent",
    "Project",
    "SkillGroup",
    "SocialLink",
    "Stat",
    "TimelineEntry",
    "load_content",
]
