"""Static portfolio content shown by the sections."""

import json
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from portfolio.core.errors import ContentError
from portfolio.utils.logger import get_logger

logger = get_logger(__name__)


class Stat(BaseModel):
    number: str
    label: str


class Project(BaseModel):
    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    image: str = ""


class SkillGroup(BaseModel):
    category: str
    items: list[str] = Field(default_factory=list)


class TimelineEntry(BaseModel):
    year: str
    title: str
    company: str


class Interest(BaseModel):
    icon: str
    text: str


class SocialLink(BaseModel):
    label: str
    url: str = "#"


class PortfolioContent(BaseModel):
    """Everything the intro, projects and about sections render."""

    owner_name: str = "Patrik Pukán"
    site_name: str = "Pukan.tech"
    avatar: str = "👨‍💻"
    headline: str = "Software Developer & Problem Solver"
    intro_text: str = (
        "This site is currently under construction and information in it is "
        "not factual. Please check back later for updates."
    )
    stats: list[Stat] = Field(
        default_factory=lambda: [
            Stat(number="5+", label="Years Experience"),
            Stat(number="20+", label="Projects Completed"),
            Stat(number="15+", label="Happy Clients"),
        ]
    )
    projects_intro: str = (
        "Explore a selection of my work across various domains and technologies. "
        "Each project represents my approach to problem-solving and attention to detail."
    )
    projects: list[Project] = Field(
        default_factory=lambda: [
            Project(
                title="E-commerce Platform",
                description=(
                    "A full-featured online shop with cart functionality, payment processing, "
                    "and order management. Built with a focus on performance and user experience."
                ),
                tags=["React", "TypeScript", "Node.js"],
                image="🛒",
            ),
            Project(
                title="Task Management App",
                description=(
                    "Collaborative project management tool with real-time updates, "
                    "task assignments, and progress tracking."
                ),
                tags=["React", "Firebase", "Tailwind CSS"],
                image="📋",
            ),
            Project(
                title="Weather Dashboard",
                description=(
                    "Interactive weather visualization with forecast data, historical trends, "
                    "and location search functionality."
                ),
                tags=["React", "Chart.js", "API Integration"],
                image="🌤️",
            ),
            Project(
                title="Portfolio Website",
                description=(
                    "Modern, responsive developer portfolio showcasing projects and skills "
                    "with interactive elements."
                ),
                tags=["React", "Tailwind CSS", "Framer Motion"],
                image="🎨",
            ),
            Project(
                title="Fitness Tracker",
                description=(
                    "Mobile-first application for tracking workouts, nutrition, and health "
                    "metrics with progress visualization."
                ),
                tags=["React Native", "TypeScript", "GraphQL"],
                image="💪",
            ),
            Project(
                title="Recipe Finder",
                description=(
                    "Web application that helps users discover recipes based on available "
                    "ingredients and dietary preferences."
                ),
                tags=["React", "Redux", "API Integration"],
                image="🍲",
            ),
        ]
    )
    about_paragraphs: list[str] = Field(
        default_factory=lambda: [
            "I'm a passionate developer on a mission to create beautiful, functional, and "
            "accessible web experiences. My journey in tech began with a fascination for how "
            "digital interfaces shape our interactions with technology.",
            "With over 5 years of experience in web development, I've had the opportunity to "
            "work on diverse projects across various industries, from e-commerce platforms to "
            "interactive dashboards and creative portfolios.",
        ]
    )
    timeline: list[TimelineEntry] = Field(
        default_factory=lambda: [
            TimelineEntry(year="2023", title="Senior Frontend Developer", company="Tech Solutions Inc."),
            TimelineEntry(year="2021", title="UI/UX Designer & Developer", company="Creative Studio"),
            TimelineEntry(year="2019", title="Web Developer", company="Digital Agency"),
            TimelineEntry(year="2018", title="Graduated University", company="BSc Computer Science"),
        ]
    )
    skills: list[SkillGroup] = Field(
        default_factory=lambda: [
            SkillGroup(category="Languages", items=["TypeScript", "JavaScript", "HTML", "CSS", "Kotlin"]),
            SkillGroup(category="Frameworks", items=["React", "Next.js", "Express", "Tailwind CSS"]),
            SkillGroup(category="Tools", items=["Git", "Docker", "Figma", "VS Code"]),
            SkillGroup(
                category="Other",
                items=["RESTful APIs", "GraphQL", "UI/UX Design", "Responsive Design"],
            ),
        ]
    )
    interests: list[Interest] = Field(
        default_factory=lambda: [
            Interest(icon="📚", text="Reading science fiction and design books"),
            Interest(icon="🏔️", text="Hiking and outdoor adventures"),
            Interest(icon="🎮", text="Strategy games and game design"),
            Interest(icon="🎸", text="Playing guitar and music production"),
        ]
    )
    social_links: list[SocialLink] = Field(
        default_factory=lambda: [SocialLink(label="GitHub"), SocialLink(label="Mail")]
    )
    footer_text: str = "Crafted with 💙 and Python"

    @property
    def owner_first_name(self) -> str:
        return self.owner_name.split()[0] if self.owner_name.strip() else self.site_name


def load_content(path: Path | str | None = None) -> PortfolioContent:
    """Load portfolio content, overriding the defaults from a YAML or JSON file.

    Raises:
        ContentError: The file can't be read, parsed or validated
    """
    if path is None:
        return PortfolioContent()

    content_file = Path(path).expanduser()
    try:
        with open(content_file, encoding="utf-8") as f:
            if content_file.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ContentError(f"Failed to read content file {content_file}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ContentError(f"Content file {content_file} must contain a mapping")

    try:
        content = PortfolioContent.model_validate(data)
    except ValidationError as e:
        raise ContentError(f"Invalid content in {content_file}: {e}") from e

    logger.info(f"[CONTENT] Loaded portfolio content from {content_file}")
    return content
