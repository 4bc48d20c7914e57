# typed records for every pipeline stage (detected → portfolio → result)
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

DEFAULT_THEME = "modern"


# ───────────────────────────────────────── detected ──
@dataclass
class Contact:
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass
class Links:
    github: Optional[str] = None
    linkedin: Optional[str] = None
    website: Optional[str] = None


@dataclass
class ExperienceEntry:
    role: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""
    highlights: List[str] = field(default_factory=list)


@dataclass
class ProjectEntry:
    title: str = ""
    tech: List[str] = field(default_factory=list)
    description: str = ""
    link: Optional[str] = None


@dataclass
class EducationEntry:
    degree: str = ""
    institution: str = ""
    year: str = ""
    details: str = ""


@dataclass
class DetectedSections:
    name: Optional[str] = None
    contact: Contact = field(default_factory=Contact)
    links: Links = field(default_factory=Links)
    summary: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    experience: List[ExperienceEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)


# ──────────────────────────────────────── portfolio ──
@dataclass
class SkillGroup:
    category: str
    items: List[str] = field(default_factory=list)


@dataclass
class PortfolioProject:
    title: str = ""
    tech: List[str] = field(default_factory=list)
    description: str = ""
    link: Optional[str] = None
    image: Optional[str] = None     # reserved for a user upload


@dataclass
class PortfolioLinks:
    github: Optional[str] = None
    linkedin: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None


@dataclass
class Colors:
    primary: str = "#3B82F6"
    secondary: str = "#1E40AF"
    accent: str = "#60A5FA"


@dataclass
class Fonts:
    heading: str = "Inter"
    body: str = "Inter"


@dataclass
class Customizations:
    colors: Colors = field(default_factory=Colors)
    fonts: Fonts = field(default_factory=Fonts)
    layout: str = "default"


@dataclass
class PortfolioRecord:
    name: str = ""
    headline: str = ""
    summary: str = ""
    skills: List[SkillGroup] = field(default_factory=list)
    experience: List[ExperienceEntry] = field(default_factory=list)
    projects: List[PortfolioProject] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    links: PortfolioLinks = field(default_factory=PortfolioLinks)
    theme: str = DEFAULT_THEME
    customizations: Customizations = field(default_factory=Customizations)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ─────────────────────────────────────────── result ──
@dataclass
class SectionsFound:
    has_name: bool = False
    has_contact: bool = False
    has_skills: bool = False
    has_experience: bool = False
    has_projects: bool = False
    has_education: bool = False


@dataclass
class ParseMetadata:
    text_length: int
    sections_found: SectionsFound

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ParseResult:
    success: bool
    data: Optional[PortfolioRecord] = None
    metadata: Optional[ParseMetadata] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error}
        return {
            "success": True,
            "data": self.data.to_dict(),
            "metadata": self.metadata.to_dict(),
        }


# shape handed to the refinement prompt
PORTFOLIO_SCHEMA = PortfolioRecord().to_dict()
