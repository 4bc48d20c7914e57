"""
Shared clean-ups and schema normalisation.

normalise_portfolio() turns whatever the detector found into a complete
PortfolioRecord; coerce_portfolio() does the same for loosely-typed dicts
coming back from the refinement stage.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from .rules import DEFAULT_RULES, DetectionRules, SkillCategories
from .schema_portfolio import (
    Customizations,
    DetectedSections,
    EducationEntry,
    ExperienceEntry,
    PortfolioLinks,
    PortfolioProject,
    PortfolioRecord,
    SkillGroup,
    DEFAULT_THEME,
)

logger = logging.getLogger(__name__)

FALLBACK_NAME = "Portfolio Owner"
FALLBACK_HEADLINE = "Professional"
UNKNOWN_NAME = "Unknown"


# ───────────────────────────────────────── helpers ──
def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _strings(values: Any) -> List[str]:
    if not isinstance(values, (list, tuple)):
        return []
    return [v.strip() for v in values if isinstance(v, str) and v.strip()]


def _optional(value: Any) -> Optional[str]:
    return value.strip() or None if isinstance(value, str) else None


def normalise_name(raw: Optional[str]) -> str:
    name = (raw or "").strip()
    if not name or name == UNKNOWN_NAME:
        return FALLBACK_NAME
    return name


def make_headline(experience: List[ExperienceEntry]) -> str:
    if experience and experience[0].role:
        return experience[0].role
    return FALLBACK_HEADLINE


def group_skills(raw: List[str], categories: SkillCategories) -> List[SkillGroup]:
    """Bucket raw skills by keyword substring; first category wins."""
    buckets: Dict[str, List[str]] = {name: [] for name in categories.names()}
    for skill in raw or []:
        if not isinstance(skill, str) or not skill:
            continue
        low = skill.lower()
        for name, keywords in categories.categories:
            if any(k in low for k in keywords):
                buckets[name].append(skill)
                break
        else:
            buckets[categories.other].append(skill)
    return [SkillGroup(name, items) for name, items in buckets.items() if items]


# ──────────────────────────────────────── sections ──
def normalise_experience(raw: List[ExperienceEntry]) -> List[ExperienceEntry]:
    return [
        ExperienceEntry(
            role=e.role or "",
            company=e.company or "",
            duration=e.duration or "",
            description=e.description or "",
            highlights=list(e.highlights or []),
        )
        for e in raw or []
    ]


def normalise_projects(raw) -> List[PortfolioProject]:
    return [
        PortfolioProject(
            title=p.title or "",
            tech=list(p.tech or []),
            description=p.description or "",
            link=p.link or None,
        )
        for p in raw or []
    ]


def normalise_education(raw: List[EducationEntry]) -> List[EducationEntry]:
    return [
        EducationEntry(
            degree=e.degree or "",
            institution=e.institution or "",
            year=e.year or "",
            details=e.details or "",
        )
        for e in raw or []
    ]


def normalise_links(detected: DetectedSections) -> PortfolioLinks:
    contact, links = detected.contact, detected.links
    return PortfolioLinks(
        github=(links and links.github) or None,
        linkedin=(links and links.linkedin) or None,
        email=(contact and contact.email) or None,
        phone=(contact and contact.phone) or None,
        website=(links and links.website) or None,
    )


# ─────────────────────────────────────── normaliser ──
def normalise_portfolio(
    detected: DetectedSections, rules: DetectionRules = DEFAULT_RULES
) -> PortfolioRecord:
    experience = normalise_experience(detected.experience)
    return PortfolioRecord(
        name=normalise_name(detected.name),
        headline=make_headline(experience),
        summary=detected.summary or "",
        skills=group_skills(detected.skills, rules.skill_categories),
        experience=experience,
        projects=normalise_projects(detected.projects),
        education=normalise_education(detected.education),
        links=normalise_links(detected),
        theme=DEFAULT_THEME,
        customizations=Customizations(),
    )


# ───────────────────────────────────────── coercion ──
def _coerce_skills(raw: Any, fallback: List[SkillGroup]) -> List[SkillGroup]:
    if not isinstance(raw, list):
        return fallback
    groups = []
    for g in raw:
        if isinstance(g, dict) and _text(g.get("category")):
            if items := _strings(g.get("items")):
                groups.append(SkillGroup(_text(g["category"]), items))
    return groups


def _coerce_project(p: Any) -> PortfolioProject:
    # projects → guarantee dict shape
    if isinstance(p, str):
        return PortfolioProject(title=p.strip())
    return PortfolioProject(
        title=_text(p.get("title") or p.get("name")),
        tech=_strings(p.get("tech")),
        description=_text(p.get("description")),
        link=_optional(p.get("link") or p.get("url")),
    )


def coerce_portfolio(data: Dict[str, Any], fallback: PortfolioRecord) -> PortfolioRecord:
    """Rebuild a record from an untrusted mapping, defaulting to *fallback*."""
    if not isinstance(data, dict):
        logger.warning("refined payload is %s, not an object", type(data).__name__)
        return fallback

    def lst(key):
        value = data.get(key)
        return [x for x in value if isinstance(x, (dict, str))] if isinstance(value, list) else None

    experience = lst("experience")
    projects = lst("projects")
    education = lst("education")
    links = data.get("links") if isinstance(data.get("links"), dict) else {}
    base_links = fallback.links

    return PortfolioRecord(
        name=_text(data.get("name")) or fallback.name,
        headline=_text(data.get("headline")) or fallback.headline,
        summary=_text(data.get("summary")) or fallback.summary,
        skills=_coerce_skills(data.get("skills"), fallback.skills),
        experience=fallback.experience if experience is None else [
            ExperienceEntry(
                role=_text(e.get("role")),
                company=_text(e.get("company")),
                duration=_text(e.get("duration")),
                description=_text(e.get("description")),
                highlights=_strings(e.get("highlights")),
            )
            for e in experience if isinstance(e, dict)
        ],
        projects=fallback.projects if projects is None else [
            _coerce_project(p) for p in projects
        ],
        education=fallback.education if education is None else [
            EducationEntry(
                degree=_text(e.get("degree")),
                institution=_text(e.get("institution")),
                year=_text(str(e["year"]) if isinstance(e.get("year"), int) else e.get("year")),
                details=_text(e.get("details")),
            )
            for e in education if isinstance(e, dict)
        ],
        links=PortfolioLinks(**{
            key: _optional(links.get(key)) if key in links else getattr(base_links, key)
            for key in ("github", "linkedin", "email", "phone", "website")
        }),
        theme=fallback.theme,
        customizations=fallback.customizations,
    )
