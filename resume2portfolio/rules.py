"""
Keyword and pattern tables used by the section detector and the cleaner.

The tables are frozen and passed in explicitly, so a test can swap in a
hand-crafted set without touching module state.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SkillCategories:
    # (category, keywords) in match order; first hit wins
    categories: Tuple[Tuple[str, Tuple[str, ...]], ...]
    other: str = "Other"

    def names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.categories) + (self.other,)


@dataclass(frozen=True)
class DetectionRules:
    # (section, header pattern) in priority order
    section_headers: Tuple[Tuple[str, re.Pattern], ...]
    degree: re.Pattern
    skill_categories: SkillCategories

    @property
    def section_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.section_headers)

    def match_header(self, line: str) -> str | None:
        for name, pattern in self.section_headers:
            if pattern.match(line):
                return name
        return None


def _header(*words: str) -> re.Pattern:
    return re.compile(r"^(" + "|".join(words) + r")", re.I)


SECTION_HEADERS = (
    ("summary", _header("summary", "objective", "profile", "about", "about me",
                        "professional summary")),
    ("skills", _header("skills", "technical skills", "core competencies",
                       "expertise", "technologies")),
    ("experience", _header("experience", "work experience", "employment",
                           "professional experience", "work history")),
    ("projects", _header("projects", "personal projects", "key projects",
                         "portfolio")),
    ("education", _header("education", "academic", "qualifications",
                          "academic background")),
)

DEGREE = re.compile(
    r"(bachelor|master|phd|doctorate|b\.s\.|m\.s\.|b\.a\.|m\.a\.|b\.tech|m\.tech)",
    re.I,
)

SKILL_CATEGORIES = SkillCategories(categories=(
    ("Languages", ("javascript", "python", "java", "c++", "c#", "ruby", "go",
                   "rust", "typescript", "php", "swift", "kotlin")),
    ("Frontend", ("react", "vue", "angular", "html", "css", "tailwind",
                  "bootstrap", "sass", "less")),
    ("Backend", ("node", "express", "django", "flask", "spring", "laravel",
                 ".net", "fastapi", "nestjs")),
    ("Database", ("mongodb", "postgresql", "mysql", "redis", "dynamodb", "sql",
                  "nosql", "firebase")),
    ("DevOps", ("docker", "kubernetes", "aws", "azure", "gcp", "ci/cd",
                "jenkins", "github actions")),
    ("Tools", ("git", "github", "gitlab", "jira", "figma", "postman", "vscode")),
))

DEFAULT_RULES = DetectionRules(
    section_headers=SECTION_HEADERS,
    degree=DEGREE,
    skill_categories=SKILL_CATEGORIES,
)
