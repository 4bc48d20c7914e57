"""
Rule-based résumé section detector.

Works on normalised text from extractor.normalise_text(): one pass over
the lines to split sections, plus full-text sweeps for contact details
and profile links. Nothing here raises – a missing field is just empty.
"""

from __future__ import annotations
import re
from typing import Dict, List, Optional

from .rules import DEFAULT_RULES, DetectionRules
from .schema_portfolio import (
    Contact,
    DetectedSections,
    EducationEntry,
    ExperienceEntry,
    Links,
    ProjectEntry,
)


def expand_username_url(token: str, domain: str) -> str:
    token = (token or "").strip()
    if token.startswith(("http://", "https://")):
        return token
    return f"https://{domain}/{token.lstrip('@').split('/')[-1]}" if token else ""


EMAIL = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9._-]+\.[a-zA-Z0-9_-]+")
PHONE = re.compile(r"(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
URL = re.compile(r"https?://[^\s]+")
HAS_URL = re.compile(r"https?://")
GITHUB = re.compile(r"github\.com/([a-zA-Z0-9_-]+)", re.I)
LINKEDIN = re.compile(r"linkedin\.com/in/([a-zA-Z0-9_-]+)", re.I)

BULLET = re.compile(r"^[•\-*]\s*")
IS_BULLET = re.compile(r"^[•\-*]")
JOB_HEADER = re.compile(r"(\d{4}|\w+\s+\d{4}|present|current)", re.I)
JOB_SPLIT = re.compile(r"\||,|\(")
DURATION = re.compile(
    r"(\w+\s+\d{4}\s*[-–]\s*\w+\s+\d{4}"
    r"|\w+\s+\d{4}\s*[-–]\s*present"
    r"|\d{4}\s*[-–]\s*\d{4})",
    re.I,
)
YEAR = re.compile(r"\d{4}")
TECH_LABELS = ("technologies:", "tech stack:", "built with:")

NAME_SCAN = 5
NAME_MAX_LEN = 50
UNKNOWN = "Unknown"


def detect_sections(text: str, rules: DetectionRules = DEFAULT_RULES) -> DetectedSections:
    lines = [ln.strip() for ln in (text or "").split("\n") if ln.strip()]
    sections = find_sections(lines, rules)
    return DetectedSections(
        name=detect_name(lines, rules),
        contact=detect_contact(text or ""),
        links=detect_links(text or ""),
        summary=detect_summary(sections["summary"]),
        skills=detect_skills(sections["skills"]),
        experience=detect_experience(sections["experience"]),
        projects=detect_projects(sections["projects"]),
        education=detect_education(sections["education"], rules),
    )


# ──────────────────────────────────────── header ──
def detect_name(lines: List[str], rules: DetectionRules = DEFAULT_RULES) -> str:
    for ln in lines[:NAME_SCAN]:
        ln = ln.strip()
        if EMAIL.search(ln) or PHONE.search(ln) or HAS_URL.search(ln):
            continue
        if len(ln) > NAME_MAX_LEN or rules.match_header(ln):
            continue
        words = ln.split()
        if 2 <= len(words) <= 4 and all(w[0].isupper() for w in words):
            return ln
    return lines[0] if lines else UNKNOWN


def detect_contact(text: str) -> Contact:
    email, phone = EMAIL.search(text), PHONE.search(text)
    return Contact(
        email=email.group() if email else None,
        phone=phone.group() if phone else None,
    )


def detect_links(text: str) -> Links:
    out = Links()
    if m := GITHUB.search(text):
        out.github = expand_username_url(m.group(1), "github.com")
    if m := LINKEDIN.search(text):
        out.linkedin = expand_username_url(m.group(1), "linkedin.com/in")
    out.website = next(
        (u for u in URL.findall(text)
         if "github.com" not in u and "linkedin.com" not in u),
        None,
    )
    return out


# ────────────────────────────────────── sections ──
def find_sections(lines: List[str], rules: DetectionRules = DEFAULT_RULES) -> Dict[str, List[str]]:
    """Map section name → its content lines, header lines excluded."""
    out: Dict[str, List[str]] = {name: [] for name in rules.section_names}
    sec, start = None, -1
    for i, ln in enumerate(lines):
        found = rules.match_header(ln.strip())
        if not found:
            continue
        if sec:
            out[sec] = lines[start:i]
        sec, start = found, i + 1
    if sec:
        out[sec] = lines[start:]
    return out


def _unbullet(ln: str) -> str:
    return BULLET.sub("", ln.strip(), count=1)


def detect_summary(lines: List[str]) -> Optional[str]:
    if not lines:
        return None
    return " ".join(ln.strip() for ln in lines if ln.strip()).strip()


def detect_skills(lines: List[str]) -> List[str]:
    text = " ".join(lines)
    if "," in text:
        return [s.strip() for s in text.split(",") if s.strip()]
    return [s for s in (_unbullet(ln) for ln in lines) if s]


def detect_experience(lines: List[str]) -> List[ExperienceEntry]:
    jobs: List[ExperienceEntry] = []
    cur: Optional[ExperienceEntry] = None
    for ln in lines:
        ln = ln.strip()
        if not ln:
            continue
        if JOB_HEADER.search(ln):
            if cur:
                jobs.append(cur)
            cur = _job_header(ln)
        elif cur and (bullet := _unbullet(ln)):
            cur.highlights.append(bullet)
    if cur:
        jobs.append(cur)

    for j in jobs:
        j.description = " ".join(j.highlights)
    return jobs


def _job_header(ln: str) -> ExperienceEntry:
    # "Software Engineer at Google | 2020 - 2023"
    # "Senior Developer, Microsoft (Jan 2020 - Present)"
    job = ExperienceEntry()
    first = JOB_SPLIT.split(ln)[0].strip()
    if " at " in first.lower():
        # detection ignores case, the split does not: "Dev AT Foo" stays whole
        parts = first.split(" at ")
        job.role = parts[0].strip()
        job.company = parts[1].strip() if len(parts) > 1 else ""
    else:
        job.role = first
    if m := DURATION.search(ln):
        job.duration = m.group()
    return job


def detect_projects(lines: List[str]) -> List[ProjectEntry]:
    projects: List[ProjectEntry] = []
    cur: Optional[ProjectEntry] = None
    for ln in lines:
        ln = ln.strip()
        if not ln:
            continue
        if not IS_BULLET.match(ln) and len(ln) > 5 and ":" not in ln:
            if cur:
                projects.append(cur)
            cur = ProjectEntry(title=ln)
            continue
        if not cur:
            continue

        cleaned = _unbullet(ln)
        if any(label in cleaned.lower() for label in TECH_LABELS):
            tech = cleaned.split(":", 1)[1]
            cur.tech = [t.strip() for t in tech.split(",") if t.strip()]
        else:
            cur.description = f"{cur.description} {cleaned}" if cur.description else cleaned
        # later lines overwrite earlier links
        if m := URL.search(cleaned):
            cur.link = m.group()
    if cur:
        projects.append(cur)
    return projects


def detect_education(lines: List[str], rules: DetectionRules = DEFAULT_RULES) -> List[EducationEntry]:
    schools: List[EducationEntry] = []
    cur: Optional[EducationEntry] = None
    for ln in lines:
        ln = ln.strip()
        if not ln:
            continue
        if rules.degree.search(ln):
            if cur:
                schools.append(cur)
            year = YEAR.search(ln)
            cur = EducationEntry(degree=ln, year=year.group() if year else "")
        elif cur and not cur.institution and len(ln) > 5:
            cur.institution = ln
        elif cur:
            cur.details = f"{cur.details} {ln}" if cur.details else ln
    if cur:
        schools.append(cur)
    return schools
