"""
Profile data ➜ site config.

build_site_config() turns a loosely-shaped portfolio record (decoded JSON,
camelCase keys, anything may be missing) into the complete SiteConfig the
renderer expects. It is pure and total: every field has a fallback, and no
input makes it raise.
"""
from __future__ import annotations
from typing import Any, List, Mapping

from cleaner import (
    text,
    mapping,
    records,
    strings,
    split_tech_stack,
    split_bullets,
    join_present,
    date_range,
)
from schema_site import (
    DEFAULT_ACCENT,
    Education,
    Experience,
    Project,
    SiteConfig,
    Social,
)

DEFAULT_NAME = "Your Name"
DEFAULT_TITLE = "Professional Title"
DEFAULT_ABOUT_ME = (
    "Write a concise summary highlighting your strengths, passions, "
    "and what you bring to a team."
)


def build_site_config(data: Any) -> SiteConfig:
    src = mapping(data)
    user = mapping(src.get("user"))
    portfolio = mapping(src.get("portfolio"))
    summary = text(src.get("summary"))

    name = (join_present((user.get("firstName"), user.get("lastName")), " ") or "").strip()
    name = name or DEFAULT_NAME

    social: Social = {
        "email": text(user.get("email")),
        "linkedin": text(user.get("linkedInUrl")),
        "twitter": None,  # no twitter field in the profile schema
        "github": text(user.get("githubUrl")),
    }

    return {
        "name": name,
        "title": text(src.get("roleTitle")) or text(portfolio.get("title")) or DEFAULT_TITLE,
        "description": summary or f"Portfolio website of {name}",
        "accentColor": DEFAULT_ACCENT,
        "resumeUrl": text(src.get("resumeUrl")),
        "social": social,
        "aboutMe": summary or DEFAULT_ABOUT_ME,
        "skills": [s for s in (text(k.get("name")) for k in records(src.get("skills"))) if s],
        "projects": [_project(p) for p in records(src.get("projects"))],
        "experience": [_job(e) for e in records(src.get("experiences"))],
        "education": [_school(e) for e in records(src.get("education"))],
    }


# ───────────────────────────────────────── helpers ──
def _required(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _project(p: Mapping[str, Any]) -> Project:
    return {
        "name": _required(p.get("name")),
        "description": text(p.get("description")),
        "link": text(p.get("link")),
        "skills": split_tech_stack(p.get("techStack")),
    }


def _job(e: Mapping[str, Any]) -> Experience:
    bullets: List[str] = strings(e.get("bullets")) or split_bullets(e.get("description"))
    return {
        "company": _required(e.get("companyName")),
        "title": _required(e.get("title")),
        "dateRange": date_range(e.get("startDate"), e.get("endDate")),
        "bullets": bullets,
    }


def _school(e: Mapping[str, Any]) -> Education:
    return {
        "school": _required(e.get("school")),
        "degree": join_present((e.get("degree"), e.get("field")), " • "),
        "dateRange": date_range(e.get("startDate"), e.get("endDate")),
        "achievements": split_bullets(e.get("description")),
    }
