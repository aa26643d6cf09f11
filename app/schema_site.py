# canonical site-config schema (optional text is None, never "")
from __future__ import annotations
from typing import List, Optional, TypedDict

DEFAULT_ACCENT = "#1d4ed8"


# ───────────────────────────────────────── input (camelCase wire keys) ──
class UserInput(TypedDict, total=False):
    firstName: Optional[str]
    lastName: Optional[str]
    email: Optional[str]
    linkedInUrl: Optional[str]
    githubUrl: Optional[str]


class PortfolioInput(TypedDict, total=False):
    title: Optional[str]


class SkillInput(TypedDict, total=False):
    name: Optional[str]


class ProjectInput(TypedDict, total=False):
    name: str
    description: Optional[str]
    link: Optional[str]
    techStack: Optional[str]


class ExperienceInput(TypedDict, total=False):
    companyName: str
    title: str
    startDate: Optional[str]
    endDate: Optional[str]
    bullets: Optional[List[str]]
    description: Optional[str]


class EducationInput(TypedDict, total=False):
    school: str
    degree: Optional[str]
    field: Optional[str]
    startDate: Optional[str]
    endDate: Optional[str]
    description: Optional[str]


class TemplateInput(TypedDict, total=False):
    user: Optional[UserInput]
    roleTitle: Optional[str]
    summary: Optional[str]
    resumeUrl: Optional[str]
    portfolio: Optional[PortfolioInput]
    skills: List[SkillInput]
    projects: List[ProjectInput]
    experiences: List[ExperienceInput]
    education: List[EducationInput]


# ───────────────────────────────────────── output ──
class Social(TypedDict):
    email: Optional[str]
    linkedin: Optional[str]
    twitter: Optional[str]
    github: Optional[str]


class Project(TypedDict):
    name: str
    description: Optional[str]
    link: Optional[str]
    skills: List[str]


class Experience(TypedDict):
    company: str
    title: str
    dateRange: Optional[str]
    bullets: List[str]


class Education(TypedDict):
    school: str
    degree: Optional[str]
    dateRange: Optional[str]
    achievements: List[str]


class SiteConfig(TypedDict):
    name: str
    title: str
    description: str
    accentColor: str
    resumeUrl: Optional[str]
    social: Social
    aboutMe: str
    skills: List[str]
    projects: List[Project]
    experience: List[Experience]
    education: List[Education]
