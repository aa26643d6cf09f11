"""
Sample site config: local development preview and the fallback whenever no
portfolio data can be loaded. Treat SITE_CONFIG as read-only; hand out
default_site_config() copies instead.
"""
from __future__ import annotations
import copy

from schema_site import DEFAULT_ACCENT, SiteConfig

_PROJECT_SKILLS = ["React", "Node.js", "AWS"]

SITE_CONFIG: SiteConfig = {
    "name": "Ryan Fitzgerald",
    "title": "Senior Software Engineer",
    "description": "Portfolio website of Ryan Fitzgerald",
    "accentColor": DEFAULT_ACCENT,
    "resumeUrl": None,
    "social": {
        "email": "your-email@example.com",
        "linkedin": "https://linkedin.com/in/yourprofile",
        "twitter": "https://x.com/rfitzio",
        "github": "https://github.com/RyanFitzgerald",
    },
    "aboutMe": (
        "Lorem ipsum dolor sit amet, consectetur adipisicing elit. Rem quos asperiores "
        "nihil consequatur tempore cupiditate architecto natus commodi corrupti quas quasi "
        "facere est, dignissimos odit nam veniam sapiente ut, vitae eligendi ipsum dolor, "
        "nostrum ullam impedit! Corrupti ratione mollitia temporibus necessitatibus, "
        "consectetur reiciendis recusandae id, dolorum quaerat, vero pariatur. Ratione!"
    ),
    "skills": ["Javascript", "React", "Node.js", "Python", "AWS", "Docker"],
    "projects": [
        {
            "name": "AI Dev Roundup Newsletter",
            "description": (
                "One concise email. Five minutes. Every Tuesday. Essential AI news & trends, "
                "production-ready libraries, powerful AI tools, and real-world code examples"
            ),
            "link": "https://aidevroundup.com/?ref=devportfolio",
            "skills": list(_PROJECT_SKILLS),
        },
        {
            "name": "Chrome Extension Mastery: Build Full-Stack Extensions with React & Node.js",
            "description": (
                "Master the art of building production-ready, full-stack Chrome Extensions "
                "using modern web technologies and best practices"
            ),
            "link": "https://fullstackextensions.com/?ref=devportfolio",
            "skills": list(_PROJECT_SKILLS),
        },
        {
            "name": "ExtensionKit",
            "description": (
                "Kit to jump-start your Chrome extension projects with a variety of "
                "battle-tested starter templates & examples"
            ),
            "link": "https://extensionkit.io/?ref=devportfolio",
            "skills": list(_PROJECT_SKILLS),
        },
    ],
    "experience": [
        {
            "company": "Tech Company",
            "title": "Senior Software Engineer",
            "dateRange": "Jan 2022 - Present",
            "bullets": [
                "Led development of microservices architecture serving 1M+ users",
                "Reduced API response times by 40% through optimization",
                "Mentored team of 5 junior developers",
            ],
        },
        {
            "company": "Startup Inc",
            "title": "Full Stack Developer",
            "dateRange": "Jun 2020 - Dec 2021",
            "bullets": [
                "Built and launched MVP product from scratch using React and Node.js",
                "Implemented CI/CD pipeline reducing deployment time by 60%",
                "Collaborated with product team to define technical requirements",
            ],
        },
        {
            "company": "Digital Agency",
            "title": "Frontend Developer",
            "dateRange": "Aug 2018 - May 2020",
            "bullets": [
                "Developed responsive web applications for 20+ clients",
                "Improved site performance scores by 35% on average",
                "Introduced modern JavaScript frameworks to legacy codebases",
            ],
        },
    ],
    "education": [
        {
            "school": "University Name",
            "degree": "Bachelor of Science in Computer Science",
            "dateRange": "2014 - 2018",
            "achievements": [
                "Graduated Magna Cum Laude with 3.8 GPA",
                "Dean's List all semesters",
                "President of Computer Science Club",
            ],
        },
        {
            "school": "Online Platform",
            "degree": "Full Stack Development Certificate",
            "dateRange": "2019",
            "achievements": [
                "Completed 500+ hours of coursework",
                "Built 10+ portfolio projects",
                "Specialized in React and Node.js",
            ],
        },
    ],
}


def default_site_config() -> SiteConfig:
    """Fresh copy of the sample config; mutating it never touches SITE_CONFIG."""
    return copy.deepcopy(SITE_CONFIG)
