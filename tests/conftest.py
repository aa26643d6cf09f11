import os

# keep a developer's .env from pointing tests at a real portfolio
os.environ.setdefault("PORTFOLIO_API_BASE_URL", "http://portfolio.test")
os.environ.setdefault("PORTFOLIO_REQUEST_TIMEOUT", "3")

import pytest

SITE_KEYS = {
    "name", "title", "description", "accentColor", "resumeUrl", "social",
    "aboutMe", "skills", "projects", "experience", "education",
}


def _optional(value):
    return value is None or (isinstance(value, str) and value != "")


def _check_render_safe(config):
    """Assert every key is present, optional text is never "", lists are lists."""
    assert set(config) == SITE_KEYS
    for key in ("name", "title", "description", "accentColor", "aboutMe"):
        assert isinstance(config[key], str) and config[key]
    assert _optional(config["resumeUrl"])
    assert set(config["social"]) == {"email", "linkedin", "twitter", "github"}
    assert all(_optional(v) for v in config["social"].values())

    assert all(isinstance(s, str) and s for s in config["skills"])
    for p in config["projects"]:
        assert set(p) == {"name", "description", "link", "skills"}
        assert isinstance(p["name"], str)
        assert _optional(p["description"]) and _optional(p["link"])
        assert isinstance(p["skills"], list)
    for e in config["experience"]:
        assert set(e) == {"company", "title", "dateRange", "bullets"}
        assert _optional(e["dateRange"])
        assert isinstance(e["bullets"], list)
    for e in config["education"]:
        assert set(e) == {"school", "degree", "dateRange", "achievements"}
        assert _optional(e["degree"]) and _optional(e["dateRange"])
        assert isinstance(e["achievements"], list)


@pytest.fixture
def assert_render_safe():
    return _check_render_safe


@pytest.fixture
def profile_input():
    """A fully populated portfolio record as the API hands it over."""
    return {
        "user": {
            "firstName": "Jane",
            "lastName": "Doe",
            "email": "jane@example.com",
            "linkedInUrl": "https://linkedin.com/in/janedoe",
            "githubUrl": "https://github.com/janedoe",
        },
        "roleTitle": "Staff Engineer",
        "summary": "Builds reliable data platforms.",
        "resumeUrl": "https://example.com/jane.pdf",
        "portfolio": {"title": "Jane's Portfolio"},
        "skills": [{"name": "Python"}, {"name": ""}, {"name": "Go"}, {}],
        "projects": [
            {
                "name": "Pipeline",
                "description": "Streaming ETL",
                "link": "https://example.com/pipeline",
                "techStack": "React, Node.js|AWS",
            },
            {"name": "Scratch"},
        ],
        "experiences": [
            {
                "companyName": "Acme",
                "title": "Engineer",
                "startDate": "2020",
                "endDate": "2023",
                "bullets": ["Owned billing", "Cut costs"],
            },
            {
                "companyName": "Initech",
                "title": "Intern",
                "startDate": "2019",
                "description": "Led team\n• Shipped feature\n- Fixed bugs",
            },
        ],
        "education": [
            {
                "school": "State University",
                "degree": "BSc",
                "field": "Computer Science",
                "startDate": "2015",
                "endDate": "2019",
                "description": "• Dean's List\n• Robotics club",
            },
            {"school": "Bootcamp"},
        ],
    }
