"""Resume section segmentation, contact extraction and skill detection."""

import re
from collections.abc import Mapping
from typing import Any

from pydantic.alias_generators import to_camel

from models.schemas.parsed_resume import ParsedResume, PersonalInfo
from services.skill_catalog import find_skills
from services.skill_normalizer import normalize_skills

# Section header patterns and their canonical names
SECTION_PATTERNS: dict[str, list[str]] = {
    "experience": [
        r"(?:work|professional|employment)\s*(?:experience|history)",
        r"experience",
        r"career\s*(?:history|path)",
    ],
    "education": [
        r"education(?:al)?\s*(?:background|qualifications|history)?",
        r"academic\s*(?:background|qualifications)",
    ],
    "skills": [
        r"(?:technical|core|key|professional)?\s*skills",
        r"(?:technical|core)?\s*(?:competencies|proficiencies|expertise)",
        r"technologies",
    ],
    "summary": [
        r"(?:professional|executive|career)?\s*summary",
        r"(?:career|professional)?\s*objective",
        r"profile",
        r"about\s*me",
    ],
    "projects": [
        r"(?:key|notable|selected|personal)?\s*projects",
        r"portfolio",
    ],
    "certifications": [
        r"certific(?:ations?|ates?)",
        r"licen[sc]es?\s*(?:&|and)?\s*certific(?:ations?|ates?)",
        r"courses",
    ],
    "achievements": [
        r"(?:key\s+)?achievements?",
        r"(?:awards?|honors?|accomplishments)",
    ],
}

_COMPILED: dict[str, re.Pattern] = {}
for section, patterns in SECTION_PATTERNS.items():
    combined = "|".join(patterns)
    _COMPILED[section] = re.compile(
        rf"^\s*(?:{combined})\s*:?\s*$", re.IGNORECASE | re.MULTILINE
    )

# Contact info patterns
EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
PHONE_RE = re.compile(r"\+?[\d\s\-().]{7,15}\d")
_YEAR_RANGE_RE = re.compile(r"^\(?\d{4}\s*[-–]\s*\d{4}\)?$")
LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)

_LINK_RE = re.compile(r"http|www", re.IGNORECASE)
_LONG_DIGITS_RE = re.compile(r"\d{10}")

DEFAULT_NAME = "Candidate"


def parse_sections(text: str) -> dict[str, str]:
    """Split resume text into named sections.

    Returns a dict mapping section name -> section text content.
    Unmatched text at the top goes into 'header'.
    """
    sections: dict[str, str] = {}
    current_section = "header"
    current_lines: list[str] = []

    for line in text.split("\n"):
        matched_section = None
        stripped = line.strip()

        if stripped:
            for section_name, pattern in _COMPILED.items():
                if pattern.match(stripped):
                    matched_section = section_name
                    break

        if matched_section:
            if current_lines:
                sections[current_section] = "\n".join(current_lines).strip()
            current_section = matched_section
            current_lines = []
        else:
            current_lines.append(line)

    if current_lines:
        sections[current_section] = "\n".join(current_lines).strip()

    return sections


def find_phone(text: str) -> str | None:
    """First phone-like run with at least seven digits that is not a year range."""
    for match in PHONE_RE.finditer(text):
        candidate = match.group().strip()
        if sum(ch.isdigit() for ch in candidate) >= 7 and not _YEAR_RANGE_RE.match(candidate):
            return candidate
    return None


def extract_contact_info(text: str) -> dict[str, str | None]:
    email_match = EMAIL_RE.search(text)
    linkedin_match = LINKEDIN_RE.search(text)
    github_match = GITHUB_RE.search(text)

    return {
        "email": email_match.group().lower() if email_match else None,
        "phone": find_phone(text),
        "linkedin": f"https://www.{linkedin_match.group()}" if linkedin_match else None,
        "github": f"https://www.{github_match.group()}" if github_match else None,
    }


def extract_name(text: str) -> str:
    """First plausible name line among the first five non-empty lines."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    for line in lines[:5]:
        if "@" in line or _LONG_DIGITS_RE.search(line) or _LINK_RE.search(line):
            continue
        if 3 < len(line) < 50:
            return line
    return DEFAULT_NAME


def _section_lines(content: str | None) -> list[str]:
    """Trimmed lines longer than two characters."""
    if not content:
        return []
    return [line.strip() for line in content.splitlines() if len(line.strip()) > 2]


def parse_resume(text: str) -> ParsedResume:
    """Parse plain resume text into a ParsedResume."""
    if not isinstance(text, str):
        text = ""

    sections = parse_sections(text)
    contact = extract_contact_info(text)

    skills_text = sections.get("skills") or text
    skills = normalize_skills(find_skills(skills_text))

    return ParsedResume(
        personal_info=PersonalInfo(name=extract_name(text), **contact),
        summary=_section_lines(sections.get("summary")),
        experience=_section_lines(sections.get("experience")),
        education=_section_lines(sections.get("education")),
        projects=_section_lines(sections.get("projects")),
        skills=skills,
        raw_text=text,
    )


def _lines(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [item for item in value if isinstance(item, str)]
    return []


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _field(mapping: Mapping, name: str) -> Any:
    """Look a field up by its snake_case or camelCase key."""
    if name in mapping:
        return mapping[name]
    return mapping.get(to_camel(name))


def coerce_resume(value: Any) -> ParsedResume:
    """Accept a ParsedResume, a loosely-shaped mapping, or nothing at all.

    Keys may be snake_case or camelCase. Wrong-typed fields become empty
    values instead of raising.
    """
    if isinstance(value, ParsedResume):
        return value
    if not isinstance(value, Mapping):
        return ParsedResume()

    info = _field(value, "personal_info")
    if not isinstance(info, Mapping):
        info = {}
    name = info.get("name")
    raw_text = _field(value, "raw_text")

    return ParsedResume(
        personal_info=PersonalInfo(
            name=name if isinstance(name, str) else "",
            email=_optional_str(info.get("email")),
            phone=_optional_str(info.get("phone")),
            linkedin=_optional_str(info.get("linkedin")),
            github=_optional_str(info.get("github")),
        ),
        summary=_lines(value.get("summary")),
        experience=_lines(value.get("experience")),
        education=_lines(value.get("education")),
        projects=_lines(value.get("projects")),
        skills=_lines(value.get("skills")),
        raw_text=raw_text if isinstance(raw_text, str) else "",
    )
