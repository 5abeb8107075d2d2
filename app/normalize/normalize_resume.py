from __future__ import annotations

from app.schemas.ats import EducationEntry, ResumeContent

from .utils import normalize_text


def build_resume_full_text(resume: ResumeContent) -> str:
    """Join every resume field into one searchable string.

    Order: summary, then title/company/bullets per role, then skills, then
    degree/field/institution per education entry.
    """
    parts: list[str] = []

    if resume.summary:
        parts.append(resume.summary)

    for entry in resume.experience:
        parts.append(entry.title)
        parts.append(entry.company)
        parts.append(" ".join(entry.bullets))

    parts.append(" ".join(resume.skills))

    for entry in resume.education:
        parts.append(entry.degree)
        if entry.field:
            parts.append(entry.field)
        parts.append(entry.institution)

    return " ".join(parts)


def normalize_resume_text(resume: ResumeContent) -> str:
    return normalize_text(build_resume_full_text(resume))


def resume_search_text(resume: ResumeContent) -> str:
    """Lowercased full text with punctuation kept, for keyword phrase containment."""
    return build_resume_full_text(resume).lower()


def education_text(entry: EducationEntry) -> str:
    return f"{entry.degree} {entry.field or ''}".strip()


def resume_titles(resume: ResumeContent) -> list[str]:
    return [entry.title.lower() for entry in resume.experience]
