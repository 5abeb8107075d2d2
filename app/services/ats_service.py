from __future__ import annotations

import logging
from typing import Any

from app.normalize.normalize_resume import normalize_resume_text, resume_search_text
from app.normalize.utils import normalize_text
from app.schemas.ats import ATSScore, ATSScoreBreakdown, ResumeContent, ScoreRating
from app.scoring import (
    build_suggestions,
    score_education,
    score_format,
    score_hard_skills,
    score_job_title,
    score_keywords,
    score_soft_skills,
)
from app.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

logger = logging.getLogger(__name__)

STRONG_SCORE = 70
FAIR_SCORE = 50


def rate_score(overall: int) -> ScoreRating:
    if overall >= STRONG_SCORE:
        return "strong"
    if overall >= FAIR_SCORE:
        return "fair"
    return "weak"


def _coerce_resume(resume: ResumeContent | dict[str, Any] | None) -> ResumeContent:
    if isinstance(resume, ResumeContent):
        return resume
    return ResumeContent.model_validate(resume or {})


def calculate_ats_score(
    resume: ResumeContent | dict[str, Any] | None,
    job_description: str | None,
    job_title: str | None,
    *,
    taxonomy: TaxonomyProvider | None = None,
) -> ATSScore:
    """Score a structured resume against a job description and title (0-100).

    Deterministic and side-effect free; missing text or fields count as empty.
    """
    content = _coerce_resume(resume)
    provider = taxonomy if taxonomy is not None else get_default_taxonomy_provider()

    resume_text = normalize_resume_text(content)
    search_text = resume_search_text(content)
    jd_text = normalize_text(job_description)

    breakdown = ATSScoreBreakdown(
        keywords=score_keywords(jd_text, search_text),
        hard_skills=score_hard_skills(jd_text, resume_text, provider),
        job_title=score_job_title(content, job_title or ""),
        education=score_education(content, jd_text),
        format=score_format(content),
        soft_skills=score_soft_skills(jd_text, resume_text, provider),
    )
    overall = sum(dimension.score for dimension in breakdown.dimensions())

    logger.debug(
        "ats_score overall=%s keywords=%s hard_skills=%s job_title=%s education=%s format=%s soft_skills=%s",
        overall,
        breakdown.keywords.score,
        breakdown.hard_skills.score,
        breakdown.job_title.score,
        breakdown.education.score,
        breakdown.format.score,
        breakdown.soft_skills.score,
    )

    return ATSScore(
        overall=overall,
        rating=rate_score(overall),
        breakdown=breakdown,
        suggestions=build_suggestions(breakdown),
    )
