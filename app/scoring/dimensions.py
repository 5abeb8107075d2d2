"""The six independent scoring dimensions.

Each scorer is a pure function of already-normalized text and/or the structured
resume, and returns a frozen dimension model whose score is capped at the
dimension maximum. Scorers share no state and can run in any order.
"""

from __future__ import annotations

import math

from app.core.config import get_scoring_value
from app.features.education import get_education_level
from app.features.keywords import extract_keywords
from app.features.skill_pipeline import build_skill_alignment
from app.normalize.normalize_resume import education_text, resume_titles
from app.schemas.ats import (
    EDUCATION_MAX,
    FORMAT_MAX,
    HARD_SKILLS_MAX,
    JOB_TITLE_MAX,
    KEYWORDS_MAX,
    SOFT_SKILLS_MAX,
    EducationScore,
    FormatScore,
    HardSkillsScore,
    JobTitleScore,
    KeywordsScore,
    ResumeContent,
    SoftSkillsScore,
)
from app.taxonomy import HARD_SKILLS, SOFT_SKILLS, TaxonomyProvider, get_default_taxonomy_provider

TITLE_DETAILS = {
    "high": "Your job titles closely match the target role",
    "medium": "Your experience shows related job titles",
    "low": "Consider highlighting more relevant job titles or responsibilities",
}

EDUCATION_DETAILS = {
    "unspecified": "Education requirements not specified in job description",
    "met": "Your education meets or exceeds requirements",
    "partial": "Your education level may be below stated requirements",
    "missing": "Add your education credentials",
}

FORMAT_ISSUES = {
    "summary": "Add a professional summary (50+ words)",
    "no_experience": "Add work experience",
    "few_bullets": "Add more bullet points to each role (3-5 recommended)",
    "few_skills": "Add more skills (8-12 recommended)",
    "no_education": "Add education section",
}


def round_half_up(value: float) -> int:
    # round() would send 12.5 to 12; scores round halves upward
    return int(math.floor(value + 0.5))


def scaled_ratio_score(matched: int, total: int, multiplier: float, cap: int) -> int:
    """min(cap, round(matched / total * multiplier)); the multiplier deliberately exceeds the cap."""
    ratio = matched / max(1, total)
    return max(0, min(cap, round_half_up(ratio * multiplier)))


def score_keywords(jd_text: str, resume_text: str) -> KeywordsScore:
    """Keyword coverage. ``resume_text`` is the lowercased raw resume text, not the
    normalized one, so punctuation between words breaks a phrase match.

    The score counts every matched phrase; only the returned ``matches`` list is truncated.
    """
    job_keywords = extract_keywords(jd_text)
    min_missing = int(get_scoring_value("keywords.min_missing_length", 5))
    missing_limit = int(get_scoring_value("keywords.missing_limit", 10))
    display_limit = int(get_scoring_value("keywords.display_limit", 20))

    matched: list[str] = []
    missing: list[str] = []
    for keyword in job_keywords:
        if keyword in resume_text:
            matched.append(keyword)
        elif len(keyword) >= min_missing:
            missing.append(keyword)

    # longest phrases first; sorted() is stable so ties keep extraction order
    top_missing = sorted(missing, key=len, reverse=True)[:missing_limit]

    score = scaled_ratio_score(
        len(matched),
        len(job_keywords),
        float(get_scoring_value("keywords.multiplier", 50)),
        KEYWORDS_MAX,
    )
    return KeywordsScore(score=score, matches=matched[:display_limit], missing=top_missing)


def score_hard_skills(
    jd_text: str,
    resume_text: str,
    taxonomy: TaxonomyProvider | None = None,
) -> HardSkillsScore:
    provider = taxonomy if taxonomy is not None else get_default_taxonomy_provider()
    alignment = build_skill_alignment(jd_text, resume_text, provider.vocabulary(HARD_SKILLS))

    if not alignment.jd_terms:
        score = int(get_scoring_value("hard_skills.default_score", 15))
    else:
        score = scaled_ratio_score(
            len(alignment.matched_terms),
            alignment.denominator,
            float(get_scoring_value("hard_skills.multiplier", 25)),
            HARD_SKILLS_MAX,
        )
    return HardSkillsScore(
        score=min(score, HARD_SKILLS_MAX),
        matches=alignment.matched_terms,
        missing=alignment.missing_terms,
    )


def score_job_title(resume: ResumeContent, job_title: str) -> JobTitleScore:
    titles = resume_titles(resume)
    target = (job_title or "").strip().lower()
    min_word_length = int(get_scoring_value("job_title.min_word_length", 3))
    target_words = [word for word in target.split() if len(word) >= min_word_length]

    has_exact_match = any(target in title for title in titles)
    word_matches = sum(1 for word in target_words if any(word in title for title in titles))
    word_match_ratio = word_matches / max(1, len(target_words))

    if has_exact_match or word_match_ratio >= float(get_scoring_value("job_title.high_ratio", 0.8)):
        relevance = "high"
    elif word_match_ratio >= float(get_scoring_value("job_title.medium_ratio", 0.5)):
        relevance = "medium"
    else:
        relevance = "low"

    default_scores = {"high": 15, "medium": 10, "low": 5}
    score = int(get_scoring_value(f"job_title.scores.{relevance}", default_scores[relevance]))
    return JobTitleScore(
        score=min(score, JOB_TITLE_MAX),
        relevance=relevance,
        details=TITLE_DETAILS[relevance],
    )


def score_education(resume: ResumeContent, jd_text: str) -> EducationScore:
    job_level = get_education_level(jd_text)
    resume_level = max(
        (get_education_level(education_text(entry)) for entry in resume.education),
        default=0,
    )
    met_score = int(get_scoring_value("education.scores.met", 10))

    # Branch order matters: a resume level of 0 never reaches "partial".
    if job_level == 0:
        status, score, details = "meets", met_score, EDUCATION_DETAILS["unspecified"]
    elif resume_level >= job_level:
        status = "exceeds" if resume_level > job_level else "meets"
        score, details = met_score, EDUCATION_DETAILS["met"]
    elif resume_level > 0:
        status = "partial"
        score = int(get_scoring_value("education.scores.partial", 5))
        details = EDUCATION_DETAILS["partial"]
    else:
        status = "missing"
        score = int(get_scoring_value("education.scores.missing", 3))
        details = EDUCATION_DETAILS["missing"]

    return EducationScore(score=min(score, EDUCATION_MAX), status=status, details=details)


def score_format(resume: ResumeContent) -> FormatScore:
    deductions = get_scoring_value("format.deductions", {}) or {}
    issues: list[str] = []
    score = FORMAT_MAX

    def deduct(key: str, default: int) -> None:
        nonlocal score
        issues.append(FORMAT_ISSUES[key])
        score -= int(deductions.get(key, default))

    if len(resume.summary) < int(get_scoring_value("format.summary_min_chars", 50)):
        deduct("summary", 2)

    if not resume.experience:
        deduct("no_experience", 4)
    else:
        bullet_count = sum(len(entry.bullets) for entry in resume.experience)
        if bullet_count / len(resume.experience) < float(get_scoring_value("format.min_avg_bullets", 2)):
            deduct("few_bullets", 2)

    if len(resume.skills) < int(get_scoring_value("format.min_skills", 5)):
        deduct("few_skills", 2)

    if not resume.education:
        deduct("no_education", 1)

    return FormatScore(score=max(0, score), issues=issues)


def score_soft_skills(
    jd_text: str,
    resume_text: str,
    taxonomy: TaxonomyProvider | None = None,
) -> SoftSkillsScore:
    provider = taxonomy if taxonomy is not None else get_default_taxonomy_provider()
    alignment = build_skill_alignment(jd_text, resume_text, provider.vocabulary(SOFT_SKILLS))

    if not alignment.jd_terms:
        score = int(get_scoring_value("soft_skills.default_score", 3))
    else:
        score = scaled_ratio_score(
            len(alignment.matched_terms),
            alignment.denominator,
            float(get_scoring_value("soft_skills.multiplier", 7)),
            SOFT_SKILLS_MAX,
        )
    return SoftSkillsScore(
        score=min(score, SOFT_SKILLS_MAX),
        matches=alignment.matched_terms,
        missing=alignment.missing_terms,
    )
