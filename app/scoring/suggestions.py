from __future__ import annotations

from app.core.config import get_scoring_value
from app.schemas.ats import ATSScoreBreakdown

TITLE_SUGGESTION = "Tailor your job titles or bullet points to better match the target role"


def build_suggestions(breakdown: ATSScoreBreakdown) -> list[str]:
    """Prioritized, capped suggestions built only from the breakdown's own evidence.

    Priority: missing hard skills, missing long keywords, weak title match, format
    issues (verbatim, in check order), absent soft skills.
    """
    named_items = int(get_scoring_value("suggestions.named_items", 3))
    max_missing_hard = int(get_scoring_value("suggestions.max_missing_hard_skills", 5))
    min_keyword_length = int(get_scoring_value("suggestions.min_keyword_length", 7))
    limit = int(get_scoring_value("suggestions.limit", 5))

    suggestions: list[str] = []

    missing_hard = breakdown.hard_skills.missing
    if 0 < len(missing_hard) <= max_missing_hard:
        suggestions.append(f"Add these skills if you have them: {', '.join(missing_hard[:named_items])}")

    long_missing = [keyword for keyword in breakdown.keywords.missing if len(keyword) >= min_keyword_length]
    if long_missing:
        suggestions.append(f"Consider including these terms: {', '.join(long_missing[:named_items])}")

    if breakdown.job_title.relevance == "low":
        suggestions.append(TITLE_SUGGESTION)

    suggestions.extend(breakdown.format.issues)

    soft = breakdown.soft_skills
    if not soft.matches and soft.missing:
        suggestions.append(f"Highlight soft skills like: {', '.join(soft.missing[:named_items])}")

    return suggestions[:limit]
