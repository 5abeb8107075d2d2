from .dimensions import (
    round_half_up,
    scaled_ratio_score,
    score_education,
    score_format,
    score_hard_skills,
    score_job_title,
    score_keywords,
    score_soft_skills,
)
from .suggestions import build_suggestions

__all__ = [
    "round_half_up",
    "scaled_ratio_score",
    "score_keywords",
    "score_hard_skills",
    "score_job_title",
    "score_education",
    "score_format",
    "score_soft_skills",
    "build_suggestions",
]
