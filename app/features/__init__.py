from .education import get_education_level
from .keywords import extract_keywords, filter_tokens
from .skill_pipeline import (
    SkillAlignmentResult,
    build_skill_alignment,
    extract_from_vocabulary,
    extract_hard_skills,
    extract_soft_skills,
)

__all__ = [
    "get_education_level",
    "extract_keywords",
    "filter_tokens",
    "SkillAlignmentResult",
    "build_skill_alignment",
    "extract_from_vocabulary",
    "extract_hard_skills",
    "extract_soft_skills",
]
