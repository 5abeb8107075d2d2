from __future__ import annotations

from dataclasses import dataclass, field

from app.normalize.utils import normalize_text
from app.taxonomy import HARD_SKILLS, SOFT_SKILLS, TaxonomyProvider, VocabularySet, get_default_taxonomy_provider


@dataclass(slots=True)
class SkillAlignmentResult:
    jd_terms: list[str] = field(default_factory=list)
    resume_terms: list[str] = field(default_factory=list)
    matched_terms: list[str] = field(default_factory=list)
    missing_terms: list[str] = field(default_factory=list)

    @property
    def denominator(self) -> int:
        return len(self.jd_terms)


def extract_from_vocabulary(text: str | None, vocabulary: VocabularySet) -> list[str]:
    """Vocabulary terms found in text, in vocabulary order."""
    normalized = normalize_text(text)
    if not normalized:
        return []
    return [
        term
        for term, pattern in zip(vocabulary.terms, vocabulary.patterns)
        if pattern.search(normalized)
    ]


def _provider(taxonomy: TaxonomyProvider | None) -> TaxonomyProvider:
    return taxonomy if taxonomy is not None else get_default_taxonomy_provider()


def extract_hard_skills(text: str | None, taxonomy: TaxonomyProvider | None = None) -> list[str]:
    return extract_from_vocabulary(text, _provider(taxonomy).vocabulary(HARD_SKILLS))


def extract_soft_skills(text: str | None, taxonomy: TaxonomyProvider | None = None) -> list[str]:
    return extract_from_vocabulary(text, _provider(taxonomy).vocabulary(SOFT_SKILLS))


def build_skill_alignment(jd_text: str, resume_text: str, vocabulary: VocabularySet) -> SkillAlignmentResult:
    jd_terms = extract_from_vocabulary(jd_text, vocabulary)
    resume_terms = extract_from_vocabulary(resume_text, vocabulary)
    resume_set = set(resume_terms)
    return SkillAlignmentResult(
        jd_terms=jd_terms,
        resume_terms=resume_terms,
        matched_terms=[term for term in jd_terms if term in resume_set],
        missing_terms=[term for term in jd_terms if term not in resume_set],
    )
