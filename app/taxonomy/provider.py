from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol

HARD_SKILLS = "hard_skills"
SOFT_SKILLS = "soft_skills"


def compile_term_pattern(term: str) -> re.Pattern[str]:
    """Whole-term pattern that also anchors symbol-bearing terms such as c++ or ci/cd."""
    return re.compile(rf"(?<![a-z0-9]){re.escape(term)}(?![a-z0-9])")


@dataclass(frozen=True, slots=True)
class VocabularySet:
    name: str
    terms: tuple[str, ...]
    patterns: tuple[re.Pattern[str], ...]

    @classmethod
    def from_terms(cls, name: str, raw_terms: list[str] | tuple[str, ...]) -> "VocabularySet":
        terms: list[str] = []
        seen: set[str] = set()
        for raw in raw_terms:
            term = str(raw).strip().lower()
            if not term or term in seen:
                continue
            seen.add(term)
            terms.append(term)
        return cls(
            name=name,
            terms=tuple(terms),
            patterns=tuple(compile_term_pattern(term) for term in terms),
        )

    def __len__(self) -> int:
        return len(self.terms)


class TaxonomyProvider(Protocol):
    def vocabulary(self, name: str) -> VocabularySet:
        """Return the named vocabulary. Raises KeyError for unknown names."""

    def names(self) -> list[str]:
        """Names of the vocabularies this provider serves."""
