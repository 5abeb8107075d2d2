from __future__ import annotations

import re
from functools import lru_cache

from app.core.config import get_scoring_value
from app.normalize.utils import normalize_text
from app.taxonomy.provider import compile_term_pattern

_DEFAULT_LEVELS = {
    "high school": 1,
    "associate": 2,
    "bachelor": 3,
    "master": 4,
    "mba": 4,
    "phd": 5,
    "doctorate": 5,
}
_DEFAULT_ABBREVIATIONS = {
    "bs": 3,
    "ba": 3,
    "b.s.": 3,
    "b.a.": 3,
    "ms": 4,
    "ma": 4,
    "m.s.": 4,
    "m.a.": 4,
}


def _levels() -> dict[str, int]:
    configured = get_scoring_value("education.levels", None) or _DEFAULT_LEVELS
    return {str(keyword).lower(): int(level) for keyword, level in configured.items()}


@lru_cache(maxsize=1)
def _abbreviation_patterns() -> tuple[tuple[re.Pattern[str], int], ...]:
    configured = get_scoring_value("education.abbreviations", None) or _DEFAULT_ABBREVIATIONS
    return tuple(
        (compile_term_pattern(str(token).lower()), int(level))
        for token, level in configured.items()
    )


def get_education_level(text: str | None) -> int:
    """Highest ordinal level mentioned: 1 high school .. 5 doctorate, 0 when none is found.

    Full keywords match as substrings ("bachelor's", "masters"); abbreviations such
    as bs or m.s. only count as standalone tokens.
    """
    normalized = normalize_text(text)
    if not normalized:
        return 0

    level = 0
    for keyword, keyword_level in _levels().items():
        if keyword in normalized:
            level = max(level, keyword_level)

    for pattern, abbreviation_level in _abbreviation_patterns():
        if abbreviation_level > level and pattern.search(normalized):
            level = abbreviation_level

    return level
